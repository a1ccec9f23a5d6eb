# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Value codecs - conversion between typed values and their stored form.

Every value held by a ConfigNode is kept as a string, exactly as it would be
written to the configuration file. A codec knows how to turn a Python value
into that stored form (``decompose``) and back (``compose``).

Built-in codecs:
    - StringCodec: plain text, optionally wrapped in matching quotes
    - IntegerCodec: 32-bit signed integers
    - LongCodec: 64-bit signed integers
    - BooleanCodec: ``true`` / ``false`` (case-insensitive)
    - StringListCodec: block lists, one ``- item`` per line

Codecs are looked up by the type of the value being stored, walking the
type's MRO, so ``bool`` resolves to BooleanCodec before ``int``.

A codec may also provide ``empty()``, the result read from a node that has
no value (``False`` for booleans, ``[]`` for lists); without it that result
is ``None``.

Example:
    >>> codec_for(int).decompose(5)
    '5'
    >>> StringListCodec().compose('- a\\n- b')
    ['a', 'b']
"""

from __future__ import annotations

import re
from typing import Any, Protocol, runtime_checkable

from .exceptions import ValueDecodeError

_INTEGER_RE = re.compile(r'^[+-]?\d+$')

INT_MIN, INT_MAX = -(2 ** 31), 2 ** 31 - 1
LONG_MIN, LONG_MAX = -(2 ** 63), 2 ** 63 - 1


@runtime_checkable
class ValueCodec(Protocol):
    """Capability converting a value to and from its stored string form."""

    def decompose(self, value: Any) -> str:
        ...

    def compose(self, stored: str) -> Any:
        ...


class StringCodec:
    """Text values.

    A stored value wrapped in one pair of matching single or double quotes
    is returned without them. When decomposing a value that is itself
    quote-wrapped, it is wrapped again in the other kind of quote so that
    ``compose(decompose(x)) == x`` always holds.
    """

    def decompose(self, value: Any) -> str:
        text = str(value)
        if _is_quoted(text, '"'):
            return f"'{text}'"
        if _is_quoted(text, "'"):
            return f'"{text}"'
        return text

    def compose(self, stored: str) -> str:
        if _is_quoted(stored, '"') or _is_quoted(stored, "'"):
            return stored[1:-1]
        return stored


def _is_quoted(text: str, quote: str) -> bool:
    return len(text) >= 2 and text[0] == quote and text[-1] == quote


class IntegerCodec:
    """Signed integers within a fixed bit range (32 bits by default)."""

    name = 'IntegerCodec'
    minimum = INT_MIN
    maximum = INT_MAX

    def decompose(self, value: Any) -> str:
        return str(int(value))

    def compose(self, stored: str) -> int:
        text = stored.strip()
        if not _INTEGER_RE.match(text):
            raise ValueDecodeError(self.name, stored, 'not an integer')
        number = int(text)
        if not self.minimum <= number <= self.maximum:
            raise ValueDecodeError(
                self.name, stored,
                f"out of range ({self.minimum}..{self.maximum})",
            )
        return number


class LongCodec(IntegerCodec):
    """64-bit signed integers."""

    name = 'LongCodec'
    minimum = LONG_MIN
    maximum = LONG_MAX


class BooleanCodec:
    """Boolean flags stored as ``true`` / ``false``.

    A missing value (``None``) composes to ``False``: an unset flag is off.
    """

    def empty(self) -> bool:
        return False

    def decompose(self, value: Any) -> str:
        return 'true' if value else 'false'

    def compose(self, stored: str | None) -> bool:
        if stored is None:
            return False
        text = stored.strip().lower()
        if text == 'true':
            return True
        if text == 'false':
            return False
        raise ValueDecodeError('BooleanCodec', stored, 'expected true or false')


class StringListCodec:
    """Lists of strings stored as a block list.

    Stored form::

        - first
        - "  second, padded  "

    Blank lines are ignored. Each item goes through StringCodec; items with
    leading or trailing whitespace are written in double quotes so that
    reading them back keeps the whitespace. Items can not span lines.
    """

    def __init__(self) -> None:
        self._strings = StringCodec()

    def empty(self) -> list[str]:
        return []

    def decompose(self, value: Any) -> str:
        return '\n'.join(f"- {self._decompose_item(str(item))}" for item in value)

    def _decompose_item(self, item: str) -> str:
        if '\n' in item or '\r' in item:
            raise ValueError(f"List items can not contain line breaks: {item!r}")
        if item != item.strip():
            return f'"{item}"'
        return self._strings.decompose(item)

    def compose(self, stored: str) -> list[str]:
        items: list[str] = []
        for line in stored.split('\n'):
            line = line.strip()
            if not line:
                continue
            if not line.startswith('-'):
                raise ValueDecodeError(
                    'StringListCodec', stored, f"list item without '-': {line!r}"
                )
            items.append(self._strings.compose(line[1:].strip()))
        return items


# ==================== Registry ====================

_registry: dict[type, ValueCodec] = {
    str: StringCodec(),
    bool: BooleanCodec(),
    int: IntegerCodec(),
    list: StringListCodec(),
    tuple: StringListCodec(),
}


def register_codec(target_type: type, codec: ValueCodec) -> None:
    """Register (or replace) the codec used for values of target_type.

    Args:
        target_type: Python type the codec handles.
        codec: Object providing decompose() and compose().

    Raises:
        TypeError: If codec does not provide decompose() and compose().
    """
    if not isinstance(codec, ValueCodec):
        raise TypeError(
            f"codec must provide decompose() and compose(), not {type(codec).__name__}"
        )
    _registry[target_type] = codec


def codec_for(target_type: type) -> ValueCodec:
    """Return the codec registered for target_type or its nearest base class.

    Raises:
        TypeError: If no codec handles target_type.
    """
    for klass in target_type.__mro__:
        codec = _registry.get(klass)
        if codec is not None:
            return codec
    raise TypeError(f"No value codec registered for {target_type.__name__}")
