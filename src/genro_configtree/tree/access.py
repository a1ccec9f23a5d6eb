# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Typed value access for ConfigNode.

Values are stored as strings; the getters here compose them into Python
types through the value codecs, and set() decomposes Python values into
their stored form.

Every getter takes an optional path. Without it the getter reads the node it
is called on; with it the node is looked up first and a missing path gives
the absent result instead of an error:

    ==================  ==============
    getter              absent result
    ==================  ==============
    get_string          None
    get_integer         None
    get_long            None
    get_boolean         False
    get_string_list     []
    ==================  ==============

A stored value that cannot be composed raises ValueDecodeError.
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING

from ..codecs import (
    BooleanCodec,
    IntegerCodec,
    LongCodec,
    StringCodec,
    StringListCodec,
    ValueCodec,
    codec_for,
)

if TYPE_CHECKING:
    from .core import ConfigNode

_STRING = StringCodec()
_INTEGER = IntegerCodec()
_LONG = LongCodec()
_BOOLEAN = BooleanCodec()
_STRING_LIST = StringListCodec()

_MISSING = object()


class TypedAccessMixin:
    """Mixin providing typed getters and set() to ConfigNode."""

    __slots__ = ()

    def _target(self, path: str | None) -> ConfigNode | None:
        if path is None:
            return self  # type: ignore[return-value]
        return self.get_node(path)  # type: ignore[attr-defined]

    def _compose(self, codec: ValueCodec, path: str | None, default: Any = _MISSING) -> Any:
        if default is _MISSING:
            empty = getattr(codec, 'empty', None)
            default = empty() if empty is not None else None
        node = self._target(path)
        if node is None or node.value is None:
            return default
        return codec.compose(node.value)

    # ==================== Setters ====================

    def set(self, path_or_value: Any, value: Any = _MISSING) -> None:
        """Set a value on this node, or on the node at a path.

        Two forms:
            node.set(value): store value on this node.
            node.set(path, value): create the node at path if needed and
                store value on it.

        The stored form is produced by the codec registered for the value's
        type. A ConfigNode value is merged in with copy_all(); None clears
        the value. Nothing is created when the value can not be stored.

        Raises:
            TypeError: If no codec handles the value's type.
            ValueError: If the codec rejects the value.
            InvalidPathError: If path is empty.

        Example:
            >>> root.set('server.port', 8080)
            >>> root.get_node('server.port').set(9090)
        """
        if value is _MISSING:
            self._store(self._stored_form(path_or_value))
        else:
            stored = self._stored_form(value)
            self.add_node(path_or_value)._store(stored)  # type: ignore[attr-defined]

    @staticmethod
    def _stored_form(value: Any) -> Any:
        from .core import ConfigNode

        if isinstance(value, ConfigNode) or value is None:
            return value
        return codec_for(type(value)).decompose(value)

    def _store(self, stored: Any) -> None:
        from .core import ConfigNode

        if isinstance(stored, ConfigNode):
            self.copy_all(stored)  # type: ignore[attr-defined]
        else:
            self.value = stored  # type: ignore[attr-defined]

    # ==================== Getters ====================

    def get_value(self, target_type: type, path: str | None = None, default: Any = _MISSING) -> Any:
        """Compose the stored value with the codec registered for target_type.

        This is the generic form of the typed getters: get_value(bool, path)
        reads like get_boolean(path).

        Args:
            target_type: Type the stored value is converted to.
            path: Optional path of the node to read.
            default: Returned when the node or its value is missing. If not
                given, the codec's empty() result is used when it has one,
                None otherwise.

        Raises:
            TypeError: If no codec handles target_type.
            ValueDecodeError: If the stored value is malformed.
        """
        return self._compose(codec_for(target_type), path, default)

    def get_string(self, path: str | None = None) -> str | None:
        return self._compose(_STRING, path)

    def get_integer(self, path: str | None = None) -> int | None:
        """Get a 32-bit integer value."""
        return self._compose(_INTEGER, path)

    def get_long(self, path: str | None = None) -> int | None:
        """Get a 64-bit integer value."""
        return self._compose(_LONG, path)

    def get_boolean(self, path: str | None = None) -> bool:
        """Get a boolean value; an unset value or missing node is False."""
        return self._compose(_BOOLEAN, path)

    def get_string_list(self, path: str | None = None) -> list[str]:
        return self._compose(_STRING_LIST, path)

    def get_string_map(self, full_keys: bool = False) -> dict[str, str | None]:
        """Return the string values of the direct children.

        Args:
            full_keys: If True, keys are full dotted paths; otherwise the
                children's own keys.

        Returns:
            Dict of key -> string value, in child order.
        """
        return {
            child.get_key(full_keys): child.get_string()
            for child in self  # type: ignore[attr-defined]
        }
