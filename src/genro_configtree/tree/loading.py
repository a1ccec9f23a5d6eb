# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Functions populating a ConfigNode from plain Python data.

Loaders only use the public node API (add_node, set, set_comment), the same
way a file parser builds a tree.

Special keys in dicts:
    - '_value': the node's own value, beside its children
    - '_comment': comment lines for the node (string or list of strings)
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from .core import ConfigNode


def load_from_dict(node: ConfigNode, data: dict[str, Any]) -> None:
    """Load a nested dict into node.

    Keys may be dotted paths. Nested dicts become child nodes, any other
    value is stored through its codec.

    Args:
        node: The node receiving the data.
        data: Mapping of key -> value or nested mapping.

    Example:
        >>> load_from_dict(root, {
        ...     'server': {'_comment': 'Web server', 'port': 8080},
        ...     'debug': False,
        ... })
    """
    for key, value in data.items():
        if key == '_value':
            node.set(value)
        elif key == '_comment':
            node.set_comment(_comment_lines(value))
        elif isinstance(value, dict):
            load_from_dict(node.add_node(key), value)
        else:
            node.set(key, value)


def load_from_list(node: ConfigNode, items: list[tuple]) -> None:
    """Load a list of (key, value) or (key, value, comment) tuples into node.

    Nested lists and dicts become child nodes.

    Raises:
        ValueError: If an item is not a 2- or 3-tuple.
    """
    for item in items:
        if len(item) == 2:
            key, value = item
            comment = None
        elif len(item) == 3:
            key, value, comment = item
        else:
            raise ValueError(f"Expected (key, value) or (key, value, comment), got {item!r}")

        child = node.add_node(key)
        if isinstance(value, dict):
            load_from_dict(child, value)
        elif isinstance(value, list) and value and isinstance(value[0], tuple):
            load_from_list(child, value)
        else:
            child.set(value)
        if comment is not None:
            child.set_comment(_comment_lines(comment))


def _comment_lines(comment: str | list[str]) -> list[str]:
    if isinstance(comment, str):
        return comment.splitlines()
    return list(comment)
