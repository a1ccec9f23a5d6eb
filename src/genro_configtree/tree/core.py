# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ConfigNode - A path-addressable configuration tree.

This module provides the ConfigNode class. There is no separate tree
container: every node is at the same time a tree (when it is the root) and a
handle on a subtree, and all operations recurse along the parent/child
relationship.

Each node has:
    - key: Name of the node, unique among its siblings
    - parent: The owning node, or None for a root
    - value: Stored (string) form of the node's value, or None if unset
    - children: Child nodes by key, iterated in an explicit order
    - comments: Comment lines attached to the node

A node may hold a value and children at the same time. A leaf is simply a
node without children.

Path Syntax:
    - Dotted paths: 'database.connection.port'
    - The root has no key; its children are at depth 0

Example:
    Basic usage::

        root = ConfigNode()
        root.set('database.host', 'localhost')
        root.set('database.port', 5432)

        root.get_integer('database.port')    # 5432
        root.contains('database.user')       # False

    Upgrading a user's configuration with new defaults::

        user_config.copy_missing(defaults)   # fill gaps, keep overrides
"""

from __future__ import annotations

from typing import Any, Iterator

from loguru import logger

from ..exceptions import InvalidPathError, InvalidStateError
from .access import TypedAccessMixin
from .loading import load_from_dict


def _split_path(path: str) -> tuple[str, str]:
    """Split a dotted path into its first key and the remaining path."""
    key, _, rest = path.partition('.')
    return key, rest


def _check_path(path: str) -> None:
    if not path:
        raise InvalidPathError("Can not add a node with empty path")
    if '' in path.split('.'):
        raise InvalidPathError(f"Empty key in path '{path}'")


class ConfigNode(TypedAccessMixin):
    """A node in a configuration tree.

    ConfigNode provides:
    - get_node(path) / contains(path): Navigation, None when missing
    - add_node(path): Create nodes on demand
    - remove_node(path) / move_child(old, new): Structural changes
    - copy_missing(other) / copy_all(other): Merge two trees
    - get_string(path), get_integer(path), ...: Typed access

    Attributes:
        key: The node's name within its parent ('' for a root).
        parent: The owning ConfigNode, or None for a root.
        value: Stored form of the value, None when the node has no value.

    Example:
        >>> root = ConfigNode()
        >>> root.add_node('a.b.c').set('5')
        >>> root.get_integer('a.b.c')
        5
    """

    __slots__ = ('key', 'parent', 'value', '_nodes', '_order', '_comment')

    def __init__(
        self,
        key: str = '',
        parent: ConfigNode | None = None,
        value: str | None = None,
    ) -> None:
        """Initialize a ConfigNode.

        The node is not registered in parent's children; use add_child() or
        add_node() to build a tree.

        Args:
            key: The node's name within its parent.
            parent: The node owning this one.
            value: Stored form of the node's value.
        """
        self.key = key
        self.parent = parent
        self.value = value
        self._nodes: dict[str, ConfigNode] = {}
        self._order: list[str] = []
        self._comment: list[str] = []

    @classmethod
    def from_dict(cls, data: dict[str, Any], **kwargs: Any) -> ConfigNode:
        """Build a new root node populated from a nested dict.

        Args:
            data: Nested mapping, see load_from_dict().
            **kwargs: Passed to the constructor (e.g. saver for Config).
        """
        root = cls(**kwargs)
        load_from_dict(root, data)
        return root

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        """Return string representation showing key, value and child keys."""
        return f"ConfigNode({self.get_key(True)!r}, value={self.value!r}, children={self._order})"

    def __len__(self) -> int:
        """Return the number of direct children."""
        return len(self._nodes)

    def __iter__(self) -> Iterator[ConfigNode]:
        """Iterate over direct child nodes in order."""
        return iter([self._nodes[key] for key in self._order])

    def __contains__(self, path: str) -> bool:
        return self.contains(path)

    # ==================== Navigation ====================

    def get_node(self, path: str) -> ConfigNode | None:
        """Get the node at the given path.

        Args:
            path: Dotted path relative to this node.

        Returns:
            The ConfigNode at path, or None if any segment is missing.
        """
        key, rest = _split_path(path)
        child = self._nodes.get(key)
        if child is None or not rest:
            return child
        return child.get_node(rest)

    def contains(self, path: str) -> bool:
        """True if a node exists at path."""
        return self.get_node(path) is not None

    def get_key(self, deep: bool = False) -> str:
        """Return this node's key, or its full dotted path if deep is True."""
        if not deep:
            return self.key
        if self.parent is None:
            return ''
        parent_key = self.parent.get_key(True)
        return f"{parent_key}.{self.key}" if parent_key else self.key

    @property
    def root(self) -> ConfigNode:
        """Get the root node of this tree."""
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    @property
    def depth(self) -> int:
        """Get the depth of this node (root=-1, its children=0)."""
        if self.parent is None:
            return -1
        return self.parent.depth + 1

    @property
    def is_leaf(self) -> bool:
        """True if this node has no children (regardless of its value)."""
        return not self._order

    @property
    def node_order(self) -> list[str]:
        """Child keys in iteration order (a copy)."""
        return list(self._order)

    def keys(self) -> list[str]:
        """Return the child keys in order."""
        return list(self._order)

    def get_comment(self) -> list[str]:
        return self._comment

    def set_comment(self, comment: list[str]) -> None:
        self._comment = list(comment)

    @property
    def comments(self) -> list[str]:
        """Comment lines attached to this node."""
        return self._comment

    @comments.setter
    def comments(self, comment: list[str]) -> None:
        self.set_comment(comment)

    # ==================== Structure ====================

    def add_node(self, path: str) -> ConfigNode:
        """Get the node at path, creating it and any missing ancestors.

        Args:
            path: Dotted path relative to this node.

        Returns:
            The existing or newly created ConfigNode. Repeated calls with
            the same path return the same node.

        Raises:
            InvalidPathError: If path is empty or contains an empty segment.
        """
        _check_path(path)
        return self._add_node(path)

    def _add_node(self, path: str) -> ConfigNode:
        key, rest = _split_path(path)
        child = self._nodes.get(key)
        if child is None:
            child = self.add_child(ConfigNode(key, self))
        return child._add_node(rest) if rest else child

    def add_child(self, child: ConfigNode) -> ConfigNode:
        """Attach child under this node, replacing a same-keyed child.

        A child still attached elsewhere is detached from its old parent
        first, so it ends up owned by this node only.

        Args:
            child: The node to attach.

        Returns:
            The attached child.
        """
        if child.parent is not None and child.parent._nodes.get(child.key) is child:
            child.remove()
        existing = self._nodes.get(child.key)
        if existing is not None:
            existing.remove()
        self._nodes[child.key] = child
        self._order.append(child.key)
        child.parent = self
        return child

    def remove(self) -> None:
        """Detach this node from its parent.

        The node and its subtree stay intact and can be attached elsewhere.

        Raises:
            InvalidStateError: If this node has no parent.
        """
        if self.parent is None:
            raise InvalidStateError("Can not remove root node from a tree.")
        del self.parent._nodes[self.key]
        self.parent._order.remove(self.key)
        self.parent = None

    def remove_node(self, path: str) -> bool:
        """Remove the node at path.

        Returns:
            True if a node was found and removed, False if path had no node.
        """
        node = self.get_node(path)
        if node is None:
            return False
        node.remove()
        logger.debug(f"Removed config node '{path}'")
        return True

    def move_child(self, old_path: str, new_path: str) -> bool:
        """Move the node at old_path to new_path.

        The node at new_path is created if needed and receives the whole
        content of the moved node (value, comments and children); that
        destination node is the one left in the tree.

        Args:
            old_path: Current path of the node.
            new_path: Path the content is moved to.

        Returns:
            True if the move was done, False if old_path had no node.

        Raises:
            InvalidPathError: If new_path is empty, has an empty segment or
                leads below the moved node.
        """
        move_from = self.get_node(old_path)
        if move_from is None:
            return False
        _check_path(new_path)

        node = self
        segments = new_path.split('.')
        for index, key in enumerate(segments):
            node = node._nodes.get(key)
            if node is None:
                break
            if node is move_from:
                if index == len(segments) - 1:
                    return True
                raise InvalidPathError(
                    f"Can not move '{old_path}' into its own subtree '{new_path}'"
                )

        move_to = self.add_node(new_path)
        new_parent = move_to.parent

        move_from.remove()
        move_to.copy_all(move_from)
        new_parent.add_child(move_to)

        logger.debug(f"Moved config node '{old_path}' to '{new_path}'")
        return self.contains(new_path)

    def sort(self) -> None:
        """Sort direct children alphabetically by key (not recursive)."""
        self._order.sort()

    def reorder(self, new_order: list[str]) -> bool:
        """Replace the child order.

        Args:
            new_order: Every current child key, each exactly once.

        Returns:
            True if the order was applied, False (nothing changed) if
            new_order misses a key, adds an unknown key or repeats one.
        """
        if len(new_order) != len(self._order) or set(new_order) != set(self._order):
            return False
        self._order = list(new_order)
        return True

    # ==================== Merge ====================

    def copy_missing(self, from_node: ConfigNode) -> None:
        """Fill what this tree lacks from from_node, keeping existing content.

        Comments are taken from from_node when it has more lines, the value
        only when this node has none. Children missing here are moved over
        with their whole subtree; children present on both sides are merged
        recursively.

        Args:
            from_node: The tree providing defaults.
        """
        if len(self._comment) < len(from_node._comment):
            self._comment = list(from_node._comment)

        if self.value is None and from_node.value is not None:
            self.value = from_node.value

        for key in list(from_node._order):
            new_child = from_node._nodes[key]
            old_child = self._nodes.get(key)
            if old_child is not None:
                old_child.copy_missing(new_child)
            else:
                logger.debug(f"Adding missing config node '{new_child.get_key(True)}'")
                self.add_child(new_child)

    def copy_all(self, from_node: ConfigNode) -> None:
        """Overwrite this tree with from_node's content.

        Comments and value are always taken from from_node. Children present
        on both sides are overwritten recursively, children only in
        from_node are moved over, children only here are kept.

        Args:
            from_node: The tree whose content wins.
        """
        self._comment = list(from_node._comment)
        self.value = from_node.value
        for key in list(from_node._order):
            new_child = from_node._nodes[key]
            old_child = self._nodes.get(key)
            if old_child is not None:
                old_child.copy_all(new_child)
            else:
                self.add_child(new_child)

    # ==================== Persistence ====================

    def save(self) -> None:
        """Find the root of this tree and save it.

        Raises:
            InvalidStateError: If the root has no save routine.
            OSError: Propagated from the root's save routine.
        """
        root = self.root
        if root is self:
            raise InvalidStateError("Tree has no save routine; use a Config root.")
        root.save()

    # ==================== Walk / Conversion ====================

    def walk(self) -> Iterator[tuple[str, ConfigNode]]:
        """Yield (full_key, node) for every descendant, depth first, in order.

        Example:
            >>> for path, node in root.walk():
            ...     print(path, node.value)
        """
        for child in self:
            yield child.get_key(True), child
            yield from child.walk()

    def as_dict(self) -> dict[str, Any]:
        """Convert to plain nested dict of stored values (recursive).

        Leaf nodes become their stored value. Nodes with children become
        dicts; a value held beside children is kept under '_value'.
        """
        result: dict[str, Any] = {}
        for child in self:
            if child.is_leaf:
                result[child.key] = child.value
            else:
                child_dict = child.as_dict()
                if child.value is not None:
                    child_dict = {'_value': child.value, **child_dict}
                result[child.key] = child_dict
        return result
