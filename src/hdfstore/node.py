# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HDF node class."""

from __future__ import annotations

from bisect import bisect_left, insort
from typing import Iterator


def _node_name(node: HdfNode) -> str:
    return node.name


class HdfNode:
    """A node in an HDF hierarchy.

    Each node has:
    - name: The path segment identifying the node within its parent
    - value: Optional scalar string (None means "never assigned")
    - link: Optional dotted path; when set the node is an alias
    - children: Child nodes, always sorted by name
    - parent: The node containing this one, or None for the root

    A node may hold a value and children at the same time.

    Example:
        >>> root = HdfNode()
        >>> config = root.create_child('config')
        >>> config.value = 'Config Tree'
        >>> config.path
        'config'
    """

    __slots__ = ('name', 'value', 'link', 'children', 'parent')

    def __init__(
        self,
        name: str = '',
        value: str | None = None,
        link: str | None = None,
        parent: HdfNode | None = None,
    ) -> None:
        """Initialize an HdfNode.

        Args:
            name: The node's path segment. Empty only for the root.
            value: Optional scalar value.
            link: Optional dotted path this node aliases.
            parent: The node containing this one.
        """
        self.name = name
        self.value = value
        self.link = link
        self.children: list[HdfNode] = []
        self.parent = parent

    def __repr__(self) -> str:
        if self.is_link:
            return f"HdfNode({self.name!r}, link={self.link!r})"
        return (
            f"HdfNode({self.name!r}, value={self.value!r}, "
            f"children={len(self.children)})"
        )

    def __iter__(self) -> Iterator[HdfNode]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)

    @property
    def is_root(self) -> bool:
        """True if this node has no parent."""
        return self.parent is None

    @property
    def is_link(self) -> bool:
        """True if this node carries a non-empty link."""
        return bool(self.link)

    @property
    def has_value(self) -> bool:
        """True if this node carries a non-empty value."""
        return bool(self.value)

    @property
    def root(self) -> HdfNode:
        """Get the root node of this hierarchy."""
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    @property
    def path(self) -> str:
        """Dotted path from the root to this node ('' for the root)."""
        names = []
        node = self
        while node.parent is not None:
            names.append(node.name)
            node = node.parent
        return '.'.join(reversed(names))

    # ==================== Children ====================

    def find_child(self, name: str) -> HdfNode | None:
        """Return the first child called ``name``, or None.

        Children are sorted, so the leftmost match is the sibling a linear
        scan would reach first; later duplicates stay shadowed.
        """
        idx = bisect_left(self.children, name, key=_node_name)
        if idx < len(self.children) and self.children[idx].name == name:
            return self.children[idx]
        return None

    def add_child(self, node: HdfNode) -> HdfNode:
        """Insert ``node`` among the children, keeping them sorted by name.

        A node whose name is already present goes after the existing
        siblings with that name.
        """
        node.parent = self
        insort(self.children, node, key=_node_name)
        return node

    def create_child(self, name: str) -> HdfNode:
        """Create an empty child called ``name`` and insert it."""
        return self.add_child(HdfNode(name))

    def remove_child(self, node: HdfNode) -> bool:
        """Remove ``node`` (by identity) from the children.

        Returns:
            True if the node was a child and has been removed.
        """
        for idx, child in enumerate(self.children):
            if child is node:
                del self.children[idx]
                node.parent = None
                return True
        return False

    def set_link(self, target: str) -> None:
        """Turn this node into an alias of ``target``.

        Any value and children are dropped.
        """
        for child in self.children:
            child.parent = None
        self.children = []
        self.value = None
        self.link = target
