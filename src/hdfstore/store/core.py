# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HdfStore - Path navigation over an HDF node tree.

This module provides the HdfStore class, the public API of the hdfstore
library. An HdfStore is bound to one HdfNode (a fresh root by default) and
resolves dotted paths relative to it.

Key Features:
    - **Dotted paths**: 'config.database.host'
    - **Create on write**: set_value/link_value build missing segments
    - **Links**: a node may alias another root-relative path
    - **Sorted children**: siblings are always kept in name order
    - **Cascade delete**: emptied ancestors are removed with their last child

Reads never raise: a missing path yields the caller's default.

Example:
    Basic usage::

        store = HdfStore()
        store.set_value('config.database.host', 'localhost')
        store.set_int_value('config.database.port', 5432)

        store.get_value('config.database.host')          # 'localhost'
        store.get_int_value('config.database.port', 0)   # 5432

    Links::

        store.link_value('db', 'config.database')
        store.get_value('db.host')                       # 'localhost'
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Iterator

from ..exceptions import PathNotFoundError
from ..node import HdfNode
from .dumping import dump_flat, dump_tree

DEFAULT_MAX_LINK_DEPTH = 32

_INT_RE = re.compile(r'[+-]?[0-9]+')


def split_path(path: str) -> list[str]:
    """Split a dotted path into its segments."""
    return path.split('.')


class HdfStore:
    """Dotted-path API over an HdfNode tree.

    HdfStore provides:
    - get_value / get_int_value: reads with a caller-supplied default
    - set_value / set_int_value / link_value: writes with autocreate
    - delete_value: removal with cascade of emptied ancestors
    - get_object / object_name: relative navigation into subtrees
    - dump_tree / dump_flat: text serialization

    Attributes:
        node: The HdfNode paths are resolved against.
        logger: Diagnostics sink, shared with stores derived from this one.

    Example:
        >>> store = HdfStore()
        >>> store.set_value('config.subtree', 'test')
        >>> store.get_object('config.subtree').object_name()
        'subtree'
    """

    __slots__ = ('node', 'logger', 'max_link_depth')

    def __init__(
        self,
        node: HdfNode | None = None,
        logger: logging.Logger | None = None,
        max_link_depth: int = DEFAULT_MAX_LINK_DEPTH,
    ) -> None:
        """Initialize an HdfStore.

        Args:
            node: The node to bind to. A new empty root when omitted.
            logger: Logger for diagnostics. Defaults to the module logger.
            max_link_depth: Longest chain of links followed while resolving
                a single segment before giving up.
        """
        self.node = node if node is not None else HdfNode()
        self.logger = logger or logging.getLogger(__name__)
        self.max_link_depth = max_link_depth

    def _derive(self, node: HdfNode) -> HdfStore:
        return HdfStore(node, logger=self.logger, max_link_depth=self.max_link_depth)

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"HdfStore({self.node.path!r}, {[c.name for c in self.node.children]})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HdfStore):
            return NotImplemented
        return self.node is other.node

    def __hash__(self) -> int:
        return id(self.node)

    def __len__(self) -> int:
        """Return the number of direct children of the bound node."""
        return len(self.node.children)

    def __iter__(self) -> Iterator[HdfStore]:
        """Iterate over stores bound to the direct children, in name order."""
        for child in list(self.node.children):
            yield self._derive(child)

    def __contains__(self, path: str) -> bool:
        return self.resolve(path) is not None

    def __getitem__(self, path: str) -> str:
        """Get the value at path.

        Raises:
            PathNotFoundError: If the path does not resolve or has no value.
        """
        value = self.get_value(path)
        if value is None:
            raise PathNotFoundError(path)
        return value

    def __setitem__(self, path: str, value: Any) -> None:
        # bool is stored as 1 or 0 so get_int_value can read it back
        if isinstance(value, int):
            self.set_int_value(path, value)
        else:
            self.set_value(path, str(value))

    def __delitem__(self, path: str) -> None:
        self.delete_value(path)

    # ==================== Navigation ====================

    @property
    def root(self) -> HdfStore:
        """Get a store bound to the root of this hierarchy."""
        return self._derive(self.node.root)

    def _traverse(
        self, node: HdfNode, path: str, autocreate: bool, following: tuple[HdfNode, ...]
    ) -> HdfNode | None:
        """Walk path from node, following links through the root.

        Args:
            node: Start node.
            path: Dotted path relative to node.
            autocreate: If True, create missing segments.
            following: Link nodes currently being followed, for cycle detection.

        Returns:
            The resolved node, or None.
        """
        if not path:
            if autocreate:
                self.logger.error("cannot create a node at an empty path")
            return None

        current = node
        for segment in split_path(path):
            child = current.find_child(segment)
            if child is None:
                if not autocreate:
                    return None
                child = current.create_child(segment)
            if child.is_link:
                if any(child is n for n in following):
                    self.logger.error(
                        "link cycle at %r (-> %r)", child.path, child.link
                    )
                    return None
                if len(following) >= self.max_link_depth:
                    self.logger.error(
                        "link chain deeper than %d at %r", self.max_link_depth, child.path
                    )
                    return None
                # links always resolve with autocreate, even on reads
                child = self._traverse(
                    child.root, child.link, True, following + (child,)
                )
                if child is None:
                    return None
            current = child
        return current

    def resolve(self, path: str) -> HdfNode | None:
        """Return the node at path, or None if any segment is missing."""
        return self._traverse(self.node, path, False, ())

    def resolve_or_create(self, path: str) -> HdfNode | None:
        """Return the node at path, creating missing segments.

        Returns None only for an empty path or an unresolvable link.
        """
        return self._traverse(self.node, path, True, ())

    def get_object(self, path: str) -> HdfStore | None:
        """Get a store bound to the node at path.

        The returned store resolves further paths relative to that node.

        Args:
            path: Dotted path to the node.

        Returns:
            HdfStore bound to the node, or None if the path does not resolve.
        """
        node = self.resolve(path)
        if node is None:
            return None
        return self._derive(node)

    def object_name(self) -> str:
        """Return the bound node's own name (not its full path)."""
        return self.node.name

    # ==================== Core API ====================

    def get_value(self, path: str, default: str | None = None) -> str | None:
        """Get the value at path.

        An empty value reads as absent.

        Args:
            path: Dotted path.
            default: Returned when the path or the value is missing.

        Returns:
            The node's value or default.
        """
        node = self.resolve(path)
        if node is not None and node.value:
            return node.value
        return default

    def get_int_value(self, path: str, default: int = 0) -> int:
        """Get the value at path as an integer.

        Only an optional sign followed by decimal digits is accepted.

        Args:
            path: Dotted path.
            default: Returned when the path is missing or not numeric.

        Returns:
            The parsed integer or default.
        """
        value = self.get_value(path, '')
        if value and _INT_RE.fullmatch(value):
            return int(value)
        return default

    def set_value(self, path: str, value: str) -> None:
        """Set the value at path, creating the node if needed.

        Link and children of the node are left alone.
        """
        node = self.resolve_or_create(path)
        if node is None:
            self.logger.error("set_value(%r) did not resolve, value dropped", path)
            return
        node.value = value

    def set_int_value(self, path: str, value: int) -> None:
        """Set an integer value at path, stored in base 10."""
        self.set_value(path, str(int(value)))

    def link_value(self, from_path: str, to_path: str) -> None:
        """Make the node at from_path an alias of to_path.

        to_path is resolved against the root of the tree each time the link
        is followed. The node's value and children are dropped.
        """
        node = self.resolve_or_create(from_path)
        if node is None:
            self.logger.error("link_value(%r) did not resolve, link dropped", from_path)
            return
        node.set_link(to_path)

    def delete_value(self, path: str) -> None:
        """Delete the node at path, if it exists.

        When the parent is left without children and holds neither a value
        nor a link, it is deleted as well, recursively up to the root.
        """
        node = self.resolve(path)
        if node is None or node.parent is None:
            return
        parent = node.parent
        parent.remove_child(node)
        while (
            parent.parent is not None
            and not parent.children
            and not parent.has_value
            and not parent.is_link
        ):
            node, parent = parent, parent.parent
            parent.remove_child(node)

    # ==================== Iteration ====================

    def walk(self) -> Iterator[tuple[str, HdfNode]]:
        """Yield (path, node) pairs depth first in name order.

        Paths are relative to the bound node. Links are not followed.

        Example:
            >>> for path, node in store.walk():
            ...     print(path, node.value)
        """
        stack = [(iter(self.node.children), '')]
        while stack:
            children, prefix = stack[-1]
            child = next(children, None)
            if child is None:
                stack.pop()
                continue
            path = f"{prefix}.{child.name}" if prefix else child.name
            yield path, child
            stack.append((iter(child.children), path))

    def keys(self) -> list[str]:
        """Return the names of the direct children in sorted order."""
        return [child.name for child in self.node.children]

    # ==================== Loading ====================

    def read_string(self, text: str) -> HdfStore:
        """Parse HDF text into this store and return it."""
        from ..parsers import HdfParser
        HdfParser(logger=self.logger).parse(text, self)
        return self

    def read_file(self, path: str | Path) -> HdfStore:
        """Parse an HDF file into this store and return it.

        A file that cannot be read is logged and leaves the store unchanged.
        """
        from ..parsers import HdfParser
        HdfParser(logger=self.logger).parse_file(path, self)
        return self

    # ==================== Dumping ====================

    def dump_tree(self) -> list[str]:
        """Render the children of the bound node in nested form."""
        return dump_tree(self.node)

    def dump_flat(self) -> list[str]:
        """Render the children of the bound node in flat form."""
        return dump_flat(self.node)

    def dumps(self, flat: bool = False) -> str:
        """Render the store as HDF text, newline terminated."""
        lines = self.dump_flat() if flat else self.dump_tree()
        if not lines:
            return ''
        return '\n'.join(lines) + '\n'

    def write_file(self, path: str | Path, flat: bool = False) -> None:
        """Write the store to path as UTF-8 HDF text."""
        Path(path).write_text(self.dumps(flat=flat), encoding='utf-8', newline='\n')
