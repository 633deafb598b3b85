# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Rendering of HdfNode trees as HDF text.

Two read-only depth-first traversals, both visiting children in their
sorted order:

- dump_tree: nested form, tab indented, children inside ``name { ... }``
- dump_flat: flat form, full dotted keys, no braces

Each entry of the returned list is one logical line; a multi-line value
is a single entry holding its ``<< EOM`` block. Links are written as
``name : target`` and never expanded.
"""

from __future__ import annotations

from ..node import HdfNode


def _value_line(key: str, value: str) -> str:
    if '\n' in value:
        if not value.endswith('\n'):
            value += '\n'
        return f"{key} << EOM\n{value}EOM"
    return f"{key} = {value}"


def dump_tree(node: HdfNode, depth: int = 0) -> list[str]:
    """Render the children of node in nested form.

    Args:
        node: Node whose children are rendered (the node itself is not).
        depth: Indentation level of the children.

    Returns:
        List of lines, without trailing newlines.
    """
    dump: list[str] = []
    stack = [(iter(node.children), depth)]
    while stack:
        children, level = stack[-1]
        child = next(children, None)
        if child is None:
            stack.pop()
            if stack:
                dump.append('\t' * (level - 1) + '}')
            continue
        padding = '\t' * level
        if child.value:
            dump.append(padding + _value_line(child.name, child.value))
        if child.link:
            dump.append(f"{padding}{child.name} : {child.link}")
        if child.children:
            dump.append(f"{padding}{child.name} {{")
            stack.append((iter(child.children), level + 1))
    return dump


def dump_flat(node: HdfNode, prefix: str = '') -> list[str]:
    """Render the children of node in flat form.

    Args:
        node: Node whose children are rendered (the node itself is not).
        prefix: Dotted path prepended to every key.

    Returns:
        List of lines, without trailing newlines.
    """
    dump: list[str] = []
    stack = [(iter(node.children), prefix)]
    while stack:
        children, base = stack[-1]
        child = next(children, None)
        if child is None:
            stack.pop()
            continue
        key = f"{base}.{child.name}" if base else child.name
        if child.value:
            dump.append(_value_line(key, child.value))
        if child.link:
            dump.append(f"{key} : {child.link}")
        if child.children:
            stack.append((iter(child.children), key))
    return dump
