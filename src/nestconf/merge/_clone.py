"""
Structural clone for nested dict/list data.

Dicts and lists are copied recursively; every other value is a leaf and
is returned as-is (shared by reference). Cyclic input is not supported.
"""

from __future__ import annotations

import typing as _typing

import nestconf.merge._types as _types


def clone(node: _types.Node) -> _types.Node:
    """
    Return a copy of node sharing no dict or list with the original.

    Example:
        >>> data = {"a": [[1, 2]]}
        >>> copied = clone(data)
        >>> copied["a"][0].append(3)
        >>> data
        {'a': [[1, 2]]}
    """
    if _types.is_plain(node):
        return {key: clone(value) for key, value in node.items()}
    if _types.is_sequence(node):
        return [clone(item) for item in node]
    return node


def clone_sequence(items: _typing.Iterable[_types.Node]) -> _types.Sequence:
    """Return a new list holding clones of items."""
    return [clone(item) for item in items]
