"""
Flatten nested dicts into a single level with dotted keys.

Example:
    >>> plainify({"nested": {"foo": "bar", "deep": {"foo": [1, 2]}}, "foo": "bar"})
    {'nested.foo': 'bar', 'nested.deep.foo': [1, 2], 'foo': 'bar'}
"""

from __future__ import annotations

import typing as _typing

import nestconf.merge._clone as _clone
import nestconf.merge._types as _types

DEFAULT_SEPARATOR = "."


def plainify(
    target: _types.Node,
    condition: _types.Condition | None = None,
    *,
    separator: str = DEFAULT_SEPARATOR,
) -> _types.Node:
    """
    Return a flattened copy of target.

    Every nested dict is expanded into its parent using keys joined with
    separator, recursively. A dict for which condition returns True is
    treated as a single value and kept whole under its (joined) key.
    Lists and other leaves are never expanded.

    Args:
        target: The nested dict to flatten. Never modified.
        condition: Optional predicate called with each nested dict;
            True means "do not descend".
        separator: String used to join key names.

    Returns:
        A new dict whose values share no dicts or lists with target.
        If target is not a dict, a clone of it is returned.
    """
    if not separator:
        raise ValueError("separator must be a non-empty string")

    if not _types.is_plain(target):
        return _clone.clone(target)

    result: dict[str, _typing.Any] = {}
    for key, value in _walk(target, condition, ()):
        result[separator.join(key)] = _clone.clone(value)
    return result


def _walk(
    node: _types.PlainStructure,
    condition: _types.Condition | None,
    prefix: _types.Path,
) -> _typing.Iterator[tuple[_types.Path, _typing.Any]]:
    """Yield (path, value) for every value that stays un-expanded."""
    for key, value in node.items():
        path = (*prefix, str(key))
        if _types.is_plain(value) and (condition is None or not condition(value)):
            yield from _walk(value, condition, path)
        else:
            yield path, value
