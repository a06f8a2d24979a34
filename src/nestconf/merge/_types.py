"""
Type aliases and the MISSING sentinel for nested merge operations.

This module provides:
- Node: Any value in a nested structure (dict, list, or leaf)
- PlainStructure: A dict of string keys to nodes
- Sequence: A list of nodes
- MISSING: Marker for "no value here" (distinct from None)
"""

from __future__ import annotations

import typing as _typing

Node: _typing.TypeAlias = _typing.Any
PlainStructure: _typing.TypeAlias = dict[str, _typing.Any]
Sequence: _typing.TypeAlias = list[_typing.Any]

# Tuple of keys identifying a nested location
# Example: ("formula", "output") represents formula.output
Path: _typing.TypeAlias = tuple[str, ...]

# skip_func(target_value, source_value) -> True to leave the key untouched
SkipFunc: _typing.TypeAlias = _typing.Callable[[_typing.Any, _typing.Any], bool]

# condition(structure) -> True to keep the structure whole when flattening
Condition: _typing.TypeAlias = _typing.Callable[[PlainStructure], bool]


def _get_missing_singleton() -> _MissingType:
    """Return the MISSING singleton. Called by pickle to reconstruct."""
    return MISSING


class _MissingType:
    """Sentinel type for an absent value."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<MISSING>"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> tuple[_typing.Callable[[], _MissingType], tuple[()]]:
        """Pickle support: ensure singleton is preserved."""
        return (_get_missing_singleton, ())


MISSING = _MissingType()
"""Value of a key that does not exist. Never written by merge_deep."""


def is_plain(value: _typing.Any) -> bool:
    """Check if a value is a plain structure (a dict)."""
    return isinstance(value, dict)


def is_sequence(value: _typing.Any) -> bool:
    """Check if a value is a sequence (a list)."""
    return isinstance(value, list)
