"""
Read-only views over nested dict/list data.

A Config hands out its defaults through these views so callers cannot
modify the stored defaults by accident. Nested dicts and lists are
wrapped on access; thaw() returns an independent mutable copy.
"""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing

import nestconf.merge._clone as _clone
import nestconf.merge._types as _types


class FrozenMapping(_abc.Mapping[str, _typing.Any]):
    """
    Read-only view of a dict.

    Example:
        >>> view = FrozenMapping({"a": {"b": [1, 2]}})
        >>> view["a"]["b"][0]
        1
        >>> view["a"]["b"].append(3)  # AttributeError: no append
    """

    __slots__ = ("_data",)

    def __init__(self, data: _types.PlainStructure) -> None:
        # Wrapped by reference: the view tracks later changes to data
        self._data = data

    def __getitem__(self, key: str) -> _typing.Any:
        return freeze(self._data[key])

    def __iter__(self) -> _typing.Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"FrozenMapping({self._data!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, _abc.Mapping):
            return dict(self) == dict(other)
        return NotImplemented

    def __hash__(self) -> int:
        raise TypeError(f"unhashable type: '{type(self).__name__}'")

    def thaw(self) -> _types.PlainStructure:
        """Return a mutable deep copy of the wrapped dict."""
        return _clone.clone(self._data)


class FrozenSequence(_abc.Sequence[_typing.Any]):
    """Read-only view of a list."""

    __slots__ = ("_data",)

    def __init__(self, data: _types.Sequence) -> None:
        self._data = data

    @_typing.overload
    def __getitem__(self, index: int) -> _typing.Any: ...

    @_typing.overload
    def __getitem__(self, index: slice) -> FrozenSequence: ...

    def __getitem__(self, index: int | slice) -> _typing.Any:
        if isinstance(index, slice):
            return FrozenSequence(self._data[index])
        return freeze(self._data[index])

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"FrozenSequence({self._data!r})"

    def __eq__(self, other: object) -> bool:
        # Strings are sequences too, but never equal to a list view
        if isinstance(other, str):
            return NotImplemented
        if isinstance(other, _abc.Sequence):
            return list(self) == list(other)
        return NotImplemented

    def __hash__(self) -> int:
        raise TypeError(f"unhashable type: '{type(self).__name__}'")

    def thaw(self) -> _types.Sequence:
        """Return a mutable deep copy of the wrapped list."""
        return _clone.clone(self._data)


def freeze(value: _typing.Any) -> _typing.Any:
    """
    Wrap a dict or list in a read-only view; return anything else as-is.

    Example:
        >>> freeze({"a": 1})
        FrozenMapping({'a': 1})
        >>> freeze("text")
        'text'
    """
    if _types.is_plain(value):
        return FrozenMapping(value)
    if _types.is_sequence(value):
        return FrozenSequence(value)
    return value
