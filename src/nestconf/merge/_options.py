"""
Options controlling how merge_deep combines structures.

Example:
    >>> opts = MergeOptions(array_behavior=ArrayBehavior.APPEND)
    >>> merge_deep({"a": [1]}, {"a": [2]}, options=opts)
    {'a': [1, 2]}
"""

from __future__ import annotations

import dataclasses as _dataclasses
import enum as _enum

import nestconf.merge._types as _types


class ArrayBehavior(_enum.IntEnum):
    """
    How a list in a source is combined with the accumulator.

    REPLACE_LINK stores the source list itself in the result. The merged
    structure and the source then share one mutable list: a caller that
    chooses it must treat the source list as no longer exclusively theirs.
    """

    REPLACE_COPY = 0
    """Replace with an independent deep copy of the source list (default)."""

    APPEND = 1
    """Existing items followed by source items, as a new independent list."""

    REPLACE_LINK = 2
    """Replace with the source list instance itself (aliasing)."""

    @classmethod
    def parse(cls, value: str | int | ArrayBehavior) -> ArrayBehavior:
        """
        Convert an enum member, integer or name into an ArrayBehavior.

        Names are case-insensitive and accept dashes, e.g. "replace-link".

        Raises:
            ValueError: If the value does not name a known behavior.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().upper().replace("-", "_")
            if name.isdigit():
                return cls(int(name))
            try:
                return cls[name]
            except KeyError:
                choices = ", ".join(m.name.lower().replace("_", "-") for m in cls)
                raise ValueError(
                    f"Unknown array behavior {value!r} (expected one of: {choices})"
                ) from None
        return cls(value)


@_dataclasses.dataclass(frozen=True, slots=True)
class MergeOptions:
    """Per-call merge settings."""

    array_behavior: ArrayBehavior = ArrayBehavior.REPLACE_COPY
    skip_func: _types.SkipFunc | None = None
    mutate: bool = True
    """False merges into a deep copy of the target and leaves it untouched."""

    def __post_init__(self) -> None:
        # Frozen dataclass: go through object.__setattr__ to normalize ints
        object.__setattr__(
            self, "array_behavior", ArrayBehavior.parse(self.array_behavior)
        )

    def with_mutate(self) -> MergeOptions:
        """Return a copy that always mutates the target."""
        if self.mutate:
            return self
        return _dataclasses.replace(self, mutate=True)


DEFAULT_OPTIONS = MergeOptions()


def resolve(options: MergeOptions | None) -> MergeOptions:
    """
    Return options, or the defaults when None.

    Raises:
        TypeError: If options is neither None nor MergeOptions.
    """
    if options is None:
        return DEFAULT_OPTIONS
    if not isinstance(options, MergeOptions):
        raise TypeError(
            f"options must be MergeOptions, got {type(options).__name__}"
        )
    return options
