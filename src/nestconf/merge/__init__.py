"""
Deep merge and flattening of nested dict/list data.

Example:
    >>> from nestconf.merge import ArrayBehavior, MergeOptions, merge_deep
    >>> merge_deep({"a": [1]}, {"a": [1, 2]},
    ...            options=MergeOptions(array_behavior=ArrayBehavior.APPEND))
    {'a': [1, 1, 2]}
"""

from nestconf.merge._clone import clone
from nestconf.merge._core import merge_deep
from nestconf.merge._frozen import FrozenMapping, FrozenSequence, freeze
from nestconf.merge._options import ArrayBehavior, MergeOptions
from nestconf.merge._plainify import DEFAULT_SEPARATOR, plainify
from nestconf.merge._types import MISSING, is_plain, is_sequence

__all__ = [
    "DEFAULT_SEPARATOR",
    "MISSING",
    "ArrayBehavior",
    "FrozenMapping",
    "FrozenSequence",
    "MergeOptions",
    "clone",
    "freeze",
    "is_plain",
    "is_sequence",
    "merge_deep",
    "plainify",
]
