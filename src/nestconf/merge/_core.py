"""
Recursive deep merge of nested dicts.

merge_deep() folds any number of sources into a target, left to right.
Later sources win on key collisions; nested dicts are merged key by key;
lists follow the ArrayBehavior in effect; MISSING is never written.

Example:
    >>> merge_deep({}, {"a": 1, "b": 1}, {"a": 2})
    {'a': 2, 'b': 1}
"""

from __future__ import annotations

import logging as _logging

import nestconf.merge._clone as _clone
import nestconf.merge._options as _options
import nestconf.merge._types as _types

_logger = _logging.getLogger(__name__)


def merge_deep(
    target: _types.Node,
    *sources: _types.Node,
    options: _options.MergeOptions | None = None,
) -> _types.Node:
    """
    Deep merge sources into target.

    Args:
        target: The dict to merge into. Mutated in place unless
            options.mutate is False.
        *sources: Dicts applied in order; later ones take priority.
        options: Array policy, skip predicate and mutation flag.

    Returns:
        The merged structure: target itself when mutating, otherwise a
        new structure (target is left untouched).

    Note:
        If target or a source is not a dict, that merge step does nothing.
        The same holds one level down: a dict in a source is only merged
        into an existing dict, or into a fresh one when the key is absent
        or holds a falsy leaf such as None, False, 0 or "". Any other value
        already there (including a list) is left alone.
    """
    opts = _options.resolve(options)

    if not opts.mutate:
        target = _clone.clone(target)

    for source in sources:
        _merge_into(target, source, opts)

    return target


def _merge_into(
    target: _types.Node,
    source: _types.Node,
    opts: _options.MergeOptions,
) -> None:
    """Merge one source into target, recursing into nested dicts."""
    if not (_types.is_plain(target) and _types.is_plain(source)):
        _logger.debug(
            "Skipping merge of %s into %s",
            type(source).__name__,
            type(target).__name__,
        )
        return

    for key, value in source.items():
        if _types.is_plain(value):
            if _is_vacant(target.get(key)):
                target[key] = {}
            _merge_into(target[key], value, opts)
            continue

        current = target.get(key, _types.MISSING)
        if opts.skip_func is not None and opts.skip_func(current, value):
            _logger.debug("skip_func vetoed key %r", key)
            continue

        if _types.is_sequence(value):
            target[key] = _combine_lists(current, value, opts.array_behavior)
        elif value is not _types.MISSING:
            target[key] = value


def _combine_lists(
    current: _types.Node,
    incoming: _types.Sequence,
    behavior: _options.ArrayBehavior,
) -> _types.Sequence:
    """Apply the array policy to one key."""
    if behavior is _options.ArrayBehavior.APPEND:
        existing = current if _types.is_sequence(current) else []
        return _clone.clone_sequence(existing) + _clone.clone_sequence(incoming)
    if behavior is _options.ArrayBehavior.REPLACE_LINK:
        return incoming
    return _clone.clone_sequence(incoming)


def _is_vacant(existing: _types.Node) -> bool:
    """True when a nested dict may replace the value at a key."""
    if _types.is_plain(existing) or _types.is_sequence(existing):
        return False
    return not existing
