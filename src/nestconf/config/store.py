"""
Layered configuration store.

Config keeps two independent nested dicts built with merge_deep:

- current: current configuration (defaults overridden by config layers)
- defaults: the defaults alone, exposed read-only

Mutating the current values never changes the defaults, even for nested
lists and dicts, because every layer is merged in as a copy (unless a
caller explicitly asks for ArrayBehavior.REPLACE_LINK).

Example:
    >>> config = Config({"a": "new value"}, {"a": "default value"})
    >>> config["a"]
    'new value'
    >>> config.get_default("a")
    'default value'
    >>> config.add({"b": 1}, {"b": 0}).get_prop_ref("b")
    1
"""

from __future__ import annotations

import collections.abc as _abc
import logging as _logging
import typing as _typing

import nestconf.merge as merge

_logger = _logging.getLogger(__name__)


class Config(_abc.Mapping[str, _typing.Any]):
    """
    Nested configuration with separately tracked defaults.

    Behaves as a mapping over the current values (item assignment is
    supported too). Layers are added with add(); later calls win on key
    collisions. There is no way to remove a layer: a key once set
    persists until overwritten.

    Args:
        overrides: Current values layered over defaults.
        defaults: Default values.
        separator: Delimiter for dotted paths in get_prop_ref/get_default
            and for keys produced by flatten().

    Note:
        **Thread safety:** Not thread-safe. Serialize access to a given
        store externally if it is shared between threads.
    """

    def __init__(
        self,
        overrides: dict[str, _typing.Any] | None = None,
        defaults: dict[str, _typing.Any] | None = None,
        *,
        separator: str = merge.DEFAULT_SEPARATOR,
    ) -> None:
        if not separator:
            raise ValueError("separator must be a non-empty string")
        self._separator = separator
        self._values: dict[str, _typing.Any] = {}
        self._defaults: dict[str, _typing.Any] = {}
        self.add(overrides or {}, defaults or {})

    @property
    def current(self) -> dict[str, _typing.Any]:
        """The current values dict itself (not a copy)."""
        return self._values

    @property
    def defaults(self) -> merge.FrozenMapping:
        """Read-only view of the stored defaults."""
        return merge.FrozenMapping(self._defaults)

    @property
    def separator(self) -> str:
        """Delimiter used for dotted paths."""
        return self._separator

    def add(
        self,
        config: dict[str, _typing.Any] | None,
        defaults: dict[str, _typing.Any] | None = None,
        options: merge.MergeOptions | None = None,
    ) -> Config:
        """
        Merge another layer of config values and defaults.

        defaults is merged into the current values first, then config, so
        config wins. defaults is also merged into the stored defaults.

        Args:
            config: Current values to add. None adds nothing.
            defaults: Default values to add. None leaves defaults unchanged.
            options: Merge options. mutate=False is ignored: the store's
                own dicts are always updated in place.

        Returns:
            self, for chaining.
        """
        opts = (options or merge.MergeOptions()).with_mutate()
        config = config or {}
        defaults = defaults or {}
        merge.merge_deep(self._values, defaults, config, options=opts)
        merge.merge_deep(self._defaults, defaults, options=opts)
        _logger.debug(
            "Added layer: %d config keys, %d default keys",
            len(config),
            len(defaults),
        )
        return self

    def get_default(self, path: str | None, default: _typing.Any = None) -> _typing.Any:
        """
        Look up a default value by dotted path, e.g. "formula.output".

        Returns:
            The stored default, or default if the path does not exist.
        """
        return self.get_prop_ref(path, self._defaults, default=default)

    def get_prop_ref(
        self,
        path: str | None,
        target: _typing.Any = None,
        *,
        default: _typing.Any = None,
    ) -> _typing.Any:
        """
        Look up a value by dotted path, e.g. "formula.output".

        Mappings are indexed by key and sequences by integer position. A missing
        key at any level returns default instead of raising.

        Args:
            path: Dotted path. None or "" returns target itself.
            target: Mapping or sequence to search (the store itself and its
                defaults view work too). None means the current values.
            default: Returned when the path does not exist.

        Returns:
            The referenced value (not a copy).
        """
        if target is None:
            target = self._values
        if not path:
            return target

        current = target
        for key in path.split(self._separator):
            current = _step(current, key)
            if current is merge.MISSING:
                return default
        return current

    def to_dict(self) -> dict[str, _typing.Any]:
        """Return an independent deep copy of the current values."""
        return merge.clone(self._values)

    def flatten(
        self,
        condition: _typing.Callable[[dict[str, _typing.Any]], bool] | None = None,
    ) -> dict[str, _typing.Any]:
        """Return the current values flattened into dotted keys."""
        return merge.plainify(self._values, condition, separator=self._separator)

    def copy(self) -> Config:
        """Return an independent store with copies of both views."""
        new = Config(separator=self._separator)
        new._values = merge.clone(self._values)
        new._defaults = merge.clone(self._defaults)
        return new

    # Mapping interface over the current values

    def __getitem__(self, key: str) -> _typing.Any:
        return self._values[key]

    def __setitem__(self, key: str, value: _typing.Any) -> None:
        self._values[key] = value

    def __iter__(self) -> _typing.Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Config({self._values!r}, defaults={self._defaults!r})"


def _step(node: _typing.Any, key: str) -> _typing.Any:
    """Index one level down, returning MISSING when there is nothing there."""
    if isinstance(node, _abc.Mapping):
        return node.get(key, merge.MISSING)
    if (
        isinstance(node, _abc.Sequence)
        and not isinstance(node, str)
        and key.isascii()
        and key.isdigit()
    ):
        index = int(key)
        if index < len(node):
            return node[index]
    return merge.MISSING


def create(
    overrides: dict[str, _typing.Any] | None = None,
    defaults: dict[str, _typing.Any] | None = None,
) -> Config:
    """Create a Config from current values and defaults."""
    return Config(overrides, defaults)
