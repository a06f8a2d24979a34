"""
nestconf - layered nested configuration

Deep merges default and override dicts, keeps the defaults separately
for later lookup, and flattens nested structures into dotted keys.

Example:
    >>> import nestconf
    >>> config = nestconf.create({"port": 8080}, {"port": 8000, "host": "localhost"})
    >>> config["port"], config.get_default("port"), config["host"]
    (8080, 8000, 'localhost')
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("nestconf")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)

from nestconf.config import Config, create  # noqa: E402
from nestconf.merge import (  # noqa: E402
    MISSING,
    ArrayBehavior,
    MergeOptions,
    clone,
    merge_deep,
    plainify,
)

__all__ = [
    "MISSING",
    "ArrayBehavior",
    "Config",
    "MergeOptions",
    "__version__",
    "__version_info__",
    "clone",
    "create",
    "merge_deep",
    "plainify",
]
