"""YAML configuration layers for Config.

This module provides:

- load_layer: read one YAML (or JSON) file into a dict
- merge_layers: deep merge several files, later files winning
- load_config: build a Config from config files and default files

Parsing stays outside the merge core: these helpers only turn files into
the plain dicts that merge_deep and Config consume.
"""

import logging as _logging
import pathlib as _pathlib
import typing as _typing

import yaml as _yaml

import nestconf.config.store as store
import nestconf.merge as merge

_logger = _logging.getLogger(__name__)

PathLike = str | _pathlib.Path


class ConfigFileError(Exception):
    """Error loading or parsing a configuration file."""

    def __init__(self, path: _pathlib.Path, message: str) -> None:
        self.path = path
        super().__init__(f"Error in config file {path}: {message}")


def load_layer(path: PathLike) -> dict[str, _typing.Any]:
    """
    Load a YAML file and return its contents as a dict.

    Args:
        path: Path to the YAML file. JSON is accepted too.

    Returns:
        Parsed contents; an empty document yields {}.

    Raises:
        ConfigFileError: If the file cannot be read, is malformed YAML,
            or contains non-dict content at the top level.
    """
    path = _pathlib.Path(path)

    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigFileError(path, "file not found") from e
    except PermissionError as e:
        raise ConfigFileError(path, f"permission denied: {e}") from e
    except OSError as e:
        raise ConfigFileError(path, f"cannot read file: {e}") from e

    try:
        parsed = _yaml.safe_load(content)
    except _yaml.YAMLError as e:
        raise ConfigFileError(path, f"invalid YAML: {e}") from e

    if parsed is None:
        _logger.debug("Config file %s is empty", path)
        return {}

    if not isinstance(parsed, dict):
        raise ConfigFileError(
            path,
            f"expected a mapping at top level, got {type(parsed).__name__}",
        )

    return parsed


def merge_layers(
    paths: _typing.Iterable[PathLike],
    options: merge.MergeOptions | None = None,
) -> dict[str, _typing.Any]:
    """
    Load files in order and deep merge them into a new dict.

    Later files take priority over earlier ones.
    """
    opts = (options or merge.MergeOptions()).with_mutate()
    result: dict[str, _typing.Any] = {}
    for path in paths:
        _logger.debug("Merging config layer %s", path)
        merge.merge_deep(result, load_layer(path), options=opts)
    return result


def load_config(
    config_paths: _typing.Iterable[PathLike] = (),
    default_paths: _typing.Iterable[PathLike] = (),
    options: merge.MergeOptions | None = None,
    *,
    separator: str = merge.DEFAULT_SEPARATOR,
) -> store.Config:
    """
    Build a Config from files.

    Args:
        config_paths: Files with current values, lowest priority first.
        default_paths: Files with defaults, lowest priority first.
        options: Merge options used for both the file merge and the store.
        separator: Path delimiter for the resulting Config.

    Raises:
        ConfigFileError: If any file cannot be loaded.
    """
    overrides = merge_layers(config_paths, options)
    defaults = merge_layers(default_paths, options)
    return store.Config(separator=separator).add(overrides, defaults, options)
