"""
Configuration store for nestconf.

Config layers current values over defaults and keeps the defaults
separately; sources loads layers from YAML files; Settings configures
the command line via pydantic-settings.
"""

from nestconf.config.settings import Settings
from nestconf.config.sources import ConfigFileError, load_config, load_layer, merge_layers
from nestconf.config.store import Config, create

__all__ = [
    "Config",
    "ConfigFileError",
    "Settings",
    "create",
    "load_config",
    "load_layer",
    "merge_layers",
]
