"""
Shared constants for nestconf.

This module provides a single source of truth for default values
that are used across multiple modules.
"""

DEFAULT_LOG_LEVEL = "WARNING"
"""Log level used by the CLI unless --verbose or NESTCONF_LOG_LEVEL is given."""

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
"""Accepted values for NESTCONF_LOG_LEVEL."""

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
"""Format for log records printed by the CLI."""

YAML_THEME = "monokai"
"""Pygments theme for highlighted YAML output."""
