"""
CLI module for nestconf.

Provides the command-line interface using Click.
"""

from nestconf.cli.main import cli

__all__ = ["cli"]
