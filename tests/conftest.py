"""
Shared pytest fixtures for nestconf tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import os as _os
import pathlib as _pathlib
import typing as _typing
import unittest.mock as _mock

import pytest as _pytest
import yaml as _yaml


@_pytest.fixture
def layered_defaults() -> dict[str, _typing.Any]:
    """Nested defaults with arrays and descriptor-shaped metadata."""
    return {
        "foo": "bar",
        "nested": {
            "nested": {
                "foo": "bar",
                "array": [1, 2],
            },
            "foo": "bar",
        },
        "meta": {
            "foo": {"desc": "Some description", "type": "string", "alias": "f"},
            "nested": {
                "foo": {"desc": "Some description", "type": "string"},
                "nested": {
                    "foo": "Some description",
                    "array": {"desc": "Some description", "type": "array", "alias": "a"},
                },
            },
        },
    }


@_pytest.fixture
def write_yaml(tmp_path: _pathlib.Path) -> _typing.Callable[[str, _typing.Any], _pathlib.Path]:
    """Factory writing data as YAML to tmp_path/name and returning the path."""

    def _write(name: str, data: _typing.Any) -> _pathlib.Path:
        path = tmp_path / name
        path.write_text(_yaml.safe_dump(data), encoding="utf-8")
        return path

    return _write


@_pytest.fixture
def clean_env() -> _typing.Iterator[None]:
    """Run the test with all NESTCONF_* variables (and NO_COLOR) removed."""
    env = {
        k: v
        for k, v in _os.environ.items()
        if not k.startswith("NESTCONF_") and k != "NO_COLOR"
    }
    with _mock.patch.dict(_os.environ, env, clear=True):
        yield
