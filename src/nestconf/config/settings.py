"""
Settings configuration using pydantic-settings.

Loads settings for the nestconf command line from:
1. Constructor arguments (highest precedence)
2. Environment variables with NESTCONF_ prefix
3. .env file named by NESTCONF_ENV_FILE (if set and present)

The library API never reads these settings; they only supply defaults
for the CLI (array behavior, path separator, output format).
"""

import os as _os
import pathlib as _pathlib
import typing as _typing

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings

import nestconf.constants as constants
import nestconf.merge as merge


def _get_env_file() -> str | None:
    """Return NESTCONF_ENV_FILE if it names an existing file."""
    if env_file := _os.environ.get("NESTCONF_ENV_FILE"):
        if _pathlib.Path(env_file).exists():
            return env_file
    return None


class Settings(_pydantic_settings.BaseSettings):
    """
    nestconf CLI settings.

    All settings can be overridden via environment variables with the
    NESTCONF_ prefix, e.g. NESTCONF_ARRAY_BEHAVIOR=append.
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix="NESTCONF_",
        env_file=_get_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    array_behavior: merge.ArrayBehavior = _pydantic.Field(
        default=merge.ArrayBehavior.REPLACE_COPY,
        description="How lists from later layers combine with earlier ones",
    )

    separator: str = _pydantic.Field(
        default=merge.DEFAULT_SEPARATOR,
        description="Delimiter for dotted paths and flattened keys",
    )

    output_format: _typing.Literal["yaml", "json"] = _pydantic.Field(
        default="yaml",
        description="Output format for printed structures",
    )

    color: bool | None = _pydantic.Field(
        default=None,
        description="Force syntax highlighting on/off (None = detect TTY)",
    )

    log_level: str = _pydantic.Field(
        default=constants.DEFAULT_LOG_LEVEL,
        description="Logging level when --verbose is not given",
    )

    @_pydantic.field_validator("array_behavior", mode="before")
    @classmethod
    def _parse_array_behavior(cls, v: _typing.Any) -> merge.ArrayBehavior:
        """Accept names like "append" or "replace-link" as well as 0/1/2."""
        return merge.ArrayBehavior.parse(v)

    @_pydantic.field_validator("separator")
    @classmethod
    def _check_separator(cls, v: str) -> str:
        if not v:
            raise ValueError("separator must be a non-empty string")
        return v

    @_pydantic.field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in constants.LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(constants.LOG_LEVELS)}"
            )
        return level

    @classmethod
    def construct_without_dotenv(cls, **kwargs: _typing.Any) -> "Settings":
        """Create Settings from environment variables only, without loading .env file.

        Useful for test isolation and for reproducing issues without a
        stray .env file interfering.
        """
        return cls(_env_file=None, **kwargs)  # type: ignore[call-arg]

    def merge_options(self) -> merge.MergeOptions:
        """Merge options implied by these settings."""
        return merge.MergeOptions(array_behavior=self.array_behavior)
