"""
Main CLI entry point for nestconf.

Provides the command-line interface using Click:

- merge: layer config files over default files and print the result
- get: print one value by dotted path
- flatten: print a file with nested keys joined into dotted keys
"""

import json as _json
import logging as _logging
import os as _os
import sys as _sys
import typing as _typing

import click as _click
import pydantic as _pydantic
import yaml as _yaml

import nestconf
import nestconf.config as config
import nestconf.constants as constants
import nestconf.merge as merge

_logger = _logging.getLogger(__name__)

# Custom Click context settings for better help formatting
CONTEXT_SETTINGS: dict[str, _typing.Any] = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 100,
}

ARRAY_BEHAVIOR_CHOICES = [m.name.lower().replace("_", "-") for m in merge.ArrayBehavior]


def _configure_logging(verbose: bool, settings: config.Settings) -> None:
    """Send log records to stderr at DEBUG (--verbose) or the configured level."""
    level = _logging.DEBUG if verbose else getattr(_logging, settings.log_level)
    _logging.basicConfig(level=level, format=constants.LOG_FORMAT, stream=_sys.stderr)
    _logging.getLogger("nestconf").setLevel(level)


@_click.group(context_settings=CONTEXT_SETTINGS)
@_click.version_option(nestconf.__version__, "-v", "--version", prog_name="nestconf")
@_click.option(
    "--array-behavior",
    type=_click.Choice(ARRAY_BEHAVIOR_CHOICES),
    default=None,
    help="How lists from later layers combine with earlier ones",
)
@_click.option(
    "--separator",
    type=str,
    default=None,
    help="Delimiter for dotted paths (default: '.')",
)
@_click.option(
    "--json/--yaml",
    "json_output",
    default=None,
    help="Output format (default: yaml, or NESTCONF_OUTPUT_FORMAT)",
)
@_click.option(
    "--color/--no-color",
    "use_color",
    default=None,
    help="Enable/disable syntax highlighting (default: auto-detect TTY)",
)
@_click.option(
    "--verbose",
    is_flag=True,
    help="Enable debug logging on stderr",
)
@_click.pass_context
def cli(
    ctx: _click.Context,
    array_behavior: str | None,
    separator: str | None,
    json_output: bool | None,
    use_color: bool | None,
    verbose: bool,
) -> None:
    """
    nestconf - layered nested configuration.

    \b
    Examples:
        nestconf merge local.yaml -d defaults.yaml
        nestconf --array-behavior append merge a.yaml b.yaml
        nestconf get server.port local.yaml -d defaults.yaml
        nestconf flatten config.yaml --atomic desc --atomic type
    """
    # CLI args become constructor arguments, which take priority over env vars
    overrides: dict[str, _typing.Any] = {}
    if array_behavior is not None:
        overrides["array_behavior"] = merge.ArrayBehavior.parse(array_behavior)
    if separator is not None:
        overrides["separator"] = separator
    if json_output is not None:
        overrides["output_format"] = "json" if json_output else "yaml"
    if use_color is not None:
        overrides["color"] = use_color
    try:
        settings = config.Settings(**overrides)
    except _pydantic.ValidationError as e:
        raise _click.ClickException(f"Invalid settings: {e}") from e

    _configure_logging(verbose, settings)
    _logger.debug("Settings: %s", settings.model_dump())

    # Store settings in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


def _load(
    settings: config.Settings,
    files: _typing.Sequence[str],
    defaults: _typing.Sequence[str],
) -> config.Config:
    """Build a Config from files, reporting load errors as click errors."""
    try:
        return config.load_config(
            files,
            defaults,
            settings.merge_options(),
            separator=settings.separator,
        )
    except config.ConfigFileError as e:
        raise _click.ClickException(str(e)) from e


@cli.command(name="merge")
@_click.argument("files", nargs=-1, type=_click.Path(dir_okay=False))
@_click.option(
    "-d",
    "--defaults",
    "default_files",
    multiple=True,
    type=_click.Path(dir_okay=False),
    help="Defaults file (repeatable, later files win)",
)
@_click.option("--flatten", is_flag=True, help="Join nested keys into dotted keys")
@_click.pass_context
def merge_cmd(
    ctx: _click.Context,
    files: tuple[str, ...],
    default_files: tuple[str, ...],
    flatten: bool,
) -> None:
    """Merge FILES over the defaults and print the current values.

    Later files take priority over earlier ones; every config file takes
    priority over every defaults file.
    """
    settings: config.Settings = ctx.obj["settings"]
    store = _load(settings, files, default_files)
    _emit(store.flatten() if flatten else store.current, settings)


@cli.command(name="get")
@_click.argument("path")
@_click.argument("files", nargs=-1, type=_click.Path(dir_okay=False))
@_click.option(
    "-d",
    "--defaults",
    "default_files",
    multiple=True,
    type=_click.Path(dir_okay=False),
    help="Defaults file (repeatable, later files win)",
)
@_click.option("--default", "from_defaults", is_flag=True, help="Look up the default value")
@_click.pass_context
def get_cmd(
    ctx: _click.Context,
    path: str,
    files: tuple[str, ...],
    default_files: tuple[str, ...],
    from_defaults: bool,
) -> None:
    """Print the value at dotted PATH (e.g. server.port)."""
    settings: config.Settings = ctx.obj["settings"]
    store = _load(settings, files, default_files)

    if from_defaults:
        value = store.get_default(path, default=merge.MISSING)
    else:
        value = store.get_prop_ref(path, default=merge.MISSING)

    if value is merge.MISSING:
        _click.echo(f"Not found: {path}", err=True)
        raise SystemExit(1)

    if merge.is_plain(value) or merge.is_sequence(value):
        _emit(value, settings)
    elif isinstance(value, str):
        _click.echo(value)
    else:
        _click.echo(_json.dumps(value, default=str))


@cli.command(name="flatten")
@_click.argument("file", type=_click.Path(dir_okay=False))
@_click.option(
    "--atomic",
    "atomic_keys",
    multiple=True,
    help="Keep dicts holding all these keys whole (repeatable)",
)
@_click.pass_context
def flatten_cmd(ctx: _click.Context, file: str, atomic_keys: tuple[str, ...]) -> None:
    """Print FILE with nested keys joined into dotted keys."""
    settings: config.Settings = ctx.obj["settings"]
    try:
        data = config.load_layer(file)
    except config.ConfigFileError as e:
        raise _click.ClickException(str(e)) from e

    condition = _has_all_keys(atomic_keys) if atomic_keys else None
    _emit(merge.plainify(data, condition, separator=settings.separator), settings)


def _has_all_keys(keys: _typing.Sequence[str]) -> _typing.Callable[[dict[str, _typing.Any]], bool]:
    """Return a predicate true for dicts that contain every key in keys."""

    def condition(value: dict[str, _typing.Any]) -> bool:
        return all(key in value for key in keys)

    return condition


def _emit(data: _typing.Any, settings: config.Settings) -> None:
    """Print a structure in the configured output format."""
    if settings.output_format == "json":
        _click.echo(_json.dumps(data, indent=2, default=str))
        return

    yaml_text = _yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    color_enabled, force_color = _should_use_color(settings.color)
    _print_yaml(yaml_text, color=color_enabled, force_color=force_color)


def _should_use_color(setting: bool | None) -> tuple[bool, bool]:
    """Determine whether to use color output.

    Priority:
    1. --color / --no-color or NESTCONF_COLOR, if given
    2. NO_COLOR env var (if set, disable color) - standard convention
    3. Auto-detect: color if stdout is a TTY

    Returns:
        Tuple of (color_enabled, force_color).
        force_color is True when color was explicitly requested (not auto-detected).
    """
    if setting is not None:
        return (setting, setting)

    # Check NO_COLOR standard (https://no-color.org/)
    if _os.environ.get("NO_COLOR") is not None:
        return (False, False)

    return (_sys.stdout.isatty(), False)


def _print_yaml(yaml_text: str, *, color: bool = True, force_color: bool = False) -> None:
    """Print YAML text, optionally with syntax highlighting."""
    if not color:
        _click.echo(yaml_text, nl=False)
        return

    import rich.console as _rich_console
    import rich.syntax as _rich_syntax

    console = _rich_console.Console(
        force_terminal=force_color,
        no_color=False if force_color else None,
        color_system="truecolor" if force_color else "auto",
    )
    syntax = _rich_syntax.Syntax(
        yaml_text,
        "yaml",
        theme=constants.YAML_THEME,
        background_color="default",
    )
    console.print(syntax)


def main() -> None:
    """Main entry point with correct program name."""
    cli(prog_name="nestconf")


if __name__ == "__main__":
    main()
