# topmark:header:start
#
#   project      : MarkerView
#   file         : options.py
#   file_relpath : src/markerview/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI options and their resolution logic.

This module centralizes reusable options (verbosity, color, output format and
view filtering) so commands and groups can stay thin.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Generic, NoReturn, ParamSpec, TypeVar, cast

import click
from click.core import ParameterSource

from markerview.cli.errors import MarkerviewUsageError
from markerview.config.logging import TRACE_LEVEL

if TYPE_CHECKING:
    from collections.abc import Iterable

P = ParamSpec("P")
R = TypeVar("R")
E = TypeVar("E", bound=Enum)

LOG_LEVELS = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# Severity toggles: (option declaration, parameter name, help text)
_SEVERITY_TOGGLES: tuple[tuple[str, str, str], ...] = (
    ("--errors/--no-errors", "show_errors", "Show or hide error markers."),
    ("--warnings/--no-warnings", "show_warnings", "Show or hide warning markers."),
    ("--infos/--no-infos", "show_infos", "Show or hide info markers."),
    ("--hints/--no-hints", "show_hints", "Show or hide hint markers."),
)


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


class OutputFormat(str, Enum):
    """Output formats supported by the view commands."""

    TEXT = "text"
    JSON = "json"
    NDJSON = "ndjson"


class EnumChoiceParam(click.ParamType, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum."""

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = enum_cls.__name__.lower()
        self.choices: list[str] = [cast("str", e.value) for e in enum_cls]

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Convert a string to a member of the Enum (case-insensitive)."""
        if value is None or isinstance(value, self.enum_cls):
            return value
        lookup: dict[str, E] = {
            cast("str", choice.value).lower(): choice
            for choice in cast("Iterable[E]", self.enum_cls)
        }
        key = str(value).lower()
        if key in lookup:
            return lookup[key]
        self._fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output level based on verbose and quiet counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The logging level as an integer (WARNING by default).

    Raises:
        MarkerviewUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise MarkerviewUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return LOG_LEVELS["TRACE"]
    if verbose_count == 2:
        return LOG_LEVELS["DEBUG"]
    if verbose_count == 1:
        return LOG_LEVELS["INFO"]
    if quiet_count >= 1:
        return LOG_LEVELS["ERROR"]
    return LOG_LEVELS["WARNING"]


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: OutputFormat | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Disables color for JSON/NDJSON output, honors ``--color``/``--no-color``,
    then the FORCE_COLOR and NO_COLOR environment variables, and finally
    enables color when stdout is a TTY.
    """
    if output_format in (OutputFormat.JSON, OutputFormat.NDJSON):
        return False
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return bool(stdout_isatty)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress output. Specify up to twice for even less.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` (auto, always, never) and ``--no-color`` options."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--format`` option."""
    return click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=OutputFormat.TEXT.value,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)


def view_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the snapshot argument plus config and filtering options.

    Adds ``SNAPSHOT``, ``--config``, ``--filter``, the per-severity toggles and
    ``--sort/--no-sort``. Flags only override the config file when given
    explicitly (see `explicit_flag`).
    """
    f = click.option(
        "--sort/--no-sort",
        "sort",
        help="Order resources and markers by severity (default), or keep grouping order.",
    )(f)
    for decl, name, help_text in reversed(_SEVERITY_TOGGLES):
        f = click.option(decl, name, default=True, help=help_text)(f)
    f = click.option(
        "--filter",
        "filter_text",
        default=None,
        help="Filter text: comma-separated text terms, resource globs and !exclusions.",
    )(f)
    f = click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help=(
            "Config file (markerview.toml or pyproject.toml). "
            "Discovered from the working directory if omitted."
        ),
    )(f)
    f = click.argument(
        "snapshot",
        type=click.Path(dir_okay=False, path_type=Path),
    )(f)
    return f


def explicit_flag(ctx: click.Context, name: str, value: bool) -> bool | None:
    """Return ``value`` if the user passed the flag, None if Click filled in the default."""
    source: ParameterSource | None = ctx.get_parameter_source(name)
    if source in (None, ParameterSource.DEFAULT, ParameterSource.DEFAULT_MAP):
        return None
    return value
