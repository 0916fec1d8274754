# topmark:header:start
#
#   project      : MarkerView
#   file         : errors.py
#   file_relpath : src/markerview/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the MarkerView CLI.

Raise these in commands to exit with a standardized message and exit code.
They prefer the project console when one is present in the Click context and
fall back to Click's default styling otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from markerview.cli.exit_codes import ExitCode


class MarkerviewError(click.ClickException):
    """Base class for all MarkerView CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class MarkerviewUsageError(MarkerviewError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class MarkerviewConfigError(MarkerviewError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class MarkerviewFileNotFoundError(MarkerviewError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class MarkerviewInputError(MarkerviewError):
    """Error for malformed snapshot content."""

    exit_code = ExitCode.DATA_ERROR
