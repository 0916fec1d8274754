# topmark:header:start
#
#   project      : MarkerView
#   file         : version.py
#   file_relpath : src/markerview/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MarkerView `version` command.

Prints the MarkerView version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from markerview.cli.common import get_console
from markerview.cli.options import OutputFormat, output_format_option
from markerview.constants import MARKERVIEW_VERSION

if TYPE_CHECKING:
    from markerview.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of MarkerView.",
)
@output_format_option
@click.pass_context
def version_command(ctx: click.Context, *, output_format: OutputFormat) -> None:
    """Show the current version of MarkerView."""
    console: ConsoleLike = get_console(ctx)
    if output_format in (OutputFormat.JSON, OutputFormat.NDJSON):
        console.print(json.dumps({"version": MARKERVIEW_VERSION}))
    else:
        console.print(console.styled(MARKERVIEW_VERSION, bold=True))
