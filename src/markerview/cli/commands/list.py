# topmark:header:start
#
#   project      : MarkerView
#   file         : list.py
#   file_relpath : src/markerview/cli/commands/list.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MarkerView `list` command.

Loads a snapshot, applies the configured filter and prints the visible
resources with their markers, ordered by severity and path unless
``--no-sort`` is given.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from markerview.cli.common import (
    build_view,
    get_console,
    get_effective_verbosity,
    resolve_view_config,
)
from markerview.cli.exit_codes import ExitCode
from markerview.cli.options import OutputFormat, output_format_option, view_options
from markerview.machine.serializers import serialize_view_json, serialize_view_ndjson
from markerview.markers.stats import MarkerStats, compute_marker_stats

if TYPE_CHECKING:
    from pathlib import Path

    from markerview.cli.console import ConsoleLike
    from markerview.markers.model import Marker, Resource


def format_counts(stats: MarkerStats) -> str:
    """Return a compact count summary such as ``2 errors, 1 warning``."""
    parts: list[str] = []
    for count, noun in (
        (stats.n_error, "error"),
        (stats.n_warning, "warning"),
        (stats.n_info, "info"),
        (stats.n_hint, "hint"),
    ):
        if count:
            parts.append(f"{count} {noun}{'' if count == 1 else 's'}")
    return ", ".join(parts) if parts else "no problems"


def format_marker_line(marker: Marker) -> str:
    """Return the one-line listing of a marker, colored by severity."""
    label: str = marker.severity.label or "Hint"
    badge: str = marker.severity.color(f"{label:<7}")
    line: str = f"  {badge} {marker.start_line}:{marker.start_column}"
    line += f"  {marker.message}"
    extra: str = " ".join(part for part in (marker.source, marker.code) if part)
    if extra:
        line += f"  [{extra}]"
    return line


def render_text(console: ConsoleLike, resources: list[Resource], *, verbosity: int) -> None:
    """Print resources and markers as human-readable text."""
    for resource in resources:
        console.print(
            f"{console.styled(resource.path, bold=True)}  ({format_counts(resource.stats())})"
        )
        for marker in resource.markers:
            if verbosity > 0:
                for line in str(marker).splitlines():
                    console.print(f"    {line}")
                console.print()
            else:
                console.print(format_marker_line(marker))
    if verbosity >= 0:
        total: MarkerStats = compute_marker_stats(m for r in resources for m in r.markers)
        if total.total:
            console.print()
            noun: str = "resource" if len(resources) == 1 else "resources"
            console.print(f"{len(resources)} {noun}: {format_counts(total)}")
        else:
            console.print("No problems found.")


@click.command(
    name="list",
    help="List the markers of a JSON snapshot, grouped by resource.",
)
@view_options
@output_format_option
@click.option(
    "--fail-on-error",
    is_flag=True,
    help=f"Exit with code {int(ExitCode.PROBLEMS_FOUND)} when error markers are visible.",
)
@click.pass_context
def list_command(
    ctx: click.Context,
    *,
    snapshot: Path,
    config_path: Path | None,
    filter_text: str | None,
    show_errors: bool,
    show_warnings: bool,
    show_infos: bool,
    show_hints: bool,
    sort: bool,
    output_format: OutputFormat,
    fail_on_error: bool,
) -> None:
    """List the visible markers of a snapshot."""
    console: ConsoleLike = get_console(ctx)
    config = resolve_view_config(
        ctx,
        config_path=config_path,
        filter_text=filter_text,
        show_errors=show_errors,
        show_warnings=show_warnings,
        show_infos=show_infos,
        show_hints=show_hints,
        sort=sort,
    )
    view = build_view(snapshot, config)

    if output_format == OutputFormat.JSON:
        console.print(serialize_view_json(view.resources))
    elif output_format == OutputFormat.NDJSON:
        console.print(serialize_view_ndjson(view.resources), nl=False)
    else:
        render_text(console, view.resources, verbosity=get_effective_verbosity(ctx))

    if fail_on_error and view.model.filtered_stats().n_error:
        ctx.exit(ExitCode.PROBLEMS_FOUND)
