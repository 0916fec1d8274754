# topmark:header:start
#
#   project      : MarkerView
#   file         : stats.py
#   file_relpath : src/markerview/cli/commands/stats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MarkerView `stats` command: per-severity counts of the visible markers."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from markerview.cli.common import build_view, get_console, resolve_view_config
from markerview.cli.options import OutputFormat, output_format_option, view_options
from markerview.machine.payloads import build_meta_payload, summary_to_dict
from markerview.machine.schemas import MachineKey, MachineKind

if TYPE_CHECKING:
    from pathlib import Path

    from markerview.cli.console import ConsoleLike


@click.command(
    name="stats",
    help="Count the visible markers of a JSON snapshot by severity.",
)
@view_options
@output_format_option
@click.pass_context
def stats_command(
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
) -> None:
    """Print per-severity counts for the visible markers."""
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
    summary: dict[str, object] = summary_to_dict(
        view.model.filtered_stats(), resources=len(view.resources)
    )

    if output_format == OutputFormat.JSON:
        envelope = {MachineKey.META: dict(build_meta_payload()), MachineKey.SUMMARY: summary}
        console.print(json.dumps(envelope, indent=2))
    elif output_format == OutputFormat.NDJSON:
        record = {
            MachineKey.KIND: MachineKind.SUMMARY,
            MachineKey.META: dict(build_meta_payload()),
            MachineKey.SUMMARY: summary,
        }
        console.print(json.dumps(record))
    else:
        console.print(f"resources: {summary['resources']}")
        counts = view.model.filtered_stats().to_dict()
        for key, count in counts.items():
            console.print(f"{key}s: {count}")
        console.print(f"total: {summary['total']}")
