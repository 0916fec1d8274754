# topmark:header:start
#
#   project      : MarkerView
#   file         : common.py
#   file_relpath : src/markerview/cli/common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command plumbing: resolve the config, load the snapshot, build the view.

These helpers translate library exceptions into CLI errors with the right
exit codes; they carry no output policy.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import click

from markerview.cli.errors import (
    MarkerviewConfigError,
    MarkerviewFileNotFoundError,
    MarkerviewInputError,
)
from markerview.cli.options import explicit_flag
from markerview.config.io import load_config
from markerview.config.logging import get_logger
from markerview.config.model import ConfigError
from markerview.markers.model import MarkersModel
from markerview.snapshot import SnapshotError, load_snapshot

if TYPE_CHECKING:
    from markerview.cli.console import ConsoleLike
    from markerview.config.model import ViewConfig
    from markerview.markers.model import Resource

logger = get_logger(__name__)


@dataclass
class View:
    """The resolved config, the populated model and the resources to show."""

    config: ViewConfig
    model: MarkersModel
    resources: list[Resource]


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console installed on the Click context by the group callback."""
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return program-output verbosity: the ``-v`` count, or -1 when ``-q`` was given."""
    return int(ctx.obj.get("verbosity", 0))


def resolve_view_config(
    ctx: click.Context,
    *,
    config_path: Path | None,
    filter_text: str | None,
    show_errors: bool,
    show_warnings: bool,
    show_infos: bool,
    show_hints: bool,
    sort: bool,
) -> ViewConfig:
    """Resolve the config file and apply explicitly given CLI flags on top.

    Raises:
        MarkerviewFileNotFoundError: If ``config_path`` does not exist.
        MarkerviewConfigError: If the config file is malformed.
    """
    if config_path is not None and not config_path.is_file():
        raise MarkerviewFileNotFoundError(f"Config file not found: {config_path}")
    try:
        config: ViewConfig = load_config(config_path, search_from=Path.cwd())
    except ConfigError as exc:
        raise MarkerviewConfigError(str(exc)) from exc

    config = config.with_overrides(
        filter_text=filter_text,
        show_errors=explicit_flag(ctx, "show_errors", show_errors),
        show_warnings=explicit_flag(ctx, "show_warnings", show_warnings),
        show_infos=explicit_flag(ctx, "show_infos", show_infos),
        show_hints=explicit_flag(ctx, "show_hints", show_hints),
        sort=explicit_flag(ctx, "sort", sort),
    )
    logger.debug("Effective view config: %s", config)
    return config


def build_view(snapshot: Path, config: ViewConfig) -> View:
    """Load ``snapshot`` into a model, apply the filter and collect the visible resources.

    Raises:
        MarkerviewFileNotFoundError: If the snapshot does not exist.
        MarkerviewInputError: If the snapshot is unreadable or malformed.
    """
    if not snapshot.is_file():
        raise MarkerviewFileNotFoundError(f"Snapshot not found: {snapshot}")
    try:
        model = MarkersModel(load_snapshot(snapshot))
    except SnapshotError as exc:
        raise MarkerviewInputError(str(exc)) from exc

    options = config.to_filter_options()
    if not options.is_empty:
        model.set_filter(options)

    resources: list[Resource] = model.sorted_view() if config.sort else model.filtered_resources()
    return View(config=config, model=model, resources=resources)
