# topmark:header:start
#
#   project      : MarkerView
#   file         : io.py
#   file_relpath : src/markerview/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load MarkerView configuration from TOML.

Sources, lowest precedence first:
- the runtime defaults (`load_defaults_dict`, no I/O);
- ``markerview.toml`` (``[markers]`` table) or ``pyproject.toml``
  (``[tool.markerview.markers]``), found by walking up from a start directory
  or given explicitly.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from markerview.config.keys import Toml
from markerview.config.logging import get_logger
from markerview.config.model import ConfigError, ViewConfig
from markerview.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME

if TYPE_CHECKING:
    from markerview.config.logging import MarkerviewLogger

logger: MarkerviewLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def load_defaults_dict() -> TomlTable:
    """Return MarkerView's runtime defaults as a TOML-compatible dict.

    Returns:
        A new dict with a single ``markers`` table, safe to mutate.
    """
    return {Toml.SECTION_MARKERS: ViewConfig().to_dict()}


def load_toml_dict(path: Path) -> TomlTable:
    """Read and parse a TOML file into plain Python containers.

    Args:
        path: The TOML file.

    Returns:
        The parsed document.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    return cast("TomlTable", doc.unwrap())


def extract_markers_table(doc: TomlTable, *, is_pyproject: bool) -> TomlTable | None:
    """Return the ``[markers]`` table of a parsed config document.

    Args:
        doc: Parsed TOML document.
        is_pyproject: Whether ``doc`` is a ``pyproject.toml`` (nested under
            ``[tool.markerview]``).

    Returns:
        The table, or None if the document carries no MarkerView settings.

    Raises:
        ConfigError: If the table exists but is not a table.
    """
    root: Any = doc
    if is_pyproject:
        tool: Any = doc.get(Toml.SECTION_TOOL)
        root = tool.get(Toml.SECTION_TOOL_NAME) if isinstance(tool, dict) else None
        if root is None:
            return None
    if not isinstance(root, dict):
        raise ConfigError(f"[{Toml.SECTION_TOOL}.{Toml.SECTION_TOOL_NAME}] must be a table")
    table: Any = root.get(Toml.SECTION_MARKERS)
    if table is None:
        return {} if not is_pyproject else None
    if not isinstance(table, dict):
        raise ConfigError(f"[{Toml.SECTION_MARKERS}] must be a table")
    return cast("TomlTable", table)


def discover_config_file(start: Path) -> Path | None:
    """Find the nearest config file at or above ``start``.

    In each directory ``markerview.toml`` wins over ``pyproject.toml``; a
    ``pyproject.toml`` only counts if it has a ``[tool.markerview.markers]`` table.

    Args:
        start: Directory to start from.

    Returns:
        The config file path, or None if none was found.
    """
    for directory in (start, *start.parents):
        candidate: Path = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
        pyproject: Path = directory / PYPROJECT_FILE_NAME
        if pyproject.is_file():
            try:
                doc: TomlTable = load_toml_dict(pyproject)
            except ConfigError as exc:
                logger.warning("Skipping unreadable %s: %s", pyproject, exc)
                continue
            if extract_markers_table(doc, is_pyproject=True) is not None:
                return pyproject
    return None


def load_config(path: Path | None = None, *, search_from: Path | None = None) -> ViewConfig:
    """Resolve the view configuration.

    Args:
        path: Explicit config file; when None the file is discovered from
            ``search_from`` (skipped when that is None too).
        search_from: Directory where discovery starts.

    Returns:
        Defaults merged with the config file settings, if any.

    Raises:
        ConfigError: If the config file is unreadable or malformed.
    """
    config: ViewConfig = ViewConfig.from_dict(load_defaults_dict()[Toml.SECTION_MARKERS])

    if path is None and search_from is not None:
        path = discover_config_file(search_from.resolve())
    if path is None:
        logger.debug("No config file; using defaults")
        return config

    doc: TomlTable = load_toml_dict(path)
    is_pyproject: bool = path.name == PYPROJECT_FILE_NAME
    table: TomlTable | None = extract_markers_table(doc, is_pyproject=is_pyproject)
    if table is None:
        logger.info("No [tool.%s] table in %s", Toml.SECTION_TOOL_NAME, path)
        return config
    logger.debug("Loaded config from %s: %s", path, table)
    return config.merged_with(table)
