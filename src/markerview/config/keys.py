# topmark:header:start
#
#   project      : MarkerView
#   file         : keys.py
#   file_relpath : src/markerview/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for MarkerView configuration.

These constants are the external configuration schema as it appears in
``markerview.toml`` and under ``[tool.markerview]`` in ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by MarkerView configuration."""

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"
    SECTION_TOOL_NAME: Final[str] = "markerview"

    # [markers]
    SECTION_MARKERS: Final[str] = "markers"

    KEY_FILTER: Final[str] = "filter"
    KEY_SHOW_ERRORS: Final[str] = "show_errors"
    KEY_SHOW_WARNINGS: Final[str] = "show_warnings"
    KEY_SHOW_INFOS: Final[str] = "show_infos"
    KEY_SHOW_HINTS: Final[str] = "show_hints"
    KEY_SORT: Final[str] = "sort"
