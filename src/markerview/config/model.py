# topmark:header:start
#
#   project      : MarkerView
#   file         : model.py
#   file_relpath : src/markerview/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""View configuration model.

`ViewConfig` is the immutable, fully-resolved set of options for presenting a
markers snapshot: the filter text, per-severity visibility toggles and whether
the view is sorted. Layers (defaults, config file, CLI flags) are merged with
`ViewConfig.merged_with` and `ViewConfig.with_overrides`.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING, Any

from markerview.config.keys import Toml
from markerview.config.logging import get_logger
from markerview.markers.filter import FilterOptions

if TYPE_CHECKING:
    from collections.abc import Mapping

    from markerview.config.logging import MarkerviewLogger

logger: MarkerviewLogger = get_logger(__name__)


class ConfigError(ValueError):
    """Raised when a configuration source is unreadable or malformed."""


# TOML key -> ViewConfig attribute
_KEY_TO_FIELD: dict[str, str] = {
    Toml.KEY_FILTER: "filter_text",
    Toml.KEY_SHOW_ERRORS: "show_errors",
    Toml.KEY_SHOW_WARNINGS: "show_warnings",
    Toml.KEY_SHOW_INFOS: "show_infos",
    Toml.KEY_SHOW_HINTS: "show_hints",
    Toml.KEY_SORT: "sort",
}


@dataclass(frozen=True)
class ViewConfig:
    """Resolved options for the markers view.

    Attributes:
        filter_text: Filter text, see [`FilterOptions`][markerview.markers.filter.FilterOptions].
        show_errors: Whether error markers are visible.
        show_warnings: Whether warning markers are visible.
        show_infos: Whether info markers are visible.
        show_hints: Whether hint markers are visible.
        sort: Whether the view is sorted by severity and path (grouping order otherwise).
    """

    filter_text: str = ""
    show_errors: bool = True
    show_warnings: bool = True
    show_infos: bool = True
    show_hints: bool = True
    sort: bool = True

    @classmethod
    def from_dict(cls, table: Mapping[str, Any]) -> ViewConfig:
        """Build a config from a ``[markers]`` TOML table over the defaults."""
        return cls().merged_with(table)

    def merged_with(self, table: Mapping[str, Any]) -> ViewConfig:
        """Return a copy with the values of a ``[markers]`` TOML table applied.

        Unknown keys are logged and ignored.

        Args:
            table: Mapping of TOML keys (see [`Toml`][markerview.config.keys.Toml]) to values.

        Returns:
            The merged config.

        Raises:
            ConfigError: If a value has the wrong type.
        """
        changes: dict[str, Any] = {}
        for key, value in table.items():
            attr: str | None = _KEY_TO_FIELD.get(key)
            if attr is None:
                logger.warning("Ignoring unknown config key [%s].%s", Toml.SECTION_MARKERS, key)
                continue
            expected: type = str if attr == "filter_text" else bool
            if not isinstance(value, expected):
                raise ConfigError(
                    f"[{Toml.SECTION_MARKERS}].{key} must be a {expected.__name__}, "
                    f"got {type(value).__name__}"
                )
            changes[attr] = value
        return replace(self, **changes)

    def with_overrides(self, **overrides: Any) -> ViewConfig:
        """Return a copy with the given attributes replaced; None values are skipped."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def to_filter_options(self) -> FilterOptions:
        """Return the filter predicate described by this config."""
        return FilterOptions(
            filter_text=self.filter_text,
            show_errors=self.show_errors,
            show_warnings=self.show_warnings,
            show_infos=self.show_infos,
            show_hints=self.show_hints,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the config as a ``[markers]`` TOML table."""
        by_field: dict[str, str] = {v: k for k, v in _KEY_TO_FIELD.items()}
        return {by_field[f.name]: getattr(self, f.name) for f in fields(self)}
