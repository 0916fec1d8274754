# topmark:header:start
#
#   project      : MarkerView
#   file         : severity.py
#   file_relpath : src/markerview/markers/severity.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Marker severity levels.

Severities are ordered by importance: ERROR > WARNING > INFO > HINT. The
ordering used for sorting is exposed as `MarkerSeverity.rank` (0 is the most
severe), never as the enum value itself.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable

# Rank given to a resource that holds no markers at all; sorts after HINT.
NO_SEVERITY_RANK: Final[int] = 4


class MarkerSeverity(Enum):
    """Severity of a problem marker.

    Values are the lower-case names used in machine formats. Upstream producers
    that report numeric levels (8/4/2/1, most severe first) are mapped through
    `MarkerSeverity.from_value`.
    """

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    HINT = "hint"

    @property
    def rank(self) -> int:
        """Return the sort rank; lower ranks are more severe."""
        return _RANKS[self]

    @property
    def label(self) -> str:
        """Return the human-readable label (empty for hints)."""
        return _LABELS[self]

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity.

        Intended for human-readable output only; machine formats should not use colors.
        """
        return cast(
            "Callable[[str], str]",
            {
                MarkerSeverity.ERROR: chalk.red_bright,
                MarkerSeverity.WARNING: chalk.yellow,
                MarkerSeverity.INFO: chalk.blue,
                MarkerSeverity.HINT: chalk.gray,
            }[self],
        )

    @classmethod
    def from_value(cls, value: object) -> MarkerSeverity:
        """Coerce a name (``"Error"``, ``"warning"``) or numeric level to a severity.

        Args:
            value: A `MarkerSeverity`, a case-insensitive name, or one of the
                numeric levels 8 (error), 4 (warning), 2 (info), 1 (hint).

        Returns:
            The matching severity.

        Raises:
            ValueError: If ``value`` does not name a severity.
        """
        if isinstance(value, MarkerSeverity):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Not a marker severity: {value!r}")
        if isinstance(value, int):
            try:
                return _NUMERIC[value]
            except KeyError:
                raise ValueError(f"Not a marker severity level: {value!r}") from None
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                raise ValueError(f"Not a marker severity: {value!r}") from None
        raise ValueError(f"Not a marker severity: {value!r}")


_RANKS: Final[dict[MarkerSeverity, int]] = {
    MarkerSeverity.ERROR: 0,
    MarkerSeverity.WARNING: 1,
    MarkerSeverity.INFO: 2,
    MarkerSeverity.HINT: 3,
}

_LABELS: Final[dict[MarkerSeverity, str]] = {
    MarkerSeverity.ERROR: "Error",
    MarkerSeverity.WARNING: "Warning",
    MarkerSeverity.INFO: "Info",
    MarkerSeverity.HINT: "",
}

_NUMERIC: Final[dict[int, MarkerSeverity]] = {
    8: MarkerSeverity.ERROR,
    4: MarkerSeverity.WARNING,
    2: MarkerSeverity.INFO,
    1: MarkerSeverity.HINT,
}
