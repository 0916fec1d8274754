# topmark:header:start
#
#   project      : MarkerView
#   file         : stats.py
#   file_relpath : src/markerview/markers/stats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-severity marker counts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from markerview.markers.severity import MarkerSeverity

if TYPE_CHECKING:
    from collections.abc import Iterable

    from markerview.markers.model import Marker


@dataclass(frozen=True)
class MarkerStats:
    """Aggregated counts for markers by severity."""

    n_error: int = 0
    n_warning: int = 0
    n_info: int = 0
    n_hint: int = 0

    @property
    def total(self) -> int:
        """Return the total count of markers."""
        return self.n_error + self.n_warning + self.n_info + self.n_hint

    def __add__(self, other: MarkerStats) -> MarkerStats:
        return MarkerStats(
            n_error=self.n_error + other.n_error,
            n_warning=self.n_warning + other.n_warning,
            n_info=self.n_info + other.n_info,
            n_hint=self.n_hint + other.n_hint,
        )

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly mapping of counts by severity.

        Returns:
            Mapping with keys ``"error"``, ``"warning"``, ``"info"`` and ``"hint"``.
        """
        return {
            MarkerSeverity.ERROR.value: self.n_error,
            MarkerSeverity.WARNING.value: self.n_warning,
            MarkerSeverity.INFO.value: self.n_info,
            MarkerSeverity.HINT.value: self.n_hint,
        }


def compute_marker_stats(markers: Iterable[Marker]) -> MarkerStats:
    """Return per-severity counts for any iterable of markers.

    Args:
        markers: The markers to count.

    Returns:
        Per-severity counts.
    """
    counts: dict[MarkerSeverity, int] = dict.fromkeys(MarkerSeverity, 0)
    for marker in markers:
        counts[marker.severity] += 1
    return MarkerStats(
        n_error=counts[MarkerSeverity.ERROR],
        n_warning=counts[MarkerSeverity.WARNING],
        n_info=counts[MarkerSeverity.INFO],
        n_hint=counts[MarkerSeverity.HINT],
    )
