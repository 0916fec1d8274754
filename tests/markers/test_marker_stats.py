# topmark:header:start
#
#   project      : MarkerView
#   file         : test_marker_stats.py
#   file_relpath : tests/markers/test_marker_stats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for per-severity marker counts."""

from __future__ import annotations

from markerview.markers.model import Marker
from markerview.markers.severity import MarkerSeverity
from markerview.markers.stats import MarkerStats, compute_marker_stats


def test_compute_marker_stats(a_marker) -> None:
    markers = [
        Marker(a_marker(severity=MarkerSeverity.ERROR)),
        Marker(a_marker(severity=MarkerSeverity.WARNING)),
        Marker(a_marker(severity=MarkerSeverity.WARNING)),
        Marker(a_marker(severity=MarkerSeverity.HINT)),
    ]

    stats = compute_marker_stats(markers)

    assert stats == MarkerStats(n_error=1, n_warning=2, n_hint=1)
    assert stats.total == 4
    assert stats.to_dict() == {"error": 1, "warning": 2, "info": 0, "hint": 1}


def test_stats_add() -> None:
    total = MarkerStats(n_error=1) + MarkerStats(n_info=2, n_error=1)

    assert total == MarkerStats(n_error=2, n_info=2)


def test_empty_stats() -> None:
    assert compute_marker_stats([]).total == 0
