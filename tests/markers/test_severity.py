# topmark:header:start
#
#   project      : MarkerView
#   file         : test_severity.py
#   file_relpath : tests/markers/test_severity.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `MarkerSeverity`."""

from __future__ import annotations

import pytest

from markerview.markers.severity import NO_SEVERITY_RANK, MarkerSeverity


def test_ranks_follow_importance() -> None:
    ranks = [s.rank for s in MarkerSeverity]

    assert ranks == [0, 1, 2, 3]
    assert all(rank < NO_SEVERITY_RANK for rank in ranks)


def test_labels() -> None:
    assert [s.label for s in MarkerSeverity] == ["Error", "Warning", "Info", ""]


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (MarkerSeverity.INFO, MarkerSeverity.INFO),
        ("error", MarkerSeverity.ERROR),
        ("  Warning ", MarkerSeverity.WARNING),
        ("HINT", MarkerSeverity.HINT),
        (8, MarkerSeverity.ERROR),
        (4, MarkerSeverity.WARNING),
        (2, MarkerSeverity.INFO),
        (1, MarkerSeverity.HINT),
    ],
)
def test_from_value(value: object, expected: MarkerSeverity) -> None:
    assert MarkerSeverity.from_value(value) is expected


@pytest.mark.parametrize("value", ["fatal", 3, True, None, 1.0])
def test_from_value_rejects_unknown(value: object) -> None:
    with pytest.raises(ValueError):
        MarkerSeverity.from_value(value)


def test_color_returns_callable() -> None:
    for severity in MarkerSeverity:
        assert "x" in severity.color("x")
