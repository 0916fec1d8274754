# topmark:header:start
#
#   project      : MarkerView
#   file         : test_markers_model.py
#   file_relpath : tests/markers/test_markers_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for grouping, ordering and string rendering in `markerview.markers.model`."""

from __future__ import annotations

from functools import cmp_to_key
from typing import TYPE_CHECKING

from markerview.markers.model import Marker, MarkersModel, Resource
from markerview.markers.severity import MarkerSeverity
from markerview.markers.uri import normalize_resource

if TYPE_CHECKING:
    from collections.abc import Sequence

    from markerview.markers.raw import RawMarker


def has_marker(markers: Sequence[Marker], raw: RawMarker) -> bool:
    """Return True if exactly one of ``markers`` wraps ``raw``."""
    return sum(1 for m in markers if m.raw is raw) == 1


def is_resource(resource: Resource, path: str) -> bool:
    return resource.uri == normalize_resource(path)


def sort_resources(resources: list[Resource]) -> list[Resource]:
    return sorted(resources, key=cmp_to_key(Resource.compare))


def test_filtered_resources_group_markers_by_resource(a_marker) -> None:
    """Markers are grouped per resource, in order of first appearance."""
    marker1 = a_marker("res1")
    marker2 = a_marker("res2")
    marker3 = a_marker("res1")
    marker4 = a_marker("res3")
    marker5 = a_marker("res4")
    marker6 = a_marker("res2")
    model = MarkersModel([marker1, marker2, marker3, marker4, marker5, marker6])

    actuals: list[Resource] = model.filtered_resources()

    assert len(actuals) == 4

    assert is_resource(actuals[0], "res1")
    assert len(actuals[0].markers) == 2
    assert has_marker(actuals[0].markers, marker1)
    assert has_marker(actuals[0].markers, marker3)

    assert is_resource(actuals[1], "res2")
    assert len(actuals[1].markers) == 2
    assert has_marker(actuals[1].markers, marker2)
    assert has_marker(actuals[1].markers, marker6)

    assert is_resource(actuals[2], "res3")
    assert len(actuals[2].markers) == 1
    assert has_marker(actuals[2].markers, marker4)

    assert is_resource(actuals[3], "res4")
    assert len(actuals[3].markers) == 1
    assert has_marker(actuals[3].markers, marker5)


def test_markers_keep_insertion_order_within_resource(a_marker) -> None:
    first = a_marker("res1", MarkerSeverity.HINT)
    second = a_marker("res1", MarkerSeverity.ERROR)
    model = MarkersModel([first, second])

    (resource,) = model.filtered_resources()

    assert [m.raw for m in resource.markers] == [first, second]


def test_sort_places_resources_with_no_errors_at_the_end(a_marker) -> None:
    model = MarkersModel(
        [
            a_marker("a/res1", MarkerSeverity.WARNING),
            a_marker("a/res2"),
            a_marker("res4"),
            a_marker("b/res3"),
            a_marker("res4"),
            a_marker("c/res2", MarkerSeverity.INFO),
        ]
    )

    actuals = sort_resources(model.filtered_resources())

    assert len(actuals) == 5
    assert is_resource(actuals[0], "a/res2")
    assert is_resource(actuals[1], "b/res3")
    assert is_resource(actuals[2], "res4")
    assert is_resource(actuals[3], "a/res1")
    assert is_resource(actuals[4], "c/res2")


def test_sort_resources_by_file_path(a_marker) -> None:
    model = MarkersModel(
        [
            a_marker("a/res1"),
            a_marker("a/res2"),
            a_marker("res4"),
            a_marker("b/res3"),
            a_marker("res4"),
            a_marker("c/res2"),
        ]
    )

    actuals = sort_resources(model.filtered_resources())

    assert [r.path for r in actuals] == ["/a/res1", "/a/res2", "/b/res3", "/c/res2", "/res4"]


def test_resource_path_comparison_ignores_case(a_marker) -> None:
    upper = Resource(normalize_resource("B/x"), [Marker(a_marker("B/x"))])
    lower = Resource(normalize_resource("a/x"), [Marker(a_marker("a/x"))])

    assert Resource.compare(lower, upper) < 0
    assert Resource.compare(upper, lower) > 0


def test_empty_resource_sorts_after_hint_only_resources(a_marker) -> None:
    empty = Resource(normalize_resource("a/empty"))
    hint_only = Resource(
        normalize_resource("z/hints"), [Marker(a_marker("z/hints", MarkerSeverity.HINT))]
    )

    assert sort_resources([empty, hint_only]) == [hint_only, empty]
    assert empty.worst_severity is None
    assert hint_only.worst_severity is MarkerSeverity.HINT


def _ranged(
    factory,
    severity: MarkerSeverity,
    start_line: int = 10,
    start_column: int = 5,
    end_line: int | None = None,
    end_column: int | None = None,
    message: str = "some message",
) -> RawMarker:
    return factory(
        "some resource", severity, start_line, start_column, end_line, end_column, message
    )


def test_sort_markers_by_severity_line_and_column(a_marker) -> None:
    error, warning = MarkerSeverity.ERROR, MarkerSeverity.WARNING
    info, hint = MarkerSeverity.INFO, MarkerSeverity.HINT

    marker1 = _ranged(a_marker, warning, 8, 1, 9, 3)
    marker2 = _ranged(a_marker, warning, 3)
    marker3 = _ranged(a_marker, error, 8, 1, 9, 3)
    marker4 = _ranged(a_marker, hint, 5)
    marker5 = _ranged(a_marker, info, 8, 1, 8, 4, "ab")
    marker6 = _ranged(a_marker, error, 3)
    marker7 = _ranged(a_marker, error, 5)
    marker8 = _ranged(a_marker, info, 5)
    marker9 = _ranged(a_marker, error, 8, 1, 8, 4, "ab")
    marker10 = _ranged(a_marker, error, 10)
    marker11 = _ranged(a_marker, error, 8, 1, 8, 4, "ba")
    marker12 = _ranged(a_marker, hint, 3)
    marker13 = _ranged(a_marker, warning, 5)
    marker14 = _ranged(a_marker, error, 4)
    marker15 = _ranged(a_marker, error, 8, 2, 8, 4)
    model = MarkersModel(
        [
            marker1,
            marker2,
            marker3,
            marker4,
            marker5,
            marker6,
            marker7,
            marker8,
            marker9,
            marker10,
            marker11,
            marker12,
            marker13,
            marker14,
            marker15,
        ]
    )

    actuals = sorted(model.filtered_resources()[0].markers, key=cmp_to_key(Marker.compare))

    assert [m.raw for m in actuals] == [
        marker6,
        marker14,
        marker7,
        marker9,
        marker11,
        marker3,
        marker15,
        marker10,
        marker2,
        marker13,
        marker1,
        marker8,
        marker5,
        marker12,
        marker4,
    ]
    # The key-based ordering agrees with the comparator.
    assert [m.raw for m in sorted(actuals, key=lambda m: m.sort_key)] == [m.raw for m in actuals]


def test_marker_compare_is_zero_only_on_full_tie(a_marker) -> None:
    a = Marker(a_marker("x"))
    b = Marker(a_marker("x"))
    c = Marker(a_marker("x", message="other"))

    assert Marker.compare(a, b) == 0
    assert Marker.compare(a, c) != 0
    assert a is not b and a != b


def test_sorted_markers_is_stable_for_equal_keys(a_marker) -> None:
    first = a_marker("x", owner="one")
    second = a_marker("x", owner="two")
    resource = Resource(normalize_resource("x"), [Marker(second), Marker(first)])

    assert [m.raw for m in resource.sorted_markers()] == [second, first]


def test_marker_to_string(a_marker) -> None:
    assert str(Marker(a_marker("a/res1", code="1234"))) == (
        "file: 'file:///a/res1'\nseverity: 'Error'\nmessage: 'some message'\n"
        "at: '10,5'\nsource: 'tslint'\ncode: '1234'"
    )
    assert str(Marker(a_marker("a/res2", MarkerSeverity.WARNING))) == (
        "file: 'file:///a/res2'\nseverity: 'Warning'\nmessage: 'some message'\n"
        "at: '10,5'\nsource: 'tslint'\ncode: ''"
    )
    assert str(Marker(a_marker("a/res2", MarkerSeverity.INFO, 1, 2, 1, 8, "Info", ""))) == (
        "file: 'file:///a/res2'\nseverity: 'Info'\nmessage: 'Info'\n"
        "at: '1,2'\nsource: ''\ncode: ''"
    )
    hint = a_marker("a/res2", MarkerSeverity.HINT, 1, 2, 1, 8, "Ignore message", "Ignore")
    assert str(Marker(hint)) == (
        "file: 'file:///a/res2'\nseverity: ''\nmessage: 'Ignore message'\n"
        "at: '1,2'\nsource: 'Ignore'\ncode: ''"
    )


def test_marker_to_string_without_source(a_marker) -> None:
    text = str(Marker(a_marker("a/res1", source=None)))

    assert "source: ''" in text
    assert "None" not in text


def test_marker_owner_defaults_to_raw_owner(a_marker) -> None:
    raw = a_marker(owner="pyright")

    assert Marker(raw).owner == "pyright"
    assert Marker(raw, "eslint").owner == "eslint"


def test_marker_wraps_compares_records_by_value(a_marker) -> None:
    marker = Marker(a_marker("a/res1"))

    assert marker.wraps(a_marker("a/res1"))
    assert not marker.wraps(a_marker("a/res1", message="different"))


def test_sorted_view_orders_resources_and_markers(a_marker) -> None:
    model = MarkersModel(
        [
            a_marker("b", MarkerSeverity.WARNING, 3),
            a_marker("a", MarkerSeverity.HINT),
            a_marker("b", MarkerSeverity.WARNING, 1),
        ]
    )

    view = model.sorted_view()

    assert [r.path for r in view] == ["/b", "/a"]
    assert [m.start_line for m in view[0].markers] == [1, 3]
    # The stored grouping order is untouched.
    assert [m.start_line for m in model.filtered_resources()[0].markers] == [3, 1]


def test_returned_resources_are_views(a_marker) -> None:
    model = MarkersModel([a_marker("res1", start_line=5), a_marker("res1", start_line=1)])

    model.filtered_resources()[0].markers.clear()

    assert model.total() == 2


def test_resource_lookup_normalizes_uri(a_marker) -> None:
    model = MarkersModel([a_marker("a/res1")])

    found = model.resource("a/res1")

    assert found is not None
    assert found.uri == "file:///a/res1"
    assert found.name == "res1"
    assert model.resource("file:///a/res1") is not None
    assert model.resource("missing") is None
