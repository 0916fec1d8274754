# topmark:header:start
#
#   project      : MarkerView
#   file         : model.py
#   file_relpath : src/markerview/markers/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markers model: grouping, filtering and ordering of problem markers.

Sections:
    * Marker: one raw marker plus its owner, with a cached sort key and a
      diagnostic string rendering.
    * Resource: one resource URI with its markers in insertion order.
    * MarkersModel: the snapshot of all markers grouped by resource, with an
      optional filter predicate applied on read.

The model never sorts on its own. Consumers get resources in grouping
(insertion) order and apply `Resource.compare` / `Marker.compare` (or the
equivalent `sort_key` properties) when they want severity ordering.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import TYPE_CHECKING

from markerview.config.logging import get_logger
from markerview.markers.raw import InvalidMarkerError, RawMarker
from markerview.markers.severity import NO_SEVERITY_RANK, MarkerSeverity
from markerview.markers.stats import MarkerStats, compute_marker_stats
from markerview.markers.uri import normalize_resource, resource_name, resource_path

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator
    from pathlib import PurePath

    from markerview.config.logging import MarkerviewLogger

    MarkerFilter = Callable[["Marker"], bool]

logger: MarkerviewLogger = get_logger(__name__)


def _cmp(a: object, b: object) -> int:
    # Works for any pair of tuples of mutually comparable items.
    return (a > b) - (a < b)  # type: ignore[operator]


class Marker:
    """A single problem marker tied to a location in a resource.

    A `Marker` wraps exactly one `RawMarker`. Markers have no value equality:
    two markers are the same only if they are the same object. Use
    `Marker.wraps` to ask whether a marker was built from a given record.

    Args:
        raw: The wrapped record.
        owner: Id of the owner that produced the marker; defaults to ``raw.owner``.
    """

    __slots__ = ("_sort_key", "owner", "raw")

    def __init__(self, raw: RawMarker, owner: str | None = None) -> None:
        self.raw: RawMarker = raw
        self.owner: str = raw.owner if owner is None else owner
        self._sort_key: tuple[int, int, int, int, int, str] = (
            raw.severity.rank,
            raw.start_line,
            raw.start_column,
            raw.end_line,
            raw.end_column,
            raw.message,
        )

    @property
    def resource(self) -> str:
        """Return the normalized URI of the resource this marker belongs to."""
        return self.raw.resource

    @property
    def severity(self) -> MarkerSeverity:
        """Return the marker severity."""
        return self.raw.severity

    @property
    def message(self) -> str:
        """Return the marker message."""
        return self.raw.message

    @property
    def start_line(self) -> int:
        """Return the first line of the marker range."""
        return self.raw.start_line

    @property
    def start_column(self) -> int:
        """Return the first column of the marker range."""
        return self.raw.start_column

    @property
    def end_line(self) -> int:
        """Return the last line of the marker range."""
        return self.raw.end_line

    @property
    def end_column(self) -> int:
        """Return the end column of the marker range."""
        return self.raw.end_column

    @property
    def source(self) -> str | None:
        """Return the label of the tool that reported the marker, if any."""
        return self.raw.source

    @property
    def code(self) -> str | None:
        """Return the diagnostic code, if any."""
        return self.raw.code

    @property
    def sort_key(self) -> tuple[int, int, int, int, int, str]:
        """Return ``(rank, start_line, start_column, end_line, end_column, message)``."""
        return self._sort_key

    def wraps(self, raw: RawMarker) -> bool:
        """Return True if this marker was built from a record equal to ``raw``."""
        return self.raw == raw

    @staticmethod
    def compare(a: Marker, b: Marker) -> int:
        """Order markers by severity, then start position, end position and message.

        Returns:
            A negative number if ``a`` sorts first, positive if ``b`` does, 0 on a full tie.
        """
        return _cmp(a._sort_key, b._sort_key)

    def __str__(self) -> str:
        return "\n".join(
            (
                f"file: '{self.resource}'",
                f"severity: '{self.severity.label}'",
                f"message: '{self.message}'",
                f"at: '{self.start_line},{self.start_column}'",
                f"source: '{self.source or ''}'",
                f"code: '{self.code or ''}'",
            )
        )

    def __repr__(self) -> str:
        return (
            f"Marker({self.severity.value} {self.resource}"
            f"@{self.start_line}:{self.start_column} {self.message!r})"
        )


class Resource:
    """A resource URI and the markers currently attached to it.

    Markers are kept in insertion order. The worst severity is derived on
    demand and only used for ordering resources.
    """

    def __init__(self, uri: str, markers: Iterable[Marker] = ()) -> None:
        self.uri: str = uri
        self.markers: list[Marker] = list(markers)

    @property
    def path(self) -> str:
        """Return the decoded path of the resource URI."""
        return resource_path(self.uri)

    @property
    def name(self) -> str:
        """Return the last path segment of the resource URI."""
        return resource_name(self.uri)

    @property
    def worst_rank(self) -> int:
        """Return the lowest severity rank among the markers.

        A resource without markers gets `NO_SEVERITY_RANK`, which sorts after
        every real severity.
        """
        return min((m.severity.rank for m in self.markers), default=NO_SEVERITY_RANK)

    @property
    def worst_severity(self) -> MarkerSeverity | None:
        """Return the most severe marker severity, or None when empty."""
        best: Marker | None = min(self.markers, key=lambda m: m.severity.rank, default=None)
        return None if best is None else best.severity

    @property
    def sort_key(self) -> tuple[int, str]:
        """Return ``(worst_rank, case-folded path)``, the key behind `Resource.compare`."""
        return (self.worst_rank, self.path.casefold())

    @staticmethod
    def compare(a: Resource, b: Resource) -> int:
        """Order resources by worst severity, then by case-insensitive path.

        Resources without any marker sort after all others.

        Returns:
            A negative number if ``a`` sorts first, positive if ``b`` does, 0 on a tie.
        """
        return _cmp(a.sort_key, b.sort_key)

    def sorted_markers(self) -> list[Marker]:
        """Return the markers ordered with `Marker.compare` (stable)."""
        return sorted(self.markers, key=cmp_to_key(Marker.compare))

    def stats(self) -> MarkerStats:
        """Return per-severity counts for the markers of this resource."""
        return compute_marker_stats(self.markers)

    def __iter__(self) -> Iterator[Marker]:
        return iter(self.markers)

    def __len__(self) -> int:
        return len(self.markers)

    def __repr__(self) -> str:
        return f"Resource({self.uri!r}, {len(self.markers)} marker(s))"


class MarkersModel:
    """Snapshot of problem markers grouped by resource.

    Resources are keyed by normalized URI and kept in the order their first
    marker was ingested. Within a resource, markers keep ingestion order.
    A resource never stays in the model without markers.

    The model is single-writer: callers sharing it across threads must
    serialize `update_markers` and `set_filter` against reads.

    Args:
        markers: Initial raw markers; each marker keeps the owner recorded on
            its raw record.
    """

    def __init__(self, markers: Iterable[RawMarker] = ()) -> None:
        self._resources: dict[str, Resource] = {}
        self._filter: MarkerFilter | None = None
        batch: list[RawMarker] = _checked_batch(markers)
        for raw in batch:
            self._ingest(Marker(raw))
        logger.debug(
            "Created markers model with %d marker(s) in %d resource(s)",
            len(batch),
            len(self._resources),
        )

    # --- mutation ---

    def update_markers(self, owner: str, markers: Iterable[RawMarker]) -> None:
        """Replace all markers produced by ``owner`` with ``markers``.

        Every marker of ``owner`` is removed first, dropping resources left
        empty; the new batch is then ingested as on construction, each marker
        attributed to ``owner``. Markers of other owners are untouched. An
        unknown owner or an empty batch are valid.

        Args:
            owner: Id of the producer whose markers are replaced.
            markers: The producer's complete new batch.

        Raises:
            InvalidMarkerError: If the batch holds something other than
                `RawMarker` records; the model is left unchanged.
        """
        batch: list[RawMarker] = _checked_batch(markers)

        removed: int = 0
        for uri in list(self._resources):
            resource: Resource = self._resources[uri]
            kept: list[Marker] = [m for m in resource.markers if m.owner != owner]
            removed += len(resource.markers) - len(kept)
            if kept:
                resource.markers = kept
            else:
                del self._resources[uri]
                logger.trace("Dropped empty resource %s", uri)

        for raw in batch:
            self._ingest(Marker(raw, owner))

        logger.debug(
            "Updated markers of owner %r: removed %d, added %d",
            owner,
            removed,
            len(batch),
        )

    def _ingest(self, marker: Marker) -> None:
        resource: Resource | None = self._resources.get(marker.resource)
        if resource is None:
            resource = Resource(marker.resource)
            self._resources[marker.resource] = resource
        resource.markers.append(marker)
        logger.trace("Ingested %r", marker)

    # --- filtering ---

    @property
    def filter(self) -> MarkerFilter | None:
        """Return the active filter predicate, if any."""
        return self._filter

    def set_filter(self, predicate: MarkerFilter) -> None:
        """Replace the active filter; stored markers are not touched."""
        self._filter = predicate

    def clear_filter(self) -> None:
        """Remove the active filter so every marker is visible again."""
        self._filter = None

    def for_each_filtered_resource(self, visitor: Callable[[Resource], object]) -> None:
        """Visit every resource with at least one marker passing the filter.

        Resources are visited in grouping order. Each visited `Resource` is a
        fresh view holding only the passing markers (all markers when no filter
        is set), so callers may sort or mutate it freely.

        Args:
            visitor: Called once per visible resource.
        """
        predicate: MarkerFilter | None = self._filter
        for resource in list(self._resources.values()):
            if predicate is None:
                visible: list[Marker] = list(resource.markers)
            else:
                visible = [m for m in resource.markers if predicate(m)]
            if visible:
                visitor(Resource(resource.uri, visible))

    def filtered_resources(self) -> list[Resource]:
        """Return the visible resources in grouping order."""
        out: list[Resource] = []
        self.for_each_filtered_resource(out.append)
        return out

    def sorted_view(self) -> list[Resource]:
        """Return the visible resources ordered for display.

        Resources are ordered with `Resource.compare` and each resource's
        markers with `Marker.compare`.
        """
        resources: list[Resource] = sorted(
            self.filtered_resources(), key=cmp_to_key(Resource.compare)
        )
        for resource in resources:
            resource.markers = resource.sorted_markers()
        return resources

    # --- queries ---

    def resource(self, uri: str | PurePath) -> Resource | None:
        """Return a view of the stored resource for ``uri`` (unfiltered), if any."""
        resource: Resource | None = self._resources.get(normalize_resource(uri))
        if resource is None:
            return None
        return Resource(resource.uri, resource.markers)

    def owners(self) -> list[str]:
        """Return the owners that currently have markers, in first-seen order."""
        seen: dict[str, None] = {}
        for resource in self._resources.values():
            for marker in resource.markers:
                seen.setdefault(marker.owner, None)
        return list(seen)

    def has_resources(self) -> bool:
        """Return True if the model holds at least one marker."""
        return bool(self._resources)

    def has_filtered_resources(self) -> bool:
        """Return True if at least one marker passes the active filter."""
        predicate: MarkerFilter | None = self._filter
        if predicate is None:
            return self.has_resources()
        return any(predicate(m) for r in self._resources.values() for m in r.markers)

    def total(self) -> int:
        """Return the number of stored markers, ignoring the filter."""
        return sum(len(r.markers) for r in self._resources.values())

    def stats(self) -> MarkerStats:
        """Return per-severity counts of all stored markers."""
        return compute_marker_stats(m for r in self._resources.values() for m in r.markers)

    def filtered_stats(self) -> MarkerStats:
        """Return per-severity counts of the markers passing the filter."""
        return compute_marker_stats(m for r in self.filtered_resources() for m in r.markers)

    def __len__(self) -> int:
        """Return the number of resources, ignoring the filter."""
        return len(self._resources)


def _checked_batch(markers: Iterable[RawMarker]) -> list[RawMarker]:
    batch: list[RawMarker] = list(markers)
    for raw in batch:
        if not isinstance(raw, RawMarker):
            raise InvalidMarkerError(f"expected a RawMarker, got {type(raw).__name__}")
    return batch
