# topmark:header:start
#
#   project      : MarkerView
#   file         : __init__.py
#   file_relpath : src/markerview/markers/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Problem markers model.

Design:
    - Upstream producers hand over immutable `RawMarker` records.
    - `MarkersModel` groups them into `Resource` instances wrapping `Marker`
      objects, keyed by normalized resource URI, in insertion order.
    - Visibility is controlled by a replaceable filter predicate, typically a
      `FilterOptions` instance; ordering is applied explicitly with
      `Resource.compare` and `Marker.compare`.
"""

from __future__ import annotations

from markerview.markers.filter import FilterOptions
from markerview.markers.model import Marker, MarkersModel, Resource
from markerview.markers.raw import InvalidMarkerError, RawMarker
from markerview.markers.severity import NO_SEVERITY_RANK, MarkerSeverity
from markerview.markers.stats import MarkerStats, compute_marker_stats
from markerview.markers.uri import normalize_resource, resource_name, resource_path

__all__ = [
    "NO_SEVERITY_RANK",
    "FilterOptions",
    "InvalidMarkerError",
    "Marker",
    "MarkerSeverity",
    "MarkerStats",
    "MarkersModel",
    "RawMarker",
    "Resource",
    "compute_marker_stats",
    "normalize_resource",
    "resource_name",
    "resource_path",
]
