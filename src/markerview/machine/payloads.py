# topmark:header:start
#
#   project      : MarkerView
#   file         : payloads.py
#   file_relpath : src/markerview/machine/payloads.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Payload builders: markers, resources and summaries as plain dicts.

Builders are pure and console-free; severities are emitted by value
(``"error"``, ``"warning"``, ``"info"``, ``"hint"``).
"""

from __future__ import annotations

import sys
from functools import lru_cache
from typing import TYPE_CHECKING

from markerview.constants import MARKERVIEW, MARKERVIEW_VERSION
from markerview.machine.schemas import MetaPayload

if TYPE_CHECKING:
    from markerview.markers.model import Marker, Resource
    from markerview.markers.stats import MarkerStats


@lru_cache(maxsize=1)
def build_meta_payload() -> MetaPayload:
    """Build the metadata payload with tool name, version and platform.

    Cached because it is stable for the lifetime of the process.
    """
    return MetaPayload(
        tool=MARKERVIEW,
        version=MARKERVIEW_VERSION,
        platform=sys.platform,
    )


def marker_to_dict(marker: Marker) -> dict[str, object]:
    """Return a JSON-friendly dict for one marker."""
    return {
        "owner": marker.owner,
        "resource": marker.resource,
        "severity": marker.severity.value,
        "message": marker.message,
        "start_line": marker.start_line,
        "start_column": marker.start_column,
        "end_line": marker.end_line,
        "end_column": marker.end_column,
        "source": marker.source,
        "code": marker.code,
    }


def resource_to_dict(resource: Resource) -> dict[str, object]:
    """Return a JSON-friendly dict for a resource and its markers (in current order)."""
    worst = resource.worst_severity
    return {
        "uri": resource.uri,
        "path": resource.path,
        "worst_severity": None if worst is None else worst.value,
        "counts": resource.stats().to_dict(),
        "markers": [marker_to_dict(m) for m in resource.markers],
    }


def summary_to_dict(stats: MarkerStats, *, resources: int) -> dict[str, object]:
    """Return a JSON-friendly summary with per-severity counts."""
    return {
        "resources": resources,
        "total": stats.total,
        "counts": stats.to_dict(),
    }
