# topmark:header:start
#
#   project      : MarkerView
#   file         : serializers.py
#   file_relpath : src/markerview/machine/serializers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""JSON/NDJSON serialization of markers views.

Conventions:
- `serialize_view_json()` returns pretty-printed JSON without a trailing newline.
- `serialize_view_ndjson()` returns one record per line and *does* end with a
  final ``\n``. Records are ``resource`` records, each followed by its
  ``marker`` records, and a final ``summary`` record. Every record carries
  ``kind`` and ``meta``.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from markerview.machine.payloads import (
    build_meta_payload,
    marker_to_dict,
    resource_to_dict,
    summary_to_dict,
)
from markerview.machine.schemas import MachineKey, MachineKind
from markerview.markers.stats import compute_marker_stats

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from markerview.markers.model import Resource


def serialize_view_json(resources: Sequence[Resource]) -> str:
    """Serialize resources (in the given order) as a single JSON envelope."""
    stats = compute_marker_stats(m for r in resources for m in r.markers)
    envelope: dict[str, object] = {
        MachineKey.META: dict(build_meta_payload()),
        MachineKey.RESOURCES: [resource_to_dict(r) for r in resources],
        MachineKey.SUMMARY: summary_to_dict(stats, resources=len(resources)),
    }
    return json.dumps(envelope, indent=2)


def iter_view_records(resources: Sequence[Resource]) -> Iterator[dict[str, object]]:
    """Yield NDJSON record dicts for resources (in the given order)."""
    meta: dict[str, object] = dict(build_meta_payload())
    for resource in resources:
        payload: dict[str, object] = resource_to_dict(resource)
        del payload[MachineKey.MARKERS]
        yield {
            MachineKey.KIND: MachineKind.RESOURCE,
            MachineKey.META: meta,
            MachineKey.RESOURCE: payload,
        }
        for marker in resource.markers:
            yield {
                MachineKey.KIND: MachineKind.MARKER,
                MachineKey.META: meta,
                MachineKey.MARKER: marker_to_dict(marker),
            }
    stats = compute_marker_stats(m for r in resources for m in r.markers)
    yield {
        MachineKey.KIND: MachineKind.SUMMARY,
        MachineKey.META: meta,
        MachineKey.SUMMARY: summary_to_dict(stats, resources=len(resources)),
    }


def serialize_view_ndjson(resources: Sequence[Resource]) -> str:
    """Serialize resources as newline-delimited JSON records (trailing newline included)."""
    return "\n".join(json.dumps(record) for record in iter_view_records(resources)) + "\n"
