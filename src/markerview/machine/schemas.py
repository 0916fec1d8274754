# topmark:header:start
#
#   project      : MarkerView
#   file         : schemas.py
#   file_relpath : src/markerview/machine/schemas.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Keys, record kinds and shared payload types for machine output."""

from __future__ import annotations

from typing import Final, TypedDict


class MachineKey:
    """Canonical keys used in JSON envelopes and NDJSON records."""

    KIND: Final[str] = "kind"
    META: Final[str] = "meta"
    RESOURCES: Final[str] = "resources"
    RESOURCE: Final[str] = "resource"
    MARKERS: Final[str] = "markers"
    MARKER: Final[str] = "marker"
    SUMMARY: Final[str] = "summary"


class MachineKind:
    """Canonical values for `MachineKey.KIND` in NDJSON records."""

    RESOURCE: Final[str] = "resource"
    MARKER: Final[str] = "marker"
    SUMMARY: Final[str] = "summary"


class MetaPayload(TypedDict):
    """Metadata describing the MarkerView runtime for machine output."""

    tool: str
    version: str
    platform: str
