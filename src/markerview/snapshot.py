# topmark:header:start
#
#   project      : MarkerView
#   file         : snapshot.py
#   file_relpath : src/markerview/snapshot.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Read marker snapshots from JSON.

A snapshot is either a JSON array of marker objects, or an object with a
``markers`` array and an optional default ``owner``:

```json
{
  "owner": "pyright",
  "markers": [
    {"resource": "src/app.py", "severity": "error", "message": "Undefined name",
     "startLineNumber": 3, "startColumn": 5, "endLineNumber": 3, "endColumn": 9,
     "source": "pyright", "code": "reportUndefinedVariable"}
  ]
}
```

Marker objects accept the keys understood by
[`RawMarker.from_dict`][markerview.markers.raw.RawMarker.from_dict].
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from markerview.config.logging import get_logger
from markerview.markers.raw import InvalidMarkerError, RawMarker

if TYPE_CHECKING:
    from pathlib import Path

    from markerview.config.logging import MarkerviewLogger

logger: MarkerviewLogger = get_logger(__name__)

DEFAULT_OWNER: str = "snapshot"


class SnapshotError(ValueError):
    """Raised when a snapshot cannot be read or holds malformed markers."""


def parse_snapshot(text: str, *, origin: str = "<string>") -> list[RawMarker]:
    """Parse snapshot JSON text into raw marker records.

    Args:
        text: The JSON document.
        origin: Name of the source used in error messages.

    Returns:
        The records, in document order.

    Raises:
        SnapshotError: If the text is not valid JSON or a marker is malformed.
    """
    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SnapshotError(f"{origin}: invalid JSON: {exc}") from exc

    owner: str = DEFAULT_OWNER
    if isinstance(data, dict):
        owner_value: Any = data.get("owner", DEFAULT_OWNER)
        if not isinstance(owner_value, str):
            raise SnapshotError(f"{origin}: 'owner' must be a string")
        owner = owner_value
        data = data.get("markers")
    if not isinstance(data, list):
        raise SnapshotError(f"{origin}: expected a list of markers")

    records: list[RawMarker] = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise SnapshotError(f"{origin}: marker #{index} is not an object")
        try:
            records.append(RawMarker.from_dict(item, owner=owner))
        except InvalidMarkerError as exc:
            raise SnapshotError(f"{origin}: marker #{index}: {exc}") from exc

    logger.debug("Parsed %d marker(s) from %s", len(records), origin)
    return records


def load_snapshot(path: Path) -> list[RawMarker]:
    """Read a snapshot file.

    Raises:
        SnapshotError: If the file cannot be read or parsed.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SnapshotError(f"Cannot read snapshot {path}: {exc}") from exc
    return parse_snapshot(text, origin=str(path))
