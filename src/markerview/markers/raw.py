# topmark:header:start
#
#   project      : MarkerView
#   file         : raw.py
#   file_relpath : src/markerview/markers/raw.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Raw marker records as supplied by diagnostics producers.

A `RawMarker` is the in-process input contract of the markers model: one
diagnostic reported by an owner against a resource. Records are immutable and
compare by value. Malformed records are rejected at construction time with
`InvalidMarkerError`; the model itself never validates again.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath
from typing import TYPE_CHECKING, Any, Final

from markerview.markers.severity import MarkerSeverity
from markerview.markers.uri import normalize_resource

if TYPE_CHECKING:
    from collections.abc import Mapping


class InvalidMarkerError(ValueError):
    """Raised when a raw marker record violates the input contract."""


# Accepted spellings for each field when building records from mappings.
_FIELD_ALIASES: Final[dict[str, tuple[str, ...]]] = {
    "owner": ("owner",),
    "resource": ("resource", "uri", "file"),
    "severity": ("severity",),
    "message": ("message",),
    "start_line": ("start_line", "startLineNumber"),
    "start_column": ("start_column", "startColumn"),
    "end_line": ("end_line", "endLineNumber"),
    "end_column": ("end_column", "endColumn"),
    "source": ("source",),
    "code": ("code",),
}

_OPTIONAL_FIELDS: Final[frozenset[str]] = frozenset({"source", "code", "end_line", "end_column"})


@dataclass(frozen=True, slots=True)
class RawMarker:
    """One diagnostic as reported by its owner.

    Lines and columns are 1-based. ``resource`` is normalized on construction
    (see [`normalize_resource`][markerview.markers.uri.normalize_resource]), so
    two records built from ``"a/res1"`` and ``"file:///a/res1"`` share a resource.

    Attributes:
        owner: Id of the producer that reported the marker.
        resource: Normalized resource URI.
        severity: Marker severity.
        message: Diagnostic message text.
        start_line: First line of the range.
        start_column: First column of the range.
        end_line: Last line of the range.
        end_column: Column where the range ends.
        source: Optional label of the tool that reported the marker.
        code: Optional diagnostic code.
    """

    owner: str
    resource: str
    severity: MarkerSeverity
    message: str
    start_line: int
    start_column: int
    end_line: int
    end_column: int
    source: str | None = None
    code: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.owner, str):
            raise InvalidMarkerError(f"owner must be a string, got {self.owner!r}")
        if not isinstance(self.resource, (str, PurePath)):
            raise InvalidMarkerError(f"resource must be a string or path, got {self.resource!r}")
        if not isinstance(self.message, str):
            raise InvalidMarkerError(f"message must be a string, got {self.message!r}")
        try:
            severity: MarkerSeverity = MarkerSeverity.from_value(self.severity)
        except ValueError as exc:
            raise InvalidMarkerError(str(exc)) from exc

        for name in ("start_line", "start_column", "end_line", "end_column"):
            value: object = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                raise InvalidMarkerError(f"{name} must be a positive integer, got {value!r}")
        if (self.end_line, self.end_column) < (self.start_line, self.start_column):
            raise InvalidMarkerError(
                f"range ends before it starts: "
                f"({self.start_line},{self.start_column})-({self.end_line},{self.end_column})"
            )
        for name in ("source", "code"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise InvalidMarkerError(f"{name} must be a string or None, got {value!r}")

        object.__setattr__(self, "severity", severity)
        object.__setattr__(self, "resource", normalize_resource(self.resource))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], *, owner: str | None = None) -> RawMarker:
        """Build a record from a mapping using snake_case or camelCase keys.

        ``end_line``/``end_column`` default to the start position. Numeric
        codes are converted to strings.

        Args:
            data: Mapping with the marker fields.
            owner: Owner id used when ``data`` carries none.

        Returns:
            The validated record.

        Raises:
            InvalidMarkerError: If a required field is missing or a value is invalid.
        """
        values: dict[str, Any] = {}
        for name, aliases in _FIELD_ALIASES.items():
            for alias in aliases:
                if alias in data:
                    values[name] = data[alias]
                    break

        if "owner" not in values and owner is not None:
            values["owner"] = owner
        missing: list[str] = [
            name for name in _FIELD_ALIASES if name not in values and name not in _OPTIONAL_FIELDS
        ]
        if missing:
            raise InvalidMarkerError(f"missing required field(s): {', '.join(missing)}")

        values.setdefault("end_line", values["start_line"])
        values.setdefault("end_column", values["start_column"])
        if isinstance(values.get("code"), int) and not isinstance(values["code"], bool):
            values["code"] = str(values["code"])
        return cls(**values)
