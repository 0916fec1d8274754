# topmark:header:start
#
#   project      : MarkerView
#   file         : filter.py
#   file_relpath : src/markerview/markers/filter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Filter options for the markers view.

A filter is built from a free-form filter text plus per-severity toggles.
The text is split on commas; every trimmed term is one of:

- ``!pattern``: hide resources whose path matches the gitwildmatch pattern;
- a term containing ``/``, ``*`` or ``?``: only show resources matching it;
- any other term: case-insensitive substring of the message, source, code
  or resource name. Text terms are OR-ed.

`FilterOptions.matches` is a plain predicate suitable for
[`MarkersModel.set_filter`][markerview.markers.model.MarkersModel.set_filter].
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from markerview.config.logging import get_logger
from markerview.markers.severity import MarkerSeverity
from markerview.markers.uri import resource_name, resource_path

if TYPE_CHECKING:
    from markerview.config.logging import MarkerviewLogger
    from markerview.markers.model import Marker

logger: MarkerviewLogger = get_logger(__name__)

_GLOB_CHARS: Final[frozenset[str]] = frozenset("/*?")


@dataclass(frozen=True)
class FilterOptions:
    """Parsed filter text and severity toggles.

    Attributes:
        filter_text: The raw filter text, as typed by the user.
        show_errors: Whether error markers are visible.
        show_warnings: Whether warning markers are visible.
        show_infos: Whether info markers are visible.
        show_hints: Whether hint markers are visible.
        text_terms: Case-folded text terms derived from ``filter_text``.
        include_patterns: Resource patterns a marker's resource must match.
        exclude_patterns: Resource patterns that hide a marker's resource.
    """

    filter_text: str = ""
    show_errors: bool = True
    show_warnings: bool = True
    show_infos: bool = True
    show_hints: bool = True

    text_terms: tuple[str, ...] = field(init=False, default=())
    include_patterns: tuple[str, ...] = field(init=False, default=())
    exclude_patterns: tuple[str, ...] = field(init=False, default=())
    _include_spec: PathSpec | None = field(init=False, default=None, repr=False, compare=False)
    _exclude_spec: PathSpec | None = field(init=False, default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        text: list[str] = []
        include: list[str] = []
        exclude: list[str] = []
        for term in (t.strip() for t in self.filter_text.split(",")):
            if not term:
                continue
            if term.startswith("!"):
                if term[1:].strip():
                    exclude.append(term[1:].strip())
            elif _GLOB_CHARS.intersection(term):
                include.append(term)
            else:
                text.append(term.casefold())

        object.__setattr__(self, "text_terms", tuple(text))
        object.__setattr__(self, "include_patterns", tuple(include))
        object.__setattr__(self, "exclude_patterns", tuple(exclude))
        if include:
            object.__setattr__(
                self, "_include_spec", PathSpec.from_lines(GitWildMatchPattern, include)
            )
        if exclude:
            object.__setattr__(
                self, "_exclude_spec", PathSpec.from_lines(GitWildMatchPattern, exclude)
            )
        logger.trace(
            "Parsed filter %r: text=%s include=%s exclude=%s",
            self.filter_text,
            text,
            include,
            exclude,
        )

    @property
    def is_empty(self) -> bool:
        """Return True if this filter lets every marker through."""
        return (
            not self.text_terms
            and not self.include_patterns
            and not self.exclude_patterns
            and all(self.severity_visible(s) for s in MarkerSeverity)
        )

    def severity_visible(self, severity: MarkerSeverity) -> bool:
        """Return True if markers of ``severity`` are shown."""
        return {
            MarkerSeverity.ERROR: self.show_errors,
            MarkerSeverity.WARNING: self.show_warnings,
            MarkerSeverity.INFO: self.show_infos,
            MarkerSeverity.HINT: self.show_hints,
        }[severity]

    def matches(self, marker: Marker) -> bool:
        """Return True if ``marker`` passes this filter."""
        if not self.severity_visible(marker.severity):
            return False

        if self._include_spec is not None or self._exclude_spec is not None:
            # Patterns are matched against the path relative to the URI root.
            rel: str = resource_path(marker.resource).lstrip("/")
            if self._exclude_spec is not None and self._exclude_spec.match_file(rel):
                return False
            if self._include_spec is not None and not self._include_spec.match_file(rel):
                return False

        if not self.text_terms:
            return True
        haystacks: tuple[str, ...] = (
            marker.message.casefold(),
            (marker.source or "").casefold(),
            (marker.code or "").casefold(),
            resource_name(marker.resource).casefold(),
        )
        return any(term in hay for term in self.text_terms for hay in haystacks)

    def __call__(self, marker: Marker) -> bool:
        return self.matches(marker)
