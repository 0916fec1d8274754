# topmark:header:start
#
#   project      : MarkerView
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the MarkerView test suite.

Provides the `a_marker` factory fixture used across the suite to build raw
marker records with sensible defaults, and configures TRACE logging for
test runs.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol, TypeVar, cast

import pytest

from markerview.config import logging
from markerview.markers.raw import RawMarker
from markerview.markers.severity import MarkerSeverity

if TYPE_CHECKING:
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return cast("Callable[[F], F]", pytest.hookimpl(*args, **kwargs))


class MarkerFactory(Protocol):
    """Signature of the `a_marker` fixture."""

    def __call__(
        self,
        resource: str = ...,
        severity: MarkerSeverity = ...,
        start_line: int = ...,
        start_column: int = ...,
        end_line: int | None = ...,
        end_column: int | None = ...,
        message: str = ...,
        source: str | None = ...,
        code: str | None = ...,
        owner: str = ...,
    ) -> RawMarker: ...


def make_marker(
    resource: str = "some resource",
    severity: MarkerSeverity = MarkerSeverity.ERROR,
    start_line: int = 10,
    start_column: int = 5,
    end_line: int | None = None,
    end_column: int | None = None,
    message: str = "some message",
    source: str | None = "tslint",
    code: str | None = None,
    owner: str = "someOwner",
) -> RawMarker:
    """Return a raw marker; the range defaults to one line and five columns past the start."""
    return RawMarker(
        owner=owner,
        resource=resource,
        severity=severity,
        message=message,
        start_line=start_line,
        start_column=start_column,
        end_line=start_line + 1 if end_line is None else end_line,
        end_column=start_column + 5 if end_column is None else end_column,
        source=source,
        code=code,
    )


@pytest.fixture
def a_marker() -> MarkerFactory:
    """Return the raw marker factory."""
    return make_marker


@pytest.fixture(autouse=True)
def silence_markerview_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure MARKERVIEW_LOG_LEVEL exported in the developer's shell does not leak into tests."""
    monkeypatch.delenv("MARKERVIEW_LOG_LEVEL", raising=False)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test in an empty project directory so config discovery finds nothing else.

    Returns:
        Path: The temporary working directory (holds an empty ``markerview.toml``).
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    # Stops config discovery from walking up into the repository.
    (cwd / "markerview.toml").write_text("", encoding="utf-8")
    monkeypatch.chdir(cwd)
    return cwd


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level for all tests so detailed output is captured."""
    logging.setup_logging(level=logging.TRACE_LEVEL)
