# topmark:header:start
#
#   project      : MarkerView
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running MarkerView against snapshot files.

CLI tests request the `isolation` fixture so that the working directory is an
empty project: config discovery then never reaches the repository's own
``pyproject.toml``. Snapshots are written into that directory with
`write_snapshot` and passed by relative name.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

from click.testing import CliRunner, Result

from markerview.cli.exit_codes import ExitCode
from markerview.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence

SAMPLE_MARKERS: list[dict[str, Any]] = [
    {
        "resource": "src/util.py",
        "severity": "warning",
        "message": "Unused variable 'x'",
        "startLineNumber": 12,
        "startColumn": 5,
        "source": "pylint",
        "code": "W0612",
    },
    {
        "resource": "src/app.py",
        "severity": "hint",
        "message": "Consider a comprehension",
        "startLineNumber": 3,
        "startColumn": 1,
    },
    {
        "resource": "src/app.py",
        "severity": "error",
        "message": "Undefined name 'foo'",
        "startLineNumber": 7,
        "startColumn": 9,
        "endLineNumber": 7,
        "endColumn": 12,
        "source": "pyright",
        "code": "reportUndefinedVariable",
    },
    {
        "resource": "docs/conf.py",
        "severity": "info",
        "message": "Line too long",
        "startLineNumber": 1,
        "startColumn": 80,
    },
]


def run_cli(argv: Sequence[str]) -> Result:
    """Invoke the CLI in the current working directory.

    Args:
        argv (Sequence[str]): CLI argument vector, e.g. ``["list", "snapshot.json"]``.

    Returns:
        Result: The `click.testing.Result` produced by `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, list(argv))


def write_snapshot(
    directory: Path,
    markers: list[dict[str, Any]] | None = None,
    *,
    owner: str | None = None,
    name: str = "snapshot.json",
) -> str:
    """Write a snapshot file and return its name relative to ``directory``.

    Args:
        directory (Path): Target directory (usually the `isolation` directory).
        markers (list[dict[str, Any]] | None): Marker objects; defaults to `SAMPLE_MARKERS`.
        owner (str | None): If given, wrap the markers in an object with this owner.
        name (str): File name.

    Returns:
        str: The file name.
    """
    items: list[dict[str, Any]] = SAMPLE_MARKERS if markers is None else markers
    data: object = items if owner is None else {"owner": owner, "markers": items}
    Path(directory, name).write_text(json.dumps(data), encoding="utf-8")
    return name


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_PROBLEMS_FOUND(result: Result) -> None:
    """Assert that the command exited with PROBLEMS_FOUND (code 2)."""
    # A normal outcome, but Click still records the SystemExit as the exception.
    assert result.exit_code == ExitCode.PROBLEMS_FOUND, result.output
    assert "Error:" not in result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert that the command exited with ``code``."""
    assert result.exit_code == code, result.output
