# topmark:header:start
#
#   project      : MarkerView
#   file         : test_uri.py
#   file_relpath : tests/markers/test_uri.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for resource identifier normalization."""

from __future__ import annotations

from pathlib import PurePosixPath, PureWindowsPath

import pytest
from hypothesis import given
from hypothesis import strategies as st

from markerview.markers.uri import normalize_resource, resource_name, resource_path


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("a/res1", "file:///a/res1"),
        ("/a/res1", "file:///a/res1"),
        ("res4", "file:///res4"),
        ("some resource", "file:///some%20resource"),
        ("file:///a/res1", "file:///a/res1"),
        ("FILE:///a/res1", "file:///a/res1"),
        ("untitled:Untitled-1", "untitled:Untitled-1"),
        ("C:/work/x.py", "file:///c:/work/x.py"),
        ("file:///C:/work/x.py", "file:///c:/work/x.py"),
        ("File:///D%3A/x.py", "file:///d%3A/x.py"),
        ("dir\\sub\\x.py", "file:///dir/sub/x.py"),
    ],
)
def test_normalize_resource(value: str, expected: str) -> None:
    assert normalize_resource(value) == expected


def test_normalize_paths() -> None:
    assert normalize_resource(PurePosixPath("a/res1")) == "file:///a/res1"
    assert normalize_resource(PureWindowsPath("D:/x/y.py")) == "file:///d:/x/y.py"


def test_drive_letter_case_groups_together() -> None:
    assert normalize_resource("file:///C:/x") == normalize_resource("C:/x")
    assert normalize_resource("file:///C:/x") == normalize_resource("c:/x")


def test_resource_path_and_name() -> None:
    uri = normalize_resource("some dir/some resource")

    assert resource_path(uri) == "/some dir/some resource"
    assert resource_name(uri) == "some resource"
    assert resource_name("untitled:Untitled-1") == "Untitled-1"


@given(st.text(alphabet=st.characters(blacklist_categories=("Cs",)), min_size=1, max_size=40))
def test_normalization_is_idempotent(value: str) -> None:
    once = normalize_resource(value)

    assert normalize_resource(once) == once
