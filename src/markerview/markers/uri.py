# topmark:header:start
#
#   project      : MarkerView
#   file         : uri.py
#   file_relpath : src/markerview/markers/uri.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resource identifier normalization.

Markers are grouped by the normalized string form of their resource. Plain
file paths are turned into ``file://`` URIs (``a/res1`` becomes
``file:///a/res1``); identifiers that already carry a scheme are kept apart
from lower-casing the scheme. Normalization is idempotent.
"""

from __future__ import annotations

import re
from pathlib import PurePath
from urllib.parse import quote, unquote, urlsplit

from markerview.constants import FILE_SCHEME

# Two or more characters so that Windows drive letters ("C:") are not schemes.
_SCHEME_RE: re.Pattern[str] = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]+):")
_DRIVE_RE: re.Pattern[str] = re.compile(r"^/?[A-Za-z]:/")
_FILE_URI_DRIVE_RE: re.Pattern[str] = re.compile(r"^(file:///)([A-Za-z])(?=:|%3[Aa])")


def normalize_resource(value: str | PurePath) -> str:
    """Return the normalized URI string for a resource identifier.

    Args:
        value: A URI string (``file:///a/b.py``, ``untitled:Untitled-1``), a
            file path string, or a `PurePath`.

    Returns:
        The normalized URI string used as grouping key.
    """
    if isinstance(value, PurePath):
        return _file_uri(value.as_posix())

    m = _SCHEME_RE.match(value)
    if m is not None:
        scheme: str = m.group(1)
        uri: str = scheme.lower() + value[len(scheme) :]
        if scheme.lower() == FILE_SCHEME:
            uri = _FILE_URI_DRIVE_RE.sub(lambda d: d.group(1) + d.group(2).lower(), uri)
        return uri
    return _file_uri(value)


def _file_uri(path: str) -> str:
    path = path.replace("\\", "/")
    if not path.startswith("/"):
        path = "/" + path
    if _DRIVE_RE.match(path):
        # Lower-case drive letters so "C:/x" and "c:/x" group together.
        path = path[:1] + path[1].lower() + path[2:]
    return f"{FILE_SCHEME}://{quote(path, safe='/:')}"


def resource_path(uri: str) -> str:
    """Return the decoded path component of a normalized resource URI.

    Examples:
        ``file:///a/res1`` -> ``/a/res1``; ``untitled:Untitled-1`` -> ``Untitled-1``.
    """
    return unquote(urlsplit(uri).path)


def resource_name(uri: str) -> str:
    """Return the last path segment of a normalized resource URI."""
    path: str = resource_path(uri).rstrip("/")
    return path.rsplit("/", 1)[-1]
