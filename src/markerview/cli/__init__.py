# topmark:header:start
#
#   project      : MarkerView
#   file         : __init__.py
#   file_relpath : src/markerview/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for MarkerView."""

from __future__ import annotations
