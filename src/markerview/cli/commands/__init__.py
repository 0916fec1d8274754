# topmark:header:start
#
#   project      : MarkerView
#   file         : __init__.py
#   file_relpath : src/markerview/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MarkerView CLI subcommands."""

from __future__ import annotations
