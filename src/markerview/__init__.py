# topmark:header:start
#
#   project      : MarkerView
#   file         : __init__.py
#   file_relpath : src/markerview/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MarkerView package.

MarkerView aggregates problem markers (errors, warnings, infos and hints
reported against files) into per-resource groups, filters them and orders
them for display. The core model lives in [`markerview.markers`][markerview.markers];
a small CLI reads JSON snapshots for inspection.
"""

from __future__ import annotations
