# topmark:header:start
#
#   project      : MarkerView
#   file         : __init__.py
#   file_relpath : src/markerview/machine/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Machine-readable (JSON/NDJSON) output for markers views.

Where things live:
- [`markerview.machine.schemas`][markerview.machine.schemas]: keys, kinds and the meta payload type.
- [`markerview.machine.payloads`][markerview.machine.payloads]: domain objects to plain dicts.
- [`markerview.machine.serializers`][markerview.machine.serializers]: envelopes/records to strings.
"""

from __future__ import annotations
