# topmark:header:start
#
#   project      : MarkerView
#   file         : __init__.py
#   file_relpath : src/markerview/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MarkerView configuration and logging.

Submodules:
    * [`markerview.config.logging`][markerview.config.logging]: TRACE-aware logger setup.
    * [`markerview.config.keys`][markerview.config.keys]: TOML section and key names.
    * [`markerview.config.model`][markerview.config.model]: the frozen `ViewConfig`.
    * [`markerview.config.io`][markerview.config.io]: TOML discovery and loading.

This package initializer imports nothing so that the core model can depend on
`markerview.config.logging` without pulling in the configuration layer.
"""

from __future__ import annotations
