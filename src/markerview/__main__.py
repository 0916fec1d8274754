# topmark:header:start
#
#   project      : MarkerView
#   file         : __main__.py
#   file_relpath : src/markerview/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running MarkerView via ``python -m markerview``.

Delegates to :func:`markerview.cli.main.cli`, the same entry point as the
``markerview`` console script.

Examples:
    List the markers of a snapshot::

        python -m markerview list problems.json
"""

from __future__ import annotations

from markerview.cli.main import cli

if __name__ == "__main__":
    cli()
