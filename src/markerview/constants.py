# topmark:header:start
#
#   project      : MarkerView
#   file         : constants.py
#   file_relpath : src/markerview/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MarkerView Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    MARKERVIEW_VERSION: str = get_version("markerview")
except PackageNotFoundError:  # running from a source checkout
    MARKERVIEW_VERSION = "0.0.0"

MARKERVIEW: str = "markerview"

# Name of the environment variable consulted for the internal log level:
LOG_LEVEL_ENV_VAR: str = "MARKERVIEW_LOG_LEVEL"

# Config file names, in discovery order:
CONFIG_FILE_NAME: str = "markerview.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"

FILE_SCHEME: str = "file"
