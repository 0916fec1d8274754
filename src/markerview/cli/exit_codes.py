# topmark:header:start
#
#   project      : MarkerView
#   file         : exit_codes.py
#   file_relpath : src/markerview/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the MarkerView CLI.

MarkerView aligns with the BSD `sysexits` convention where practical. The one
deliberate divergence is `PROBLEMS_FOUND=2`, returned with ``--fail-on-error``
when error markers are visible. Click reports its own usage errors with 2
too, so callers tell them apart by the error message on stderr.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the MarkerView CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure (non-specific error).
        PROBLEMS_FOUND: Error markers are visible and ``--fail-on-error`` was given.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: Malformed snapshot content. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        CONFIG_ERROR: Malformed configuration. Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1
    PROBLEMS_FOUND = 2  # deliberate divergence from sysexits; see class docstring

    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
