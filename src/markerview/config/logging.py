# topmark:header:start
#
#   project      : MarkerView
#   file         : logging.py
#   file_relpath : src/markerview/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logging setup shared by the MarkerView library and CLI.

Adds a TRACE level under DEBUG for per-marker detail, registers
`MarkerviewLogger` as the logger class so every module logger has ``trace()``,
and colors stderr output by level with `yachalk`.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from markerview.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class MarkerviewLogger(logging.Logger):
    """Standard logger plus a ``trace()`` method for the TRACE level."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Emit ``msg`` at TRACE level if that level is enabled.

        Args:
            msg (object): Format string, merged with ``args`` lazily.
            *args (object): Values for the ``%`` placeholders in ``msg``.
            extra (Mapping[str, object] | None): Attributes copied onto the log record.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(MarkerviewLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"

_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


# Checked from the most severe down; records below TRACE fall through.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that paints each line in the color of its level."""

    def format(self, record: logging.LogRecord) -> str:
        """Render ``record`` with the base format, then color it.

        Args:
            record (logging.LogRecord): Record emitted by a MarkerView logger.

        Returns:
            str: The rendered line wrapped in ANSI color codes.
        """
        message = super().format(record)
        for threshold, paint in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return paint(message)
        return chalk.dim.red(message)


def parse_log_level(value: str) -> int | None:
    """Parse a level name (``"TRACE"``, ``"debug"``) or number (``"10"``).

    Returns:
        The numeric logging level, or None if ``value`` is not recognized.
    """
    v = value.strip().upper()
    if v.isdigit():
        return int(v)
    return _LEVEL_NAMES.get(v)


def resolve_env_log_level() -> int | None:
    """Return a logging level from the environment or None if unset.

    Honors MARKERVIEW_LOG_LEVEL (e.g., "TRACE", "DEBUG", "INFO", numeric "10").
    """
    val = os.environ.get(LOG_LEVEL_ENV_VAR)
    if val:
        return parse_log_level(val)
    return None


def setup_logging(level: int | None = None) -> None:
    """Install a single colored stderr handler on the root logger.

    Repeated calls replace the handler installed by the previous call. Without
    ``level``, [`resolve_env_log_level`][markerview.config.logging.resolve_env_log_level]
    decides, and logging stays silent below CRITICAL if that yields nothing.
    Levels below INFO switch to a format carrying file, line and function.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for old in list(root_logger.handlers):
        root_logger.removeHandler(old)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root_logger.addHandler(handler)

    root_logger.propagate = False


def get_logger(name: str) -> MarkerviewLogger:
    """Return the logger for ``name``, typed so that ``trace()`` is available.

    Args:
        name (str): Dotted logger name, usually the calling module's ``__name__``.

    Returns:
        MarkerviewLogger: The logger registered under ``name``.
    """
    return cast("MarkerviewLogger", logging.getLogger(name))
