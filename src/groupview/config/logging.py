# groupview:header:start
#
#   project      : GroupView
#   file         : logging.py
#   file_relpath : src/groupview/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# groupview:header:end

"""Logging for GroupView: a TRACE level, a logger class and a coloured formatter.

Loggers obtained through `get_logger` are `GroupviewLogger` instances and
support ``logger.trace(...)`` below DEBUG. Nothing is configured on import;
applications (and the test suite) opt in via `setup_logging`.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from typing import IO

# Define TRACE_LEVEL as a module-level constant
TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV: Final[str] = "GROUPVIEW_LOG_LEVEL"


class GroupviewLogger(logging.Logger):
    """Custom logger class for GroupView with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        The projector emits one TRACE record per skipped field, so this level is
        only worth enabling while debugging a view definition.

        Args:
            msg (object): The message to be logged.
            *args (object): Variable length argument list for the message.
            extra (Mapping[str, object] | None): Optional dictionary of extra information to pass
                to the logger.
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
    # Expose TRACE_LEVEL as logging.TRACE
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(GroupviewLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"


# Highest threshold first; the first threshold <= record level picks the colour.
_LEVEL_COLORS: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colours each record by severity using `yachalk`.

    Records below TRACE (custom levels) are rendered dim red.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and wrap the text in the colour of its level.

        Args:
            record (logging.LogRecord): The record to format.

        Returns:
            str: The coloured message.
        """
        message: str = super().format(record)
        for threshold, colorize in _LEVEL_COLORS:
            if record.levelno >= threshold:
                return colorize(message)
        return chalk.dim.red(message)


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


def resolve_env_log_level() -> int | None:
    """Return a logging level from environment or None if unset.

    Honors GROUPVIEW_LOG_LEVEL (e.g., "TRACE", "DEBUG", "INFO", numeric "10").
    """
    val = os.environ.get(LOG_LEVEL_ENV)
    if not val:
        return None
    v = val.strip().upper()
    if v.isdigit():
        return int(v)
    return _LEVEL_NAMES.get(v)


def setup_logging(level: int | None = None, *, stream: IO[str] | None = None) -> None:
    """Install a single coloured handler on the root logger.

    Any handler already attached to the root logger is removed first, so the
    function can be called repeatedly (e.g. once per test session).

    Args:
        level (int | None): Logging level. When None, ``GROUPVIEW_LOG_LEVEL`` is
            consulted via `resolve_env_log_level`, falling back to CRITICAL
            (effectively silent).
        stream (IO[str] | None): Destination; defaults to ``sys.stdout``.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for existing in list(root_logger.handlers):
        root_logger.removeHandler(existing)

    handler = logging.StreamHandler(stream or sys.stdout)
    # Source locations are only useful when debugging
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root_logger.addHandler(handler)


def get_logger(name: str) -> GroupviewLogger:
    """Return the `GroupviewLogger` registered under ``name``."""
    return cast("GroupviewLogger", logging.getLogger(name))
