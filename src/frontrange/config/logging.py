# topmark:header:start
#
#   project      : FrontRange
#   file         : logging.py
#   file_relpath : src/frontrange/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 FrontRange contributors
#
# topmark:header:end

"""Logging setup for FrontRange, with a TRACE level below DEBUG.

Library modules obtain their logger through [`get_logger`][frontrange.config.logging.get_logger];
the CLI calls [`setup_logging`][frontrange.config.logging.setup_logging] once, after parsing the
verbosity flags. Log records go to stderr so that command output on stdout stays machine-readable.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from frontrange.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = (
    "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"
)

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


class FrontRangeLogger(logging.Logger):
    """Logger class that adds a `trace()` method for the TRACE level."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Arguments merged into `msg` with %-formatting.
            extra (Mapping[str, object] | None): Extra attributes for the log record.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


if logging.getLevelName(TRACE_LEVEL) != "TRACE":
    logging.addLevelName(TRACE_LEVEL, "TRACE")

logging.setLoggerClass(FrontRangeLogger)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record according to its severity."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the record, then wrap it in a chalk style picked by level."""
        level = record.levelno
        message = super().format(record)

        if level >= logging.CRITICAL:
            return chalk.red_bright(message)
        if level >= logging.ERROR:
            return chalk.red(message)
        if level >= logging.WARNING:
            return chalk.yellow(message)
        if level >= logging.INFO:
            return chalk.green(message)
        if level >= logging.DEBUG:
            return chalk.gray(message)
        if level >= TRACE_LEVEL:
            return chalk.blue(message)
        return chalk.dim.red(message)


def parse_log_level(value: str) -> int | None:
    """Translate a level name ("TRACE", "debug") or a number ("10") to a level.

    Returns None when the value is not recognised.
    """
    v = value.strip().upper()
    if not v:
        return None
    if v.isdigit():
        return int(v)
    return _LEVEL_NAMES.get(v)


def resolve_env_log_level() -> int | None:
    """Return the level requested through `FRONTRANGE_LOG_LEVEL`, or None if unset."""
    val = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not val:
        return None
    return parse_log_level(val)


def setup_logging(level: int | None = None) -> None:
    """Configure the root logger with a colored stderr handler.

    If ``level`` is None the environment is consulted via
    [`resolve_env_log_level`][frontrange.config.logging.resolve_env_log_level];
    the fallback is CRITICAL, which keeps the CLI silent by default.
    """
    if level is None:
        level = resolve_env_log_level()
        if level is None:
            level = logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Replace handlers so repeated calls do not duplicate output
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root_logger.addHandler(handler)


def get_logger(name: str) -> FrontRangeLogger:
    """Return the FrontRangeLogger registered under `name`."""
    return cast("FrontRangeLogger", logging.getLogger(name))
