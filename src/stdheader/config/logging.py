# topmark:header:start
#
#   project      : StdHeader
#   file         : logging.py
#   file_relpath : src/stdheader/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 StdHeader contributors
#
# topmark:header:end

"""StdHeader logging: a TRACE level below DEBUG and colored stderr output.

Logging is for developers. What the user is meant to read (results, warnings
about skipped files) goes through the CLI console instead. The level is taken
from ``STDHEADER_LOG_LEVEL`` and defaults to CRITICAL, so a normal run is
silent.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from stdheader.constants import ENV_LOG_LEVEL

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

#: Numeric value of the TRACE level (below DEBUG).
TRACE_LEVEL: Final[int] = logging.DEBUG - 5

#: Name of the package logger configured by `setup_logging`.
ROOT_LOGGER_NAME: Final[str] = "stdheader"

SHORT_FORMAT: Final[str] = "%(levelname)-8s %(message)s"
DETAILED_FORMAT: Final[str] = "%(levelname)-8s %(name)s:%(lineno)d %(message)s"


class StdheaderLogger(logging.Logger):
    """Logger with a `trace` method for very chatty output."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(StdheaderLogger)

# Highest threshold first; the first entry at or below the record level wins.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter coloring each record by severity with `yachalk`."""

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and color it according to its level."""
        message: str = super().format(record)
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim(message)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``STDHEADER_LOG_LEVEL``, or None if unset or unknown.

    Accepts level names (``"trace"``, ``"DEBUG"``, ``"warn"``) and numbers (``"10"``).
    """
    raw: str = os.environ.get(ENV_LOG_LEVEL, "").strip().upper()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    if raw == "WARN":
        raw = "WARNING"
    level: object = logging.getLevelName(raw)
    return level if isinstance(level, int) else None


def setup_logging(level: int | None = None) -> None:
    """Attach a single colored stderr handler to the ``stdheader`` logger.

    Args:
        level (int | None): Log level; when None, ``STDHEADER_LOG_LEVEL`` is
            consulted and CRITICAL is used if it is unset.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    pkg_logger: logging.Logger = logging.getLogger(ROOT_LOGGER_NAME)
    pkg_logger.setLevel(level)
    for old in pkg_logger.handlers[:]:
        pkg_logger.removeHandler(old)

    # stderr only: STDOUT carries document content in STDIN mode.
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(SHORT_FORMAT if level >= logging.INFO else DETAILED_FORMAT))
    pkg_logger.addHandler(handler)
    pkg_logger.propagate = False


def get_logger(name: str) -> StdheaderLogger:
    """Return the `StdheaderLogger` called ``name`` (usually ``__name__``)."""
    return cast("StdheaderLogger", logging.getLogger(name))
