"""
Logging configuration — one place to wire handlers for the cmdforge CLI.

main.py calls ``setup_logging`` once per process; every engine module
just does ``logger = logging.getLogger(__name__)`` and inherits it.

Console level, highest priority first:
    --debug  >  --verbose  >  --quiet  >  CMDFORGE_LOG_LEVEL  >  WARNING

CMDFORGE_LOG_FILE adds a file handler (level CMDFORGE_LOG_FILE_LEVEL,
or the console level when unset).
"""

from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV = "CMDFORGE_LOG_LEVEL"
LOG_FILE_ENV = "CMDFORGE_LOG_FILE"
LOG_FILE_LEVEL_ENV = "CMDFORGE_LOG_FILE_LEVEL"

# Console output grows more detailed as the level drops.
_FMT_MINIMAL = "%(message)s"
_FMT_VERBOSE = "%(asctime)s [%(name)s] %(message)s"
_FMT_DEBUG = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"

_CONSOLE_DATEFMT = "%H:%M:%S"
_FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"


def resolve_level(debug: bool = False, verbose: bool = False, quiet: bool = False) -> str:
    """Pick the console level name from CLI switches, then the environment."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    return os.environ.get(LOG_LEVEL_ENV, "WARNING")


def _console_formatter(level: int) -> logging.Formatter:
    if level <= logging.DEBUG:
        return logging.Formatter(_FMT_DEBUG, datefmt=_CONSOLE_DATEFMT)
    if level <= logging.INFO:
        return logging.Formatter(_FMT_VERBOSE, datefmt=_CONSOLE_DATEFMT)
    return logging.Formatter(_FMT_MINIMAL)


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Replace the root logger's handlers with cmdforge's.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path; when given, a file handler is added with
            the full debug format.
        log_file_level: Level for the file handler. Defaults to ``level``.
    """
    console_level = _parse_level(level)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(console_level)
    stderr_handler.setFormatter(_console_formatter(console_level))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(stderr_handler)
    lowest = console_level

    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(_FMT_DEBUG, datefmt=_FILE_DATEFMT))
        root.addHandler(file_handler)
        lowest = min(lowest, file_level)

    root.setLevel(lowest)


def _parse_level(level: str | None) -> int:
    """Level name → logging constant; anything unrecognised is WARNING."""
    numeric = logging.getLevelName(level.upper()) if level else None
    return numeric if isinstance(numeric, int) else logging.WARNING
