"""
Logging setup for the projgen CLI.

Diagnostics only. Status lines a user is meant to read are printed by
the CLI through click; logs go to stderr and stay quiet (WARNING) unless
``--verbose``/``--debug`` or ``PROJGEN_LOG_LEVEL`` ask for more.
``PROJGEN_LOG_FILE`` adds a full-detail file log.
"""

from __future__ import annotations

import logging
import sys

_FMT_MINIMAL = "%(levelname)s: %(message)s"
_FMT_VERBOSE = "%(asctime)s [%(name)s] %(message)s"
_FMT_DEBUG = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_DATEFMT_CONSOLE = "%H:%M:%S"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"


def _console_format(level: int) -> tuple[str, str | None]:
    if level <= logging.DEBUG:
        return _FMT_DEBUG, _DATEFMT_CONSOLE
    if level <= logging.INFO:
        return _FMT_VERBOSE, _DATEFMT_CONSOLE
    return _FMT_MINIMAL, None


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Replace the root logger's handlers with a stderr handler.

    Args:
        level: Console level name.
        log_file: Optional path of an extra file log.
        log_file_level: Level for the file log (default: ``level``).
    """
    console_level = _parse_level(level)
    fmt, datefmt = _console_format(console_level)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(fmt, datefmt=datefmt))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    root_level = console_level

    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_DEBUG, datefmt=_DATEFMT_FILE))
        root.addHandler(fh)
        root_level = min(root_level, file_level)

    root.setLevel(root_level)


def _parse_level(level: str | None) -> int:
    """Level name to its numeric value; unknown names mean WARNING."""
    numeric = getattr(logging, level.upper(), None) if level else None
    return numeric if isinstance(numeric, int) else logging.WARNING
