"""Timestamped, levelled log lines written to standard output."""

from __future__ import annotations

import enum
import sys

from . import appinfo
from .timestamp import Timestamp

_TAG_WIDTH = 11
_enabled = True


class Level(enum.Enum):
    ERROR = "ERROR"
    WARNING = "WARNING"
    DEBUG = "DEBUG"
    INFO = "INFO"


def format_prefix(level: Level) -> str:
    """Return the '[time] [app] [LEVEL]' prefix for a log line."""
    tag = f"[{level.value}]".ljust(_TAG_WIDTH)
    return f"[{Timestamp()}] [{appinfo.name()}] {tag}"


def log(level: Level, *args) -> str:
    """Write one log line made of the arguments and return it."""
    line = format_prefix(level) + "".join(str(arg) for arg in args) + "\n"
    if _enabled:
        sys.stdout.write(line)
    return line


def log_error(*args) -> str:
    return log(Level.ERROR, *args)


def log_warning(*args) -> str:
    return log(Level.WARNING, *args)


def log_debug(*args) -> str:
    return log(Level.DEBUG, *args)


def log_info(*args) -> str:
    return log(Level.INFO, *args)


def disable() -> None:
    """Stop writing log lines."""
    global _enabled
    _enabled = False


def enable() -> None:
    """Resume writing log lines."""
    global _enabled
    _enabled = True


def is_enabled() -> bool:
    return _enabled