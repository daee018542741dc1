"""Exceptions that record where they were raised, and helpers that raise them."""

from __future__ import annotations

import sys
import traceback
from pathlib import Path

from . import appinfo


class StackTraceException(Exception):
    """Error carrying its origin (file, function, line) and the stack at creation."""

    def __init__(self, error_message, filename, function, line, fatal=False):
        super().__init__(error_message)
        self.error_message = str(error_message)
        self.filename = filename
        self.function = function
        self.line = line
        self.fatal = fatal
        self.trace = "".join(traceback.format_stack()[:-1])

    def error_details(self) -> str:
        """Return the message, system details and stack trace as one report."""
        return f"{self}\n\n{appinfo.system_details()}STACK TRACE:\n\n{self.trace}"

    def __str__(self) -> str:
        return f"ERROR: {self.error_message}\n    in: {self.function} at: {self.filename}:{self.line}"


class TerminateException(Exception):
    """Raised when the application is asked to terminate."""


def _raise_from_caller(message: str, fatal: bool, depth: int) -> None:
    frame = sys._getframe(depth)
    code = frame.f_code
    raise StackTraceException(message, Path(code.co_filename).name, code.co_name, frame.f_lineno, fatal)


def err(message) -> None:
    """Raise a StackTraceException located at the caller."""
    _raise_from_caller(message, False, 2)


def fatal_err(message) -> None:
    """Raise a fatal StackTraceException located at the caller."""
    _raise_from_caller(message, True, 2)


def expects(condition, description="") -> None:
    """Raise if a pre-condition does not hold."""
    if not condition:
        _raise_from_caller(f"Pre-condition failed: {description}", False, 2)


def ensures(condition, description="") -> None:
    """Raise if a post-condition does not hold."""
    if not condition:
        _raise_from_caller(f"Post-condition failed: {description}", False, 2)