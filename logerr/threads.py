"""Threads whose exceptions are handed back to the main thread."""

from __future__ import annotations

import sys
import threading

_lock = threading.Lock()
_pending: BaseException | None = None
_main_thread_id: int | None = None


def store_exception(exc) -> None:
    """Keep an exception for the main thread to raise; None clears it."""
    global _pending
    with _lock:
        _pending = exc


def pending_exception():
    """Return the stored exception, or None."""
    with _lock:
        return _pending


def mark_main_thread() -> None:
    """Record the calling thread as the main thread."""
    global _main_thread_id
    _main_thread_id = threading.get_ident()


def rethrow() -> None:
    """Raise the stored exception in the main thread, clearing it.

    Exits with code 12 if no main thread was marked, or 13 if called from
    another thread while an exception is pending.
    """
    global _pending
    with _lock:
        exc, _pending = _pending, None
    if exc is None:
        return
    if _main_thread_id is None:
        sys.exit(12)
    if threading.get_ident() != _main_thread_id:
        sys.exit(13)
    raise exc


class LogerrThread(threading.Thread):
    """Thread that stores any exception raised by its target."""

    def __init__(self, target, *args, **kwargs):
        super().__init__()
        self._call = (target, args, kwargs)

    def run(self) -> None:
        target, args, kwargs = self._call
        try:
            target(*args, **kwargs)
        except BaseException as exc:  # noqa: BLE001 - every failure is handed over
            store_exception(exc)