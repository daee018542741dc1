"""A text stream that forwards output and hands each finished entry to callbacks."""

from __future__ import annotations

import sys
import threading
from typing import Callable, TextIO


class LogStream:
    """Wraps a text stream; written text passes through and complete entries go to callbacks.

    If the wrapped stream is the current ``sys.stdout``, the LogStream takes its
    place until closed.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._callbacks: dict[str, Callable[[str], None]] = {}
        self._lock = threading.Lock()
        self._local = threading.local()
        self._replaced_stdout = stream is sys.stdout
        if self._replaced_stdout:
            sys.stdout = self

    def register_log_function(self, name: str, function: Callable[[str], None]) -> None:
        """Add a callback; an existing name keeps its first callback."""
        with self._lock:
            self._callbacks.setdefault(name, function)

    def unregister_log_function(self, name: str = "") -> None:
        """Remove the named callback, or every callback if name is empty."""
        with self._lock:
            if name:
                self._callbacks.pop(name, None)
            else:
                self._callbacks.clear()

    def write(self, text: str) -> int:
        self._stream.write(text)
        buffer = getattr(self._local, "buffer", "") + text
        if buffer.endswith("\n"):
            self._local.buffer = ""
            self._dispatch(buffer)
        else:
            self._local.buffer = buffer
        return len(text)

    def _dispatch(self, entry: str) -> None:
        with self._lock:
            for name in sorted(self._callbacks):
                self._callbacks[name](entry)

    def flush(self) -> None:
        self._stream.flush()

    def writable(self) -> bool:
        return True

    def close(self) -> None:
        """Restore sys.stdout if this stream replaced it."""
        if self._replaced_stdout and sys.stdout is self:
            sys.stdout = self._stream
        self._replaced_stdout = False

    def __enter__(self) -> LogStream:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()