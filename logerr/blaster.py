"""Sends log entries as UDP multicast datagrams from a background thread."""

from __future__ import annotations

import queue
import socket
import threading

from .errors import StackTraceException

DEFAULT_GROUP = "239.239.239.239"
DEFAULT_PORT = 52387

_POLL_INTERVAL = 0.01


class LogBlaster:
    """Queues log text and sends each entry as one datagram to ``host:port``."""

    def __init__(self, host: str = DEFAULT_GROUP, port: int = DEFAULT_PORT) -> None:
        self.host = host
        self.port = port
        self._queue: queue.SimpleQueue[str] = queue.SimpleQueue()
        self._stop = threading.Event()
        self._closed = False

        self._socket = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            self._socket.bind(("0.0.0.0", 0))
        except OSError as exc:
            self._socket.close()
            raise StackTraceException(
                f"Pre-condition failed: socket bind ({exc})", __name__, "LogBlaster.__init__", 0
            ) from exc
        self._socket.setsockopt(socket.IPPROTO_IP, socket.IP_MULTICAST_TTL, 1)

        self._thread = threading.Thread(target=self._run, name="LogBlaster", daemon=True)
        self._thread.start()

    def _send(self, text: str) -> None:
        try:
            self._socket.sendto(text.encode("utf-8"), (self.host, self.port))
        except OSError:
            pass

    def _run(self) -> None:
        while not self._stop.is_set():
            try:
                text = self._queue.get(timeout=_POLL_INTERVAL)
            except queue.Empty:
                continue
            self._send(text)
        # send whatever is still waiting once asked to stop
        while True:
            try:
                text = self._queue.get_nowait()
            except queue.Empty:
                break
            self._send(text)

    def blast(self, text: str) -> None:
        """Queue a log entry to be sent."""
        if self._closed:
            raise ValueError("blast on a closed LogBlaster")
        self._queue.put(text)

    def close(self) -> None:
        """Send anything still queued, stop the thread and close the socket."""
        if self._closed:
            return
        self._closed = True
        self._stop.set()
        self._thread.join()
        self._socket.close()

    def __enter__(self) -> LogBlaster:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()