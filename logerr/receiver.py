"""Receives log entries sent as UDP multicast datagrams."""

from __future__ import annotations

import socket
from typing import Callable

from .blaster import DEFAULT_GROUP, DEFAULT_PORT
from .errors import StackTraceException

_MAX_DATAGRAM = 65535


class LogReceiver:
    """Listens on a UDP port, joined to a multicast group, and passes each datagram to a callback."""

    def __init__(
        self,
        callback: Callable[[str], None],
        group: str = DEFAULT_GROUP,
        port: int = DEFAULT_PORT,
    ) -> None:
        self._callback = callback
        self.group = group
        self._socket = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        self._socket.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            self._socket.bind(("0.0.0.0", port))
        except (OSError, OverflowError) as exc:
            self._socket.close()
            raise StackTraceException(
                f"Log Receiver failed to connect to port {port}: {exc}",
                __name__,
                "LogReceiver.__init__",
                0,
            ) from exc
        self.port = self._socket.getsockname()[1]
        membership = socket.inet_aton(group) + socket.inet_aton("0.0.0.0")
        try:
            self._socket.setsockopt(socket.IPPROTO_IP, socket.IP_ADD_MEMBERSHIP, membership)
        except OSError:
            # Unicast datagrams still arrive if the group cannot be joined.
            pass
        self._socket.setblocking(False)

    def fileno(self) -> int:
        return self._socket.fileno()

    def process_pending_datagrams(self) -> int:
        """Hand every datagram waiting on the socket to the callback; return how many."""
        count = 0
        while True:
            try:
                data, _ = self._socket.recvfrom(_MAX_DATAGRAM)
            except (BlockingIOError, InterruptedError):
                return count
            self._callback(data.decode("utf-8", errors="replace"))
            count += 1

    def close(self) -> None:
        self._socket.close()

    def __enter__(self) -> LogReceiver:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()