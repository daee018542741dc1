"""A moment in time captured when the object is created."""

from __future__ import annotations

import functools
from datetime import datetime


@functools.total_ordering
class Timestamp:
    """Stores the time of its creation, convertible to datetime, epoch seconds or text."""

    def __init__(self, now: datetime | None = None) -> None:
        self._now = now if now is not None else datetime.now()

    def as_datetime(self) -> datetime:
        """Return the stored moment as a datetime."""
        return self._now

    def __int__(self) -> int:
        """Return the stored moment as whole seconds since the epoch."""
        return int(self._now.timestamp())

    def __str__(self) -> str:
        millis = self._now.microsecond // 1000
        return f"{self._now:%Y-%m-%d %H:%M:%S}.{millis:03d}"

    def __repr__(self) -> str:
        return f"Timestamp({self._now!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self._now == other._now

    def __lt__(self, other: Timestamp) -> bool:
        if not isinstance(other, Timestamp):
            return NotImplemented
        return self._now < other._now

    def __hash__(self) -> int:
        return hash(self._now)