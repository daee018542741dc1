"""A table of parsed log entries with a bounded scrollback buffer."""

from __future__ import annotations

import enum
import queue
import re

from .timestamp import Timestamp

_ENTRY_PATTERN = re.compile(
    r"\s*?\[(.*?)\]\s*?\[(.*?)\]\s*?\[(.*?)\]\s*?(.*?)\n(.*)",
    re.MULTILINE | re.DOTALL,
)

_UNSET_NAME = "unset_name"
_DEFAULT_TYPE = "INFO"


class Column(enum.IntEnum):
    """Columns of a log entry; fields beyond MESSAGE are detail lines."""

    TIMESTAMP = 0
    MODULE = 1
    TYPE = 2
    MESSAGE = 3


_COLUMN_COUNT = len(Column)


def parse_entry(text: str) -> list[str] | None:
    """Split one log entry into timestamp, module, type, message and detail lines.

    Returns None for text that is only whitespace. Text that does not follow the
    ``[time] [module] [TYPE] message`` layout is stamped now and given the
    module ``unset_name`` and type ``INFO``.
    """
    if not text.strip():
        return None

    match = _ENTRY_PATTERN.search(text)
    if match is None:
        first, *rest = text.split("\n")
        return [str(Timestamp()), _UNSET_NAME, _DEFAULT_TYPE, first.strip(), *rest]

    timestamp, module, kind, message, details = match.groups()
    fields = [timestamp, module, kind, message.strip()]
    if details:
        fields.extend(detail.strip() for detail in details.split("\n"))
    return fields


class LogModel:
    """Holds parsed log entries; queued text is parsed and added by :meth:`append_rows`.

    :meth:`queue_log_entry` may be called from any thread.
    """

    def __init__(self, scrollback_buffer_size: int = 10000) -> None:
        self._scrollback_buffer_size = scrollback_buffer_size
        self._entries: list[list[str]] = []
        self._inbox: queue.SimpleQueue[str] = queue.SimpleQueue()
        self._num_removed = 0

    def queue_log_entry(self, text: str) -> None:
        """Queue raw log text to be parsed and added later."""
        self._inbox.put(text)

    def append_row(self, value: str) -> None:
        """Parse one entry and add it at once; whitespace-only text is ignored."""
        fields = parse_entry(value)
        if fields is not None:
            self._entries.append(fields)

    def _drain_inbox(self) -> list[list[str]]:
        rows = []
        while True:
            try:
                text = self._inbox.get_nowait()
            except queue.Empty:
                return rows
            fields = parse_entry(text)
            if fields is not None:
                rows.append(fields)

    def append_rows(self) -> int:
        """Parse every queued entry and add it, keeping the scrollback bound.

        Once the total would exceed twice the scrollback size, the oldest
        entries are dropped until exactly the scrollback size remains.
        Returns the number of rows added.
        """
        rows = self._drain_inbox()
        if not rows:
            return 0

        total = len(self._entries) + len(rows)
        if total > 2 * self._scrollback_buffer_size:
            to_remove = total - self._scrollback_buffer_size
            self._num_removed += to_remove
            from_existing = min(to_remove, len(self._entries))
            del self._entries[:from_existing]
            to_remove -= from_existing
            if to_remove:
                del rows[: min(to_remove, len(rows))]

        self._entries.extend(rows)
        return len(rows)

    def row_count(self) -> int:
        """Return the number of top-level entries."""
        return len(self._entries)

    def child_count(self, row: int) -> int:
        """Return the number of detail lines under an entry."""
        if not self.has_children(row):
            return 0
        return len(self._entries[row]) - _COLUMN_COUNT

    def has_children(self, row: int | None = None) -> bool:
        """With no row, report whether the model holds entries; else whether the row has details."""
        if row is None:
            return bool(self._entries)
        return len(self._entries[row]) > _COLUMN_COUNT

    def data(self, row: int, column: int, child: int | None = None) -> str:
        """Return a cell of an entry, or of one of its detail lines when ``child`` is given.

        Detail lines only fill the MESSAGE column; their other cells are empty.
        """
        entry = self._entries[row]
        if child is None:
            return entry[column]
        if column < Column.MESSAGE:
            return ""
        return entry[child + _COLUMN_COUNT]

    def header_data(self, section: int) -> str | None:
        """Return the header title of a column, or None if there is no such column."""
        try:
            return Column(section).name.title()
        except ValueError:
            return None

    def entries(self) -> list[list[str]]:
        """Return a copy of all entries."""
        return [list(entry) for entry in self._entries]

    def scrollback_buffer_size(self) -> int:
        return self._scrollback_buffer_size

    def set_scrollback_buffer_size(self, size: int) -> None:
        """Set the scrollback size, dropping the oldest entries beyond it."""
        if size < len(self._entries):
            del self._entries[: len(self._entries) - size]
        self._scrollback_buffer_size = size