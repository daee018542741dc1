"""Filtering and ordering of parsed log entries for display."""

from __future__ import annotations

import re
from typing import Iterable, Sequence

from .logmodel import Column

_WILDCARD_PART = re.compile(r"\*|\?|\[!?\]?[^\]]*\]|[^*?\[]+|\[")


def _wildcard_to_regex(pattern: str) -> str:
    """Translate a shell-style wildcard into an unanchored regular expression."""
    pieces = []
    for part in _WILDCARD_PART.findall(pattern):
        if part == "*":
            pieces.append(".*")
        elif part == "?":
            pieces.append(".")
        elif part.startswith("[") and part.endswith("]") and len(part) > 2:
            body = part[1:-1]
            if body.startswith("!"):
                body = "^" + body[1:]
            pieces.append("[" + body.replace("\\", "\\\\") + "]")
        else:
            pieces.append(re.escape(part))
    return "".join(pieces)


class LogFilter:
    """Decides which log entries are shown, by type and by a search on the message."""

    def __init__(
        self,
        accepts_errors: bool = True,
        accepts_warnings: bool = True,
        accepts_info: bool = True,
        accepts_debug: bool = True,
        case_sensitive: bool = False,
    ) -> None:
        self.accepts_errors = accepts_errors
        self.accepts_warnings = accepts_warnings
        self.accepts_info = accepts_info
        self.accepts_debug = accepts_debug
        self.case_sensitive = case_sensitive
        self._pattern = ""

    def set_wildcard(self, pattern: str) -> None:
        """Filter messages with a wildcard (``*``, ``?``, ``[...]``) matched anywhere."""
        self._pattern = _wildcard_to_regex(pattern)

    def set_regex(self, pattern: str) -> None:
        """Filter messages with a regular expression; raises re.error if it is invalid."""
        re.compile(pattern)
        self._pattern = pattern

    def _search(self, message: str) -> bool:
        if not self._pattern:
            return True
        flags = 0 if self.case_sensitive else re.IGNORECASE
        return re.search(self._pattern, message, flags) is not None

    def accepts(self, entry: Sequence[str]) -> bool:
        """Return whether an entry passes the type switches and the message search."""
        kind = entry[Column.TYPE]
        rejected = {
            "ERROR": not self.accepts_errors,
            "WARNING": not self.accepts_warnings,
            "INFO": not self.accepts_info,
            "DEBUG": not self.accepts_debug,
        }
        if rejected.get(kind, False):
            return False
        return self._search(entry[Column.MESSAGE])

    def filter(self, entries: Iterable[Sequence[str]]) -> list:
        """Return the accepted entries, in their original order."""
        return [entry for entry in entries if self.accepts(entry)]

    def sort(self, entries: Iterable[Sequence[str]]) -> list:
        """Return the entries ordered by their timestamp text; equal ones keep their order."""
        return sorted(entries, key=lambda entry: entry[Column.TIMESTAMP])