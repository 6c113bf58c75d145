from __future__ import annotations

from collections import deque

from ezsymlink.domain.links import HistoryEntry

DEFAULT_HISTORY_SIZE = 5


class HistoryLog:
    """Most recent successful links, oldest first."""

    def __init__(self, capacity: int = DEFAULT_HISTORY_SIZE) -> None:
        if capacity < 1:
            raise ValueError("History capacity must be at least 1.")
        self._entries: deque[HistoryEntry] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._entries.maxlen or DEFAULT_HISTORY_SIZE

    def record(self, source: str, destination: str) -> HistoryEntry:
        entry = HistoryEntry(source, destination)
        self._entries.append(entry)
        return entry

    def items(self) -> tuple[HistoryEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
