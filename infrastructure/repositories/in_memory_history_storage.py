"""History storage kept in process memory."""
from __future__ import annotations

from typing import Sequence

from domain.entities import HistoryEntry
from domain.interfaces import HistoryStorage


class InMemoryHistoryStorage(HistoryStorage):
    """Keeps serialised entries in a dict, like a browser's local storage."""

    def __init__(self, key: str = "search_history") -> None:
        self._key = key
        self._data: dict[str, list[dict]] = {}

    def load(self) -> list[HistoryEntry]:
        return [HistoryEntry.from_dict(item) for item in self._data.get(self._key, [])]

    def save(self, entries: Sequence[HistoryEntry]) -> None:
        self._data[self._key] = [entry.to_dict() for entry in entries]

    def clear(self) -> None:
        self._data.pop(self._key, None)


__all__ = ["InMemoryHistoryStorage"]
