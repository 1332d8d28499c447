"""Search history with frequency/recency tracking and a bounded size."""
from __future__ import annotations

import logging
import sqlite3
import threading
import time
from typing import Callable

from domain.entities import HistoryEntry
from domain.interfaces import HistoryStorage

logger = logging.getLogger(__name__)

DEFAULT_MAX_ENTRIES = 50
DEFAULT_MAX_SUGGESTIONS = 8

_STORAGE_ERRORS = (OSError, ValueError, KeyError, TypeError, sqlite3.Error)


class HistoryTracker:
    """Records completed searches; entries are kept newest first.

    Storage failures never reach the caller: a broken store means the
    history simply is not persisted. The tracker may be shared between
    request threads.
    """

    def __init__(
        self,
        storage: HistoryStorage | None = None,
        *,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._storage = storage
        self._max_entries = max_entries
        self._max_suggestions = max_suggestions
        self._clock = clock
        self._lock = threading.RLock()
        self._entries: list[HistoryEntry] = self._load()

    def record(self, query: str, result_count: int) -> HistoryEntry:
        key = query.lower()
        with self._lock:
            now = self._clock()
            entry = next((item for item in self._entries if item.query.lower() == key), None)
            if entry is not None:
                entry.frequency += 1
                entry.last_seen = now
                entry.last_result_count = result_count
            else:
                entry = HistoryEntry(
                    query=query,
                    frequency=1,
                    first_seen=now,
                    last_seen=now,
                    last_result_count=result_count,
                )
                self._entries.insert(0, entry)
                while len(self._entries) > self._max_entries:
                    # ties on first_seen drop the earliest inserted entry
                    oldest = min(reversed(self._entries), key=lambda item: item.first_seen)
                    self._entries.remove(oldest)
            self._save()
            return entry

    def suggestions(self, partial: str) -> list[str]:
        """Past queries containing ``partial``, most frequent first."""
        needle = partial.lower()
        if not needle:
            return []
        with self._lock:
            matches = [entry for entry in self._entries if needle in entry.query.lower()]
        matches.sort(key=lambda entry: entry.frequency, reverse=True)
        return [entry.query for entry in matches[: self._max_suggestions]]

    def most_frequent(self, count: int = 10) -> list[tuple[str, int]]:
        with self._lock:
            ranked = sorted(self._entries, key=lambda entry: entry.frequency, reverse=True)
        return [(entry.query, entry.frequency) for entry in ranked[:count]]

    def entries(self) -> list[HistoryEntry]:
        with self._lock:
            return list(self._entries)

    def get(self, query: str) -> HistoryEntry | None:
        key = query.lower()
        with self._lock:
            return next((entry for entry in self._entries if entry.query.lower() == key), None)

    def clear(self) -> None:
        with self._lock:
            self._entries = []
            if self._storage is None:
                return
            try:
                self._storage.clear()
            except _STORAGE_ERRORS:
                logger.warning("Could not clear persisted search history.", exc_info=True)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _load(self) -> list[HistoryEntry]:
        if self._storage is None:
            return []
        try:
            entries = list(self._storage.load())
        except _STORAGE_ERRORS:
            logger.warning("Could not load search history, starting empty.", exc_info=True)
            return []
        return entries[: self._max_entries]

    def _save(self) -> None:
        if self._storage is None:
            return
        with self._lock:
            try:
                self._storage.save(self._entries)
            except _STORAGE_ERRORS:
                logger.warning("Could not persist search history.", exc_info=True)


__all__ = ["HistoryTracker", "DEFAULT_MAX_ENTRIES", "DEFAULT_MAX_SUGGESTIONS"]
