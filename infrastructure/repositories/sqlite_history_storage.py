"""SQLite key-value storage for the search history."""
from __future__ import annotations

import json
import sqlite3
from pathlib import Path
from typing import Sequence

from domain.entities import HistoryEntry
from domain.interfaces import HistoryStorage


class SqliteHistoryStorage(HistoryStorage):
    """Keeps the serialised history under one key of a ``kv_store`` table."""

    def __init__(self, db_path: str | Path = "schoolsearch.db", key: str = "search_history") -> None:
        self._db_path = Path(db_path)
        self._key = key
        self._ensure_schema()

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(self._db_path)

    def _ensure_schema(self) -> None:
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        with self._connect() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS kv_store (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
                """
            )

    def load(self) -> list[HistoryEntry]:
        with self._connect() as conn:
            row = conn.execute("SELECT value FROM kv_store WHERE key = ?", (self._key,)).fetchone()
        if row is None:
            return []
        return [HistoryEntry.from_dict(item) for item in json.loads(row[0])]

    def save(self, entries: Sequence[HistoryEntry]) -> None:
        value = json.dumps([entry.to_dict() for entry in entries], ensure_ascii=False)
        with self._connect() as conn:
            conn.execute("REPLACE INTO kv_store (key, value) VALUES (?, ?)", (self._key, value))

    def clear(self) -> None:
        with self._connect() as conn:
            conn.execute("DELETE FROM kv_store WHERE key = ?", (self._key,))


__all__ = ["SqliteHistoryStorage"]
