"""History storage backed by a JSON file."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence

from domain.entities import HistoryEntry
from domain.interfaces import HistoryStorage


class JsonHistoryStorage(HistoryStorage):
    """Stores the history list as JSON; a missing file means empty history."""

    def __init__(self, path: str | Path = "search_history.json") -> None:
        self._path = Path(path)

    def load(self) -> list[HistoryEntry]:
        if not self._path.exists():
            return []
        payload = json.loads(self._path.read_text(encoding="utf-8"))
        if not isinstance(payload, list):
            raise ValueError(f"Unexpected history format in {self._path}")
        return [HistoryEntry.from_dict(item) for item in payload]

    def save(self, entries: Sequence[HistoryEntry]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp_path.write_text(
            json.dumps([entry.to_dict() for entry in entries], ensure_ascii=False),
            encoding="utf-8",
        )
        tmp_path.replace(self._path)

    def clear(self) -> None:
        self._path.unlink(missing_ok=True)


__all__ = ["JsonHistoryStorage"]
