"""Abstract interfaces for the search engine's external collaborators."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping, Sequence

from domain.entities import Document, HistoryEntry


class ContentCollector(ABC):
    """Supplies documents to the index (static lists, HTTP sources, ...)."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return a stable name used in logs and build reports."""

    @abstractmethod
    def fetch_documents(self) -> Sequence[Document | Mapping[str, Any]]:
        """Return documents or document-shaped records.

        May be a coroutine function; the index builder awaits it in that case.
        """


class HistoryStorage(ABC):
    """Key-value persistence for the search history."""

    @abstractmethod
    def load(self) -> list[HistoryEntry]:
        """Return the persisted history, newest first."""

    @abstractmethod
    def save(self, entries: Sequence[HistoryEntry]) -> None:
        """Replace the persisted history."""

    @abstractmethod
    def clear(self) -> None:
        """Remove the persisted history."""


__all__ = ["ContentCollector", "HistoryStorage"]
