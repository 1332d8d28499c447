"""Search engine instance owned by the host application."""
from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from typing import Sequence

from application.services.history import HistoryTracker
from application.services.index_store import IndexStore
from application.services.suggestions import autocomplete
from application.use_cases.build_index import build_index
from application.use_cases.search import search
from domain.entities import BuildReport, Document, IndexStats, SearchOptions, SearchResponse
from domain.interfaces import ContentCollector

logger = logging.getLogger(__name__)


class SearchEngine:
    """Bundles the current index snapshot with the search history.

    Rebuilds fill a new store that is swapped in when complete, so a query
    always sees a whole index. A newer rebuild cancels the one in flight.
    """

    def __init__(
        self,
        *,
        history: HistoryTracker | None = None,
        index_store: IndexStore | None = None,
        default_limit: int = 50,
        collector_timeout: float | None = None,
    ) -> None:
        self._store = index_store if index_store is not None else IndexStore()
        self._history = history if history is not None else HistoryTracker()
        self._default_limit = default_limit
        self._collector_timeout = collector_timeout
        self._collectors: list[ContentCollector] = []
        self._rebuild_task: asyncio.Task | None = None

    @property
    def index_store(self) -> IndexStore:
        return self._store

    @property
    def history(self) -> HistoryTracker:
        return self._history

    @property
    def default_limit(self) -> int:
        """Result limit applied when a caller does not ask for one."""
        return self._default_limit

    @property
    def is_indexing(self) -> bool:
        return self._rebuild_task is not None and not self._rebuild_task.done()

    async def rebuild(self, collectors: Sequence[ContentCollector]) -> BuildReport:
        """Build a new index from ``collectors`` and make it current."""
        previous = self._rebuild_task
        if previous is not None and not previous.done():
            logger.info("Cancelling in-flight index rebuild in favour of a newer one")
            previous.cancel()

        self._collectors = list(collectors)
        task = asyncio.ensure_future(build_index(self._collectors, timeout=self._collector_timeout))
        self._rebuild_task = task
        try:
            store, report = await task
        except asyncio.CancelledError:
            if task.cancelled() and self._rebuild_task is not task:
                logger.info("Index rebuild superseded before completion")
                return BuildReport(superseded=True)
            raise
        if self._rebuild_task is not task:
            return BuildReport(indexed=report.indexed, skipped=report.skipped, superseded=True)
        self._store = store
        return report

    async def reindex(self) -> BuildReport:
        """Rebuild from the collectors of the last rebuild."""
        return await self.rebuild(self._collectors)

    def upsert(self, document: Document) -> None:
        self._store.upsert(document)

    def remove(self, document_id: str) -> None:
        self._store.remove(document_id)

    def search(
        self,
        query: str,
        options: SearchOptions | None = None,
        *,
        now: datetime | None = None,
    ) -> SearchResponse:
        opts = options or SearchOptions(limit=self._default_limit)
        return search(query, index_store=self._store, history=self._history, options=opts, now=now)

    def suggestions(self, partial: str) -> list[str]:
        return autocomplete(partial, index_store=self._store, history=self._history)

    def record_query(self, query: str, result_count: int) -> None:
        self._history.record(query, result_count)

    def stats(self) -> IndexStats:
        filters = self._store.available_filters()
        return IndexStats(
            index_size=len(self._store),
            history_size=len(self._history),
            available_categories=filters["categories"],
            available_kinds=filters["kinds"],
            most_searched=self._history.most_frequent(10),
        )


__all__ = ["SearchEngine"]
