"""Use case that builds a fresh index from content collectors."""
from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any, Iterable, Mapping, Sequence

from application.services.index_store import IndexStore
from domain.entities import BuildReport, Document
from domain.errors import CollectorFailure, InvalidDocument
from domain.interfaces import ContentCollector

logger = logging.getLogger(__name__)


async def build_index(
    collectors: Iterable[ContentCollector],
    *,
    timeout: float | None = None,
) -> tuple[IndexStore, BuildReport]:
    """Fetch every collector concurrently and index the results into a new store.

    A failing collector contributes no documents; the build carries on.
    Documents are inserted in collector order, so the result is deterministic.
    """

    collectors = list(collectors)
    logger.info("Building search index from %d collectors", len(collectors))
    outcomes = await asyncio.gather(
        *(_fetch(collector, timeout) for collector in collectors),
        return_exceptions=True,
    )

    store = IndexStore()
    report = BuildReport()
    for collector, outcome in zip(collectors, outcomes):
        if isinstance(outcome, BaseException):
            if not isinstance(outcome, Exception):
                raise outcome
            logger.warning("%s", outcome)
            report.failed_collectors.append(collector.name)
            continue
        for record in outcome:
            try:
                store.upsert(_as_document(record))
            except (InvalidDocument, TypeError, ValueError) as exc:
                logger.warning("Skipping document from collector '%s': %s", collector.name, exc)
                report.skipped += 1
                continue
            report.indexed += 1

    logger.info(
        "Search index ready: %d documents (%d skipped, %d collectors failed)",
        len(store),
        report.skipped,
        len(report.failed_collectors),
    )
    return store, report


async def _fetch(collector: ContentCollector, timeout: float | None) -> Sequence[Any]:
    try:
        if inspect.iscoroutinefunction(collector.fetch_documents):
            call = collector.fetch_documents()
        else:
            call = asyncio.to_thread(collector.fetch_documents)
        return list(await asyncio.wait_for(call, timeout=timeout))
    except CollectorFailure:
        raise
    except asyncio.TimeoutError as exc:
        raise CollectorFailure(collector.name, f"timed out after {timeout}s") from exc
    except Exception as exc:
        raise CollectorFailure(collector.name, str(exc) or type(exc).__name__) from exc


def _as_document(record: Document | Mapping[str, Any]) -> Document:
    if isinstance(record, Document):
        return record
    if isinstance(record, Mapping):
        return Document.from_mapping(record)
    raise TypeError(f"Unsupported document record: {type(record).__name__}")


__all__ = ["build_index"]
