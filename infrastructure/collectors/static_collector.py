"""Collector serving a fixed list of documents."""
from __future__ import annotations

from typing import Any, Iterable, Mapping

from domain.entities import Document
from domain.interfaces import ContentCollector
from infrastructure.collectors.site_catalog import SITE_FEATURES, SITE_PAGES


class StaticCollector(ContentCollector):
    """Return the same documents on every fetch."""

    def __init__(self, name: str, records: Iterable[Document | Mapping[str, Any]]) -> None:
        self._name = name
        self._records = list(records)

    @property
    def name(self) -> str:
        return self._name

    def fetch_documents(self) -> list[Document | Mapping[str, Any]]:
        return list(self._records)


def site_collectors() -> list[StaticCollector]:
    """Collectors for the built-in site pages and feature descriptors."""
    return [
        StaticCollector("site-pages", SITE_PAGES),
        StaticCollector("site-features", SITE_FEATURES),
    ]


__all__ = ["StaticCollector", "site_collectors"]
