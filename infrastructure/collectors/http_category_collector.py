"""Collector that turns the information API's categories into documents."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable

import requests

from domain.entities import Document, parse_timestamp
from domain.errors import CollectorFailure
from domain.interfaces import ContentCollector

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class HttpCategoryCollectorConfig:
    base_url: str
    endpoint: str = "/information/categories"
    timeout: float = 10.0
    cache_ttl: float = 3600.0
    category: str = "información"
    weight: int = 5


class HttpCategoryCollector(ContentCollector):
    """Fetch ``{"success": true, "categories": [...]}`` and map each category to a document.

    Mapped documents are cached for ``cache_ttl`` seconds.
    """

    def __init__(
        self,
        config: HttpCategoryCollectorConfig,
        *,
        session: requests.Session | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._config = config
        self._session = session or requests.Session()
        self._clock = clock
        self._cached: list[Document] | None = None
        self._cached_at = 0.0

    @property
    def name(self) -> str:
        return "dynamic-categories"

    def fetch_documents(self) -> list[Document]:
        if self._cached is not None and self._clock() - self._cached_at < self._config.cache_ttl:
            logger.debug("Serving %d dynamic documents from cache", len(self._cached))
            return list(self._cached)

        payload = self._request()
        if not isinstance(payload, dict) or not payload.get("success"):
            raise CollectorFailure(self.name, "API reported an unsuccessful response")
        documents = [self._to_document(item) for item in payload.get("categories", []) if item.get("categoria")]
        self._cached = documents
        self._cached_at = self._clock()
        return list(documents)

    def invalidate(self) -> None:
        self._cached = None

    def _request(self) -> Any:
        url = f"{self._config.base_url.rstrip('/')}{self._config.endpoint}"
        try:
            response = self._session.get(url, timeout=self._config.timeout)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as exc:
            raise CollectorFailure(self.name, str(exc)) from exc
        except ValueError as exc:
            raise CollectorFailure(self.name, f"invalid JSON from {url}") from exc

    def _to_document(self, item: dict[str, Any]) -> Document:
        name = str(item["categoria"])
        return Document(
            id=f"dynamic_{name}",
            title=name,
            body=f"{name} información dinámica actualizada",
            url=f"#search={name}",
            kind="dynamic",
            category=self._config.category,
            weight=self._config.weight,
            last_updated=parse_timestamp(item.get("last_updated")),
        )


__all__ = ["HttpCategoryCollector", "HttpCategoryCollectorConfig"]
