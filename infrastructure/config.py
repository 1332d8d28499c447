"""Dependency wiring for the school site search."""
from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Callable, Literal

from application.services.history import HistoryTracker
from application.services.search_engine import SearchEngine
from domain.interfaces import ContentCollector, HistoryStorage
from infrastructure.collectors.http_category_collector import (
    HttpCategoryCollector,
    HttpCategoryCollectorConfig,
)
from infrastructure.collectors.static_collector import site_collectors
from infrastructure.repositories.in_memory_history_storage import InMemoryHistoryStorage
from infrastructure.repositories.json_history_storage import JsonHistoryStorage
from infrastructure.repositories.sqlite_history_storage import SqliteHistoryStorage


HistoryBackendName = Literal["memory", "json", "sqlite"]

ENV_PREFIX = "SCHOOLSEARCH_"


@dataclass(slots=True)
class Container:
    """Simple container bundling the engine and its content collectors."""

    engine: SearchEngine
    collectors: list[ContentCollector] = field(default_factory=list)


@dataclass(slots=True)
class ContainerConfig:
    """Configuration for the search engine and its collaborators."""

    data_root: str = "data"
    history_backend: HistoryBackendName = "json"
    history_limit: int = 50
    suggestion_limit: int = 8
    result_limit: int = 50
    api_base_url: str | None = None
    categories_endpoint: str = "/information/categories"
    collector_timeout: float = 10.0
    dynamic_cache_ttl: float = 3600.0
    include_site_catalog: bool = True

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "ContainerConfig":
        """Read overrides from ``SCHOOLSEARCH_<FIELD>`` environment variables."""
        env = os.environ if environ is None else environ
        cfg = cls()
        for item in fields(cls):
            raw = env.get(f"{ENV_PREFIX}{item.name.upper()}")
            if raw is None:
                continue
            current = getattr(cfg, item.name)
            setattr(cfg, item.name, _coerce(raw, current))
        return cfg


def _coerce(raw: str, current: object) -> object:
    if isinstance(current, bool):
        return raw.strip().lower() in {"1", "true", "yes", "on"}
    if isinstance(current, int):
        return int(raw)
    if isinstance(current, float):
        return float(raw)
    if current is None:
        return raw or None
    return raw


def _memory_storage(cfg: ContainerConfig) -> HistoryStorage:
    return InMemoryHistoryStorage()


def _json_storage(cfg: ContainerConfig) -> HistoryStorage:
    return JsonHistoryStorage(Path(cfg.data_root) / "search_history.json")


def _sqlite_storage(cfg: ContainerConfig) -> HistoryStorage:
    return SqliteHistoryStorage(Path(cfg.data_root) / "schoolsearch.db")


_HISTORY_FACTORIES: dict[HistoryBackendName, Callable[[ContainerConfig], HistoryStorage]] = {
    "memory": _memory_storage,
    "json": _json_storage,
    "sqlite": _sqlite_storage,
}


def build_collectors(cfg: ContainerConfig) -> list[ContentCollector]:
    collectors: list[ContentCollector] = []
    if cfg.include_site_catalog:
        collectors.extend(site_collectors())
    if cfg.api_base_url:
        collectors.append(
            HttpCategoryCollector(
                HttpCategoryCollectorConfig(
                    base_url=cfg.api_base_url,
                    endpoint=cfg.categories_endpoint,
                    timeout=cfg.collector_timeout,
                    cache_ttl=cfg.dynamic_cache_ttl,
                )
            )
        )
    return collectors


def build_default_container(config: ContainerConfig | None = None) -> Container:
    """Instantiate the engine with the configured history storage and collectors."""

    cfg = config or ContainerConfig.from_env()
    try:
        storage = _HISTORY_FACTORIES[cfg.history_backend](cfg)
    except KeyError as exc:
        raise ValueError(f"Unknown history backend '{cfg.history_backend}'") from exc

    history = HistoryTracker(
        storage,
        max_entries=cfg.history_limit,
        max_suggestions=cfg.suggestion_limit,
    )
    engine = SearchEngine(
        history=history,
        default_limit=cfg.result_limit,
        collector_timeout=cfg.collector_timeout,
    )
    return Container(engine=engine, collectors=build_collectors(cfg))


__all__ = ["Container", "ContainerConfig", "build_collectors", "build_default_container"]
