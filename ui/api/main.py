"""FastAPI layer that exposes search, suggestions and index maintenance."""
from __future__ import annotations

from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncIterator

from fastapi import FastAPI, HTTPException, Query as FastAPIQuery, Response
from pydantic import BaseModel

from domain.entities import Document, QueryResult, SearchOptions
from domain.errors import InvalidDocument
from infrastructure.config import Container, build_default_container
from ui.logging_utils import setup_logging


class DocumentPayload(BaseModel):
    id: str
    title: str
    body: str = ""
    url: str = ""
    kind: str = "page"
    category: str = ""
    weight: int = 1
    requires_auth: bool = False
    last_updated: datetime | None = None


class SnippetPayload(BaseModel):
    text: str
    highlights: list[tuple[int, int]]


class ResultPayload(BaseModel):
    id: str
    title: str
    url: str
    kind: str
    category: str
    score: float
    weighted_score: float
    matched_terms: list[str]
    snippet: SnippetPayload | None = None


class SearchResponsePayload(BaseModel):
    query: str
    results: list[ResultPayload]
    total_matched: int
    elapsed_ms: float
    suggestions: list[str]
    available_categories: list[str]
    available_kinds: list[str]


class SuggestionsResponse(BaseModel):
    query: str
    suggestions: list[str]


class StatsResponse(BaseModel):
    index_size: int
    history_size: int
    available_categories: list[str]
    available_kinds: list[str]
    most_searched: list[tuple[str, int]]


class ReindexResponse(BaseModel):
    indexed: int
    skipped: int
    failed_collectors: list[str]
    superseded: bool


def _serialize_result(result: QueryResult) -> ResultPayload:
    doc = result.document
    snippet = None
    if result.snippet is not None:
        snippet = SnippetPayload(text=result.snippet.text, highlights=result.snippet.highlights)
    return ResultPayload(
        id=doc.id,
        title=doc.title,
        url=doc.url,
        kind=doc.kind,
        category=doc.category,
        score=result.score,
        weighted_score=result.weighted_score,
        matched_terms=result.matched_terms,
        snippet=snippet,
    )


def create_app(container: Container | None = None, *, build_on_startup: bool = True) -> FastAPI:
    """Create the API; the default container is built lazily at startup."""

    state: dict[str, Container] = {}
    if container is not None:
        state["container"] = container

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        if "container" not in state:
            setup_logging()
            state["container"] = build_default_container()
        current = state["container"]
        if build_on_startup:
            await current.engine.rebuild(current.collectors)
        yield

    app = FastAPI(title="School Site Search API", lifespan=lifespan)

    def _container() -> Container:
        return state["container"]

    @app.get("/search", response_model=SearchResponsePayload)
    def search_endpoint(
        q: str = FastAPIQuery(..., description="User query"),
        category: str | None = None,
        kind: str | None = None,
        limit: int | None = FastAPIQuery(None, ge=0, description="Defaults to the configured result limit"),
        snippets: bool = False,
        authenticated: bool = False,
    ) -> SearchResponsePayload:
        engine = _container().engine
        options = SearchOptions(
            category=category,
            kind=kind,
            limit=engine.default_limit if limit is None else limit,
            include_snippet=snippets,
            is_authenticated=authenticated,
        )
        response = engine.search(q, options)
        return SearchResponsePayload(
            query=response.query,
            results=[_serialize_result(result) for result in response.results],
            total_matched=response.total_matched,
            elapsed_ms=response.elapsed_seconds * 1000,
            suggestions=response.suggestions,
            available_categories=response.available_categories,
            available_kinds=response.available_kinds,
        )

    @app.get("/suggestions", response_model=SuggestionsResponse)
    def suggestions_endpoint(q: str = FastAPIQuery("", description="Partial query")) -> SuggestionsResponse:
        return SuggestionsResponse(query=q, suggestions=_container().engine.suggestions(q))

    @app.get("/stats", response_model=StatsResponse)
    def stats_endpoint() -> StatsResponse:
        stats = _container().engine.stats()
        return StatsResponse(
            index_size=stats.index_size,
            history_size=stats.history_size,
            available_categories=stats.available_categories,
            available_kinds=stats.available_kinds,
            most_searched=stats.most_searched,
        )

    @app.post("/documents", response_model=DocumentPayload)
    def upsert_endpoint(payload: DocumentPayload) -> DocumentPayload:
        try:
            _container().engine.upsert(Document(**payload.model_dump()))
        except InvalidDocument as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return payload

    @app.post("/reindex", response_model=ReindexResponse)
    async def reindex_endpoint() -> ReindexResponse:
        current = _container()
        report = await current.engine.rebuild(current.collectors)
        return ReindexResponse(
            indexed=report.indexed,
            skipped=report.skipped,
            failed_collectors=report.failed_collectors,
            superseded=report.superseded,
        )

    @app.delete("/history", status_code=204, response_class=Response)
    def clear_history_endpoint() -> Response:
        _container().engine.history.clear()
        return Response(status_code=204)

    return app


app = create_app()
