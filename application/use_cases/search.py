"""Use case that ranks indexed documents for a query."""
from __future__ import annotations

import time
from datetime import datetime

from application.services.history import HistoryTracker
from application.services.index_store import IndexStore
from application.services.relevance import matched_terms, score_document
from application.services.snippets import build_snippet
from application.services.suggestions import autocomplete, did_you_mean
from application.services.tokenizer import tokenize
from domain.entities import QueryResult, SearchOptions, SearchResponse

MIN_QUERY_LENGTH = 2


def search(
    query: str,
    *,
    index_store: IndexStore,
    history: HistoryTracker | None = None,
    options: SearchOptions | None = None,
    now: datetime | None = None,
) -> SearchResponse:
    """Search the index; too-short queries return no results, only suggestions."""

    opts = options or SearchOptions()
    if len(query) < MIN_QUERY_LENGTH:
        return SearchResponse(
            query=query,
            suggestions=autocomplete(query, index_store=index_store, history=history),
        )

    started = time.perf_counter()
    query_tokens = tokenize(query)

    matches: list[QueryResult] = []
    for document in index_store.all():
        if opts.category and document.category != opts.category:
            continue
        if opts.kind and document.kind != opts.kind:
            continue
        if document.requires_auth and not opts.is_authenticated:
            continue
        score = score_document(query_tokens, query, document, now=now)
        if score <= 0:
            continue
        matches.append(
            QueryResult(
                document=document,
                score=score,
                matched_terms=matched_terms(query_tokens, document),
            )
        )

    # sorted() is stable, so ties keep index order
    ranked = sorted(matches, key=lambda result: result.weighted_score, reverse=True)
    results = ranked[: max(opts.limit, 0)]
    if opts.include_snippet:
        for result in results:
            result.snippet = build_snippet(result.document.body, query)

    if history is not None:
        history.record(query, len(matches))

    return SearchResponse(
        query=query,
        results=results,
        total_matched=len(matches),
        elapsed_seconds=time.perf_counter() - started,
        suggestions=did_you_mean(query) if opts.fuzzy and not matches else [],
        available_categories=list(dict.fromkeys(m.document.category for m in matches if m.document.category)),
        available_kinds=list(dict.fromkeys(m.document.kind for m in matches if m.document.kind)),
    )


__all__ = ["search", "MIN_QUERY_LENGTH"]
