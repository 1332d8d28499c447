"""Heuristic relevance scoring for curated site content.

The model is additive and favours exact title/phrase matches over term
statistics; it is tuned for catalogs of tens to a few hundred documents.
"""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Sequence

from application.services.tokenizer import fold
from domain.entities import Document

TITLE_PHRASE_BONUS = 100.0
EXACT_TOKEN_BONUS = 10.0
PARTIAL_TOKEN_BONUS = 5.0
TITLE_TOKEN_BONUS = 15.0
TEXT_TOKEN_BONUS = 3.0
COVERAGE_BONUS = 5.0
STALE_AFTER = timedelta(days=30)
STALE_FACTOR = 0.9


def matched_terms(query_tokens: Sequence[str], document: Document) -> list[str]:
    """Distinct query tokens contained in at least one document token, in query order."""
    matched: list[str] = []
    for token in query_tokens:
        if token in matched:
            continue
        if any(token in doc_token for doc_token in document.tokens):
            matched.append(token)
    return matched


def score_document(
    query_tokens: Sequence[str],
    query: str,
    document: Document,
    *,
    now: datetime | None = None,
) -> float:
    """Return the relevance of ``document`` for the query; 0 means no match."""
    title = fold(document.title)
    text = document.searchable_text or fold(f"{document.title} {document.body}")
    doc_tokens = document.tokens
    score = 0.0

    phrase = fold(query)
    if phrase and phrase in title:
        score += TITLE_PHRASE_BONUS

    for token in query_tokens:
        if token in doc_tokens:
            score += EXACT_TOKEN_BONUS
        # stacks once per partially matching document token
        for doc_token in doc_tokens:
            if token in doc_token and token != doc_token:
                score += PARTIAL_TOKEN_BONUS
        if token in title:
            score += TITLE_TOKEN_BONUS
        if token in text:
            score += TEXT_TOKEN_BONUS

    coverage = len(matched_terms(query_tokens, document))
    if coverage > 1:
        score += COVERAGE_BONUS * coverage

    if document.last_updated is not None and is_stale(document.last_updated, now=now):
        score *= STALE_FACTOR

    return max(score, 0.0)


def is_stale(last_updated: datetime, *, now: datetime | None = None) -> bool:
    current = now or datetime.now(timezone.utc)
    if current.tzinfo is None:
        current = current.replace(tzinfo=timezone.utc)
    if last_updated.tzinfo is None:
        last_updated = last_updated.replace(tzinfo=timezone.utc)
    return current - last_updated > STALE_AFTER


__all__ = ["matched_terms", "score_document", "is_stale"]
