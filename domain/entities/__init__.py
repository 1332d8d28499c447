"""Domain entities for the school site search engine."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Mapping

from domain.errors import InvalidDocument


@dataclass(slots=True)
class Document:
    """A searchable unit: a site page, a feature or a dynamic category."""

    id: str
    title: str
    body: str = ""
    url: str = ""
    kind: str = "page"
    category: str = ""
    weight: int = 1
    requires_auth: bool = False
    last_updated: datetime | None = None
    tokens: tuple[str, ...] = ()
    searchable_text: str = ""

    @classmethod
    def from_mapping(cls, record: Mapping[str, Any]) -> "Document":
        """Build a document from a catalog/API record.

        Accepts the field names used by the site catalog (``content``,
        ``type``, ``requireAuth``, ``lastUpdated``, ``keywords``) next to the
        native ones.
        """
        doc_id = record.get("id")
        title = record.get("title")
        if not doc_id or title is None:
            raise InvalidDocument(f"Record is missing 'id' or 'title': {dict(record)!r}")
        body = str(record.get("body", record.get("content", "")) or "")
        keywords = record.get("keywords")
        if keywords:
            body = f"{body} {keywords}".strip()
        return cls(
            id=str(doc_id),
            title=str(title),
            body=body,
            url=str(record.get("url", "") or ""),
            kind=str(record.get("kind", record.get("type", "page")) or "page"),
            category=str(record.get("category", "") or ""),
            weight=int(record.get("weight", 1)),
            requires_auth=bool(record.get("requires_auth", record.get("requireAuth", False))),
            last_updated=parse_timestamp(record.get("last_updated", record.get("lastUpdated"))),
        )


@dataclass(slots=True)
class Snippet:
    """Excerpt of a document body plus ``(start, end)`` offsets of matches in ``text``."""

    text: str
    highlights: list[tuple[int, int]] = field(default_factory=list)


@dataclass(slots=True)
class QueryResult:
    """One ranked hit for a query."""

    document: Document
    score: float
    matched_terms: list[str] = field(default_factory=list)
    snippet: Snippet | None = None

    @property
    def weighted_score(self) -> float:
        return self.score * self.document.weight


@dataclass(slots=True)
class SearchOptions:
    """Recognised search options."""

    category: str | None = None
    kind: str | None = None
    limit: int = 50
    include_snippet: bool = False
    is_authenticated: bool = False
    fuzzy: bool = True


@dataclass(slots=True)
class SearchResponse:
    query: str
    results: list[QueryResult] = field(default_factory=list)
    total_matched: int = 0
    elapsed_seconds: float = 0.0
    suggestions: list[str] = field(default_factory=list)
    available_categories: list[str] = field(default_factory=list)
    available_kinds: list[str] = field(default_factory=list)


@dataclass(slots=True)
class HistoryEntry:
    """A past query with its frequency and recency (epoch seconds)."""

    query: str
    frequency: int
    first_seen: float
    last_seen: float
    last_result_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "query": self.query,
            "frequency": self.frequency,
            "firstSeen": self.first_seen,
            "lastSeen": self.last_seen,
            "lastResultCount": self.last_result_count,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "HistoryEntry":
        return cls(
            query=str(payload["query"]),
            frequency=int(payload.get("frequency", 1)),
            first_seen=float(payload.get("firstSeen", 0.0)),
            last_seen=float(payload.get("lastSeen", payload.get("firstSeen", 0.0))),
            last_result_count=int(payload.get("lastResultCount", 0)),
        )


@dataclass(slots=True)
class IndexStats:
    """Read-only diagnostics for the engine."""

    index_size: int
    history_size: int
    available_categories: list[str] = field(default_factory=list)
    available_kinds: list[str] = field(default_factory=list)
    most_searched: list[tuple[str, int]] = field(default_factory=list)


@dataclass(slots=True)
class BuildReport:
    """Outcome of an index (re)build."""

    indexed: int = 0
    skipped: int = 0
    failed_collectors: list[str] = field(default_factory=list)
    superseded: bool = False


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO-8601 string (or pass through a datetime) as an aware UTC datetime."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        text = str(value).strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


__all__ = [
    "Document",
    "Snippet",
    "QueryResult",
    "SearchOptions",
    "SearchResponse",
    "HistoryEntry",
    "IndexStats",
    "BuildReport",
    "parse_timestamp",
]
