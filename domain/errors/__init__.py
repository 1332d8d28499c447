"""Error types raised by the search engine."""
from __future__ import annotations


class SearchError(Exception):
    """Base class for search engine errors."""


class InvalidDocument(SearchError, ValueError):
    """A document cannot be indexed (missing id or required fields)."""


class CollectorFailure(SearchError):
    """A content collector could not supply its documents."""

    def __init__(self, collector: str, reason: str) -> None:
        super().__init__(f"Collector '{collector}' failed: {reason}")
        self.collector = collector
        self.reason = reason


__all__ = ["SearchError", "InvalidDocument", "CollectorFailure"]
