"""In-memory document index keyed by document id."""
from __future__ import annotations

import dataclasses
from collections import Counter
from typing import Iterator

from application.services.tokenizer import fold, tokenize
from domain.entities import Document
from domain.errors import InvalidDocument


class IndexStore:
    """Maps document ids to indexed documents.

    Iteration follows first-insertion order; replacing a document keeps its
    original position, so equal scores always resolve the same way.
    """

    def __init__(self) -> None:
        self._documents: dict[str, Document] = {}
        self._categories: Counter[str] = Counter()
        self._kinds: Counter[str] = Counter()

    def upsert(self, document: Document) -> None:
        if not document.id or not str(document.id).strip():
            raise InvalidDocument("Document id must be a non-empty string.")
        text = f"{document.title} {document.body}"
        indexed = dataclasses.replace(
            document,
            tokens=tuple(tokenize(text)),
            searchable_text=fold(text),
        )
        previous = self._documents.get(indexed.id)
        if previous is not None:
            self._forget_filters(previous)
        self._documents[indexed.id] = indexed
        self._categories[indexed.category] += 1
        self._kinds[indexed.kind] += 1

    def remove(self, document_id: str) -> None:
        previous = self._documents.pop(document_id, None)
        if previous is not None:
            self._forget_filters(previous)

    def clear(self) -> None:
        self._documents.clear()
        self._categories.clear()
        self._kinds.clear()

    def get(self, document_id: str) -> Document | None:
        return self._documents.get(document_id)

    def all(self) -> Iterator[Document]:
        """Iterate over a snapshot of the stored documents; call again to restart."""
        return iter(tuple(self._documents.values()))

    def available_filters(self) -> dict[str, list[str]]:
        return {
            "categories": [value for value in self._categories if value],
            "kinds": [value for value in self._kinds if value],
        }

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._documents

    def _forget_filters(self, document: Document) -> None:
        for counter, value in ((self._categories, document.category), (self._kinds, document.kind)):
            counter[value] -= 1
            if counter[value] <= 0:
                del counter[value]


__all__ = ["IndexStore"]
