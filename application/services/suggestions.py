"""Autocomplete and "did you mean" suggestions."""
from __future__ import annotations

from typing import Mapping, Sequence

from application.services.history import HistoryTracker
from application.services.index_store import IndexStore
from application.services.tokenizer import fold

MAX_SUGGESTIONS = 8
MAX_CORRECTIONS = 3

# canonical term -> common misspellings; a lookup table, not edit distance
CORRECTIONS: dict[str, tuple[str, ...]] = {
    "bachillerato": ("bachiller", "bachilleato", "bachilerato"),
    "estudiantes": ("estudiante", "estudiant"),
    "servicios": ("servicio", "servicios"),
    "calificaciones": ("calificacion", "calificar", "notas"),
    "horarios": ("horario", "hora", "tiempo"),
}

DID_YOU_MEAN = '¿Quisiste decir "{term}"?'


def autocomplete(
    partial: str,
    *,
    index_store: IndexStore,
    history: HistoryTracker | None = None,
    limit: int = MAX_SUGGESTIONS,
) -> list[str]:
    """Titles and past queries containing ``partial``; titles come first."""
    if len(partial) < 1:
        return []
    needle = partial.lower()
    candidates = [doc.title for doc in index_store.all() if needle in doc.title.lower()]
    if history is not None:
        candidates.extend(history.suggestions(partial))
    return list(dict.fromkeys(candidates))[:limit]


def corrections(
    query: str,
    *,
    table: Mapping[str, Sequence[str]] = CORRECTIONS,
    limit: int = MAX_CORRECTIONS,
) -> list[str]:
    """Canonical terms whose known misspellings occur in ``query``."""
    folded = fold(query)
    found = [term for term, misspellings in table.items() if any(wrong in folded for wrong in misspellings)]
    return found[:limit]


def did_you_mean(query: str, *, template: str = DID_YOU_MEAN, limit: int = MAX_CORRECTIONS) -> list[str]:
    return [template.format(term=term) for term in corrections(query, limit=limit)]


__all__ = ["CORRECTIONS", "DID_YOU_MEAN", "autocomplete", "corrections", "did_you_mean"]
