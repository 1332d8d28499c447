"""Text normalisation and tokenisation shared by indexing and querying."""
from __future__ import annotations

import re
import unicodedata

MIN_TOKEN_LENGTH = 2

_NON_WORD = re.compile(r"[^\w\s]|_")


def fold(text: str) -> str:
    """Lowercase ``text`` and strip diacritics ("Educación" -> "educacion")."""
    decomposed = unicodedata.normalize("NFD", text.lower())
    return "".join(char for char in decomposed if not unicodedata.combining(char))


def tokenize(text: str) -> list[str]:
    """Split ``text`` into normalised search terms of at least two characters."""
    cleaned = _NON_WORD.sub(" ", fold(text))
    return [token for token in cleaned.split() if len(token) >= MIN_TOKEN_LENGTH]


__all__ = ["MIN_TOKEN_LENGTH", "fold", "tokenize"]
