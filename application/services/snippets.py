"""Snippet extraction and match offsets for result previews."""
from __future__ import annotations

import re
from typing import Sequence

from application.services.tokenizer import fold, tokenize
from domain.entities import Snippet

ELLIPSIS = "..."


def build_snippet(body: str, query: str, *, context: int = 50, max_length: int = 150) -> Snippet:
    """Return an excerpt of ``body`` around the first occurrence of ``query``.

    Falls back to the first ``max_length`` characters when the query does not
    occur verbatim (case- and accent-insensitively).
    """
    spans = find_spans(body, query)
    if spans:
        match_start, match_end = spans[0]
        start = max(0, match_start - context)
        end = min(len(body), match_end + context)
        prefix = ELLIPSIS if start > 0 else ""
        suffix = ELLIPSIS if end < len(body) else ""
        text = f"{prefix}{body[start:end]}{suffix}"
    else:
        text = body[:max_length]
        if len(body) > max_length:
            text += ELLIPSIS
    return Snippet(text=text, highlights=highlight_spans(text, query))


def highlight_spans(text: str, query: str) -> list[tuple[int, int]]:
    """Offsets of the query in ``text``, or of its individual tokens if the phrase is absent."""
    spans = find_spans(text, query)
    if spans:
        return spans
    token_spans: list[tuple[int, int]] = []
    for token in dict.fromkeys(tokenize(query)):
        token_spans.extend(find_spans(text, token))
    return _merge(token_spans)


def find_spans(text: str, needle: str) -> list[tuple[int, int]]:
    needle = needle.strip()
    if not needle or not text:
        return []
    pattern = re.compile(re.escape(needle), re.IGNORECASE)
    spans = [match.span() for match in pattern.finditer(text)]
    if spans:
        return spans
    folded = fold(text)
    # accent-insensitive offsets are only valid when folding keeps the length
    if len(folded) != len(text):
        return []
    folded_pattern = re.compile(re.escape(fold(needle)))
    return [match.span() for match in folded_pattern.finditer(folded)]


def highlight(text: str, spans: Sequence[tuple[int, int]], *, opening: str = "<mark>", closing: str = "</mark>") -> str:
    """Wrap each span of ``text`` with the given markers."""
    parts: list[str] = []
    cursor = 0
    for start, end in _merge(spans):
        parts.append(text[cursor:start])
        parts.append(f"{opening}{text[start:end]}{closing}")
        cursor = end
    parts.append(text[cursor:])
    return "".join(parts)


def _merge(spans: Sequence[tuple[int, int]]) -> list[tuple[int, int]]:
    merged: list[tuple[int, int]] = []
    for start, end in sorted(spans):
        if merged and start <= merged[-1][1]:
            merged[-1] = (merged[-1][0], max(end, merged[-1][1]))
        else:
            merged.append((start, end))
    return merged


__all__ = ["ELLIPSIS", "build_snippet", "highlight_spans", "find_spans", "highlight"]
