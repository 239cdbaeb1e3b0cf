"""Fuzzy matching utilities.

Matches if all query characters appear in order (not necessarily consecutive).
Lower score = better match. :func:`fuzzy_suggestor` turns a fixed candidate
list into a suggestor for the text prompt.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterable, TypeVar

from pi.prompt.suggestions import Suggestor

T = TypeVar("T")

_WORD_BOUNDARY_RE = re.compile(r"[\s\-_./:]")


@dataclass
class FuzzyMatch:
    matches: bool
    score: float


def fuzzy_match(query: str, text: str) -> FuzzyMatch:
    query_lower = query.lower()
    text_lower = text.lower()

    if len(query_lower) == 0:
        return FuzzyMatch(matches=True, score=0)

    if len(query_lower) > len(text_lower):
        return FuzzyMatch(matches=False, score=0)

    query_index = 0
    score: float = 0
    last_match_index = -1
    consecutive_matches = 0

    for i in range(len(text_lower)):
        if query_index >= len(query_lower):
            break
        if text_lower[i] != query_lower[query_index]:
            continue

        is_word_boundary = i == 0 or bool(_WORD_BOUNDARY_RE.match(text_lower[i - 1]))

        if last_match_index == i - 1:
            consecutive_matches += 1
            score -= consecutive_matches * 5
        else:
            consecutive_matches = 0
            if last_match_index >= 0:
                score += (i - last_match_index - 1) * 2

        if is_word_boundary:
            score -= 10

        score += i * 0.1

        last_match_index = i
        query_index += 1

    if query_index < len(query_lower):
        return FuzzyMatch(matches=False, score=0)

    return FuzzyMatch(matches=True, score=score)


def fuzzy_filter(
    items: list[T], query: str, get_text: Callable[[T], str]
) -> list[T]:
    """Filter and sort items by fuzzy match quality (best matches first).

    Supports space-separated tokens: all tokens must match.
    """
    tokens = query.split()
    if not tokens:
        return list(items)

    results: list[tuple[T, float]] = []

    for item in items:
        text = get_text(item)
        total_score: float = 0

        for token in tokens:
            match = fuzzy_match(token, text)
            if not match.matches:
                break
            total_score += match.score
        else:
            results.append((item, total_score))

    results.sort(key=lambda r: r[1])
    return [r[0] for r in results]


def fuzzy_suggestor(candidates: Iterable[str], limit: int | None = None) -> Suggestor:
    """Build a suggestor that fuzzy-filters *candidates* by the typed text.

    An empty buffer suggests every candidate in its original order.
    """
    pool = list(candidates)

    def suggest(buffer: str) -> list[str]:
        matches = fuzzy_filter(pool, buffer, lambda item: item)
        return matches[:limit] if limit is not None else matches

    return suggest
