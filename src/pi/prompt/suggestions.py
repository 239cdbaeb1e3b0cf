"""Suggestion list maintenance for the text prompt."""

from __future__ import annotations

import logging
from typing import Callable

logger = logging.getLogger(__name__)

Suggestor = Callable[[str], list[str]]


def reconcile_selection(old_index: int, suggestions: list[str]) -> int:
    """Keep *old_index* pointing inside *suggestions*.

    The index is positional: it is only pulled back to the last entry when
    the list shrank below it, and never reset when the list grows.
    """
    if suggestions and old_index >= len(suggestions):
        return len(suggestions) - 1
    return old_index


class SuggestionEngine:
    """Wraps a user suggestor and recomputes candidates from the whole buffer."""

    def __init__(self, suggestor: Suggestor | None) -> None:
        self._suggestor = suggestor

    @property
    def enabled(self) -> bool:
        return self._suggestor is not None

    def initial(self) -> list[str]:
        """Suggestions for an empty buffer."""
        return self.refresh("")

    def refresh(self, buffer: str) -> list[str]:
        """Ask the suggestor for a fresh list; no suggestor means no suggestions."""
        if self._suggestor is None:
            return []
        suggestions = list(self._suggestor(buffer))
        logger.debug("%d suggestions for %r", len(suggestions), buffer)
        return suggestions

    def update(self, buffer: str, old_index: int) -> tuple[list[str], int]:
        """Refresh against *buffer*, then reconcile the selection."""
        suggestions = self.refresh(buffer)
        return suggestions, reconcile_selection(old_index, suggestions)
