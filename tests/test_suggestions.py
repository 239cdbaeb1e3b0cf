"""Tests for pi.prompt.suggestions."""

from __future__ import annotations

import pytest

from pi.prompt.suggestions import SuggestionEngine, reconcile_selection


class TestReconcileSelection:
    @pytest.mark.parametrize(
        ("old", "suggestions", "expected"),
        [
            (0, ["a", "b"], 0),
            (1, ["a", "b"], 1),
            (2, ["a", "b"], 1),
            (9, ["a"], 0),
            (3, [], 3),
            (0, [], 0),
        ],
    )
    def test_clamps_only_past_the_end(self, old, suggestions, expected) -> None:
        assert reconcile_selection(old, suggestions) == expected


class TestSuggestionEngine:
    def test_without_suggestor(self) -> None:
        engine = SuggestionEngine(None)
        assert not engine.enabled
        assert engine.initial() == []
        assert engine.refresh("abc") == []

    def test_refresh_passes_whole_buffer(self) -> None:
        seen: list[str] = []

        def suggest(buffer: str) -> list[str]:
            seen.append(buffer)
            return [buffer + "!"]

        engine = SuggestionEngine(suggest)
        assert engine.refresh("hello") == ["hello!"]
        assert seen == ["hello"]

    def test_refresh_replaces_list_and_keeps_order(self) -> None:
        engine = SuggestionEngine(lambda b: ["z", "a", "m"])
        assert engine.refresh("x") == ["z", "a", "m"]

    def test_refresh_accepts_any_iterable(self) -> None:
        engine = SuggestionEngine(lambda b: (c for c in b))
        assert engine.refresh("ab") == ["a", "b"]

    def test_update_reconciles(self) -> None:
        engine = SuggestionEngine(lambda b: ["x"] * len(b))
        assert engine.update("abc", 5) == (["x", "x", "x"], 2)
        assert engine.update("", 5) == ([], 5)
