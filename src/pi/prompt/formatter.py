"""Formatters turn the accepted answer into the text echoed after the prompt."""

from __future__ import annotations

from typing import Callable

StringFormatter = Callable[[str], str]


def _identity(answer: str) -> str:
    return answer


DEFAULT_STRING_FORMATTER: StringFormatter = _identity
