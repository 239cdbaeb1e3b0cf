"""Validators for text answers.

A validator receives the candidate answer and returns ``None`` to accept it
or a human-readable message explaining why it was rejected.
"""

from __future__ import annotations

from typing import Callable

from pi.prompt.utils import grapheme_count

StringValidator = Callable[[str], str | None]


def required(message: str = "A response is required.") -> StringValidator:
    """Reject empty answers."""

    def validate(answer: str) -> str | None:
        return message if not answer else None

    return validate


def min_length(length: int, message: str | None = None) -> StringValidator:
    """Reject answers shorter than *length* characters (grapheme clusters)."""
    text = message or f"The length of the response should be at least {length}"

    def validate(answer: str) -> str | None:
        return text if grapheme_count(answer) < length else None

    return validate


def max_length(length: int, message: str | None = None) -> StringValidator:
    """Reject answers longer than *length* characters (grapheme clusters)."""
    text = message or f"The length of the response should be at most {length}"

    def validate(answer: str) -> str | None:
        return text if grapheme_count(answer) > length else None

    return validate


def chain(*validators: StringValidator) -> StringValidator:
    """Run *validators* in order and report the first rejection."""

    def validate(answer: str) -> str | None:
        for validator in validators:
            error = validator(answer)
            if error is not None:
                return error
        return None

    return validate
