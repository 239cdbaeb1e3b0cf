"""Exceptions raised by the prompt."""

from __future__ import annotations


class PromptError(Exception):
    """Base class for every error the prompt raises."""


class ValidationError(PromptError):
    """The answer was rejected by the validator.

    Handled inside the session loop: the message is shown above the prompt
    and the user keeps editing.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class PromptInterruptedError(PromptError):
    """The user aborted the prompt (ctrl-c). No answer is available."""


class PromptIOError(PromptError):
    """Reading keys from or writing to the terminal failed."""
