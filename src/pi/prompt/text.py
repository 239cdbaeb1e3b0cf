"""Text prompt: free-form input with live suggestions and validation.

``Text`` is the immutable configuration a caller builds; ``TextPrompt`` is
the session that owns the buffer, the suggestion list, the selection and
the last validation error while one prompt is on screen.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import IO, ClassVar, Iterable

from pi.prompt import config
from pi.prompt.errors import PromptInterruptedError, PromptIOError, ValidationError
from pi.prompt.formatter import DEFAULT_STRING_FORMATTER, StringFormatter
from pi.prompt.keybindings import (
    PromptAction,
    PromptKeybindingsManager,
    get_prompt_keybindings,
)
from pi.prompt.renderer import Renderer
from pi.prompt.suggestions import SuggestionEngine, Suggestor
from pi.prompt.terminal import ProcessTerminal
from pi.prompt.utils import drop_last_grapheme, paginate
from pi.prompt.validator import StringValidator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OptionAnswer:
    """A suggestion as displayed: its position in the full list and its text."""

    index: int
    value: str


@dataclass(frozen=True)
class Text:
    """Configuration of a text prompt.

    Build one with the message and chain the ``with_*`` helpers, each of
    which returns a modified copy::

        name = Text("Name?").with_default("anonymous").prompt()
    """

    DEFAULT_PAGE_SIZE: ClassVar[int] = config.DEFAULT_PAGE_SIZE
    DEFAULT_FORMATTER: ClassVar[StringFormatter] = DEFAULT_STRING_FORMATTER

    message: str
    default: str | None = None
    help_message: str | None = None
    formatter: StringFormatter = DEFAULT_STRING_FORMATTER
    validator: StringValidator | None = None
    page_size: int = config.DEFAULT_PAGE_SIZE
    suggestor: Suggestor | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.page_size, int) or self.page_size <= 0:
            raise ValueError(f"page_size must be a positive integer, got {self.page_size!r}")

    @classmethod
    def from_message(cls, message: str) -> Text:
        return cls(message)

    def with_help_message(self, message: str) -> Text:
        return replace(self, help_message=message)

    def with_default(self, value: str) -> Text:
        return replace(self, default=value)

    def with_suggestor(self, suggestor: Suggestor) -> Text:
        return replace(self, suggestor=suggestor)

    def with_formatter(self, formatter: StringFormatter) -> Text:
        return replace(self, formatter=formatter)

    def with_validator(self, validator: StringValidator) -> Text:
        return replace(self, validator=validator)

    def with_page_size(self, page_size: int) -> Text:
        return replace(self, page_size=page_size)

    def prompt(self, output: IO[str] | None = None) -> str:
        """Run the prompt on the controlling terminal and return the answer.

        The prompt is drawn on *output*, ``sys.stdout`` by default.

        Raises :class:`PromptInterruptedError` on ctrl-c and
        :class:`PromptIOError` when the terminal cannot be used.
        """
        try:
            with ProcessTerminal(stdout=output) as terminal:
                return self.prompt_with_renderer(Renderer(terminal))
        except OSError as e:
            raise PromptIOError(str(e)) from e

    def prompt_with_renderer(
        self,
        renderer: Renderer,
        keybindings: PromptKeybindingsManager | None = None,
    ) -> str:
        return TextPrompt(self, keybindings).prompt(renderer)


def prompt_many(
    texts: Iterable[Text | str], renderer: Renderer | None = None
) -> list[str]:
    """Prompt for each entry in turn and collect the answers.

    Stops at the first error, which propagates; answers gathered so far are
    discarded with it.
    """
    answers: list[str] = []
    for text in texts:
        if isinstance(text, str):
            text = Text.from_message(text)
        if renderer is None:
            answers.append(text.prompt())
        else:
            answers.append(text.prompt_with_renderer(renderer))
    return answers


class TextPrompt:
    """One running text prompt session."""

    def __init__(
        self, text: Text, keybindings: PromptKeybindingsManager | None = None
    ) -> None:
        self._text = text
        self._keybindings = keybindings or get_prompt_keybindings()
        self._suggestions = SuggestionEngine(text.suggestor)

        self.content: str = ""
        self.error: str | None = None
        self.cursor_index: int = 0
        self.suggested_options: list[str] = self._suggestions.initial()

    # -- suggestions and selection -------------------------------------------

    def update_suggestions(self) -> None:
        if not self._suggestions.enabled:
            return
        self.suggested_options, self.cursor_index = self._suggestions.update(
            self.content, self.cursor_index
        )

    def move_cursor_up(self) -> None:
        if self.cursor_index > 0:
            self.cursor_index -= 1
        else:
            self.cursor_index = max(len(self.suggested_options) - 1, 0)

    def move_cursor_down(self) -> None:
        self.cursor_index += 1
        if self.cursor_index >= len(self.suggested_options):
            self.cursor_index = 0

    def use_select_option(self) -> None:
        if self.cursor_index < len(self.suggested_options):
            self.content = self.suggested_options[self.cursor_index]
            self.update_suggestions()

    # -- editing ---------------------------------------------------------------

    def on_change(self, action: PromptAction, data: str) -> None:
        dirty = False

        if action == "deleteCharBackward":
            self.content = drop_last_grapheme(self.content)
            dirty = True
        elif action == "selectUp":
            self.move_cursor_up()
        elif action == "selectDown":
            self.move_cursor_down()
        elif action == "clearLine":
            self.content = ""
            dirty = True
        elif action == "insert":
            self.content += data
            dirty = True

        if dirty:
            self.update_suggestions()

    # -- commit ----------------------------------------------------------------

    def get_final_answer(self) -> str:
        """Return the answer to commit, or raise :class:`ValidationError`.

        An empty buffer with a default yields the default without consulting
        the validator.
        """
        if not self.content and self._text.default is not None:
            return self._text.default

        if self._text.validator is not None:
            error = self._text.validator(self.content)
            if error is not None:
                raise ValidationError(error)

        return self.content

    def handle_key(self, data: str) -> str | None:
        """Apply one key sequence; return the final answer once committed."""
        action = self._keybindings.classify(data)
        logger.debug("Key %r classified as %s", data, action)

        if action == "interrupt":
            raise PromptInterruptedError("Input interrupted by ctrl-c")

        if action == "tab":
            self.use_select_option()
        elif action == "submit":
            try:
                return self.get_final_answer()
            except ValidationError as e:
                logger.debug("Answer %r rejected: %s", self.content, e.message)
                self.error = e.message
        else:
            self.on_change(action, data)

        return None

    # -- rendering -------------------------------------------------------------

    def render(self, renderer: Renderer) -> None:
        renderer.reset_prompt()

        if self.error is not None:
            renderer.print_error_message(self.error)

        renderer.print_prompt(self._text.message, self._text.default, self.content)

        choices = [
            OptionAnswer(i, value) for i, value in enumerate(self.suggested_options)
        ]
        page, relative = paginate(self._text.page_size, choices, self.cursor_index)
        for idx, option in enumerate(page):
            renderer.print_option(idx == relative, option.value)

        if self._text.help_message is not None:
            renderer.print_help(self._text.help_message)
        elif choices:
            renderer.print_help(config.DEFAULT_HELP_MESSAGE)

        renderer.flush()

    # -- session loop ----------------------------------------------------------

    def prompt(self, renderer: Renderer) -> str:
        try:
            while True:
                self.render(renderer)
                answer = self.handle_key(renderer.read_key())
                if answer is not None:
                    break

            renderer.cleanup(self._text.message, self._text.formatter(answer))
        except (OSError, EOFError) as e:
            raise PromptIOError(str(e) or type(e).__name__) from e

        return answer
