"""Renderer: draws the prompt frame onto a terminal.

Each frame is built line by line (error banner, prompt line, visible
options, help) and written in one go on :meth:`Renderer.flush`. The renderer
remembers how many terminal rows the frame took so that
:meth:`Renderer.reset_prompt` can erase it before the next one, and parks
the cursor at the end of the prompt line in between.

Raw mode disables output post-processing, so lines are joined with
``\\r\\n`` rather than ``\\n``.
"""

from __future__ import annotations

from pi.prompt.terminal import Terminal
from pi.prompt.utils import rows_for_width, visible_width

# ---------------------------------------------------------------------------
# ANSI escape constants
# ---------------------------------------------------------------------------

_HIDE_CURSOR = "\x1b[?25l"
_SHOW_CURSOR = "\x1b[?25h"
_CLEAR_FROM_CURSOR = "\x1b[0J"
_CURSOR_UP_FMT = "\x1b[{}A"
_CURSOR_FORWARD_FMT = "\x1b[{}C"

_NEWLINE = "\r\n"

PROMPT_PREFIX = "? "
ERROR_PREFIX = "# "
SELECTED_PREFIX = "> "
UNSELECTED_PREFIX = "  "


class Renderer:
    """Frame-based renderer over a :class:`~pi.prompt.terminal.Terminal`."""

    def __init__(self, terminal: Terminal) -> None:
        self._terminal = terminal
        self._frame: list[str] = []
        self._prompt_line: int | None = None
        # Rows between the top of the drawn frame and the cursor.
        self._cursor_row = 0

    @property
    def terminal(self) -> Terminal:
        return self._terminal

    # -- input --------------------------------------------------------------

    def read_key(self) -> str:
        return self._terminal.read_key()

    # -- frame building -----------------------------------------------------

    def reset_prompt(self) -> None:
        """Erase the previously drawn frame and start a new one."""
        self._terminal.write(_HIDE_CURSOR)
        if self._cursor_row > 0:
            self._terminal.write(_CURSOR_UP_FMT.format(self._cursor_row))
        self._terminal.write("\r" + _CLEAR_FROM_CURSOR)
        self._cursor_row = 0
        self._frame = []
        self._prompt_line = None

    def print_error_message(self, message: str) -> None:
        self._frame.append(f"{ERROR_PREFIX}{message}")

    def print_prompt(
        self, prompt: str, default: str | None, content: str | None
    ) -> None:
        line = f"{PROMPT_PREFIX}{prompt} "
        if default is not None:
            line += f"({default}) "
        if content:
            line += content
        self._prompt_line = len(self._frame)
        self._frame.append(line)

    def print_option(self, selected: bool, text: str) -> None:
        prefix = SELECTED_PREFIX if selected else UNSELECTED_PREFIX
        self._frame.append(prefix + text)

    def print_help(self, message: str) -> None:
        self._frame.append(f"[{message}]")

    # -- output -------------------------------------------------------------

    def flush(self) -> None:
        """Write the frame and park the cursor after the typed text."""
        if not self._frame:
            self._terminal.flush()
            return

        columns = self._terminal.columns
        self._terminal.write(_NEWLINE.join(self._frame))

        rows = [rows_for_width(line, columns) for line in self._frame]
        last_row = sum(rows) - 1

        if self._prompt_line is None:
            self._cursor_row = last_row
        else:
            prompt_row = sum(rows[: self._prompt_line + 1]) - 1
            if last_row > prompt_row:
                self._terminal.write(_CURSOR_UP_FMT.format(last_row - prompt_row))
            column = visible_width(self._frame[self._prompt_line]) % max(columns, 1)
            self._terminal.write("\r")
            if column:
                self._terminal.write(_CURSOR_FORWARD_FMT.format(column))
            self._cursor_row = prompt_row

        self._terminal.write(_SHOW_CURSOR)
        self._terminal.flush()

    def cleanup(self, message: str, answer: str) -> None:
        """Replace the live frame with the final ``? message answer`` line."""
        self.reset_prompt()
        self._terminal.write(f"{PROMPT_PREFIX}{message} {answer}{_NEWLINE}")
        self._terminal.write(_SHOW_CURSOR)
        self._terminal.flush()
        self._cursor_row = 0
