"""Terminal abstraction for the prompt.

Provides a ``Terminal`` protocol plus two implementations:

* ``ProcessTerminal`` drives the controlling tty through :mod:`termios`,
  switching it to raw mode for the lifetime of a ``with`` block and
  restoring the saved attributes on every exit path.
* ``StreamTerminal`` reads key bytes from any binary (or text) stream and
  writes to another, which is how piped input and tests drive the prompt.

Both split raw input into whole key sequences with :class:`StdinBuffer`.
"""

from __future__ import annotations

import codecs
import logging
import os
import re
import select
import sys
import termios
import tty
from collections import deque
from typing import IO, Protocol

from pi.prompt.config import get_write_log_path
from pi.prompt.stdin_buffer import StdinBuffer

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# ANSI escape constants
# ---------------------------------------------------------------------------

_BRACKETED_PASTE_ENABLE = "\x1b[?2004h"
_BRACKETED_PASTE_DISABLE = "\x1b[?2004l"

# Seconds to wait for the rest of a split escape sequence.
_ESCAPE_TIMEOUT = 0.01


# ---------------------------------------------------------------------------
# Terminal protocol
# ---------------------------------------------------------------------------


class Terminal(Protocol):
    """Interface for terminal I/O operations used by the renderer."""

    def read_key(self) -> str: ...

    def write(self, data: str) -> None: ...

    def flush(self) -> None: ...

    @property
    def columns(self) -> int: ...


# ---------------------------------------------------------------------------
# Shared key queue
# ---------------------------------------------------------------------------

# Whatever is left after line breaks are dropped and tabs become spaces.
_PASTE_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f\x80-\x9f]")


def clean_paste(data: str) -> str:
    """Reduce pasted text to insertable characters."""
    clean_text = data.replace("\r\n", "").replace("\r", "").replace("\n", "")
    clean_text = clean_text.replace("\t", " ")
    return _PASTE_CONTROL_CHARS.sub("", clean_text)


class _KeyQueue:
    """Collects complete key sequences emitted by a :class:`StdinBuffer`."""

    def __init__(self) -> None:
        self._keys: deque[str] = deque()
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self.stdin_buffer = StdinBuffer()
        self.stdin_buffer.on_data(self._keys.append)
        self.stdin_buffer.on_paste(self._on_paste)

    def _on_paste(self, data: str) -> None:
        clean_text = clean_paste(data)
        if clean_text:
            self._keys.append(clean_text)

    def feed(self, chunk: bytes | str) -> None:
        if isinstance(chunk, bytes):
            chunk = self._decoder.decode(chunk)
        self.stdin_buffer.process(chunk)

    def flush(self) -> None:
        for sequence in self.stdin_buffer.flush():
            self._keys.append(sequence)

    def pop(self) -> str | None:
        return self._keys.popleft() if self._keys else None


def _tee_to_write_log(data: str) -> None:
    path = get_write_log_path()
    if not path:
        return
    try:
        with open(path, "a") as f:
            f.write(data)
    except OSError:
        logger.debug("Could not append to write log %s", path, exc_info=True)


# ---------------------------------------------------------------------------
# ProcessTerminal implementation
# ---------------------------------------------------------------------------


class ProcessTerminal:
    """Concrete terminal backed by ``sys.stdin``/``sys.stdout``.

    Use as a context manager::

        with ProcessTerminal() as terminal:
            ...

    Entering saves the tty attributes, enables raw mode and bracketed paste;
    leaving restores both, also when the block raises.
    """

    def __init__(self, stdin: IO[str] | None = None, stdout: IO[str] | None = None) -> None:
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout
        self._original_termios: list | None = None
        self._queue = _KeyQueue()

    # -- properties ---------------------------------------------------------

    @property
    def columns(self) -> int:
        try:
            return os.get_terminal_size(self._stdout.fileno()).columns
        except (ValueError, OSError):
            return 80

    # -- start / stop -------------------------------------------------------

    def start(self) -> None:
        """Enable raw mode and bracketed paste."""
        fd = self._stdin.fileno()
        try:
            self._original_termios = termios.tcgetattr(fd)
            tty.setraw(fd)
        except termios.error as e:
            raise OSError(*e.args) from e
        logger.debug("Entered raw mode on fd %d", fd)
        self.write(_BRACKETED_PASTE_ENABLE)
        self.flush()

    def stop(self) -> None:
        """Restore the terminal attributes saved by :meth:`start`."""
        if self._original_termios is None:
            return
        try:
            self.write(_BRACKETED_PASTE_DISABLE)
            self.flush()
        finally:
            fd = self._stdin.fileno()
            termios.tcsetattr(fd, termios.TCSADRAIN, self._original_termios)
            self._original_termios = None
            self._queue.stdin_buffer.clear()
            logger.debug("Restored terminal mode on fd %d", fd)

    def __enter__(self) -> ProcessTerminal:
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

    # -- input --------------------------------------------------------------

    def read_key(self) -> str:
        """Block until one complete key sequence is available and return it.

        Raises ``EOFError`` when stdin is closed.
        """
        fd = self._stdin.fileno()
        while True:
            key = self._queue.pop()
            if key is not None:
                return key

            if self._queue.stdin_buffer.pending:
                ready, _, _ = select.select([fd], [], [], _ESCAPE_TIMEOUT)
                if not ready:
                    self._queue.flush()
                    continue

            raw = os.read(fd, 4096)
            if not raw:
                self._queue.flush()
                key = self._queue.pop()
                if key is not None:
                    return key
                raise EOFError("stdin closed")
            self._queue.feed(raw)

    # -- output -------------------------------------------------------------

    def write(self, data: str) -> None:
        """Write data to stdout and optionally to the write log."""
        self._stdout.write(data)
        _tee_to_write_log(data)

    def flush(self) -> None:
        self._stdout.flush()


# ---------------------------------------------------------------------------
# StreamTerminal implementation
# ---------------------------------------------------------------------------


class StreamTerminal:
    """Terminal over plain streams, with no tty handling at all.

    *input* may yield ``bytes`` or ``str``; it is read incrementally so the
    prompt consumes exactly the keys it needs. *output* receives text.
    """

    def __init__(self, input: IO, output: IO[str], columns: int = 80) -> None:
        self._input = input
        self._output = output
        self._columns = columns
        self._queue = _KeyQueue()
        self._eof = False

    @property
    def columns(self) -> int:
        return self._columns

    def __enter__(self) -> StreamTerminal:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.flush()

    def _read_chunk(self) -> bytes | str:
        read1 = getattr(self._input, "read1", None)
        if read1 is not None:
            return read1(4096)
        return self._input.read(1)

    def read_key(self) -> str:
        while True:
            key = self._queue.pop()
            if key is not None:
                return key
            if self._eof:
                raise EOFError("input stream exhausted")

            chunk = self._read_chunk()
            if not chunk:
                self._eof = True
                self._queue.flush()
                continue
            self._queue.feed(chunk)

    def write(self, data: str) -> None:
        self._output.write(data)
        _tee_to_write_log(data)

    def flush(self) -> None:
        self._output.flush()
