"""Virtual terminal for testing -- implements the Terminal protocol in-memory.

This module provides a ``VirtualTerminal`` class that satisfies the
``pi.prompt.terminal.Terminal`` protocol without performing any real I/O.
Keys are scripted up front and all output is captured for assertions.
"""

from __future__ import annotations

from collections import deque
from typing import Iterable


class VirtualTerminal:
    """In-memory terminal that replays scripted keys and records writes.

    Parameters
    ----------
    keys:
        Complete key sequences returned by ``read_key`` one at a time.
    columns:
        Number of terminal columns (width).
    """

    def __init__(self, keys: Iterable[str] = (), columns: int = 80) -> None:
        self._keys: deque[str] = deque(keys)
        self._columns = columns
        self._buffer: list[str] = []
        self.flush_count = 0

    # -- Terminal protocol --------------------------------------------------

    @property
    def columns(self) -> int:
        return self._columns

    def read_key(self) -> str:
        """Return the next scripted key; ``EOFError`` once they run out."""
        if not self._keys:
            raise EOFError("no more scripted keys")
        return self._keys.popleft()

    def write(self, data: str) -> None:
        """Append *data* to the internal buffer."""
        self._buffer.append(data)

    def flush(self) -> None:
        self.flush_count += 1

    # -- Test helpers -------------------------------------------------------

    @property
    def output(self) -> str:
        """Return everything written to the terminal as a single string."""
        return "".join(self._buffer)

    @property
    def remaining_keys(self) -> list[str]:
        return list(self._keys)

    def clear_buffer(self) -> None:
        """Discard all recorded output."""
        self._buffer.clear()

    def feed(self, *keys: str) -> None:
        """Queue more scripted keys."""
        self._keys.extend(keys)
