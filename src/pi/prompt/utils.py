"""Text utilities for the prompt: grapheme editing, width measurement, paging.

Buffer edits operate on grapheme clusters (via ``grapheme``) so that a
backspace never leaves half of an emoji or a dangling combining mark behind.
Display widths use ``wcwidth`` and are only needed by the renderer to know
how many terminal rows a line occupies.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Sequence, TypeVar

import grapheme
import wcwidth as _wcwidth

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Grapheme segmenter wrapper
# ---------------------------------------------------------------------------


class _GraphemeSegmenter:
    """Thin wrapper around ``grapheme.graphemes``."""

    @staticmethod
    def segment(text: str) -> list[str]:
        return list(grapheme.graphemes(text))


def get_segmenter() -> _GraphemeSegmenter:
    """Return a grapheme segmenter instance."""
    return _GraphemeSegmenter()


def grapheme_count(text: str) -> int:
    """Number of user-perceived characters in *text*."""
    return grapheme.length(text)


def drop_last_grapheme(text: str) -> str:
    """Return *text* without its final grapheme cluster.

    An empty string stays empty.
    """
    if not text:
        return text
    graphemes = get_segmenter().segment(text)
    return "".join(graphemes[:-1])


# ---------------------------------------------------------------------------
# Width measurement
# ---------------------------------------------------------------------------

_STRIP_RE = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def _cache_width(key: str, value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


def _grapheme_width(g: str) -> int:
    """Return the terminal display width of a single grapheme cluster.

    Multi-codepoint clusters carrying emoji markers (VS16, ZWJ, skin tone
    modifiers, regional indicators) are two columns wide; everything else
    is delegated to ``wcwidth`` on the first codepoint.
    """
    if not g:
        return 0

    if len(g) == 1:
        cp = ord(g)
        if cp < 0x20 or (0x7F <= cp <= 0x9F):
            return 0
        return max(_wcwidth.wcwidth(g), 0)

    for ch in g:
        cp = ord(ch)
        if cp in (0xFE0F, 0x200D):
            return 2
        if 0x1F3FB <= cp <= 0x1F3FF or 0x1F1E6 <= cp <= 0x1F1FF:
            return 2

    if ord(g[0]) >= 0x1F000:
        return 2

    if unicodedata.category(g[0]) in ("Mn", "Me", "Mc", "Cf"):
        return 0

    return max(_wcwidth.wcwidth(g[0]), 0)


def visible_width(text: str) -> int:
    """Calculate the visible terminal width of *text*.

    ANSI CSI sequences are ignored. ASCII text takes a fast path; other text
    is measured cluster by cluster and cached.
    """
    if not text:
        return 0

    stripped = _STRIP_RE.sub("", text)
    if not stripped:
        return 0

    if all(0x20 <= ord(ch) <= 0x7E for ch in stripped):
        return len(stripped)

    cached = _width_cache.get(stripped)
    if cached is not None:
        return cached

    total = sum(_grapheme_width(g) for g in grapheme.graphemes(stripped))
    return _cache_width(stripped, total)


def rows_for_width(text: str, columns: int) -> int:
    """Number of terminal rows *text* wraps onto at *columns* wide."""
    if columns <= 0:
        return 1
    width = visible_width(text)
    if width == 0:
        return 1
    return (width - 1) // columns + 1


# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------


def paginate(
    page_size: int, items: Sequence[T], selected: int
) -> tuple[list[T], int]:
    """Return the visible window of *items* and the selection's offset in it.

    The window holds ``min(page_size, len(items))`` entries and always
    contains the selected item. It stays pinned to the first page while the
    selection is in the first half page, to the last page while it is in the
    last half page, and otherwise keeps the selection in the middle.

    A selection past the end is treated as the last item.
    """
    total = len(items)
    if total == 0 or page_size <= 0:
        return [], 0

    selected = min(max(selected, 0), total - 1)

    if total <= page_size:
        return list(items), selected

    half = page_size // 2

    if selected < half:
        start = 0
    elif total - selected <= page_size - half:
        start = total - page_size
    else:
        start = selected - half

    return list(items[start : start + page_size]), selected - start
