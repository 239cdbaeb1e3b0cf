"""Prompt defaults. Values marked below can be overridden from the environment."""

from __future__ import annotations

import os
import sys

# Help line shown under the suggestion list when no explicit help is given.
DEFAULT_HELP_MESSAGE = "↑↓ to move, tab to auto-complete, enter to submit"

_FALLBACK_PAGE_SIZE = 7


def _get_default_page_size() -> int:
    raw = os.environ.get("PI_PROMPT_PAGE_SIZE", "")
    if not raw:
        return _FALLBACK_PAGE_SIZE
    try:
        value = int(raw)
    except ValueError:
        print(f"Ignoring invalid PI_PROMPT_PAGE_SIZE: {raw!r}", file=sys.stderr)
        return _FALLBACK_PAGE_SIZE
    if value <= 0:
        print(f"Ignoring non-positive PI_PROMPT_PAGE_SIZE: {raw!r}", file=sys.stderr)
        return _FALLBACK_PAGE_SIZE
    return value


# Number of suggestions visible at once (PI_PROMPT_PAGE_SIZE).
DEFAULT_PAGE_SIZE = _get_default_page_size()


def get_write_log_path() -> str:
    """File that receives a copy of all terminal output (PI_PROMPT_WRITE_LOG)."""
    return os.environ.get("PI_PROMPT_WRITE_LOG", "")
