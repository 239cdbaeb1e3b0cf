"""pi-prompt: interactive terminal text prompt with suggestions and validation."""

# Configuration and entry points
from pi.prompt.text import OptionAnswer, Text, TextPrompt, prompt_many

# Errors
from pi.prompt.errors import (
    PromptError,
    PromptInterruptedError,
    PromptIOError,
    ValidationError,
)

# Callbacks
from pi.prompt.formatter import DEFAULT_STRING_FORMATTER, StringFormatter
from pi.prompt.fuzzy import FuzzyMatch, fuzzy_filter, fuzzy_match, fuzzy_suggestor
from pi.prompt.suggestions import SuggestionEngine, Suggestor, reconcile_selection
from pi.prompt.validator import StringValidator

# Keyboard handling
from pi.prompt.keybindings import (
    DEFAULT_PROMPT_KEYBINDINGS,
    PromptAction,
    PromptKeybindingsManager,
    get_prompt_keybindings,
    set_prompt_keybindings,
)
from pi.prompt.keys import Key, KeyId, matches_key, parse_key
from pi.prompt.stdin_buffer import StdinBuffer

# Terminal and rendering
from pi.prompt.renderer import Renderer
from pi.prompt.terminal import ProcessTerminal, StreamTerminal, Terminal

# Utilities
from pi.prompt.utils import paginate, visible_width

__all__ = [
    # Prompt
    "OptionAnswer",
    "Text",
    "TextPrompt",
    "prompt_many",
    # Errors
    "PromptError",
    "PromptIOError",
    "PromptInterruptedError",
    "ValidationError",
    # Callbacks
    "DEFAULT_STRING_FORMATTER",
    "FuzzyMatch",
    "StringFormatter",
    "StringValidator",
    "SuggestionEngine",
    "Suggestor",
    "fuzzy_filter",
    "fuzzy_match",
    "fuzzy_suggestor",
    "reconcile_selection",
    # Keybindings
    "DEFAULT_PROMPT_KEYBINDINGS",
    "PromptAction",
    "PromptKeybindingsManager",
    "get_prompt_keybindings",
    "set_prompt_keybindings",
    # Keys
    "Key",
    "KeyId",
    "matches_key",
    "parse_key",
    # Stdin buffer
    "StdinBuffer",
    # Terminal and rendering
    "ProcessTerminal",
    "Renderer",
    "StreamTerminal",
    "Terminal",
    # Utilities
    "paginate",
    "visible_width",
]
