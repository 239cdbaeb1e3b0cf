"""Prompt keybindings: classify raw key input into prompt actions."""

from __future__ import annotations

from typing import Literal

from pi.prompt.keys import Key, KeyId, has_control_chars, matches_key

PromptAction = Literal[
    # Editing
    "insert",
    "deleteCharBackward",
    "clearLine",
    # Suggestion list
    "selectUp",
    "selectDown",
    "tab",
    # Session
    "submit",
    "interrupt",
    "ignore",
]

PromptKeybindingsConfig = dict[PromptAction, KeyId | list[KeyId]]

DEFAULT_PROMPT_KEYBINDINGS: dict[PromptAction, KeyId | list[KeyId]] = {
    "deleteCharBackward": Key.backspace,
    "clearLine": [Key.ctrl("w"), Key.ctrl("x")],
    "selectUp": Key.up,
    "selectDown": Key.down,
    "tab": Key.tab,
    "submit": Key.enter,
    "interrupt": Key.ctrl("c"),
}

# Checked in this order; the first bound action wins.
_CLASSIFY_ORDER: tuple[PromptAction, ...] = (
    "interrupt",
    "submit",
    "tab",
    "deleteCharBackward",
    "clearLine",
    "selectUp",
    "selectDown",
)


class PromptKeybindingsManager:
    """Manages keybindings for the text prompt."""

    def __init__(self, config: PromptKeybindingsConfig | None = None) -> None:
        self._action_to_keys: dict[PromptAction, list[KeyId]] = {}
        self._build_maps(config or {})

    def _build_maps(self, config: PromptKeybindingsConfig) -> None:
        self._action_to_keys.clear()

        for action, keys in DEFAULT_PROMPT_KEYBINDINGS.items():
            key_array = keys if isinstance(keys, list) else [keys]
            self._action_to_keys[action] = list(key_array)

        for action, keys in config.items():
            key_array = keys if isinstance(keys, list) else [keys]
            self._action_to_keys[action] = list(key_array)

    def matches(self, data: str, action: PromptAction) -> bool:
        """Check if input matches a specific action."""
        keys = self._action_to_keys.get(action)
        if not keys:
            return False
        return any(matches_key(data, key) for key in keys)

    def classify(self, data: str) -> PromptAction:
        """Map one complete key sequence to the action it triggers.

        Bound keys take precedence; any other input free of control
        characters is text to insert.
        """
        for action in _CLASSIFY_ORDER:
            if self.matches(data, action):
                return action
        if data and not has_control_chars(data):
            return "insert"
        return "ignore"

    def get_keys(self, action: PromptAction) -> list[KeyId]:
        """Get keys bound to an action."""
        return self._action_to_keys.get(action, [])

    def set_config(self, config: PromptKeybindingsConfig) -> None:
        """Update configuration."""
        self._build_maps(config)


_global_prompt_keybindings: PromptKeybindingsManager | None = None


def get_prompt_keybindings() -> PromptKeybindingsManager:
    global _global_prompt_keybindings
    if _global_prompt_keybindings is None:
        _global_prompt_keybindings = PromptKeybindingsManager()
    return _global_prompt_keybindings


def set_prompt_keybindings(manager: PromptKeybindingsManager) -> None:
    global _global_prompt_keybindings
    _global_prompt_keybindings = manager
