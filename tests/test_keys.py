"""Tests for pi.prompt.keys -- keyboard input parsing and matching."""

from __future__ import annotations

from pi.prompt.keys import (
    Key,
    LEGACY_KEY_SEQUENCES,
    has_control_chars,
    matches_key,
    normalize_key_id,
    parse_key,
)


class TestKeyConstants:
    def test_names_match_parsed_keys(self):
        assert parse_key("\x1b[A") == Key.up
        assert parse_key("\x1b[B") == Key.down
        assert parse_key("\r") == Key.enter
        assert parse_key("\t") == Key.tab
        assert parse_key("\x7f") == Key.backspace

    def test_ctrl_combinator(self):
        assert Key.ctrl("c") == "ctrl+c"
        assert parse_key("\x03") == Key.ctrl("c")


class TestParseKeySimple:
    """parse_key converts raw single-byte input to key names."""

    def test_printable_char(self):
        assert parse_key("a") == "a"

    def test_uppercase_preserved(self):
        assert parse_key("A") == "A"

    def test_enter_variants(self):
        assert parse_key("\r") == "enter"
        assert parse_key("\n") == "enter"
        assert parse_key("\r\n") == "enter"

    def test_tab(self):
        assert parse_key("\t") == "tab"

    def test_space(self):
        assert parse_key(" ") == "space"

    def test_backspace_variants(self):
        assert parse_key("\x7f") == "backspace"
        assert parse_key("\x08") == "backspace"

    def test_escape(self):
        assert parse_key("\x1b") == "escape"

    def test_empty(self):
        assert parse_key("") is None


class TestParseKeyCtrl:
    def test_ctrl_c(self):
        assert parse_key("\x03") == "ctrl+c"

    def test_ctrl_w(self):
        assert parse_key("\x17") == "ctrl+w"

    def test_ctrl_x(self):
        assert parse_key("\x18") == "ctrl+x"


class TestParseKeyAlt:
    def test_alt_letter(self):
        assert parse_key("\x1bx") == "alt+x"

    def test_alt_backspace(self):
        assert parse_key("\x1b\x7f") == "alt+backspace"


class TestParseKeyLegacySequences:
    def test_arrows(self):
        assert parse_key("\x1b[A") == "up"
        assert parse_key("\x1b[B") == "down"
        assert parse_key("\x1bOA") == "up"
        assert parse_key("\x1bOB") == "down"

    def test_all_legacy_sequences_parse(self):
        for seq, name in LEGACY_KEY_SEQUENCES.items():
            assert parse_key(seq) == name

    def test_modified_arrows(self):
        assert parse_key("\x1b[1;5A") == "ctrl+up"
        assert parse_key("\x1b[1;2B") == "shift+down"
        assert parse_key("\x1b[1;3A") == "alt+up"

    def test_shift_tab(self):
        assert parse_key("\x1b[Z") == "shift+tab"

    def test_unknown_sequence(self):
        assert parse_key("\x1b[99~") is None


class TestMatchesKey:
    def test_plain(self):
        assert matches_key("\x1b[A", "up")
        assert not matches_key("\x1b[B", "up")

    def test_modifier_order_and_case_do_not_matter(self):
        assert matches_key("\x03", "Ctrl+C")
        assert matches_key("\x1b\x01", "alt+ctrl+a")

    def test_shift_tab_is_not_tab(self):
        assert not matches_key("\x1b[Z", "tab")

    def test_text_does_not_match_keys(self):
        assert not matches_key("hello", "h")


class TestHelpers:
    def test_normalize_key_id(self):
        assert normalize_key_id("alt+Ctrl+X") == "ctrl+alt+x"
        assert normalize_key_id("up") == "up"
        assert normalize_key_id("A") == "A"

    def test_has_control_chars(self):
        assert has_control_chars("\x1b[A")
        assert has_control_chars("a\tb")
        assert not has_control_chars("héllo 👍🏽")
        assert not has_control_chars("a\u200db")
