"""Tests for pi.prompt.terminal."""

from __future__ import annotations

import io
import os
import pty
import termios

import pytest

from pi.prompt.errors import PromptInterruptedError
from pi.prompt.terminal import ProcessTerminal, StreamTerminal, clean_paste


def stream(data: bytes | str) -> StreamTerminal:
    source = io.BytesIO(data) if isinstance(data, bytes) else io.StringIO(data)
    return StreamTerminal(source, io.StringIO())


class TestStreamTerminalInput:
    def test_reads_one_key_at_a_time(self) -> None:
        t = stream(b"ab\x1b[A\r")
        assert [t.read_key() for _ in range(4)] == ["a", "b", "\x1b[A", "\r"]

    def test_decodes_utf8(self) -> None:
        t = stream("ü🌍".encode("utf-8"))
        assert t.read_key() == "ü"
        assert t.read_key() == "🌍"

    def test_text_stream_input(self) -> None:
        t = stream("x\n")
        assert t.read_key() == "x"
        assert t.read_key() == "\n"

    def test_trailing_escape_flushed_at_eof(self) -> None:
        t = stream(b"\x1b")
        assert t.read_key() == "\x1b"

    def test_eof(self) -> None:
        t = stream(b"a")
        t.read_key()
        with pytest.raises(EOFError):
            t.read_key()

    def test_paste_is_one_key_without_newlines(self) -> None:
        t = stream(b"\x1b[200~one\r\ntwo\x1b[201~")
        assert t.read_key() == "onetwo"


class TestStreamTerminalOutput:
    def test_write_and_columns(self) -> None:
        out = io.StringIO()
        t = StreamTerminal(io.BytesIO(b""), out, columns=42)
        with t:
            t.write("hello")
        assert out.getvalue() == "hello"
        assert t.columns == 42

    def test_write_log(self, tmp_path, monkeypatch) -> None:
        log = tmp_path / "out.log"
        monkeypatch.setenv("PI_PROMPT_WRITE_LOG", str(log))
        t = stream(b"")
        t.write("abc")
        t.write("def")
        assert log.read_text() == "abcdef"


class TestProcessTerminal:
    def test_start_on_non_tty_raises_oserror(self, tmp_path) -> None:
        not_a_tty = open(tmp_path / "plain.txt", "w+")
        try:
            terminal = ProcessTerminal(stdin=not_a_tty, stdout=io.StringIO())
            with pytest.raises(OSError):
                terminal.start()
        finally:
            not_a_tty.close()

    def test_stop_without_start_is_noop(self) -> None:
        out = io.StringIO()
        ProcessTerminal(stdout=out).stop()
        assert out.getvalue() == ""

    def test_columns_fallback(self) -> None:
        assert ProcessTerminal(stdout=io.StringIO()).columns == 80

    def test_raw_mode_restored_when_block_raises(self) -> None:
        master, slave = pty.openpty()
        slave_file = os.fdopen(slave, "r", closefd=False)
        out = io.StringIO()
        try:
            saved = termios.tcgetattr(slave)
            with pytest.raises(PromptInterruptedError):
                with ProcessTerminal(stdin=slave_file, stdout=out):
                    assert termios.tcgetattr(slave) != saved
                    raise PromptInterruptedError("Input interrupted by ctrl-c")
            assert termios.tcgetattr(slave) == saved
            assert out.getvalue().startswith("\x1b[?2004h")
            assert out.getvalue().endswith("\x1b[?2004l")
        finally:
            slave_file.close()
            os.close(slave)
            os.close(master)


class TestCleanPaste:
    def test_line_breaks_removed(self) -> None:
        assert clean_paste("a\r\nb\rc\nd") == "abcd"

    def test_tab_becomes_space(self) -> None:
        assert clean_paste("col1\tcol2") == "col1 col2"

    def test_other_control_chars_dropped(self) -> None:
        assert clean_paste("a\x00b\x1bc\x7fd") == "abcd"

    def test_unicode_kept(self) -> None:
        assert clean_paste("café \U0001f30d") == "café \U0001f30d"
