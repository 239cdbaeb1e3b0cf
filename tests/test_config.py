"""Tests for pi.prompt.config environment overrides."""

from __future__ import annotations

from pi.prompt import config


class TestDefaultPageSize:
    def test_fallback(self, monkeypatch) -> None:
        monkeypatch.delenv("PI_PROMPT_PAGE_SIZE", raising=False)
        assert config._get_default_page_size() == 7

    def test_override(self, monkeypatch) -> None:
        monkeypatch.setenv("PI_PROMPT_PAGE_SIZE", "12")
        assert config._get_default_page_size() == 12

    def test_invalid_values_fall_back(self, monkeypatch, capsys) -> None:
        for raw in ("abc", "0", "-3"):
            monkeypatch.setenv("PI_PROMPT_PAGE_SIZE", raw)
            assert config._get_default_page_size() == 7
        assert "PI_PROMPT_PAGE_SIZE" in capsys.readouterr().err


class TestWriteLogPath:
    def test_unset(self, monkeypatch) -> None:
        monkeypatch.delenv("PI_PROMPT_WRITE_LOG", raising=False)
        assert config.get_write_log_path() == ""

    def test_set(self, monkeypatch) -> None:
        monkeypatch.setenv("PI_PROMPT_WRITE_LOG", "/tmp/x.log")
        assert config.get_write_log_path() == "/tmp/x.log"
