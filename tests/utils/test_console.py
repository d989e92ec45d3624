"""Tests for the shared console helpers."""

from __future__ import annotations

from rich.console import Console

from pomodoro_tui.utils.console import format_error, get_console


def test_get_console_is_cached():
    assert get_console() is get_console()
    assert isinstance(get_console(), Console)


def test_format_error(capsys):
    format_error("something broke")
    assert "Error: something broke" in capsys.readouterr().out
