"""Tests for TimerSettings validation and the shared constants."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from pomodoro_tui.config import (
    DEFAULT_SOUND,
    DURATION_PRESETS,
    SOUND_EXTENSIONS,
    TICK_RATE_SECONDS,
    TimerSettings,
)


class TestTimerSettings:
    def test_defaults(self):
        settings = TimerSettings()
        assert settings.work_minutes == 25
        assert settings.break_minutes == 5
        assert settings.hide_image is False
        assert settings.no_sound is False
        assert settings.sound_path == DEFAULT_SOUND

    @pytest.mark.parametrize("field", ["work_minutes", "break_minutes"])
    @pytest.mark.parametrize("value", [0, -5, 1000])
    def test_minutes_out_of_range(self, field, value):
        with pytest.raises(ValidationError):
            TimerSettings(**{field: value})

    def test_sound_path_coerced_and_expanded(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        settings = TimerSettings(sound_path="~/bell.wav")
        assert settings.sound_path == tmp_path / "bell.wav"

    def test_relative_sound_path_kept(self):
        assert TimerSettings(sound_path="sounds/a.ogg").sound_path == Path("sounds/a.ogg")


class TestConstants:
    def test_presets(self):
        assert DURATION_PRESETS == (2, 3, 4, 5, 10, 15, 20, 25, 30, 45, 60)

    def test_tick_rate(self):
        assert TICK_RATE_SECONDS == 0.2

    def test_sound_extensions(self):
        assert set(SOUND_EXTENSIONS) == {"mp3", "wav", "ogg"}
