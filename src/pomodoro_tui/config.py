"""Runtime settings for Pomodoro TUI.

Settings come from the command line only and live for the lifetime of the
process; changes made through the configuration menu are not written back.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

# Event source timing
TICK_RATE_SECONDS = 0.2

# Sound discovery
SOUNDS_DIR = Path("sounds")
SOUND_EXTENSIONS = ("mp3", "wav", "ogg")
DEFAULT_SOUND = SOUNDS_DIR / "notification.mp3"

# Preset lengths (minutes) offered by the duration and extend menus
DURATION_PRESETS: tuple[int, ...] = (2, 3, 4, 5, 10, 15, 20, 25, 30, 45, 60)


class TimerSettings(BaseModel):
    """Initial timer configuration."""

    work_minutes: int = Field(default=25, ge=1, le=999)
    break_minutes: int = Field(default=5, ge=1, le=999)
    hide_image: bool = Field(default=False)
    sound_path: Path = Field(default=DEFAULT_SOUND)
    no_sound: bool = Field(default=False)

    @field_validator("sound_path")
    @classmethod
    def expand_sound_path(cls, v: Path) -> Path:
        """Expand ``~`` so the notifier gets a usable path."""
        return v.expanduser()
