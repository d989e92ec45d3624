"""Minute/second countdown values."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Duration:
    """A non-negative (minutes, seconds) pair with seconds in [0, 59]."""

    minutes: int = 0
    seconds: int = 0

    def __post_init__(self) -> None:
        if self.minutes < 0 or not 0 <= self.seconds <= 59:
            raise ValueError(
                f"Invalid duration {self.minutes}:{self.seconds:02d}"
            )

    @classmethod
    def of_minutes(cls, minutes: int) -> "Duration":
        """Create a whole-minute duration."""
        return cls(minutes, 0)

    def total_seconds(self) -> int:
        return self.minutes * 60 + self.seconds

    def is_zero(self) -> bool:
        return self.minutes == 0 and self.seconds == 0

    def tick_down(self) -> "Duration":
        """Return the duration one second shorter, saturating at 00:00."""
        if self.seconds > 0:
            return Duration(self.minutes, self.seconds - 1)
        if self.minutes > 0:
            return Duration(self.minutes - 1, 59)
        return self

    def format(self) -> str:
        """Format as MM:SS (minutes grow past two digits if needed)."""
        return f"{self.minutes:02d}:{self.seconds:02d}"

    def __str__(self) -> str:
        return self.format()
