"""Full-screen rendering for Pomodoro TUI."""

from .display import TimerDisplay

__all__ = ["TimerDisplay"]
