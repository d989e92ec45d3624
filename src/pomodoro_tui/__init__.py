"""Pomodoro TUI - a terminal Pomodoro timer with a live configuration menu."""

__version__ = "0.1.0"
