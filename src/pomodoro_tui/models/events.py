"""Events carried from the input thread to the dispatcher."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

# Normalized non-printable keys; printable keys are passed as the character
SpecialKey = Literal["up", "down", "left", "right", "enter", "esc", "backspace", "tab"]


@dataclass(frozen=True)
class KeyEvent:
    """A single key press read from the terminal."""

    key: SpecialKey | str


@dataclass(frozen=True)
class TickEvent:
    """A periodic time advance.

    ``elapsed`` is the wall-clock time in seconds since the previous tick.
    """

    elapsed: float = 1.0


@dataclass(frozen=True)
class ErrorEvent:
    """The input thread hit an unrecoverable terminal error and stopped."""

    error: BaseException


Event = KeyEvent | TickEvent | ErrorEvent
