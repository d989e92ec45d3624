"""Pomodoro TUI domain models.

The timer and menu state machines are plain Python objects mutated only
from the dispatcher thread; nothing here touches the terminal.
"""

from .duration import Duration
from .events import ErrorEvent, Event, KeyEvent, TickEvent
from .menu import MENU_SPECS, MenuController, MenuSpec, MenuState
from .timer import Phase, RunState, TimerEngine

__all__ = [
    "Duration",
    "ErrorEvent",
    "Event",
    "KeyEvent",
    "TickEvent",
    "MENU_SPECS",
    "MenuController",
    "MenuSpec",
    "MenuState",
    "Phase",
    "RunState",
    "TimerEngine",
]
