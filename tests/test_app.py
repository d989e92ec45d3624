"""Unit tests for the PomodoroApp dispatcher.

Events are fed straight into handle_event, and the full run loop is driven
with a scripted keyboard so no real terminal is needed.
"""

from __future__ import annotations

import time
from io import StringIO
from unittest.mock import MagicMock

import pytest
from rich.console import Console
from rich.layout import Layout

from pomodoro_tui.app import PomodoroApp
from pomodoro_tui.config import TimerSettings
from pomodoro_tui.models.duration import Duration
from pomodoro_tui.models.events import ErrorEvent, KeyEvent, TickEvent
from pomodoro_tui.utils import exit_codes


class ScriptedKeyboard:
    """Returns the given keys (or raises given errors), then waits quietly."""

    def __init__(self, *keys):
        self.keys = list(keys)
        self.stopped = False

    def get_key(self, timeout: float = 0):
        if self.keys:
            key = self.keys.pop(0)
            if isinstance(key, Exception):
                raise key
            return key
        time.sleep(min(timeout, 0.01))
        return None

    def stop(self):
        self.stopped = True


@pytest.fixture()
def notifier():
    return MagicMock()


@pytest.fixture()
def app(notifier) -> PomodoroApp:
    console = Console(file=StringIO(), force_terminal=False, width=100, height=30)
    settings = TimerSettings(work_minutes=2, break_minutes=1, sound_path="sounds/bell.mp3")
    return PomodoroApp(settings, console=console, notifier=notifier)


def _keys(app: PomodoroApp, *keys: str) -> None:
    for key in keys:
        app.handle_event(KeyEvent(key))


def _ticks(app: PomodoroApp, count: int) -> None:
    for _ in range(count):
        app.handle_event(TickEvent(1.0))


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_engine_built_from_settings(self, app):
        assert app.engine.work_duration == Duration(2, 0)
        assert app.engine.break_duration == Duration(1, 0)
        assert str(app.engine.sound_path) == "sounds/bell.mp3"
        assert app.engine.no_sound is False

    def test_starts_with_menu_closed(self, app):
        assert not app.menu.is_open()
        assert app.exit is False
        assert app.exit_code == exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Normal-mode hotkeys
# ---------------------------------------------------------------------------


class TestHotkeys:
    def test_s_starts_and_pauses(self, app):
        _keys(app, "s")
        assert app.engine.is_running()
        _keys(app, "S")
        assert not app.engine.is_running()

    def test_r_resets(self, app):
        _keys(app, "s")
        _ticks(app, 10)
        _keys(app, "r")
        assert app.engine.work_remaining == Duration(2, 0)
        assert not app.engine.is_running()

    def test_c_opens_main_menu(self, app):
        _keys(app, "c")
        assert app.menu.menu_state == "main_menu"
        assert app.menu.menu_selection == 0

    @pytest.mark.parametrize("key", ["q", "esc"])
    def test_quit_keys(self, app, key):
        _keys(app, key)
        assert app.exit is True

    def test_hotkeys_disabled_while_menu_open(self, app):
        _keys(app, "c", "s", "r", "q")
        assert app.exit is False
        assert not app.engine.is_running()
        assert app.menu.menu_state == "main_menu"

    def test_esc_in_menu_closes_menu_not_app(self, app):
        _keys(app, "c", "esc")
        assert not app.menu.is_open()
        assert app.exit is False


# ---------------------------------------------------------------------------
# Ticks
# ---------------------------------------------------------------------------


class TestTicks:
    def test_ticks_run_while_menu_open(self, app):
        _keys(app, "s", "c")
        _ticks(app, 5)
        assert app.engine.work_remaining == Duration(1, 55)
        assert app.menu.menu_state == "main_menu"

    def test_work_end_opens_extend_menu(self, app, notifier):
        _keys(app, "s", "c", "down", "enter")  # into select_break_duration
        _ticks(app, 120)

        assert app.engine.state() == "break"
        assert app.engine.run_state == "paused"
        assert app.menu.menu_state == "extend_work_session"
        assert app.menu.menu_selection == 0
        notifier.notify.assert_called_once_with(app.engine.sound_path, False)

    def test_extend_then_work_runs(self, app):
        _keys(app, "s")
        _ticks(app, 120)
        _keys(app, "down", "down", "enter")

        assert app.engine.state() == "work"
        assert app.engine.work_remaining == Duration(4, 0)
        assert app.engine.is_running()
        assert not app.menu.is_open()

    def test_full_cycle_with_break(self, app, notifier):
        _keys(app, "s")
        _ticks(app, 120)
        _keys(app, "esc")  # take the break
        _ticks(app, 60)

        assert app.engine.state() == "work"
        assert not app.engine.is_running()
        assert notifier.notify.call_count == 2


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestErrorEvent:
    def test_error_sets_exit_and_code(self, app):
        app.handle_event(ErrorEvent(OSError("gone")))
        assert app.exit is True
        assert app.exit_code == exit_codes.ERROR_TERMINAL_IO


# ---------------------------------------------------------------------------
# Rendering and main loop
# ---------------------------------------------------------------------------


class TestRun:
    def test_render_returns_layout(self, app):
        assert isinstance(app.render(), Layout)

    def test_quit_key_ends_loop(self, app):
        keyboard = ScriptedKeyboard("s", "q")

        code = app.run(keyboard=keyboard)

        assert code == exit_codes.SUCCESS
        assert keyboard.stopped
        assert app.engine.is_running()
        assert app.bus.closed

    def test_terminal_error_ends_loop(self, app):
        keyboard = ScriptedKeyboard(OSError("stdin closed"))

        code = app.run(keyboard=keyboard)

        assert code == exit_codes.ERROR_TERMINAL_IO
        assert keyboard.stopped
