"""Shared test fixtures and configuration.

Keeps tests away from the real log directory and the real terminal.
"""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from pomodoro_tui.models.duration import Duration
from pomodoro_tui.models.menu import MenuController
from pomodoro_tui.models.timer import TimerEngine


# ---------------------------------------------------------------------------
# Logger isolation
# ---------------------------------------------------------------------------


def _drop_file_handlers() -> None:
    """Close and detach file handlers left on the app logger by earlier tests."""
    logger = logging.getLogger("pomodoro_tui")
    for handler in list(logger.handlers):
        if isinstance(handler, logging.FileHandler):
            logger.removeHandler(handler)
            handler.close()


@pytest.fixture(autouse=True)
def isolated_logger(tmp_path):
    """Send the application log to *tmp_path* and reset the singleton."""
    import pomodoro_tui.utils.logger as logger_mod

    logger_mod._logger = None
    _drop_file_handlers()
    with patch("pomodoro_tui.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")):
        yield
    logger_mod._logger = None
    _drop_file_handlers()


# ---------------------------------------------------------------------------
# Domain fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def engine() -> TimerEngine:
    """A paused engine with 25/5 minute phases."""
    return TimerEngine(
        work_duration=Duration(25, 0),
        break_duration=Duration(5, 0),
        sound_path=Path("sounds/notification.mp3"),
    )


@pytest.fixture()
def sound_files() -> list[Path]:
    return [Path("sounds/bell.mp3"), Path("sounds/chime.wav"), Path("sounds/gong.ogg")]


@pytest.fixture()
def menu(engine, sound_files) -> MenuController:
    """A closed menu over *engine* whose sound scan returns *sound_files*."""
    return MenuController(engine, scan_sounds=MagicMock(return_value=sound_files))


@pytest.fixture()
def empty_menu(engine) -> MenuController:
    """A closed menu whose sound scan finds nothing."""
    return MenuController(engine, scan_sounds=MagicMock(return_value=[]))
