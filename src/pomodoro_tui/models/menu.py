"""Modal configuration menu layered over the timer.

Each menu is described once in ``MENU_SPECS``: its title, item labels,
what Enter does and what Esc does. Navigation bounds, rendering and
selection handling all read from that table.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from pomodoro_tui.config import DURATION_PRESETS, SOUNDS_DIR
from pomodoro_tui.services.sound import NO_SOUNDS_LABEL, discover_sound_files
from pomodoro_tui.utils.logger import get_logger

from .timer import TimerEngine

MenuState = Literal[
    "none",
    "main_menu",
    "select_work_duration",
    "select_break_duration",
    "extend_work_session",
    "select_sound",
]


@dataclass(frozen=True)
class MenuSpec:
    """Behaviour of one menu screen."""

    title: str
    labels: Callable[["MenuController"], list[str]]
    on_confirm: Callable[["MenuController", int], None]
    on_back: Callable[["MenuController"], None]

    def item_count(self, controller: "MenuController") -> int:
        return len(self.labels(controller))


class MenuController:
    """Routes key presses while a menu is open.

    ``menu_selection`` always stays within the open menu's items: Up and
    Down saturate at the ends, and every state change resets it to 0.
    """

    def __init__(
        self,
        engine: TimerEngine,
        sounds_dir: Path = SOUNDS_DIR,
        scan_sounds: Callable[[Path], list[Path]] = discover_sound_files,
    ):
        self.engine = engine
        self.sounds_dir = sounds_dir
        self.scan_sounds = scan_sounds
        self.menu_state: MenuState = "none"
        self.menu_selection = 0
        self.sound_files: list[Path] = []
        self.logger = get_logger()

    # ----- Queries -----
    def is_open(self) -> bool:
        return self.menu_state != "none"

    @property
    def spec(self) -> MenuSpec | None:
        return MENU_SPECS.get(self.menu_state)

    def title(self) -> str:
        spec = self.spec
        return spec.title if spec else ""

    def items(self) -> list[str]:
        spec = self.spec
        return spec.labels(self) if spec else []

    def item_count(self) -> int:
        spec = self.spec
        return spec.item_count(self) if spec else 0

    # ----- Transitions -----
    def go_to(self, state: MenuState) -> None:
        """Switch to ``state`` with the selection back on the first item."""
        if state == "select_sound":
            self.sound_files = self.scan_sounds(self.sounds_dir)
        self.menu_state = state
        self.menu_selection = 0

    def open_main_menu(self) -> None:
        self.go_to("main_menu")

    def open_extend_session(self) -> None:
        """Ask whether to extend work; replaces whatever menu was open."""
        self.go_to("extend_work_session")

    def close(self) -> None:
        self.go_to("none")

    def move_up(self) -> None:
        if self.menu_selection > 0:
            self.menu_selection -= 1

    def move_down(self) -> None:
        if self.menu_selection < self.item_count() - 1:
            self.menu_selection += 1

    def confirm(self) -> None:
        spec = self.spec
        if spec:
            spec.on_confirm(self, self.menu_selection)

    def back(self) -> None:
        spec = self.spec
        if spec:
            spec.on_back(self)

    def handle_key(self, key: str) -> None:
        """Apply a key press to the open menu. Unbound keys are ignored."""
        if key == "up":
            self.move_up()
        elif key == "down":
            self.move_down()
        elif key == "enter":
            self.confirm()
        elif key == "esc":
            self.back()


# ---------------------------------------------------------------------------
# Menu table
# ---------------------------------------------------------------------------


def _main_labels(controller: MenuController) -> list[str]:
    status = "ON" if controller.engine.auto_start else "OFF"
    return [
        "Change Work Duration",
        "Change Break Duration",
        f"Toggle Auto-Start ({status})",
        "Change Notification Sound",
        "Back",
    ]


def _main_confirm(controller: MenuController, index: int) -> None:
    if index == 0:
        controller.go_to("select_work_duration")
    elif index == 1:
        controller.go_to("select_break_duration")
    elif index == 2:
        controller.engine.toggle_auto_start()
        controller.logger.info("auto-start set to %s", controller.engine.auto_start)
    elif index == 3:
        controller.go_to("select_sound")
    elif index == 4:
        controller.close()


def _back_to_main(controller: MenuController) -> None:
    controller.go_to("main_menu")


def _preset_labels(controller: MenuController) -> list[str]:
    return [f"{minutes} minutes" for minutes in DURATION_PRESETS]


def _work_duration_confirm(controller: MenuController, index: int) -> None:
    if index < len(DURATION_PRESETS):
        controller.engine.set_work_duration(DURATION_PRESETS[index])
        controller.logger.info("work duration set to %d minutes", DURATION_PRESETS[index])
        controller.go_to("main_menu")


def _break_duration_confirm(controller: MenuController, index: int) -> None:
    if index < len(DURATION_PRESETS):
        controller.engine.set_break_duration(DURATION_PRESETS[index])
        controller.logger.info("break duration set to %d minutes", DURATION_PRESETS[index])
        controller.go_to("main_menu")


def _extend_labels(controller: MenuController) -> list[str]:
    labels = [f"Extend {minutes} minutes" for minutes in DURATION_PRESETS]
    labels.append("No, start break")
    return labels


def _start_break(controller: MenuController) -> None:
    # The engine is paused in the break phase; toggling resumes it
    controller.engine.start_or_pause()
    controller.logger.info("break started")
    controller.close()


def _extend_confirm(controller: MenuController, index: int) -> None:
    if index < len(DURATION_PRESETS):
        controller.engine.extend_work_session(DURATION_PRESETS[index])
        controller.logger.info("work session extended by %d minutes", DURATION_PRESETS[index])
        controller.close()
    else:
        _start_break(controller)


def _sound_labels(controller: MenuController) -> list[str]:
    if not controller.sound_files:
        return [NO_SOUNDS_LABEL]
    return [path.name for path in controller.sound_files]


def _sound_confirm(controller: MenuController, index: int) -> None:
    if controller.sound_files and index < len(controller.sound_files):
        selected = controller.sound_files[index]
        controller.engine.set_sound(selected)
        controller.logger.info("notification sound set to %s", selected)
        controller.go_to("main_menu")


def _close(controller: MenuController) -> None:
    controller.close()


MENU_SPECS: dict[MenuState, MenuSpec] = {
    "main_menu": MenuSpec(
        title="Configuration Menu",
        labels=_main_labels,
        on_confirm=_main_confirm,
        on_back=_close,
    ),
    "select_work_duration": MenuSpec(
        title="Select Work Duration (minutes)",
        labels=_preset_labels,
        on_confirm=_work_duration_confirm,
        on_back=_back_to_main,
    ),
    "select_break_duration": MenuSpec(
        title="Select Break Duration (minutes)",
        labels=_preset_labels,
        on_confirm=_break_duration_confirm,
        on_back=_back_to_main,
    ),
    "extend_work_session": MenuSpec(
        title="Work Session Complete! Extend?",
        labels=_extend_labels,
        on_confirm=_extend_confirm,
        # Esc picks the default answer: take the break
        on_back=_start_break,
    ),
    "select_sound": MenuSpec(
        title="Select Notification Sound",
        labels=_sound_labels,
        on_confirm=_sound_confirm,
        on_back=_back_to_main,
    ),
}
