"""Event loop tying the input thread, timer, menu and display together."""

from __future__ import annotations

from rich.console import Console
from rich.layout import Layout
from rich.live import Live

from pomodoro_tui.config import TimerSettings
from pomodoro_tui.keyboard import create_keyboard_handler
from pomodoro_tui.models.duration import Duration
from pomodoro_tui.models.events import ErrorEvent, Event, KeyEvent, TickEvent
from pomodoro_tui.models.menu import MenuController
from pomodoro_tui.models.timer import Phase, TimerEngine
from pomodoro_tui.services.event_bus import EventBus
from pomodoro_tui.services.event_source import EventSource, KeySource
from pomodoro_tui.services.sound import SoundNotifier
from pomodoro_tui.ui.display import TimerDisplay
from pomodoro_tui.utils import exit_codes
from pomodoro_tui.utils.logger import get_logger


class PomodoroApp:
    """Single-threaded dispatcher.

    Events are taken off the bus one at a time and fully handled before the
    next one, so a key press and a phase-ending tick never interleave. All
    timer and menu state is changed here and nowhere else.
    """

    def __init__(
        self,
        settings: TimerSettings,
        console: Console | None = None,
        notifier: SoundNotifier | None = None,
        bus: EventBus | None = None,
    ):
        self.settings = settings
        self.notifier = notifier or SoundNotifier()
        self.engine = TimerEngine(
            work_duration=Duration.of_minutes(settings.work_minutes),
            break_duration=Duration.of_minutes(settings.break_minutes),
            sound_path=settings.sound_path,
            no_sound=settings.no_sound,
            on_phase_end=self._on_phase_end,
        )
        self.menu = MenuController(self.engine)
        self.bus = bus or EventBus()
        self.display = TimerDisplay(console, hide_image=settings.hide_image)
        self.exit = False
        self.exit_code = exit_codes.SUCCESS
        self.logger = get_logger()

    # ----- Event routing -----
    def handle_event(self, event: Event) -> None:
        if isinstance(event, KeyEvent):
            self.handle_key(event.key)
        elif isinstance(event, TickEvent):
            self.handle_tick(event.elapsed)
        elif isinstance(event, ErrorEvent):
            self.logger.error("stopping after terminal error: %s", event.error)
            self.exit_code = exit_codes.ERROR_TERMINAL_IO
            self.exit = True

    def handle_key(self, key: str) -> None:
        """Menu keys while a menu is open, hotkeys otherwise."""
        if self.menu.is_open():
            self.menu.handle_key(key)
            return

        key = key.lower()
        if key == "s":
            self.engine.start_or_pause()
        elif key == "r":
            self.engine.reset()
        elif key == "c":
            self.menu.open_main_menu()
        elif key in ("q", "esc"):
            self.exit = True

    def handle_tick(self, elapsed: float = 1.0) -> None:
        """Advance the timer; an ended work session opens the extend menu."""
        if self.engine.check_and_switch(elapsed):
            self.menu.open_extend_session()

    def _on_phase_end(self, finished: Phase) -> None:
        self.logger.info(
            "%s phase ended, now %s (%s)",
            finished,
            self.engine.state(),
            self.engine.run_state,
        )
        self.notifier.notify(self.engine.sound_path, self.engine.no_sound)

    # ----- Main loop -----
    def render(self) -> Layout:
        return self.display.create_layout(self.engine, self.menu)

    def run(self, keyboard: KeySource | None = None) -> int:
        """Run until the user quits or terminal input fails.

        Returns the process exit code.
        """
        keyboard = keyboard or create_keyboard_handler()
        source = EventSource(self.bus, keyboard)
        self.logger.info(
            "timer started: work=%s break=%s",
            self.engine.work_time(),
            self.engine.break_time(),
        )

        source.start()
        try:
            with Live(
                self.render(),
                console=self.display.console,
                auto_refresh=False,
                screen=True,
            ) as live:
                while not self.exit:
                    event = self.bus.get()
                    if event is None:
                        break
                    self.handle_event(event)
                    live.update(self.render(), refresh=True)
        finally:
            source.stop()
            self.bus.close()
            source.join(timeout=source.tick_rate * 5)
            keyboard.stop()

        self.logger.info("timer stopped with exit code %d", self.exit_code)
        return self.exit_code
