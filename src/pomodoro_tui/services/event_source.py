"""Background thread turning key presses and elapsed time into events."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from typing import Protocol

from pomodoro_tui.config import TICK_RATE_SECONDS
from pomodoro_tui.models.events import ErrorEvent, KeyEvent, TickEvent
from pomodoro_tui.utils.logger import get_logger

from .event_bus import EventBus


class KeySource(Protocol):
    def get_key(self, timeout: float = 0) -> str | None: ...

    def stop(self) -> None: ...


class EventSource:
    """Polls the keyboard and emits ticks onto an EventBus.

    Each poll waits at most until the next tick is due. A tick is emitted
    once the deadline has passed, and the next deadline is measured from
    that moment, so a slow iteration never produces a burst of ticks.

    The thread owns no timer or menu state; it only produces events.
    """

    def __init__(
        self,
        bus: EventBus,
        keyboard: KeySource,
        tick_rate: float = TICK_RATE_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.bus = bus
        self.keyboard = keyboard
        self.tick_rate = tick_rate
        self.clock = clock
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        self.logger = get_logger()

    def start(self) -> None:
        self._thread = threading.Thread(
            target=self.run, name="event-source", daemon=True
        )
        self._thread.start()

    def stop(self) -> None:
        """Ask the loop to exit after its current poll."""
        self._stop.set()

    def join(self, timeout: float | None = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)

    @property
    def stopped(self) -> bool:
        return self._stop.is_set()

    def run(self) -> None:
        """Poll until stopped. Terminal errors end the loop with an ErrorEvent."""
        last_tick = self.clock()
        while not self._stop.is_set():
            timeout = max(0.0, self.tick_rate - (self.clock() - last_tick))
            try:
                key = self.keyboard.get_key(timeout)
            except OSError as e:
                self.logger.error("terminal input failed: %s", e)
                self.bus.put(ErrorEvent(e))
                return

            if key is not None:
                self.bus.put(KeyEvent(key))

            now = self.clock()
            if now - last_tick >= self.tick_rate:
                self.bus.put(TickEvent(elapsed=now - last_tick))
                last_tick = now
