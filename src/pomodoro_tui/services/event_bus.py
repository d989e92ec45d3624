"""Ordered event queue between the input thread and the dispatcher."""

from __future__ import annotations

import queue
import threading

from pomodoro_tui.models.events import Event


class EventBus:
    """FIFO channel with one consumer.

    ``get`` blocks until an event is available. After ``close`` the
    consumer is woken with ``None`` and further events are dropped.
    """

    def __init__(self):
        self._queue: queue.Queue[Event | None] = queue.Queue()
        self._closed = threading.Event()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def put(self, event: Event) -> bool:
        """Enqueue ``event``. Returns False if the bus is closed."""
        if self._closed.is_set():
            return False
        self._queue.put(event)
        return True

    def get(self, timeout: float | None = None) -> Event | None:
        """Return the next event, or None once the bus is closed.

        Raises:
            queue.Empty: if ``timeout`` elapses with no event.
        """
        if self._closed.is_set() and self._queue.empty():
            return None
        return self._queue.get(timeout=timeout)

    def close(self) -> None:
        if not self._closed.is_set():
            self._closed.set()
            self._queue.put(None)
