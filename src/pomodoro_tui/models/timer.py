"""Pomodoro work/break countdown state machine."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Literal

from .duration import Duration

Phase = Literal["work", "break"]
RunState = Literal["running", "paused"]

# Tolerance when summing fractional tick intervals
_EPSILON = 1e-6


class TimerEngine:
    """Tracks the active phase, run state and both countdowns.

    Work and break remaining times are kept separately, so the inactive
    phase keeps its progress while the other one counts down. Only the
    dispatcher thread calls into this class.
    """

    def __init__(
        self,
        work_duration: Duration,
        break_duration: Duration,
        sound_path: Path,
        no_sound: bool = False,
        auto_start: bool = False,
        on_phase_end: Callable[[Phase], None] | None = None,
    ):
        """Initialize a paused engine at the start of a work phase.

        Args:
            work_duration: Target length of a work session.
            break_duration: Target length of a break.
            sound_path: Notification sound played when a phase ends.
            no_sound: Disable the notification sound.
            auto_start: Resume work automatically when a break ends.
            on_phase_end: Called with the phase that just finished.
        """
        self.phase: Phase = "work"
        self.run_state: RunState = "paused"
        self.work_duration = work_duration
        self.break_duration = break_duration
        self.work_remaining = work_duration
        self.break_remaining = break_duration
        self._auto_start = auto_start
        self.sound_path = sound_path
        self.no_sound = no_sound
        self.on_phase_end = on_phase_end
        self._carry = 0.0

    # ----- Queries -----
    def state(self) -> Phase:
        return self.phase

    def is_running(self) -> bool:
        return self.run_state == "running"

    @property
    def auto_start(self) -> bool:
        return self._auto_start

    def work_time(self) -> str:
        return self.work_remaining.format()

    def break_time(self) -> str:
        return self.break_remaining.format()

    # ----- Commands -----
    def start_or_pause(self) -> None:
        """Toggle between running and paused."""
        self.run_state = "paused" if self.is_running() else "running"

    def reset(self) -> None:
        """Rewind both countdowns to their targets and pause. Phase is kept."""
        self.work_remaining = self.work_duration
        self.break_remaining = self.break_duration
        self.run_state = "paused"
        self._carry = 0.0

    def toggle_auto_start(self) -> None:
        self._auto_start = not self._auto_start

    def set_work_duration(self, minutes: int) -> None:
        """Set the work target and restart the work countdown from it."""
        self.work_duration = Duration.of_minutes(minutes)
        self.work_remaining = self.work_duration

    def set_break_duration(self, minutes: int) -> None:
        """Set the break target and restart the break countdown from it."""
        self.break_duration = Duration.of_minutes(minutes)
        self.break_remaining = self.break_duration

    def extend_work_session(self, minutes: int) -> None:
        """Go back to work for ``minutes`` more, replacing the expired timer."""
        self.phase = "work"
        self.work_remaining = Duration.of_minutes(minutes)
        self.run_state = "running"
        self._carry = 0.0

    def set_sound(self, path: Path) -> None:
        self.sound_path = path

    def check_and_switch(self, elapsed: float = 1.0) -> bool:
        """Advance the active countdown and handle phase boundaries.

        Called on every tick. Each whole second accumulated from ``elapsed``
        removes one second from the active phase; fractions carry over to the
        next call.

        Returns:
            True if a work session just ended. The engine is then paused in
            the break phase until the user extends work or starts the break.
        """
        if not self.is_running():
            return False

        self._carry += elapsed
        while self._carry + _EPSILON >= 1.0:
            self._carry -= 1.0
            if self.phase == "work":
                self.work_remaining = self.work_remaining.tick_down()
                if self.work_remaining.is_zero():
                    self._carry = 0.0
                    self.phase = "break"
                    self.run_state = "paused"
                    self._notify("work")
                    return True
            else:
                self.break_remaining = self.break_remaining.tick_down()
                if self.break_remaining.is_zero():
                    self._carry = 0.0
                    self.break_remaining = self.break_duration
                    self.phase = "work"
                    self.work_remaining = self.work_duration
                    self.run_state = "running" if self._auto_start else "paused"
                    self._notify("break")
                    return False
        return False

    def _notify(self, finished: Phase) -> None:
        if self.on_phase_end:
            self.on_phase_end(finished)
