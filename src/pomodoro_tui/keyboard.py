"""Cross-platform keyboard input handler for the timer loop."""

from __future__ import annotations

import os
import select
import sys
import time
from collections import deque

from pomodoro_tui.models.events import SpecialKey

if sys.platform != "win32":
    import termios
    import tty

# ANSI sequences sent by arrow keys (normal and application cursor mode)
ESCAPE_SEQUENCES: dict[str, SpecialKey] = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1bOA": "up",
    "\x1bOB": "down",
    "\x1bOC": "right",
    "\x1bOD": "left",
}

SINGLE_KEYS: dict[str, SpecialKey] = {
    "\r": "enter",
    "\n": "enter",
    "\x1b": "esc",
    "\x7f": "backspace",
    "\x08": "backspace",
    "\t": "tab",
}

# How long to wait for the rest of an escape sequence split across reads
ESCAPE_TIMEOUT = 0.05


class TerminalInputError(OSError):
    """Terminal input could not be polled or read."""


def decode_keys(data: str) -> list[str]:
    """Split raw terminal input into normalized key names.

    Printable characters are returned as-is; arrows, Enter and Esc become
    ``"up"``, ``"down"``, ``"enter"``, ``"esc"`` and so on.
    """
    keys = []
    i = 0
    while i < len(data):
        if data[i] == "\x1b" and data[i + 1 : i + 2] in ("[", "O"):
            sequence = data[i : i + 3]
            if sequence in ESCAPE_SEQUENCES:
                keys.append(ESCAPE_SEQUENCES[sequence])
                i += 3
                continue
            # Unknown sequence (F-keys, Home, ...): skip to its final byte
            j = i + 2
            while j < len(data) and not (data[j].isalpha() or data[j] == "~"):
                j += 1
            i = j + 1
            continue
        char = data[i]
        keys.append(SINGLE_KEYS.get(char, char))
        i += 1
    return keys


def is_incomplete_escape(data: str) -> bool:
    """True if ``data`` stops partway through an escape sequence."""
    start = data.rfind("\x1b")
    if start == -1:
        return False
    tail = data[start + 1 :]
    if not tail:
        return True
    if tail[0] == "O":
        return len(tail) < 2
    if tail[0] == "[":
        return not any(c.isalpha() or c == "~" for c in tail[1:])
    return False


class KeyboardHandler:
    """Keyboard input in cbreak mode with a bounded wait."""

    def __init__(self):
        self.fd = sys.stdin.fileno()
        self.old_settings = None
        self._pending: deque[str] = deque()
        self._setup()

    def _setup(self):
        """Setup terminal for unbuffered, unechoed input."""
        try:
            self.old_settings = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
        except termios.error:
            # Not a TTY (piped input); read it as-is
            pass

    def get_key(self, timeout: float = 0) -> str | None:
        """
        Wait up to ``timeout`` seconds for a key press.

        Returns the key name or None if nothing was pressed in time.

        Raises:
            TerminalInputError: if stdin cannot be polled or has been closed.
        """
        if self._pending:
            return self._pending.popleft()

        try:
            ready, _, _ = select.select([self.fd], [], [], max(0.0, timeout))
            if not ready:
                return None
            data = os.read(self.fd, 64)
            if data:
                data = self._read_rest_of_escape(data)
        except (OSError, ValueError) as e:
            raise TerminalInputError(f"cannot read terminal input: {e}") from e

        if not data:
            raise TerminalInputError("terminal input closed")

        self._pending.extend(decode_keys(data.decode("utf-8", errors="ignore")))
        return self._pending.popleft() if self._pending else None

    def _read_rest_of_escape(self, data: bytes) -> bytes:
        # A lone Esc only counts as "esc" once no sequence bytes follow it
        while is_incomplete_escape(data.decode("utf-8", errors="ignore")):
            ready, _, _ = select.select([self.fd], [], [], ESCAPE_TIMEOUT)
            more = os.read(self.fd, 64) if ready else b""
            if not more:
                break
            data += more
        return data

    def stop(self):
        """Restore terminal settings."""
        if self.old_settings:
            try:
                termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
            except termios.error:
                pass


class WindowsKeyboardHandler:
    """Keyboard handler for Windows using msvcrt."""

    # Second byte after a 0x00/0xE0 prefix
    SCAN_CODES: dict[str, SpecialKey] = {"H": "up", "P": "down", "K": "left", "M": "right"}

    def __init__(self, poll_interval: float = 0.01):
        try:
            import msvcrt

            self.msvcrt = msvcrt
        except ImportError:
            self.msvcrt = None
        self.poll_interval = poll_interval

    def get_key(self, timeout: float = 0) -> str | None:
        """Wait up to ``timeout`` seconds for a key press."""
        if not self.msvcrt:
            raise TerminalInputError("msvcrt is not available")

        deadline = time.monotonic() + timeout
        while not self.msvcrt.kbhit():
            if time.monotonic() >= deadline:
                return None
            time.sleep(self.poll_interval)

        key = self._getch()
        if key in ("\x00", "\xe0"):
            return self.SCAN_CODES.get(self._getch())
        return SINGLE_KEYS.get(key, key)

    def _getch(self) -> str:
        key = self.msvcrt.getwch()
        if isinstance(key, bytes):
            key = key.decode("latin-1", errors="ignore")
        return key

    def stop(self):
        """No cleanup needed on Windows."""
        pass


def create_keyboard_handler() -> KeyboardHandler | WindowsKeyboardHandler:
    """Pick the handler for the current platform."""
    if sys.platform == "win32":
        return WindowsKeyboardHandler()
    return KeyboardHandler()
