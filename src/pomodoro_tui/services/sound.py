"""Notification sound discovery and playback."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

from pomodoro_tui.config import SOUND_EXTENSIONS, SOUNDS_DIR
from pomodoro_tui.utils.console import get_console
from pomodoro_tui.utils.logger import get_logger

NO_SOUNDS_LABEL = f"No sound files found in {SOUNDS_DIR.as_posix()}/"

# Command-line players tried in order; the sound path is appended
PLAYERS: tuple[tuple[str, ...], ...] = (
    ("paplay",),
    ("aplay", "-q"),
    ("afplay",),
    ("ffplay", "-nodisp", "-autoexit", "-loglevel", "quiet"),
)


def discover_sound_files(directory: Path = SOUNDS_DIR) -> list[Path]:
    """List audio files directly inside ``directory``, sorted by path.

    A missing or unreadable directory yields an empty list.
    """
    try:
        entries = list(directory.iterdir())
    except OSError as e:
        get_logger().debug("sound scan skipped for %s: %s", directory, e)
        return []

    sound_files = []
    for path in entries:
        try:
            if not path.is_file():
                continue
        except OSError:
            continue
        if path.suffix[1:].lower() in SOUND_EXTENSIONS:
            sound_files.append(path)

    sound_files.sort()
    return sound_files


def find_player() -> tuple[str, ...] | None:
    """Return the first installed command-line audio player, if any."""
    for command in PLAYERS:
        if shutil.which(command[0]):
            return command
    return None


class SoundNotifier:
    """Plays the notification sound when a phase ends."""

    def __init__(self, player: tuple[str, ...] | None = None):
        self.player = player if player is not None else find_player()
        self.logger = get_logger()

    def notify(self, sound_path: Path, no_sound: bool = False) -> bool:
        """Play ``sound_path`` in a detached process.

        Falls back to the terminal bell when the file or a player is missing.

        Returns:
            True if a player process was started.
        """
        if no_sound:
            return False

        if self.player is None or not sound_path.is_file():
            self.logger.debug("no player or sound file (%s), ringing bell", sound_path)
            get_console().bell()
            return False

        try:
            subprocess.Popen(
                [*self.player, str(sound_path)],
                start_new_session=True,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                stdin=subprocess.DEVNULL,
            )
        except OSError as e:
            self.logger.warning("could not play %s: %s", sound_path, e)
            get_console().bell()
            return False
        return True
