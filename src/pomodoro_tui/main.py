"""Main entry point for Pomodoro TUI."""

from pathlib import Path

import typer
from pydantic import ValidationError

from pomodoro_tui import __version__
from pomodoro_tui.app import PomodoroApp
from pomodoro_tui.config import DEFAULT_SOUND, TimerSettings
from pomodoro_tui.decorators import AppError, command_wrapper
from pomodoro_tui.utils import exit_codes
from pomodoro_tui.utils.console import get_console

app = typer.Typer(
    name="pomodoro-tui",
    help="A Pomodoro work/break timer for the terminal",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        get_console().print(f"[bold]Pomodoro TUI[/bold] version [cyan]{__version__}[/cyan]")
        raise typer.Exit()


def build_settings(**values) -> TimerSettings:
    """Validate command-line values into TimerSettings."""
    try:
        return TimerSettings(**values)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise AppError(f"Invalid options - {problems}", exit_codes.ERROR_INVALID_ARGS) from e


@app.command()
@command_wrapper
def run(
    work: int = typer.Option(25, "--work", "-w", help="Work duration in minutes"),
    break_: int = typer.Option(5, "--break", "-b", help="Break duration in minutes"),
    hide_image: bool = typer.Option(
        False, "--hide-image", help="Hide the ASCII art and show only the timers"
    ),
    sound: Path = typer.Option(
        DEFAULT_SOUND, "--sound", "-s", help="Sound file played when a phase ends"
    ),
    no_sound: bool = typer.Option(False, "--no-sound", help="Disable the notification sound"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Start the timer. Press 's' to start or pause, 'c' to configure, 'q' to quit."""
    settings = build_settings(
        work_minutes=work,
        break_minutes=break_,
        hide_image=hide_image,
        sound_path=sound,
        no_sound=no_sound,
    )
    code = PomodoroApp(settings).run()
    if code == exit_codes.ERROR_TERMINAL_IO:
        message = exit_codes.get_exit_code_description(code)
        raise AppError(f"{message} ({exit_codes.get_exit_code_name(code)})", code)
    if code != exit_codes.SUCCESS:
        raise typer.Exit(code)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
