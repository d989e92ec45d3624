"""Full-screen timer UI."""

from __future__ import annotations

from rich.align import Align
from rich.console import Console, Group
from rich.layout import Layout
from rich.panel import Panel
from rich.text import Text

from pomodoro_tui.models.menu import MenuController
from pomodoro_tui.models.timer import TimerEngine

from .ascii_art import big_text, image_for

WORK_COLOR = "blue"
BREAK_COLOR = "green"


class TimerDisplay:
    """Builds one frame from the current timer and menu state.

    Rendering only reads state; it never changes the engine or the menu.
    """

    def __init__(self, console: Console | None = None, hide_image: bool = False):
        self.console = console or Console()
        self.hide_image = hide_image

    def create_layout(self, engine: TimerEngine, menu: MenuController) -> Layout:
        """Create the frame layout with all components."""
        layout = Layout()
        layout.split_column(
            Layout(name="header", size=3),
            Layout(name="body"),
            Layout(name="footer", size=3),
        )

        header_text = Text("Pomodoro", style="bold", justify="center")
        layout["header"].update(Align.center(header_text, vertical="middle"))

        if menu.is_open():
            # Menu takes the image column; the countdown stays visible
            layout["body"].split_row(
                Layout(name="menu", ratio=3), Layout(name="timers", ratio=2)
            )
            layout["menu"].update(
                Align.center(self._create_menu_panel(menu), vertical="middle")
            )
            layout["timers"].update(
                Align.center(self._create_timers(engine), vertical="middle")
            )
        elif self.hide_image:
            layout["body"].update(
                Align.center(self._create_timers(engine), vertical="middle")
            )
        else:
            layout["body"].split_row(Layout(name="image"), Layout(name="timers"))
            layout["image"].update(
                Align.center(self._create_image(engine), vertical="middle")
            )
            layout["timers"].update(
                Align.center(self._create_timers(engine), vertical="middle")
            )

        layout["footer"].update(
            Align.center(self._create_footer_text(engine, menu), vertical="middle")
        )
        return layout

    def _create_image(self, engine: TimerEngine) -> Text:
        return Text("\n".join(image_for(engine.state())), justify="center")

    def _create_timers(self, engine: TimerEngine) -> Group:
        """Work and break countdowns; the active phase is drawn large."""
        components = []
        for phase, value, color in (
            ("work", engine.work_time(), WORK_COLOR),
            ("break", engine.break_time(), BREAK_COLOR),
        ):
            if engine.state() == phase:
                label = "WORK" if phase == "work" else "BREAK"
                if not engine.is_running():
                    label += " (paused)"
                components.append(Text(label, style=f"bold {color}", justify="center"))
                components.append(
                    Text("\n".join(big_text(value)), style=f"bold {color}", justify="center")
                )
            else:
                components.append(Text(value, style=f"dim {color}", justify="center"))
            components.append(Text(""))  # Spacer
        return Group(*components)

    def _create_menu_panel(self, menu: MenuController) -> Panel:
        lines = Text()
        for i, item in enumerate(menu.items()):
            if i == menu.menu_selection:
                lines.append(f"> {item}\n", style="bold yellow")
            else:
                lines.append(f"  {item}\n")
        lines.rstrip()
        return Panel(
            lines,
            title=menu.title(),
            border_style="bold",
            padding=(1, 2),
        )

    def _create_footer_text(self, engine: TimerEngine, menu: MenuController) -> Text:
        """Create footer with keyboard hints."""
        if menu.is_open():
            hints = [("Move ", "<Up/Down>"), (" Select ", "<Enter>"), (" Back ", "<Esc>")]
        else:
            start_pause = "Pause " if engine.is_running() else "Start "
            hints = [
                (start_pause, "<S>"),
                (" Reset ", "<R>"),
                (" Configure ", "<C>"),
                (" Quit ", "<Q/Esc>"),
            ]

        footer = Text(justify="center")
        for label, key in hints:
            footer.append(label)
            footer.append(key, style="bold blue")
        return footer
