"""Static ASCII art shown beside the timers."""

from __future__ import annotations

from pomodoro_tui.models.timer import Phase

COMPUTER = [
    r"  ______________________  ",
    r" |  __________________  | ",
    r" | |                  | | ",
    r" | |  > focus_        | | ",
    r" | |                  | | ",
    r" | |__________________| | ",
    r" |______________________| ",
    r"      _____|____|_____    ",
    r"     /  ::::::::::::  \   ",
    r"    /__________________\  ",
]

SLEEPING_CAT = [
    r"                 z z      ",
    r"               z          ",
    r"      |\      _,,,---,,_  ",
    r"      /,`.-'`'    -.  ;-;;,_",
    r"     |,4-  ) )-,_..;\ (  `'-'",
    r"    '---''(_/--'  `-'\_)  ",
    r"                          ",
]

# 5-row block glyphs for the countdown
BIG_GLYPHS: dict[str, list[str]] = {
    "0": ["█████", "█   █", "█   █", "█   █", "█████"],
    "1": ["  █  ", " ██  ", "  █  ", "  █  ", " ███ "],
    "2": ["█████", "    █", "█████", "█    ", "█████"],
    "3": ["█████", "    █", " ████", "    █", "█████"],
    "4": ["█   █", "█   █", "█████", "    █", "    █"],
    "5": ["█████", "█    ", "█████", "    █", "█████"],
    "6": ["█████", "█    ", "█████", "█   █", "█████"],
    "7": ["█████", "    █", "   █ ", "  █  ", "  █  "],
    "8": ["█████", "█   █", "█████", "█   █", "█████"],
    "9": ["█████", "█   █", "█████", "    █", "█████"],
    ":": ["   ", " █ ", "   ", " █ ", "   "],
}


def image_for(phase: Phase) -> list[str]:
    """Return the picture for the active phase."""
    if phase == "work":
        return COMPUTER
    return SLEEPING_CAT


def big_text(value: str) -> list[str]:
    """Render ``value`` (digits and colons) as five rows of block glyphs."""
    rows = ["", "", "", "", ""]
    for char in value:
        glyph = BIG_GLYPHS.get(char)
        if glyph is None:
            continue
        for i, line in enumerate(glyph):
            rows[i] += line + " "
    return [row.rstrip() for row in rows]
