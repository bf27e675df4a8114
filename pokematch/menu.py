"""Title screens, menu buttons and the menu that picks a level."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Sequence

from .leaderboard import PlayerRecord, render_leaderboard
from .screen import Color, Terminal

_START_ART = [
    " _____   ____  _  ________ __  __  ____  _   _ \n",
    "|  __ \\ / __ \\| |/ /  ____|  \\/  |/ __ \\| \\ | |\n",
    "| |__) | |  | | ' /| |__  | \\  / | |  | |  \\| |\n",
    "|  ___/| |  | |  < |  __| | |\\/| | |  | | . ` |\n",
    "| |    | |__| | . \\| |____| |  | | |__| | |\\  |\n",
    "|_|     \\____/|_|\\_\\______|_|  |_|\\____/|_| \\_|\n",
]

_END_ART = [
    " __     ______  _    _  __          _______ _   _     _ \n",
    " \\ \\   / / __ \\| |  | | \\ \\        / /_   _| \\ | |   | |\n",
    "  \\ \\_/ / |  | | |  | |  \\ \\  /\\  / /  | | |  \\| |   | |\n",
    "   \\   /| |  | | |  | |   \\ \\/  \\/ /   | | | . ` |   | |\n",
    "    | | | |__| | |__| |    \\  /\\  /   _| |_| |\\  |   |_|\n",
    "    |_|  \\____/ \\____/      \\/  \\/   |_____|_| \\_|   (_)\n",
]

_END_COLORS = [Color.AQUA, Color.AQUA, Color.GRAY, Color.GRAY, Color.RED, Color.RED]

_BUTTON_EDGE = " " + "-" * 33 + " "
_BUTTON_SIDE = "|" + " " * 33 + "|"
_BUTTON = [_BUTTON_EDGE, _BUTTON_SIDE, _BUTTON_SIDE, _BUTTON_SIDE, _BUTTON_EDGE]
_BUTTON_X = 88
_LABEL_X = 102
_FIRST_SLOT_Y = 20

_RUNS = re.compile(r" +|[^ ]+")


def _write_art(terminal: Terminal, line: str, color: Color) -> None:
    for run in _RUNS.findall(line):
        if run.startswith(" "):
            terminal.write(run)
        else:
            terminal.set_color(Color.BLACK, color)
            terminal.write(run)
            terminal.set_color(Color.BLACK, Color.WHITE)


def print_banner(terminal: Terminal) -> None:
    """Draw the game's title in aqua."""
    terminal.write("\n" * 8)
    for line in _START_ART:
        terminal.write("\t" * 10)
        _write_art(terminal, line, Color.AQUA)
    terminal.pause(0.5)


def print_end_banner(terminal: Terminal) -> None:
    """Type out the closing banner one character at a time."""
    terminal.write("\n" * 8)
    for line, color in zip(_END_ART, _END_COLORS):
        terminal.write("\t" * 10)
        for char in line:
            if char == " ":
                terminal.write(char)
                continue
            terminal.pause(0.001)
            terminal.set_color(Color.BLACK, color)
            terminal.write(char)
            terminal.set_color(Color.BLACK, Color.WHITE)


def print_background(
    terminal: Terminal, level: int, directory: str | os.PathLike[str] = "."
) -> None:
    """Draw ``Background<level>.txt`` from ``directory`` in aqua."""
    if level not in (1, 2, 3):
        raise ValueError(f"unknown level {level!r}")
    path = Path(directory) / f"Background{level}.txt"
    lines = path.read_text(encoding="utf-8").splitlines()
    for y, line in enumerate(lines, start=10):
        terminal.set_color(Color.BLACK, Color.AQUA)
        terminal.goto(10, y)
        terminal.write(line + "\n")
        terminal.set_color(Color.BLACK, Color.WHITE)


def draw_button(terminal: Terminal, label: str, slot: int) -> None:
    """Draw a boxed label in menu position ``slot`` using the current colours."""
    if slot < 0:
        raise ValueError("slot must not be negative")
    top = _FIRST_SLOT_Y + slot * len(_BUTTON)
    for offset, line in enumerate(_BUTTON):
        terminal.goto(_BUTTON_X, top + offset)
        terminal.write(line + "\n")
    terminal.goto(_LABEL_X, top + 2)
    terminal.write(label)
    terminal.set_color(Color.BLACK, Color.WHITE)


def select(terminal: Terminal, labels: Sequence[str]) -> int:
    """Show the buttons and return the index chosen with w, s and space."""
    if not labels:
        raise ValueError("a menu needs at least one entry")
    terminal.set_color(Color.WHITE, Color.BLACK)
    draw_button(terminal, labels[0], 0)
    for slot, label in enumerate(labels[1:], start=1):
        draw_button(terminal, label, slot)
    current = 0
    last = len(labels) - 1
    while True:
        key = terminal.read_key()
        if key in ("w", "s"):
            terminal.set_color(Color.BLACK, Color.WHITE)
            draw_button(terminal, labels[current], current)
            step = 1 if key == "s" else -1
            current = min(last, max(0, current + step))
            terminal.set_color(Color.WHITE, Color.BLACK)
            draw_button(terminal, labels[current], current)
        elif key == " ":
            terminal.set_color(Color.AQUA, Color.WHITE)
            draw_button(terminal, labels[current], current)
            terminal.beep()
            return current


def choose_level(terminal: Terminal, records: Sequence[PlayerRecord]) -> int | None:
    """Run the main menu; return the chosen level 1 to 3, or None on exit."""
    while True:
        terminal.clear()
        print_banner(terminal)
        choice = select(terminal, ["MODE", "LEADERBOARD", "EXIT"])
        if choice == 0:
            terminal.clear()
            print_banner(terminal)
            level = select(terminal, ["LEVEL1", "LEVEL2", "LEVEL3", "RETURN"])
            if level < 3:
                return level + 1
        elif choice == 1:
            terminal.clear()
            render_leaderboard(terminal, records)
            terminal.set_color(Color.WHITE, Color.BLACK)
            draw_button(terminal, "RETURN", 1)
            terminal.read_key()
        else:
            return None
        terminal.clear()