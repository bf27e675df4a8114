"""Leaderboard records, their text file format and their screen."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Iterable

from .screen import Color, Terminal

_SHOWN = 5

_TITLE = [
    " _      ______          _____  ______ _____  ____   ____          _____  _____ \n",
    "| |    |  ____|   /\\   |  __ \\|  ____|  __ \\|  _ \\ / __ \\   /\\   |  __ \\|  __ \\  \n",
    "| |    | |__     /  \\  | |  | | |__  | |__) | |_) | |  | | /  \\  | |__) | |  | | \n",
    "| |    |  __|   / /\\ \\ | |  | |  __| |  _  /|  _ <| |  | |/ /\\ \\ |  _  /| |  | |\n",
    "| |____| |____ / ____ \\| |__| | |____| | \\ \\| |_) | |__| / ____ \\| | \\ \\| |__| | \n",
    "|______|______/_/    \\_\\_____/|______|_|  \\_\\____/ \\____/_/    \\_\\_|  \\_\\_____/ \n",
]

_RUNS = re.compile(r" +|[^ ]+")


@dataclass
class PlayerRecord:
    """One finished game: who played, at which level and for how long."""

    name: str = ""
    rank: int = 0
    level: int = 0
    time: int = 0


def parse_leaderboard(text: str) -> list[PlayerRecord]:
    """Read the count line and that many ``rank/name/time/level`` lines."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("leaderboard is empty")
    try:
        count = int(lines[0].strip())
    except ValueError:
        raise ValueError(f"bad record count {lines[0]!r}") from None
    if count < 0:
        raise ValueError("record count must not be negative")
    body = lines[1 : count + 1]
    if len(body) < count:
        raise ValueError(f"expected {count} records, found {len(body)}")
    records = []
    for line in body:
        parts = line.split("/")
        if len(parts) != 4:
            raise ValueError(f"malformed record {line!r}")
        rank, name, elapsed, level = parts
        try:
            records.append(
                PlayerRecord(name=name, rank=int(rank), level=int(level), time=int(elapsed))
            )
        except ValueError:
            raise ValueError(f"malformed record {line!r}") from None
    return records


def format_leaderboard(records: Iterable[PlayerRecord]) -> str:
    records = list(records)
    lines = [str(len(records))]
    lines.extend(f"{r.rank}/{r.name}/{r.time}/{r.level}" for r in records)
    return "\n".join(lines) + "\n"


def load_leaderboard(path: str | Path) -> list[PlayerRecord]:
    return parse_leaderboard(Path(path).read_text(encoding="utf-8"))


def save_leaderboard(path: str | Path, records: Iterable[PlayerRecord]) -> None:
    Path(path).write_text(format_leaderboard(records), encoding="utf-8")


def sort_by_time(records: Iterable[PlayerRecord]) -> list[PlayerRecord]:
    """Order records by playing time; each position keeps its original rank."""
    records = list(records)
    ordered = sorted(records, key=lambda record: record.time)
    return [replace(record, rank=slot.rank) for slot, record in zip(records, ordered)]


def _write_title(terminal: Terminal, line: str) -> None:
    for run in _RUNS.findall(line):
        if run.startswith(" "):
            terminal.write(run)
        else:
            terminal.set_color(Color.BLACK, Color.AQUA)
            terminal.write(run)
            terminal.set_color(Color.BLACK, Color.WHITE)


def render_leaderboard(terminal: Terminal, records: Iterable[PlayerRecord]) -> None:
    """Draw the title and the first five records in a table."""
    terminal.clear()
    for line in _TITLE:
        terminal.write("\t" * 8)
        _write_title(terminal, line)
    terminal.write("\n" * 6)
    terminal.write("\t" * 9 + "RANK\t\tNAME\t\t\t\tTOTAL TIME\t\tLEVEL\t\t\n\n")
    for place, record in enumerate(list(records)[:_SHOWN], start=1):
        y = 15 + (place - 1) * 2
        for x, value in ((73, place), (89, record.name), (120, record.time), (147, record.level)):
            terminal.goto(x, y)
            terminal.write(str(value))