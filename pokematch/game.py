"""A round of play on the board, and the program that runs a whole game."""

from __future__ import annotations

import argparse
import random
import time
from pathlib import Path
from typing import Sequence

from .board import TILE_HEIGHT, TILE_WIDTH, Board, Point, board_size
from .leaderboard import PlayerRecord, load_leaderboard, save_leaderboard, sort_by_time
from .matching import can_match, find_match, has_moves, shuffle_until_playable
from .menu import choose_level, print_background, print_banner, print_end_banner
from .screen import Color, Terminal

BOARD_X = 10
BOARD_Y = 10
MAX_HINTS = 3
DEFAULT_LEADERBOARD = "Leaderboard.txt"

_MOVES = {"d": (1, 0), "a": (-1, 0), "s": (0, 1), "w": (0, -1)}


class GameSession:
    """One game on a board: cursor, selection, hints and the end of the round."""

    def __init__(
        self,
        board: Board,
        terminal: Terminal,
        level: int,
        rng: random.Random | None = None,
    ):
        if level not in (1, 2, 3):
            raise ValueError(f"unknown level {level!r}")
        self.board = board
        self.terminal = terminal
        self.level = level
        self.rng = rng if rng is not None else random.Random()
        self.cursor = Point(0, 0)
        self.selected: Point | None = None
        self.hints_used = 0
        self.finished = False

    def _paint(self, point: Point, background: Color, foreground: Color) -> None:
        self.terminal.set_color(background, foreground)
        self._draw_tile(point)
        self.terminal.set_color(Color.BLACK, Color.WHITE)

    def _draw_tile(self, point: Point) -> None:
        x = BOARD_X + point.x * TILE_WIDTH
        y = BOARD_Y + point.y * TILE_HEIGHT
        for offset, line in enumerate(self.board[point].render()):
            self.terminal.goto(x, y + offset)
            self.terminal.write(line)

    def draw(self) -> None:
        """Draw every tile of the board in the current colours."""
        for y in range(self.board.rows):
            for x in range(self.board.cols):
                self._draw_tile(Point(x, y))

    def _redraw_all(self) -> None:
        self.terminal.clear()
        try:
            print_background(self.terminal, self.level)
        except FileNotFoundError:
            pass
        self.draw()

    def move_cursor(self, key: str) -> bool:
        """Restore the tile under the cursor and move it for w, a, s or d.

        Returns True when the cursor moved.
        """
        cursor = self.cursor
        if self.selected is None or cursor != self.selected or cursor == Point(0, 0):
            self._paint(cursor, Color.BLACK, Color.WHITE)
        step = _MOVES.get(key)
        if step is None:
            return False
        target = Point(cursor.x + step[0], cursor.y + step[1])
        if not (0 <= target.x < self.board.cols and 0 <= target.y < self.board.rows):
            return False
        self.cursor = target
        self._paint(target, Color.WHITE, Color.BLACK)
        return True

    def select(self) -> bool:
        """Pick the tile under the cursor; on the second pick try to match the pair.

        Returns True when a pair was removed.
        """
        point = self.cursor
        if self.selected is None:
            self.selected = point
            self._paint(point, Color.RED, Color.WHITE)
            return False
        first = self.selected
        self._paint(point, Color.RED, Color.WHITE)
        matched = first != point and can_match(self.board, first, point)
        if matched:
            self.terminal.beep()
            self.terminal.beep()
            self.board.clear(first)
            self.board.clear(point)
        self.terminal.set_color(Color.BLACK, Color.WHITE)
        self._redraw_all()
        self.selected = None
        return matched

    def hint(self) -> tuple[Point, Point] | None:
        """Highlight a matchable pair; only three hints are given per game."""
        if self.hints_used >= MAX_HINTS:
            return None
        self.hints_used += 1
        pair = find_match(self.board)
        if pair is not None:
            for point in pair:
                self._paint(point, Color.AQUA, Color.WHITE)
        return pair

    def handle_key(self, key: str) -> bool:
        """React to one key press; return False once the game is over."""
        self.move_cursor(key)
        if key == "h":
            self.hint()
        elif key == "p":
            return False
        elif key == " ":
            self.select()
        if self.board.is_cleared():
            self.terminal.clear()
            self.terminal.write("END GAME!!")
            self.finished = True
            return False
        return True

    def play(self) -> bool:
        """Read keys until the board is cleared or the player quits.

        Returns True when the board was cleared.
        """
        while True:
            if not self.board.is_cleared() and not has_moves(self.board):
                shuffle_until_playable(self.board, self.rng)
                self.draw()
            if not self.handle_key(self.terminal.read_key()):
                return self.finished


def _read_line(terminal: Terminal) -> str:
    chars: list[str] = []
    while True:
        key = terminal.read_key()
        if key in ("\r", "\n"):
            terminal.write("\n")
            return "".join(chars)
        if key in ("\b", "\x7f"):
            if chars:
                chars.pop()
                terminal.write("\b \b")
            continue
        chars.append(key)
        terminal.write(key)


def _load_records(path: Path) -> list[PlayerRecord]:
    try:
        return load_leaderboard(path)
    except FileNotFoundError:
        return []


def run(
    terminal: Terminal,
    leaderboard_path: str | Path = DEFAULT_LEADERBOARD,
    rng: random.Random | None = None,
) -> PlayerRecord | None:
    """Ask for a name, run the menu and a game, and record the result.

    Returns the player's record, or None when the player leaves from the menu.
    The leaderboard file is rewritten only when the board was cleared.
    """
    path = Path(leaderboard_path)
    terminal.write("\n" * 4 + "\t" * 11 + "INPUT YOUR NAME:  ")
    name = _read_line(terminal)
    records = _load_records(path)
    rank = len(records) + 1

    level = choose_level(terminal, records)
    if level is None:
        return None
    rows, cols = board_size(level)
    board = Board.generate(rows, cols, rng)
    terminal.clear()

    started = time.monotonic()
    session = GameSession(board, terminal, level, rng)
    session.draw()
    cleared = session.play()
    elapsed = int(time.monotonic() - started)

    player = PlayerRecord(name=name, rank=rank, level=level, time=elapsed)
    records.append(player)
    if cleared:
        save_leaderboard(path, sort_by_time(records))

    terminal.clear()
    terminal.write("Press any key to continue . . .")
    terminal.read_key()
    return player


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="pokematch", description="Match pairs of tiles.")
    parser.add_argument(
        "--leaderboard",
        default=DEFAULT_LEADERBOARD,
        help="leaderboard file (default: %(default)s)",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the board layout")
    args = parser.parse_args(argv)

    terminal = Terminal()
    rng = random.Random(args.seed)
    print_banner(terminal)
    if run(terminal, args.leaderboard, rng) is None:
        return 1
    print_end_banner(terminal)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())