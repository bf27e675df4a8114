"""Game board: a grid of tiles, each either empty or carrying a letter."""

from __future__ import annotations

import random
import string
from dataclasses import dataclass
from typing import Iterable, Iterator

TILE_HEIGHT = 5
TILE_WIDTH = 9

_LEVEL_SIZES = {1: (4, 6), 2: (6, 6), 3: (8, 8)}


@dataclass(frozen=True)
class Point:
    """A cell position: ``x`` is the column, ``y`` the row."""

    x: int = 0
    y: int = 0


@dataclass
class Tile:
    """One cell of the board. An empty name means the cell is cleared."""

    name: str = ""

    def render(self) -> list[str]:
        """Return the tile's picture as five lines of nine characters."""
        if self.is_empty():
            return [" " * TILE_WIDTH] * TILE_HEIGHT
        edge = " " + "-" * (TILE_WIDTH - 2) + " "
        blank = "|" + " " * (TILE_WIDTH - 2) + "|"
        middle = "|   " + self.name + "   |"
        return [edge, blank, middle, blank, edge]

    def clear(self) -> None:
        """Remove the tile's letter."""
        self.name = ""

    def is_empty(self) -> bool:
        return not self.name


def _normalise(name: str | None) -> str:
    if name is None:
        return ""
    if not isinstance(name, str) or len(name) > 1:
        raise ValueError(f"tile name must be a single character, got {name!r}")
    return name


def _letter_sequence() -> Iterator[str]:
    """Letters used when filling a board: A to Z, then B to Z over and over."""
    yield from string.ascii_uppercase
    while True:
        yield from string.ascii_uppercase[1:]


class Board:
    """A rectangular grid of tiles indexed by :class:`Point`."""

    def __init__(self, rows: int, cols: int, names: Iterable[Iterable[str | None]]):
        if rows <= 0 or cols <= 0:
            raise ValueError("a board needs at least one row and one column")
        grid = [[Tile(_normalise(name)) for name in row] for row in names]
        if len(grid) != rows or any(len(row) != cols for row in grid):
            raise ValueError(f"names do not form a {rows}x{cols} grid")
        self.rows = rows
        self.cols = cols
        self._grid = grid

    @classmethod
    def generate(cls, rows: int, cols: int, rng: random.Random | None = None) -> "Board":
        """Fill a fresh board with letter pairs placed at random cells."""
        if rows <= 0 or cols <= 0:
            raise ValueError("a board needs at least one row and one column")
        if (rows * cols) % 2:
            raise ValueError("a board must have an even number of cells")
        rng = rng if rng is not None else random.Random()
        board = cls(rows, cols, [[""] * cols for _ in range(rows)])
        placed = 0
        for letter in _letter_sequence():
            for _ in range(2):
                while True:
                    tile = board._grid[rng.randrange(rows)][rng.randrange(cols)]
                    if tile.is_empty():
                        tile.name = letter
                        placed += 1
                        break
            if placed == rows * cols:
                break
        return board

    def _check(self, point: Point) -> None:
        if not (0 <= point.x < self.cols and 0 <= point.y < self.rows):
            raise IndexError(f"{point} lies outside the board")

    def __getitem__(self, point: Point) -> Tile:
        self._check(point)
        return self._grid[point.y][point.x]

    def name_at(self, row: int, col: int) -> str:
        """Return the letter at ``row``, ``col``, or an empty string."""
        return self[Point(col, row)].name

    def clear(self, point: Point) -> None:
        self[point].clear()

    def swap(self, p1: Point, p2: Point) -> None:
        self._check(p1)
        self._check(p2)
        grid = self._grid
        grid[p1.y][p1.x], grid[p2.y][p2.x] = grid[p2.y][p2.x], grid[p1.y][p1.x]

    def is_cleared(self) -> bool:
        return all(tile.is_empty() for row in self._grid for tile in row)

    def occupied(self) -> Iterator[Point]:
        """Yield the positions of non-empty tiles in row-major order."""
        for y, row in enumerate(self._grid):
            for x, tile in enumerate(row):
                if not tile.is_empty():
                    yield Point(x, y)


def board_size(level: int) -> tuple[int, int]:
    """Return ``(rows, cols)`` for a difficulty level from 1 to 3."""
    try:
        return _LEVEL_SIZES[level]
    except KeyError:
        raise ValueError(f"unknown level {level!r}") from None