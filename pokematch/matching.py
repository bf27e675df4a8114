"""Rules deciding whether two tiles can be joined by a path of at most three lines."""

from __future__ import annotations

import random
from typing import Iterator

from .board import Board, Point


def _clamp(value: int, limit: int) -> int:
    return max(0, min(limit - 1, value))


def count_row(board: Board, row: int, col1: int, col2: int) -> int:
    """Count tiles on ``row`` between two columns, inclusive.

    Rows just outside the board count as empty; column ends outside it are
    pulled back onto the edge.
    """
    if row in (-1, board.rows):
        return 0
    low = _clamp(min(col1, col2), board.cols)
    high = _clamp(max(col1, col2), board.cols)
    return sum(1 for col in range(low, high + 1) if board.name_at(row, col))


def count_col(board: Board, col: int, row1: int, row2: int) -> int:
    """Count tiles in ``col`` between two rows, inclusive."""
    if col in (-1, board.cols):
        return 0
    low = _clamp(min(row1, row2), board.rows)
    high = _clamp(max(row1, row2), board.rows)
    return sum(1 for row in range(low, high + 1) if board.name_at(row, col))


def connects_l(board: Board, p1: Point, p2: Point) -> bool:
    """Path of one horizontal and one vertical segment."""
    if count_row(board, p1.y, p1.x, p2.x) == 1 and count_col(board, p2.x, p1.y, p2.y) == 1:
        return True
    return count_row(board, p2.y, p1.x, p2.x) == 1 and count_col(board, p1.x, p1.y, p2.y) == 1


def _row_bridge(board: Board, p1: Point, p2: Point, row: int) -> bool:
    return (
        count_row(board, row, p1.x, p2.x) == 0
        and count_col(board, p1.x, p1.y, row) <= 1
        and count_col(board, p2.x, p2.y, row) <= 1
    )


def _col_bridge(board: Board, p1: Point, p2: Point, col: int) -> bool:
    return (
        count_col(board, col, p1.y, p2.y) == 0
        and count_row(board, p1.y, p1.x, col) <= 1
        and count_row(board, p2.y, p2.x, col) <= 1
    )


def connects_z_row(board: Board, p1: Point, p2: Point) -> bool:
    """Path crossing a free row that lies between the two tiles."""
    low, high = sorted((p1.y, p2.y))
    return any(_row_bridge(board, p1, p2, row) for row in range(low + 1, high))


def connects_z_col(board: Board, p1: Point, p2: Point) -> bool:
    """Path crossing a free column that lies between the two tiles."""
    low, high = sorted((p1.x, p2.x))
    return any(_col_bridge(board, p1, p2, col) for col in range(low + 1, high))


def connects_u_row(board: Board, p1: Point, p2: Point) -> bool:
    """Path through a free row above or below both tiles, border included."""
    low, high = sorted((p1.y, p2.y))
    rows = [*range(-1, low), *range(high + 1, board.rows + 1)]
    return any(_row_bridge(board, p1, p2, row) for row in rows)


def connects_u_col(board: Board, p1: Point, p2: Point) -> bool:
    """Path through a free column left or right of both tiles, border included."""
    low, high = sorted((p1.x, p2.x))
    cols = [*range(-1, low), *range(high + 1, board.cols + 1)]
    return any(_col_bridge(board, p1, p2, col) for col in cols)


def can_match(board: Board, p1: Point, p2: Point) -> bool:
    """True when the tiles at ``p1`` and ``p2`` are alike and connectable."""
    if board[p1].name != board[p2].name:
        return False
    if p1 == p2:
        return False
    if p1.x == p2.x or p1.y == p2.y:
        if p1.x == p2.x and (
            count_col(board, p1.x, p1.y, p2.y) == 2 or connects_u_col(board, p1, p2)
        ):
            return True
        if p1.y == p2.y and (
            count_row(board, p1.y, p1.x, p2.x) == 2 or connects_u_row(board, p1, p2)
        ):
            return True
        return False
    return (
        connects_l(board, p1, p2)
        or connects_z_row(board, p1, p2)
        or connects_z_col(board, p1, p2)
        or connects_u_col(board, p1, p2)
        or connects_u_row(board, p1, p2)
    )


def _positions(board: Board) -> Iterator[Point]:
    for y in range(board.rows):
        for x in range(board.cols):
            yield Point(x, y)


def has_moves(board: Board) -> bool:
    """True when at least one pair of tiles can be matched."""
    return any(
        can_match(board, p1, p2)
        for p1 in board.occupied()
        for p2 in _positions(board)
        if p2 != p1
    )


def find_match(board: Board) -> tuple[Point, Point] | None:
    """Return a matchable pair for a hint, or None.

    Scanning is row-major; the last tile with a partner wins, paired with the
    first partner found in the last row that holds one.
    """
    found = None
    for p1 in board.occupied():
        for y in range(board.rows):
            for x in range(board.cols):
                p2 = Point(x, y)
                if p2 != p1 and can_match(board, p1, p2):
                    found = (p1, p2)
                    break
    return found


def shuffle_until_playable(board: Board, rng: random.Random | None = None) -> None:
    """Swap random tiles until the board has a move."""
    if board.is_cleared():
        raise ValueError("a cleared board cannot be made playable")
    rng = rng if rng is not None else random.Random()
    while not has_moves(board):
        r1 = rng.randrange(board.rows)
        r2 = rng.randrange(board.rows)
        c1 = rng.randrange(board.cols)
        c2 = rng.randrange(board.cols)
        p1, p2 = Point(c1, r1), Point(c2, r2)
        if not board[p1].is_empty() and not board[p2].is_empty():
            board.swap(p1, p2)