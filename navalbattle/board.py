"""Game boards, coordinate parsing and shooting rules."""

from __future__ import annotations

import re
from collections.abc import Iterator
from enum import Enum

_LOWER_RE = re.compile(r"[a-z][0-9]+")
_UPPER_RE = re.compile(r"[A-Z][0-9]+")


class Cell(Enum):
    """State of a single square on a board."""

    SEA = "sea"
    SHIP = "ship"
    HIT = "hit"
    MISS = "miss"


class AttackError(ValueError):
    """Raised when a shot or a coordinate cannot be accepted."""


class ShotResult(Enum):
    """Outcome of a shot."""

    MISS = "miss"
    HIT = "hit"
    SUNK = "sunk"

    @property
    def is_hit(self) -> bool:
        return self is not ShotResult.MISS


class Board:
    """A square board of ``size`` cells with a one-cell sea border.

    Cells are addressed as ``board[x, y]`` where ``x`` is the column and
    ``y`` the row; playable cells run from 1 to ``size`` and the border
    cells at 0 and ``size + 1`` are always addressable.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"board size must be positive, got {size}")
        self.size = size
        self._grid = [[Cell.SEA] * (size + 2) for _ in range(size + 2)]

    def _check(self, pos: tuple[int, int]) -> tuple[int, int]:
        x, y = pos
        limit = self.size + 1
        if not (0 <= x <= limit and 0 <= y <= limit):
            raise IndexError(f"cell {pos} is outside the board")
        return x, y

    def __getitem__(self, pos: tuple[int, int]) -> Cell:
        x, y = self._check(pos)
        return self._grid[y][x]

    def __setitem__(self, pos: tuple[int, int], value: Cell) -> None:
        x, y = self._check(pos)
        self._grid[y][x] = Cell(value)

    def clear(self) -> None:
        """Fill the whole board, border included, with sea."""
        for row in self._grid:
            row[:] = [Cell.SEA] * len(row)

    def rows(self) -> Iterator[tuple[Cell, ...]]:
        """Yield the playable rows from top to bottom."""
        for row in self._grid[1 : self.size + 1]:
            yield tuple(row[1 : self.size + 1])

    def __repr__(self) -> str:
        return f"Board(size={self.size})"


def parse_coordinates(text: str, field_size: int) -> tuple[int, int]:
    """Parse a coordinate such as ``"b7"`` into ``(x, y)``.

    The letter selects the row (``a`` is 1) and the number the column.
    """
    if _LOWER_RE.fullmatch(text):
        y = ord(text[0]) - ord("a") + 1
    elif _UPPER_RE.fullmatch(text):
        y = ord(text[0]) - ord("A") + 1
    else:
        raise AttackError(f"malformed coordinates: {text!r}")
    x = int(text[1:])
    if not (1 <= x <= field_size and 1 <= y <= field_size):
        raise AttackError("You've gone out of the field")
    return x, y


def number_of_hits(max_size_of_ship: int) -> int:
    """Total number of ship cells in a fleet whose largest ship has the given size."""
    return sum(
        size * (max_size_of_ship - size + 1)
        for size in range(max_size_of_ship, 0, -1)
    )


_ORTHOGONAL = ((1, 0), (-1, 0), (0, 1), (0, -1))
_AFLOAT = (Cell.HIT, Cell.SHIP)


def _ship_cells(board: Board, x: int, y: int) -> set[tuple[int, int]]:
    cells = {(x, y)}
    for dx, dy in _ORTHOGONAL:
        cx, cy = x + dx, y + dy
        while 1 <= cx <= board.size and 1 <= cy <= board.size and board[cx, cy] in _AFLOAT:
            cells.add((cx, cy))
            cx, cy = cx + dx, cy + dy
    return cells


def check_destruction(tracking: Board, target: Board, x: int, y: int) -> bool:
    """Check whether the ship hit at ``(x, y)`` is sunk.

    When it is, every cell around it is marked as a miss on both boards.
    """
    cells = _ship_cells(target, x, y)
    if any(target[pos] is Cell.SHIP for pos in cells):
        return False
    xs = [cx for cx, _ in cells]
    ys = [cy for _, cy in cells]
    for cy in range(min(ys) - 1, max(ys) + 2):
        for cx in range(min(xs) - 1, max(xs) + 2):
            if (cx, cy) not in cells:
                target[cx, cy] = Cell.MISS
                tracking[cx, cy] = Cell.MISS
    return True


def fire(tracking: Board, target: Board, x: int, y: int) -> ShotResult:
    """Shoot at ``(x, y)`` on ``target``, recording the result on ``tracking``."""
    if not (1 <= x <= target.size and 1 <= y <= target.size):
        raise AttackError("You've gone out of the field")
    cell = target[x, y]
    if cell is Cell.SHIP:
        target[x, y] = Cell.HIT
        tracking[x, y] = Cell.HIT
        return ShotResult.SUNK if check_destruction(tracking, target, x, y) else ShotResult.HIT
    if cell is Cell.SEA:
        target[x, y] = Cell.MISS
        tracking[x, y] = Cell.MISS
        return ShotResult.MISS
    raise AttackError("You've already fired here")