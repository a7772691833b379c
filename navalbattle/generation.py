"""Ship fleets and their placement on a board, by hand or at random."""

from __future__ import annotations

import random
from enum import Enum

from navalbattle.board import Board, Cell

_RECREATE_LIMIT = 30


class Direction(Enum):
    """Direction in which a ship extends from its first cell."""

    RIGHT = (1, 0)
    UP = (0, -1)
    LEFT = (-1, 0)
    DOWN = (0, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class NoSpaceError(ValueError):
    """Raised when ships cannot be fitted onto a board."""

    def __init__(self, message: str = "The lack of space, try again.") -> None:
        super().__init__(message)


_DIRECTION_KEYS = {
    "d": Direction.RIGHT,
    "w": Direction.UP,
    "a": Direction.LEFT,
    "s": Direction.DOWN,
}


def parse_direction(text: str) -> Direction:
    """Map a key (D right, W up, A left, S down, any case) to a direction."""
    if len(text) == 1 and text.lower() in _DIRECTION_KEYS:
        return _DIRECTION_KEYS[text.lower()]
    raise ValueError(f"unknown direction: {text!r}")


def fleet(max_size_of_ship: int) -> list[int]:
    """Ship sizes in placing order: one of the largest, two of the next, and so on."""
    return [
        size
        for size in range(max_size_of_ship, 0, -1)
        for _ in range(max_size_of_ship - size + 1)
    ]


def _cells(x: int, y: int, size: int, direction: Direction) -> list[tuple[int, int]]:
    return [(x + i * direction.dx, y + i * direction.dy) for i in range(size)]


def can_place(board: Board, x: int, y: int, size: int, direction: Direction) -> bool:
    """Whether a ship fits at ``(x, y)`` without leaving the board or touching another."""
    if size < 1:
        return False
    cells = _cells(x, y, size, direction)
    if not all(1 <= cx <= board.size and 1 <= cy <= board.size for cx, cy in cells):
        return False
    xs = [cx for cx, _ in cells]
    ys = [cy for _, cy in cells]
    return not any(
        board[cx, cy] is Cell.SHIP
        for cy in range(min(ys) - 1, max(ys) + 2)
        for cx in range(min(xs) - 1, max(xs) + 2)
    )


def place_ship(board: Board, x: int, y: int, size: int, direction: Direction) -> None:
    """Put a ship on the board, raising :class:`NoSpaceError` if it does not fit."""
    if not can_place(board, x, y, size, direction):
        raise NoSpaceError(f"a ship of size {size} does not fit at ({x}, {y})")
    for pos in _cells(x, y, size, direction):
        board[pos] = Cell.SHIP


def _fill(board: Board, sizes: list[int], rng: random.Random, max_failures: int) -> bool:
    n = board.size
    for size in sizes:
        failures = 0
        while True:
            if rng.randrange(2) == 0:
                direction = Direction.RIGHT
                x = rng.randrange(n - size + 1) + 1
                y = rng.randrange(n) + 1
            else:
                direction = Direction.UP
                x = rng.randrange(n) + 1
                y = rng.randrange(n - size + 1) + size
            if can_place(board, x, y, size, direction):
                place_ship(board, x, y, size, direction)
                break
            failures += 1
            if failures > max_failures:
                return False
    return True


def generate_field(
    field_size: int, max_size_of_ship: int, rng: random.Random | None = None
) -> Board:
    """Place the whole fleet at random on a new board."""
    if max_size_of_ship >= field_size:
        raise NoSpaceError()
    rng = rng if rng is not None else random.Random()
    board = Board(field_size)
    sizes = fleet(max_size_of_ship)
    max_failures = field_size * field_size * 10
    for _ in range(_RECREATE_LIMIT + 1):
        board.clear()
        if _fill(board, sizes, rng, max_failures):
            return board
    raise NoSpaceError()


def ship_capacity_test(
    field_size: int, max_size_of_ship: int, rng: random.Random | None = None
) -> bool:
    """Whether the fleet for ``max_size_of_ship`` can be fitted on the board."""
    try:
        generate_field(field_size, max_size_of_ship, rng)
    except NoSpaceError:
        return False
    return True