"""Text rendering of boards."""

from __future__ import annotations

from navalbattle.board import Board, Cell

_TOP = {
    Cell.SHIP: "\u2588" * 4,
    Cell.SEA: "\u2591" * 4,
    Cell.MISS: " \\/ ",
    Cell.HIT: "####",
}
_BOTTOM = {
    Cell.SHIP: "\u2588" * 4,
    Cell.SEA: "\u2591" * 4,
    Cell.MISS: " /\\ ",
    Cell.HIT: "####",
}

_V = "\u2551"
_H = "\u2550"
_GAP = " " * 10


def _numbers(size: int) -> str:
    parts = []
    for n in range(1, size + 1):
        pad = "   " if n < 10 else "  " if n < 100 else " "
        parts.append(f"{n}{pad}")
    return "    " + "".join(parts)


def _top_border(size: int) -> str:
    return " \u2554" + _H * (size * 4 + 2) + "\u2557"


def _bottom_border(size: int) -> str:
    return " \u255a" + _H * (size * 4 + 2) + "\u255d"


def _row_lines(board: Board) -> list[tuple[str, str]]:
    lines = []
    for index, row in enumerate(board.rows()):
        letter = chr(ord("A") + index)
        top = "".join(_TOP[cell] for cell in row)
        bottom = "".join(_BOTTOM[cell] for cell in row)
        lines.append((f"{letter}{_V} {top} {_V}{letter}", f"_{_V}_{bottom}_{_V}_"))
    return lines


def render_field(board: Board) -> str:
    """Render one board with row letters and column numbers."""
    size = board.size
    lines = [_numbers(size), _top_border(size)]
    for top, bottom in _row_lines(board):
        lines.extend((top, bottom))
    lines.extend((_bottom_border(size), _numbers(size)))
    return "\n".join(lines) + "\n"


def render_side_by_side(own: Board, tracking: Board) -> str:
    """Render the player's own board and their tracking board next to each other."""
    size = own.size
    numbers = _numbers(size) + _GAP + "  " + _numbers(tracking.size)
    lines = [
        " Your field." + "    " * (size + 1) + " Enemy's field.",
        numbers,
        _top_border(size) + " " * 11 + _top_border(tracking.size),
    ]
    for (own_top, own_bottom), (trk_top, trk_bottom) in zip(
        _row_lines(own), _row_lines(tracking)
    ):
        lines.append(own_top + _GAP + trk_top)
        lines.append(own_bottom + _GAP + trk_bottom)
    lines.append(_bottom_border(size) + " " * 11 + _bottom_border(tracking.size))
    lines.append(numbers)
    return "\n".join(lines) + "\n"