from navalbattle.board import Board, Cell
from navalbattle.render import render_field, render_side_by_side


def test_render_field_line_count_and_frame():
    board = Board(3)
    lines = render_field(board).splitlines()
    assert len(lines) == 2 * board.size + 4
    assert lines[1] == " \u2554" + "\u2550" * (4 * board.size + 2) + "\u2557"
    assert lines[-2] == " \u255a" + "\u2550" * (4 * board.size + 2) + "\u255d"
    assert lines[0] == lines[-1]


def test_render_field_numbers_line():
    lines = render_field(Board(10)).splitlines()
    assert lines[0].startswith("    1   2   3")
    assert lines[0].endswith("9   10  ")


def test_render_field_cells():
    board = Board(2)
    board[1, 1] = Cell.HIT
    board[2, 1] = Cell.MISS
    board[1, 2] = Cell.SHIP
    lines = render_field(board).splitlines()
    assert lines[2] == "A\u2551 #### \\/  \u2551A"
    assert lines[3] == "_\u2551_#### /\\ _\u2551_"
    assert lines[4].startswith("B\u2551 " + "\u2588" * 4 + "\u2591" * 4)
    assert lines[4].endswith("\u2551B")


def test_render_field_rows_have_equal_width():
    board = Board(5)
    board[3, 3] = Cell.MISS
    lines = render_field(board).splitlines()[2:-2]
    assert len({len(line) for line in lines}) == 1


def test_side_by_side_layout():
    own = Board(4)
    tracking = Board(4)
    own[2, 2] = Cell.SHIP
    tracking[3, 1] = Cell.HIT
    out = render_side_by_side(own, tracking)
    lines = out.splitlines()
    assert lines[0].startswith(" Your field.")
    assert lines[0].endswith(" Enemy's field.")
    assert len(lines) == 2 * own.size + 5
    assert lines[1] == lines[-1]
    own_rows = render_field(own).splitlines()[2:-2]
    trk_rows = render_field(tracking).splitlines()[2:-2]
    for combined, left, right in zip(lines[3:-2], own_rows, trk_rows):
        assert combined == left + " " * 10 + right


def test_side_by_side_borders():
    lines = render_side_by_side(Board(2), Board(2)).splitlines()
    frame = " \u2554" + "\u2550" * 10 + "\u2557"
    assert lines[2] == frame + " " * 11 + frame