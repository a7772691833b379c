import random

import pytest

from navalbattle.board import Board, Cell, number_of_hits
from navalbattle.generation import (
    Direction,
    NoSpaceError,
    can_place,
    fleet,
    generate_field,
    parse_direction,
    place_ship,
    ship_capacity_test,
)


def _ship_positions(board):
    return {
        (x, y)
        for y, row in enumerate(board.rows(), start=1)
        for x, cell in enumerate(row, start=1)
        if cell is Cell.SHIP
    }


def _components(positions):
    remaining = set(positions)
    result = []
    while remaining:
        stack = [remaining.pop()]
        group = set(stack)
        while stack:
            x, y = stack.pop()
            for nb in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
                if nb in remaining:
                    remaining.remove(nb)
                    group.add(nb)
                    stack.append(nb)
        result.append(group)
    return result


@pytest.mark.parametrize(
    "text, expected",
    [
        ("d", Direction.RIGHT),
        ("D", Direction.RIGHT),
        ("w", Direction.UP),
        ("W", Direction.UP),
        ("a", Direction.LEFT),
        ("A", Direction.LEFT),
        ("s", Direction.DOWN),
        ("S", Direction.DOWN),
    ],
)
def test_parse_direction(text, expected):
    assert parse_direction(text) is expected


@pytest.mark.parametrize("text", ["", "x", "dd", "right"])
def test_parse_direction_rejects_unknown(text):
    with pytest.raises(ValueError):
        parse_direction(text)


def test_fleet_order():
    assert fleet(3) == [3, 2, 2, 1, 1, 1]


@pytest.mark.parametrize("max_size", [1, 2, 4, 6])
def test_fleet_matches_number_of_hits(max_size):
    assert sum(fleet(max_size)) == number_of_hits(max_size)


def test_place_ship_right():
    board = Board(5)
    place_ship(board, 2, 3, 3, Direction.RIGHT)
    assert _ship_positions(board) == {(2, 3), (3, 3), (4, 3)}


def test_place_ship_up():
    board = Board(5)
    place_ship(board, 2, 3, 3, Direction.UP)
    assert _ship_positions(board) == {(2, 3), (2, 2), (2, 1)}


def test_place_ship_left_and_down():
    board = Board(6)
    place_ship(board, 3, 1, 2, Direction.LEFT)
    place_ship(board, 6, 3, 3, Direction.DOWN)
    assert _ship_positions(board) == {(3, 1), (2, 1), (6, 3), (6, 4), (6, 5)}


@pytest.mark.parametrize(
    "x, y, size, direction",
    [
        (4, 1, 3, Direction.RIGHT),
        (1, 2, 3, Direction.UP),
        (2, 1, 3, Direction.LEFT),
        (1, 4, 3, Direction.DOWN),
        (0, 1, 1, Direction.RIGHT),
    ],
)
def test_can_place_rejects_out_of_board(x, y, size, direction):
    assert can_place(Board(5), x, y, size, direction) is False


def test_can_place_rejects_touching_ships():
    board = Board(5)
    place_ship(board, 1, 1, 2, Direction.RIGHT)
    assert can_place(board, 3, 2, 1, Direction.RIGHT) is False
    assert can_place(board, 1, 2, 2, Direction.RIGHT) is False
    assert can_place(board, 4, 1, 1, Direction.DOWN) is True


def test_place_ship_raises_when_it_does_not_fit():
    board = Board(4)
    place_ship(board, 1, 1, 3, Direction.DOWN)
    with pytest.raises(NoSpaceError):
        place_ship(board, 2, 2, 2, Direction.RIGHT)
    assert _ship_positions(board) == {(1, 1), (1, 2), (1, 3)}


@pytest.mark.parametrize("seed", [0, 1, 7, 42])
def test_generate_field_places_whole_fleet(seed):
    board = generate_field(10, 4, random.Random(seed))
    positions = _ship_positions(board)
    assert len(positions) == number_of_hits(4)
    groups = _components(positions)
    assert sorted(len(g) for g in groups) == sorted(fleet(4))
    for group in groups:
        xs = {x for x, _ in group}
        ys = {y for _, y in group}
        assert len(xs) == 1 or len(ys) == 1
    for x, y in positions:
        for dx, dy in ((1, 1), (1, -1), (-1, 1), (-1, -1)):
            assert (x + dx, y + dy) not in positions


def test_generate_field_is_reproducible_with_seed():
    first = generate_field(8, 3, random.Random(5))
    second = generate_field(8, 3, random.Random(5))
    assert list(first.rows()) == list(second.rows())


def test_generate_field_border_stays_sea():
    board = generate_field(6, 3, random.Random(3))
    border = [board[i, 0] for i in range(8)] + [board[i, 7] for i in range(8)]
    border += [board[0, i] for i in range(8)] + [board[7, i] for i in range(8)]
    assert all(cell is Cell.SEA for cell in border)


@pytest.mark.parametrize("field_size, max_size", [(3, 3), (3, 5), (5, 5)])
def test_generate_field_rejects_ship_as_large_as_field(field_size, max_size):
    with pytest.raises(NoSpaceError):
        generate_field(field_size, max_size, random.Random(0))