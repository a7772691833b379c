"""Interactive two-player game played at the terminal."""

from __future__ import annotations

import argparse
import random
import re
import sys
import time
from dataclasses import dataclass, field
from typing import TextIO

from navalbattle.board import AttackError, Board, ShotResult, fire, number_of_hits, parse_coordinates
from navalbattle.generation import NoSpaceError, generate_field, parse_direction, place_ship, ship_capacity_test
from navalbattle.render import render_field, render_side_by_side

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FIELD_SIZE_PROMPT = "Enter the field size (1-26): "
_MAX_FIELD_SIZE = 26


class Console:
    """Line-oriented terminal input and output."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def ask(self, text: str) -> str:
        """Show a prompt and return the next line of input without its line ending."""
        self.write(text)
        line = self.stdin.readline()
        if not line:
            raise EOFError("input ended")
        return line.rstrip("\r\n")

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def clear(self) -> None:
        """Clear the screen when writing to a terminal."""
        if self._interactive():
            self.write("\033[2J\033[H")

    def _interactive(self) -> bool:
        isatty = getattr(self.stdout, "isatty", None)
        return bool(isatty and isatty())

    def _pause(self, seconds: float) -> None:
        if self._interactive():
            time.sleep(seconds)


class _Quit(Exception):
    """A player chose to leave the game."""


@dataclass
class _Player:
    name: str
    board: Board
    tracking: Board
    hits_left: int = field(default=0)


def _parse_int(text: str) -> int | None:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else None


def ask_field_size(console: Console) -> int:
    """Ask until a field size from 2 to 26 is entered."""
    while True:
        size = _parse_int(console.ask(_FIELD_SIZE_PROMPT))
        if size is not None and 1 < size <= _MAX_FIELD_SIZE:
            return size
        console.clear()
        console.write("Try again.\n")


def ask_max_ship(console: Console, field_size: int, rng: random.Random | None = None) -> int:
    """Ask until a largest ship size whose fleet fits on the field is entered."""
    while True:
        size = _parse_int(console.ask("Enter the maximum size of the ship: "))
        if size is not None and ship_capacity_test(field_size, size, rng):
            return size
        console.clear()
        console.write(f"Try again.\n{_FIELD_SIZE_PROMPT}{field_size}\n")


def ask_show_both(console: Console) -> bool:
    """Ask whether to show both boards (True) or only the tracking board (False)."""
    while True:
        answer = console.ask(
            "Choose whether to show only the attack field (Q) or both fields (E)\n"
        )
        if answer in ("e", "E"):
            console.clear()
            return True
        if answer in ("q", "Q"):
            console.clear()
            return False
        console.clear()
        console.write("Try again\n")


def place_ships_manually(console: Console, board: Board, max_size_of_ship: int) -> None:
    """Let the player place the whole fleet by entering coordinates and directions."""
    for size in range(max_size_of_ship, 0, -1):
        for left in range(max_size_of_ship - size + 1, 0, -1):
            while True:
                console.clear()
                console.write(render_field(board))
                console.write(f"Placing the ship: {size}\nLeft ammount: {left}\n")
                try:
                    x, y = parse_coordinates(console.ask("Enter coordinates: "), board.size)
                except AttackError:
                    continue
                answer = console.ask(
                    "Enter direction (D - right, W - up, A - left, S - down): "
                ).strip()
                try:
                    place_ship(board, x, y, size, parse_direction(answer))
                except (ValueError, NoSpaceError):
                    continue
                break
    console.clear()


def _review(console: Console, name: str, board: Board) -> None:
    while True:
        console.write(f"{name}\n\n")
        console.write(render_field(board))
        answer = console.ask("Press E to continue\nPress Q to quit the game\n")
        if answer in ("q", "Q"):
            raise _Quit
        if answer in ("e", "E"):
            return
        console.clear()


def _setup_player(
    console: Console,
    number: int,
    field_size: int,
    max_size_of_ship: int,
    rng: random.Random,
) -> _Player:
    name = console.ask(f"Player {number}\nEnter name: ")
    console.clear()
    while True:
        console.write(f"{name}\n")
        answer = console.ask("Generate field automaticly? Y-N\n")
        if answer in ("y", "Y"):
            board = generate_field(field_size, max_size_of_ship, rng)
            break
        if answer in ("n", "N"):
            board = Board(field_size)
            place_ships_manually(console, board, max_size_of_ship)
            break
        console.clear()
    console.clear()
    _review(console, name, board)
    console.clear()
    return _Player(name, board, Board(field_size), number_of_hits(max_size_of_ship))


def _view(console: Console, player: _Player, show_both: bool) -> None:
    console.write(f"{player.name}\n\n")
    if show_both:
        console.write(render_side_by_side(player.board, player.tracking))
    else:
        console.write(render_field(player.tracking))


def _turn(console: Console, attacker: _Player, defender: _Player, show_both: bool) -> bool:
    """Play one turn; return True when the attacker has sunk the whole fleet."""
    if show_both:
        console.clear()
        while True:
            answer = console.ask(
                f"{attacker.name}, your turn, press E to continue, press Q to quit the game\n"
            )
            if answer in ("q", "Q"):
                raise _Quit
            if answer in ("e", "E"):
                break
            console.clear()
            console.write("Try again\n")
    while True:
        console.clear()
        _view(console, attacker, show_both)
        try:
            x, y = parse_coordinates(console.ask("Enter coordinates: "), defender.board.size)
            result = fire(attacker.tracking, defender.board, x, y)
        except AttackError:
            continue
        if result is not ShotResult.MISS:
            attacker.hits_left -= 1
            if attacker.hits_left <= 0:
                return True
            continue
        console.clear()
        _view(console, attacker, show_both)
        while True:
            answer = console.ask("Press E to continue.\nPress Q to stop the game.\n")
            if answer in ("q", "Q"):
                raise _Quit
            if answer in ("e", "E"):
                return False
            console.clear()
            _view(console, attacker, show_both)


def _final(console: Console, players: tuple[_Player, _Player], winner: _Player | None) -> None:
    console.clear()
    if winner is not None:
        console.write(f"{winner.name} WON!")
        console._pause(2.0)
        console.clear()
    first, second = players
    for index, player in enumerate(players):
        suffix = " -- WINNER" if player is winner else ""
        console.write(f"{player.name}{suffix}\n\n")
        console.write(render_side_by_side(player.board, player.tracking))
        if index == 0:
            console.write("\n\n\n")
    console.ask("Press any key to end the game.\n")


def play(console: Console, rng: random.Random | None = None) -> str | None:
    """Run a whole game and return the winner's name, or None if it was stopped."""
    rng = rng if rng is not None else random.Random()
    field_size = ask_field_size(console)
    max_size_of_ship = ask_max_ship(console, field_size, rng)
    console.clear()
    show_both = ask_show_both(console)
    try:
        first = _setup_player(console, 1, field_size, max_size_of_ship, rng)
        second = _setup_player(console, 2, field_size, max_size_of_ship, rng)
    except _Quit:
        return None

    winner: _Player | None = None
    try:
        while winner is None:
            for attacker, defender in ((first, second), (second, first)):
                if _turn(console, attacker, defender, show_both):
                    winner = attacker
                    break
    except _Quit:
        winner = None
    _final(console, (first, second), winner)
    return winner.name if winner is not None else None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="navalbattle", description="Two-player naval battle.")
    parser.add_argument("--seed", type=int, default=None, help="seed for random ship placement")
    args = parser.parse_args(argv)
    console = Console(sys.stdin, sys.stdout)
    try:
        play(console, random.Random(args.seed))
    except NoSpaceError as error:
        console.write(f"{error}\n")
        return 1
    except (EOFError, KeyboardInterrupt):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())