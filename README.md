# navalbattle

navalbattle is a Naval Battle (Battleship) game for two players in the terminal. Both players share one screen and take turns.

## Installation

```
pip install .
```

To install the test dependencies too:

```
pip install .[test]
```

## Playing

```
navalbattle
```

You can fix the random ship placement with a seed, which makes games reproducible:

```
navalbattle --seed 42
```

The game first asks two questions:

1. **Field size.** Enter a number from 2 to 26. Rows are lettered `A`, `B`, … and columns are numbered `1`, `2`, ….
2. **Maximum ship size.** The fleet has one ship of the largest size, two ships of the next size down, and so on down to ships of length 1. The game checks that this fleet can be placed on the field. If it cannot, you are asked again.

Next, choose how the boards are shown during play:

- `Q` shows only your attack (tracking) field.
- `E` shows your own field and the attack field side by side. With this mode each turn starts with a prompt, so the players can swap seats before the boards appear.

Each player then enters a name and chooses how to place their ships:

- `Y` places the ships at random.
- `N` lets you place each ship yourself. Enter a starting coordinate such as `B4` or `b4`. Then enter a direction: `D` for right, `W` for up, `A` for left or `S` for down. A ship must stay on the field and must not touch another ship, not even at a corner. If an entry is invalid, you are asked again.

The finished field is then shown. Press `E` to go on, or press `Q` to leave the game at once.

## Turns

On your turn you type a coordinate on the enemy field, for example `C7`.

- A **hit** (`####`) gives you another shot.
- A **miss** (` \/ `) ends your turn. Press `E` to hand over to the other player.
- A **sunk ship** is surrounded by misses automatically.

Shots that fall outside the field or repeat an earlier shot are ignored, and you are asked again.

The first player to sink the whole enemy fleet wins. If you press `Q` at a prompt during play, the game stops with no winner. In both cases the game ends by showing both players' fields and waiting for you to press Enter.

The command exits with status 1 in two cases: the ships cannot be placed at random, or the input ends early. Otherwise it exits with status 0. The screen is cleared between views only when output goes to a terminal.

## What it does not do

Targets are typed as coordinates. There is no cursor that you move with the arrow keys. There is no computer opponent, and you cannot save a game.

## Using the library

The game rules can also be used without the interactive command.

- `navalbattle.board`
  - `Board(size)` is a square board. A cell is read with `board[x, y]`, where `x` is the column and `y` is the row, both counted from 1. Each cell is a `Cell` (`SEA`, `SHIP`, `HIT`, `MISS`).
  - `fire(tracking, target, x, y)` returns a `ShotResult` (`MISS`, `HIT`, `SUNK`). It raises `AttackError` for a shot off the field or a cell that has already been shot.
  - Also available: `parse_coordinates(text, field_size)`, `check_destruction(tracking, target, x, y)` and `number_of_hits(max_size_of_ship)`.
- `navalbattle.generation`
  - `generate_field(field_size, max_size_of_ship, rng)` places a whole fleet at random. It raises `NoSpaceError` when the fleet does not fit.
  - Also available: `fleet`, `can_place`, `place_ship`, `parse_direction`, `Direction` and `ship_capacity_test`.
- `navalbattle.render`
  - `render_field(board)` and `render_side_by_side(own, tracking)` return the boards as text.
- `navalbattle.cli`
  - `play(console, rng)` runs a whole game through a `Console` that you build from any text streams. It returns the winner's name, or `None` if the game was stopped.

Example:

```python
import random
from navalbattle.board import Board, fire, number_of_hits
from navalbattle.generation import generate_field
from navalbattle.render import render_field

rng = random.Random(1)
target = generate_field(10, 4, rng)
tracking = Board(10)
result = fire(tracking, target, 3, 5)   # column 3, row E
print(result)
print(render_field(tracking))
print(number_of_hits(4))                # 20 ship cells in a 4-3-2-1 fleet
```