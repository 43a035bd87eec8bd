# blockfall

The rules engine of a classic falling-block puzzle game. It contains no graphics, audio
or input code. You supply the piece shapes, a clock and an optional sound callback, and
you drive the game from any front end you choose.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `blockfall.block`
  - `GridPosition(row, col)` and `GridBBox(min, max)`: frozen dataclasses.
  - `bounding_box(cells)`: returns the inclusive box around the cells. It raises
    `ValueError` when there are no cells.
  - `Block(block_id, rotations, color_id)`: a piece with one cell layout per
    rotation state and an offset on the grid. Its methods are `current_cells()`,
    `bbox()`, `move(dx, dy)`, `rotate()`, `rotate_left()`, `reset_offset()` and `copy()`.
- `blockfall.factory`
  - `BlockFactory(prototypes, seed=None)`: `generate()` returns a copy of a
    prototype picked uniformly at random. With a seed the sequence is the same on
    every run. Without one the current time is used as the seed.
- `blockfall.grid`
  - `Grid(width=10, height=20)`: the playfield. Each cell holds a colour id, and 0
    means empty. Its methods are:
    - `is_outside(bbox)`: checks only the left and right walls.
    - `is_collided(cells)`: true for a cell below the floor or on a filled cell.
    - `add_cells(cells, color_id)`.
    - `remove_rows(hint)`: removes the full rows inside the hint's row span and
      returns how many were removed.
    - `clear()`, `value(row, col)` and `rows()`.
- `blockfall.highscores`
  - `ScoreRecord(score, lines, is_new)` and `HighScores`: the ten best scores,
    highest first. `add_new_score(score, lines)` marks the new record and drops
    whatever falls past tenth place. `add_saved_score(score, lines)` raises
    `ValueError` when the table already holds ten records.
  - `save_scores(scores, folder, filename)`: writes the table to a file, creates
    the folder if needed and returns the file's path. The file is an unsigned 64-bit
    little-endian record count followed by score/lines pairs in the same encoding.
  - `load_scores(path)`: reads such a file back.
    - A count of 0 or above 10 gives an empty table.
    - A short or truncated file raises `ValueError`.
- `blockfall.game`
  - `GameEvent`: the notifications the game sends.
  - `LongPressRepeater(clock, first_delay, min_delay)`: `ready()` tells whether a
    held key should repeat now. The delay gets shorter the longer the key is held.
  - `ClassicTetrisGame(factory, grid=None, clock=time.monotonic, sound=None)`: a
    single game. Its methods are:
    - `add_observer`, `start`, `reset`, `update`.
    - `move_left`, `move_right`, `move_down`, `rotate`, `drop_hard`.
    - `hold`, `pause`, `unpause`.
- `blockfall.hud`
  - `HudText`: an observer that keeps these display values up to date:
    - the score, lines, level and combo strings;
    - the next and held blocks.
- `blockfall.menu`
  - `MenuElement(label, action, sound=None)`: a selectable entry. Its `state` is
    `"normal"`, `"selected"` or `"pressed"`.
  - `Menu(row_height, exit_action)`: a grid of up to two columns. Its methods are
    `add_row`, `move_up`, `move_down`, `move_left`, `move_right`, `select`, `exit`,
    `element_exists` and `bounding_box`.

## Game rules

These are the rules as `ClassicTetrisGame` implements them.

- **Spawning.** A new piece is moved 4 columns right. Pieces with `block_id` 1 are
  also moved one row up. Pieces with `block_id` 2 are moved 3 columns right and
  one row up.
- **Ghost piece.** The landing position is shown by `ghost_block`, which has
  colour id 8.
- **Rotation.** When a rotation pushes the piece past a wall, the game tries these
  shifts in order: 1 column right, 1 column left, 2 columns right.
- **Line points.** Points depend on how many lines one piece clears, and `level` is
  the speed level:

  | Lines cleared | Points                   |
  |---------------|--------------------------|
  | 1             | 100 + 50 × (level − 1)   |
  | 2             | 200 + 75 × (level − 1)   |
  | 3             | 350 + 120 × (level − 1)  |
  | 4             | 500 + 200 × (level − 1)  |

- **Combos.** Each piece that clears lines raises `combo` by one. When a piece
  clears nothing, the combo goes back to 0. If the combo was 2 or more at that
  point, it first scores 20 × 2^combo + 120 × (level − 1).
- **Speed level.** The speed level is `lines_removed // 15 + 1`, up to a maximum
  of 10.
- **Falling.** `update()` moves the piece down once every
  `base_fall_time / (speed_level × 0.7)` seconds. `base_fall_time` is 1.0.
- **Holding.** `hold()` works only once per placed piece.
- **Game over.** The game sends `GAME_OVER` when a freshly spawned piece collides
  with the grid.
- **Sounds.** These names are passed to the sound callback:
  - `"block_move"` when the piece moves or rotates;
  - `"block_drop"` when a piece is placed;
  - `"block_hold"` when a piece is held;
  - `"tetris"` when four lines are cleared at once.

  `MenuElement` passes `"button_pressed"` to its own sound callback.

## Example

```python
import time

from blockfall.block import Block
from blockfall.factory import BlockFactory
from blockfall.game import ClassicTetrisGame
from blockfall.grid import Grid
from blockfall.hud import HudText

square = Block(3, [[(0, 0), (0, 1), (1, 0), (1, 1)]], color_id=4)
line = Block(
    2,
    [
        [(1, 0), (1, 1), (1, 2), (1, 3)],
        [(0, 2), (1, 2), (2, 2), (3, 2)],
    ],
    color_id=3,
)

game = ClassicTetrisGame(
    factory=BlockFactory([square, line], seed=42),
    grid=Grid(10, 20),
    clock=time.monotonic,
    sound=lambda name: None,
)
hud = HudText()
game.add_observer(hud)
game.start()

game.move_left()
game.rotate()
game.drop_hard()
game.update()  # call once per frame; the active piece falls over time
print(hud.score, hud.lines, hud.level)
```

An observer is any object with an `on_notify(game, event)` method.

## What it does not do

- It has no built-in set of piece shapes. You pass your own prototypes to
  `BlockFactory`.
- It has no window, drawing, audio playback or keyboard and gamepad handling.
- It has no title, pause, game-over or high-score screens, and no command to run.
- The high score table is only stored where you call `save_scores()` and
  `load_scores()`.