# pokematch

A tile-matching puzzle played in the terminal. The board is a grid of
lettered tiles, each letter appearing in pairs. Pick two tiles with the
same letter; if they can be joined by a path of at most three straight
segments that passes through no other tile (the path may run along the
outside edge of the board), both tiles disappear. Clear the whole board
to finish, and your time is recorded on the leaderboard.

## Installing

```
pip install .
```

## Playing

```
pokematch
pokematch --leaderboard scores.txt --seed 42
```

Options:

- `--leaderboard PATH` — leaderboard file to read and write
  (default `Leaderboard.txt` in the current directory).
- `--seed N` — seed for the random board layout and shuffles.

The game shows its title, asks for your name (type it and press Enter),
then shows a menu:

- **MODE** — choose a level:
  - LEVEL1: 4 × 6 board
  - LEVEL2: 6 × 6 board
  - LEVEL3: 8 × 8 board
  - RETURN: back to the main menu
- **LEADERBOARD** — show the first five entries of the leaderboard file;
  any key returns to the menu.
- **EXIT** — quit (the command exits with status 1).

Keys in menus and during play:

| Key       | Action                                        |
|-----------|-----------------------------------------------|
| `w a s d` | move the cursor up, left, down, right         |
| space     | choose a menu item, or select a tile          |
| `h`       | highlight a matchable pair (three per game)   |
| `p`       | give up the current game                      |

The first space marks a tile; the second tries to match it with the tile
under the cursor. If no pair on the board can be matched, tiles are
shuffled until a move exists.

When the board is cleared, the leaderboard file is rewritten with your
result added, ordered by time (in whole seconds). A game that is given up
is not recorded. The file's first line holds the number of entries; each
following line is `rank/name/time/level`. A missing file is treated as an
empty leaderboard.

During play the board background is drawn from `Background1.txt`,
`Background2.txt` or `Background3.txt` in the current directory, matching
the level, when that file exists.

The screen is drawn with ANSI escape sequences. Keys are read one at a
time straight from the console (through `msvcrt` on Windows and raw
terminal mode elsewhere), so the game needs a real interactive terminal.

## Using it as a library

The rules live in `pokematch.matching` and work on a `pokematch.board.Board`:

```python
import random
from pokematch.board import Board, Point, board_size
from pokematch.matching import can_match, find_match, has_moves

rows, cols = board_size(1)
board = Board.generate(rows, cols, random.Random(7))
if has_moves(board):
    p1, p2 = find_match(board)
    assert can_match(board, p1, p2)
    board.clear(p1)
    board.clear(p2)
```

Other modules:

- `pokematch.leaderboard` — `PlayerRecord`, `parse_leaderboard`,
  `format_leaderboard`, `load_leaderboard`, `save_leaderboard`,
  `sort_by_time` and `render_leaderboard`.
- `pokematch.screen` — `Terminal`, which writes to any text stream and can
  take a scripted sequence of keys (`Terminal(stream, keys=[...])`), and
  the `Color` indices.
- `pokematch.menu` — the banners, `draw_button`, `select` and
  `choose_level`.
- `pokematch.game` — `GameSession` for a single round, `run` for a whole
  game and `main` for the command.

## Running the tests

```
pip install .[test]
pytest
```