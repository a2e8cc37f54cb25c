# sudokupad

A small desktop Sudoku game. Pick a difficulty, fill in the grid with the
keyboard, ask for hints when you are stuck, or watch the built-in
backtracking solver work through the puzzle one step at a time.

## Installing

```
pip install .
```

The window uses Tkinter, which ships with most Python installations.

## Playing

Start the game with:

```
sudokupad
```

- Click a cell to select it.
- Press `1`–`9` on the main keys or the number pad to enter a digit.
- Press `Delete` or `Space` to clear a cell you filled in.
- Digits you type show in blue. A digit that clashes with its row, column
  or 3×3 box turns red and counts as an error. Given digits are black and
  hinted digits are orange; neither can be changed.

### Difficulty

| Level  | Given cells | Errors allowed | Hints allowed |
|--------|-------------|----------------|---------------|
| Easy   | 65          | 3              | 3             |
| Medium | 55          | 5              | 5             |
| Hard   | 45          | 8              | 8             |

### Scoring

You start with 100 points. A correct entry earns 5, an entry that clashes
costs 10, and each hint costs 5. Reaching the error limit ends the game;
filling the grid with no clashes wins it and shows your score.

### Menu commands

- **New game** – Easy, Medium or Hard.
- **Start solver** – clears your entries and animates the backtracking
  solver filling the grid.
- **Show solution** – clears your entries and solves the puzzle at once.
- **Show hint** – reveals the correct digit in the selected cell.

## Using the game logic directly

The rules live in `sudokupad.game.SudokuGame`, which has no dependency on
the window, so it can be driven from code or tests:

```python
import random
from sudokupad.game import SudokuGame, Level

game = SudokuGame(random.Random(7))
game.new_game(Level.MEDIUM)
game.show_solution()
print(game.is_solved())
print(game.status_text())
```

`sudokupad.app.GameController` maps menu commands, mouse clicks, key
presses and timer ticks onto a game, reporting messages through a callback,
and `sudokupad.app.SudokuWindow` draws it with Tkinter.

## Running the tests

```
pip install .[test]
pytest
```