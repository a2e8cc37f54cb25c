"""Sudoku board state, scoring rules and a step-by-step backtracking solver."""

from __future__ import annotations

import random
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from .cellstack import Cell, CellStack

SIZE = 9
BOX = 3
KEY_SPACE = 0x20
KEY_DELETE = 0x2E
_DIGIT_KEYS = range(ord("1"), ord("9") + 1)
_NUMPAD_KEYS = range(0x61, 0x6A)

_BASE_GRID = (
    (1, 2, 3, 4, 5, 6, 7, 8, 9),
    (4, 5, 6, 7, 8, 9, 1, 2, 3),
    (7, 8, 9, 1, 2, 3, 4, 5, 6),
    (2, 3, 4, 5, 6, 7, 8, 9, 1),
    (5, 6, 7, 8, 9, 1, 2, 3, 4),
    (8, 9, 1, 2, 3, 4, 5, 6, 7),
    (3, 4, 5, 6, 7, 8, 9, 1, 2),
    (6, 7, 8, 9, 1, 2, 3, 4, 5),
    (9, 1, 2, 3, 4, 5, 6, 7, 8),
)


class Level(Enum):
    """Difficulty: allowed errors, allowed hints and number of given cells."""

    EASY = ("Easy", 3, 3, 65)
    MEDIUM = ("Medium", 5, 5, 55)
    HARD = ("Hard", 8, 8, 45)

    def __init__(self, label: str, max_errors: int, max_hints: int, givens: int) -> None:
        self.label = label
        self.max_errors = max_errors
        self.max_hints = max_hints
        self.givens = givens


class CellCode(Enum):
    """How a cell's value came to be and whether it conflicts."""

    INITIAL = "i"
    USER = "u"
    ERROR = "e"
    HINT = "h"


@dataclass(frozen=True)
class Notice:
    """A message for the player."""

    title: str
    message: str
    is_error: bool


def _cells() -> Iterator[Cell]:
    return ((i, j) for i in range(SIZE) for j in range(SIZE))


def _digit_for_key(keycode: int) -> int | None:
    if keycode in _DIGIT_KEYS:
        return keycode - ord("0")
    if keycode in _NUMPAD_KEYS:
        return keycode - 0x60
    return None


class SudokuGame:
    """One game of Sudoku with its grid, scoring and solver state."""

    GRID_SIZE = 450
    CELL_SIZE = GRID_SIZE // SIZE
    START_X = 50
    START_Y = 50
    MAX_SOLVER_STEPS = 1_000_000
    START_SCORE = 100

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.cell_stack = CellStack(1024)
        self.new_game(Level.EASY)

    # -- setup -----------------------------------------------------------

    def new_game(self, level: Level) -> None:
        """Reset all state and deal a fresh puzzle for the given level."""
        self.level = level
        self.current_cell: Cell | None = None
        self.error_count = 0
        self.hint_count = 0
        self.score = self.START_SCORE
        self.solver_running = False
        self.solving_complete = False
        self.current_guess = [[0] * SIZE for _ in range(SIZE)]
        self.cell_stack.clear()
        self._deal(level.givens)
        self.grid_code = [
            [CellCode.INITIAL if value else CellCode.USER for value in row]
            for row in self.grid
        ]

    def _deal(self, givens: int) -> None:
        rng = self._rng
        grid = [list(row) for row in _BASE_GRID]
        for _ in range(rng.randrange(10) + 5):
            swap_rows = rng.randrange(2) == 1
            group = rng.randrange(3)
            t1 = rng.randrange(3)
            t2 = rng.randrange(3)
            if t1 == t2:
                t2 = (t2 + 1) % 3
            a, b = group * BOX + t1, group * BOX + t2
            if swap_rows:
                grid[a], grid[b] = grid[b], grid[a]
            else:
                for row in grid:
                    row[a], row[b] = row[b], row[a]
        self.solution_grid = [row[:] for row in grid]
        for _ in range(SIZE * SIZE - givens):
            i, j = rng.randrange(SIZE), rng.randrange(SIZE)
            while grid[i][j] == 0:
                i, j = rng.randrange(SIZE), rng.randrange(SIZE)
            grid[i][j] = 0
        self.grid = grid

    # -- input -------------------------------------------------------------

    def cell_at(self, x: int, y: int) -> Cell | None:
        """Return the cell under a pixel position, or None outside the grid."""
        if (
            self.START_X < x < self.START_X + self.GRID_SIZE
            and self.START_Y < y < self.START_Y + self.GRID_SIZE
        ):
            return ((y - self.START_Y) // self.CELL_SIZE, (x - self.START_X) // self.CELL_SIZE)
        return None

    def handle_click(self, x: int, y: int) -> bool:
        """Select the clicked cell; return True if the selection changed."""
        if self.solving_complete or self.solver_running:
            return False
        cell = self.cell_at(x, y)
        if cell is None or cell == self.current_cell:
            return False
        self.current_cell = cell
        return True

    def _is_fixed(self, i: int, j: int) -> bool:
        return self.grid_code[i][j] in (CellCode.INITIAL, CellCode.HINT)

    def handle_key_press(self, keycode: int) -> Notice | None:
        """Enter a digit into the selected cell and score it."""
        if self.solving_complete or self.solver_running or self.current_cell is None:
            return None
        i, j = self.current_cell
        if self._is_fixed(i, j):
            return None
        digit = _digit_for_key(keycode)
        if digit is None or self.grid[i][j] == digit:
            return None
        self.grid[i][j] = digit
        self.update_grid_codes()
        if self.grid_code[i][j] is CellCode.ERROR:
            self.score -= 10
            self.error_count += 1
        else:
            self.score += 5
        return self.check_game_over()

    def handle_delete_or_space_key(self, keycode: int, cell_i: int, cell_j: int) -> bool:
        """Clear a cell on Delete or Space; return True if it was cleared."""
        if not (0 <= cell_i < SIZE and 0 <= cell_j < SIZE):
            return False
        if self._is_fixed(cell_i, cell_j) or keycode not in (KEY_DELETE, KEY_SPACE):
            return False
        self.grid[cell_i][cell_j] = 0
        self.grid_code[cell_i][cell_j] = CellCode.USER
        return True

    # -- rules -------------------------------------------------------------

    @staticmethod
    def _peers(cell_i: int, cell_j: int) -> Iterator[Cell]:
        r0, c0 = cell_i // BOX * BOX, cell_j // BOX * BOX
        for i in range(r0, r0 + BOX):
            for j in range(c0, c0 + BOX):
                if (i, j) != (cell_i, cell_j):
                    yield i, j
        for j in range(SIZE):
            if j != cell_j:
                yield cell_i, j
        for i in range(SIZE):
            if i != cell_i:
                yield i, cell_j

    def update_grid_codes(self) -> None:
        for i, j in _cells():
            self.update_cell_code(i, j)

    def update_cell_code(self, cell_i: int, cell_j: int) -> None:
        """Mark a non-initial cell as an error if a peer holds the same value."""
        if self.grid_code[cell_i][cell_j] is CellCode.INITIAL:
            return
        value = self.grid[cell_i][cell_j]
        clash = any(self.grid[i][j] == value for i, j in self._peers(cell_i, cell_j))
        self.grid_code[cell_i][cell_j] = CellCode.ERROR if clash else CellCode.USER

    def is_solved(self) -> bool:
        return all(
            self.grid[i][j] != 0 and self.grid_code[i][j] is not CellCode.ERROR
            for i, j in _cells()
        )

    def is_valid(self, row: int, col: int, num: int) -> bool:
        """Whether num appears nowhere in the row, column or box of a cell."""
        if any(self.grid[row][x] == num or self.grid[x][col] == num for x in range(SIZE)):
            return False
        r0, c0 = row - row % BOX, col - col % BOX
        return all(
            self.grid[r][c] != num
            for r in range(r0, r0 + BOX)
            for c in range(c0, c0 + BOX)
        )

    # -- solver ------------------------------------------------------------

    def update_solver(self) -> None:
        """Advance the backtracking solver by one placement or one step back."""
        if not any(any(row) for row in self.current_guess):
            start = next(
                (
                    (i, j)
                    for i, j in _cells()
                    if self.grid[i][j] == 0 and self.grid_code[i][j] is not CellCode.INITIAL
                ),
                None,
            )
            if start is not None:
                self.current_cell = start
                self.current_guess[start[0]][start[1]] = 1
        if self.current_cell is None:
            self.solving_complete = True
            return

        i, j = self.current_cell
        for num in range(self.current_guess[i][j], SIZE + 1):
            if not self.is_valid(i, j, num):
                continue
            self.grid[i][j] = num
            self.cell_stack.push((i, j))
            self.current_guess[i][j] = num
            following = next(
                (
                    (r, c)
                    for r, c in _cells()
                    if (r, c) > (i, j) and self.grid[r][c] == 0
                ),
                None,
            )
            if following is None:
                self.solving_complete = True
            else:
                self.current_cell = following
                self.current_guess[following[0]][following[1]] = 1
            self.update_grid_codes()
            return

        self.grid[i][j] = 0
        self.current_guess[i][j] = 1
        if self.cell_stack:
            prev_i, prev_j = self.cell_stack.pop()
            self.current_cell = (prev_i, prev_j)
            self.current_guess[prev_i][prev_j] += 1
            self.update_grid_codes()
        else:
            self.solving_complete = True

    def start_solver(self) -> None:
        """Clear the player's entries and let the solver run step by step."""
        self.clear_errors()
        self.solver_running = True
        self.solving_complete = False

    def show_solution(self) -> None:
        """Run the solver to completion, bounded by MAX_SOLVER_STEPS."""
        self.solving_complete = False
        self.solver_running = True
        self.current_cell = None
        for _ in range(self.MAX_SOLVER_STEPS):
            if self.solving_complete:
                break
            self.update_solver()

    # -- outcome -----------------------------------------------------------

    def check_game_over(self) -> Notice | None:
        """End the game on too many errors or a solved grid."""
        if self.error_count >= self.level.max_errors:
            self.solving_complete = True
            self.solver_running = False
            return Notice("Game Over", "Game Over! You made too many mistakes.", True)
        if self.is_solved():
            self.solving_complete = True
            self.solver_running = False
            return Notice(
                "Game Complete",
                "Congratulations! You solved the Sudoku puzzle.\n"
                f"Your score: {self.score}",
                False,
            )
        return None

    def clear_errors(self) -> None:
        """Remove every value the player entered and drop the selection."""
        self.current_cell = None
        for i, j in _cells():
            if self.grid_code[i][j] is not CellCode.INITIAL:
                self.grid_code[i][j] = CellCode.USER
                self.grid[i][j] = 0

    def handle_hint(self) -> Notice | None:
        """Reveal the selected cell's solution value, if allowed."""
        if self.current_cell is None:
            return Notice("Hint Error", "Please select a cell before requesting a hint.", True)
        i, j = self.current_cell
        if self.grid_code[i][j] is CellCode.INITIAL:
            return Notice("Hint Error", "Please select a nonempty cell.", True)
        if self.hint_count >= self.level.max_hints:
            return Notice("Good Luck", "You've asked for too many hints.", True)
        self.hint_count += 1
        self.grid[i][j] = self.solution_grid[i][j]
        self.grid_code[i][j] = CellCode.INITIAL
        self.score -= 5
        return self.check_game_over()

    def status_text(self) -> tuple[str, str, str]:
        """Return the error, hint and score lines shown above the grid."""
        return (
            f"Errors: {self.error_count}",
            f"Hints: {self.hint_count}",
            f"Score: {self.score}",
        )