"""Menu commands, input handling and the Tk window for playing Sudoku."""

from __future__ import annotations

import argparse
import random
from collections.abc import Callable
from enum import IntEnum
from typing import Any

from .game import KEY_DELETE, KEY_SPACE, SIZE, BOX, CellCode, Level, Notice, SudokuGame

TICK_MS = 100

ABOUT_NOTICE = Notice("About Sudoku", "Sudoku, Version 1.0", False)


class Command(IntEnum):
    """Menu commands, numbered as the menu resources number them."""

    ABOUT = 104
    EXIT = 105
    NEW_EASY = 32772
    NEW_MEDIUM = 32773
    NEW_HARD = 32774
    SHOW_SOLUTION = 32779
    START_SOLVER = 32780
    SHOW_HINT = 32782


_NEW_GAME_LEVELS = {
    Command.NEW_EASY: Level.EASY,
    Command.NEW_MEDIUM: Level.MEDIUM,
    Command.NEW_HARD: Level.HARD,
}


def _snapshot(game: SudokuGame) -> tuple[Any, ...]:
    return (
        tuple(tuple(row) for row in game.grid),
        tuple(tuple(row) for row in game.grid_code),
    )


class GameController:
    """Routes menu commands, clicks, keys and timer ticks to a game.

    Each input method returns True when the board should be redrawn.
    Messages for the player are passed to ``notify``.
    """

    def __init__(
        self,
        game: SudokuGame | None = None,
        notify: Callable[[Notice], object] | None = None,
    ) -> None:
        self.game = game if game is not None else SudokuGame()
        self._notify = notify if notify is not None else (lambda notice: None)
        self.closed = False

    def _emit(self, notice: Notice | None) -> None:
        if notice is not None:
            self._notify(notice)

    def run_command(self, command: Command | int) -> bool:
        """Carry out a menu command."""
        command = Command(command)
        game = self.game
        if command in _NEW_GAME_LEVELS:
            game.new_game(_NEW_GAME_LEVELS[command])
            return True
        if command is Command.START_SOLVER:
            game.start_solver()
            return True
        if command is Command.SHOW_SOLUTION:
            game.clear_errors()
            game.show_solution()
            return True
        if command is Command.SHOW_HINT:
            before = _snapshot(game)
            self._emit(game.handle_hint())
            return _snapshot(game) != before
        if command is Command.ABOUT:
            self._emit(ABOUT_NOTICE)
            return False
        self.closed = True
        return False

    def click(self, x: int, y: int) -> bool:
        """Select the cell under a pixel position."""
        return self.game.handle_click(x, y)

    def key(self, keycode: int) -> bool:
        """Handle a key: digits fill the selected cell, Delete or Space clear it."""
        game = self.game
        before = _snapshot(game)
        self._emit(game.handle_key_press(keycode))
        if game.current_cell is not None:
            game.handle_delete_or_space_key(keycode, *game.current_cell)
        return _snapshot(game) != before

    def tick(self) -> bool:
        """Advance a running solver by one step."""
        game = self.game
        if not game.solver_running or game.is_solved():
            return False
        game.update_solver()
        return True


def _keycode_for(keysym: str) -> int | None:
    """Translate a Tk key symbol into the key code the game understands."""
    if len(keysym) == 1 and keysym in "123456789":
        return ord(keysym)
    if keysym.startswith("KP_") and keysym[3:] in tuple("123456789"):
        return 0x60 + int(keysym[3:])
    if keysym in ("Delete", "KP_Delete"):
        return KEY_DELETE
    if keysym == "space":
        return KEY_SPACE
    return None


_COLOURS = {
    CellCode.INITIAL: "black",
    CellCode.USER: "blue",
    CellCode.ERROR: "red",
    CellCode.HINT: "orange",
}


class SudokuWindow:
    """Tk window that draws the board and feeds input to a controller."""

    WIDTH = 554
    HEIGHT = 541
    FONT = ("Arial", 18)

    def __init__(self, root: Any, controller: GameController) -> None:
        import tkinter as tk

        self.root = root
        self.controller = controller
        root.title("Sudoku")
        root.resizable(False, False)
        self.canvas = tk.Canvas(
            root, width=self.WIDTH, height=self.HEIGHT, bg="white", highlightthickness=0
        )
        self.canvas.pack()
        self._build_menu(tk)
        self.canvas.bind("<Button-1>", self._on_click)
        root.bind("<KeyPress>", self._on_key)
        root.protocol("WM_DELETE_WINDOW", self._close)
        self.redraw()
        self._timer = root.after(TICK_MS, self._on_tick)

    def _build_menu(self, tk: Any) -> None:
        menubar = tk.Menu(self.root)
        file_menu = tk.Menu(menubar, tearoff=False)
        new_menu = tk.Menu(file_menu, tearoff=False)
        for label, command in (
            ("Easy", Command.NEW_EASY),
            ("Medium", Command.NEW_MEDIUM),
            ("Hard", Command.NEW_HARD),
        ):
            new_menu.add_command(label=label, command=lambda c=command: self._command(c))
        file_menu.add_cascade(label="New Game", menu=new_menu)
        file_menu.add_separator()
        file_menu.add_command(label="Exit", command=lambda: self._command(Command.EXIT))
        menubar.add_cascade(label="File", menu=file_menu)

        game_menu = tk.Menu(menubar, tearoff=False)
        for label, command in (
            ("Play Solver", Command.START_SOLVER),
            ("Show Solution", Command.SHOW_SOLUTION),
            ("Show Hint", Command.SHOW_HINT),
        ):
            game_menu.add_command(label=label, command=lambda c=command: self._command(c))
        menubar.add_cascade(label="Game", menu=game_menu)

        help_menu = tk.Menu(menubar, tearoff=False)
        help_menu.add_command(label="About...", command=lambda: self._command(Command.ABOUT))
        menubar.add_cascade(label="Help", menu=help_menu)
        self.root.config(menu=menubar)

    def _command(self, command: Command) -> None:
        redraw = self.controller.run_command(command)
        if self.controller.closed:
            self._close()
        elif redraw:
            self.redraw()

    def _on_click(self, event: Any) -> None:
        if self.controller.click(event.x, event.y):
            self.redraw()

    def _on_key(self, event: Any) -> None:
        keycode = _keycode_for(event.keysym)
        if keycode is not None and self.controller.key(keycode):
            self.redraw()

    def _on_tick(self) -> None:
        if self.controller.tick():
            self.redraw()
        self._timer = self.root.after(TICK_MS, self._on_tick)

    def _close(self) -> None:
        self.root.after_cancel(self._timer)
        self.root.destroy()

    def redraw(self) -> None:
        """Draw the grid, the digits and the status line."""
        game = self.controller.game
        canvas = self.canvas
        x0, y0 = game.START_X, game.START_Y
        cell, size = game.CELL_SIZE, game.GRID_SIZE
        canvas.delete("all")

        if game.current_cell is not None:
            i, j = game.current_cell
            canvas.create_rectangle(
                x0 + j * cell, y0 + i * cell, x0 + (j + 1) * cell, y0 + (i + 1) * cell,
                fill="#cccccc", outline="",
            )

        for k in range(SIZE + 1):
            width = 3 if k % BOX == 0 else 1
            offset = k * cell
            canvas.create_line(x0 + offset, y0, x0 + offset, y0 + size, width=width)
            canvas.create_line(x0, y0 + offset, x0 + size, y0 + offset, width=width)

        for i, row in enumerate(game.grid):
            for j, value in enumerate(row):
                if value:
                    canvas.create_text(
                        x0 + j * cell + cell // 2,
                        y0 + i * cell + cell // 2,
                        text=str(value),
                        fill=_COLOURS[game.grid_code[i][j]],
                        font=self.FONT,
                    )

        errors, hints, score = game.status_text()
        canvas.create_text(10, 10, text=errors, anchor="nw", font=self.FONT)
        canvas.create_text(self.WIDTH // 2, 10, text=score, anchor="n", font=self.FONT)
        canvas.create_text(self.WIDTH - 10, 10, text=hints, anchor="ne", font=self.FONT)


def main(argv: list[str] | None = None) -> int:
    """Open the Sudoku window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="sudokupad", description="Play Sudoku.")
    parser.add_argument(
        "--level", choices=[level.name.lower() for level in Level], default="easy",
        help="difficulty of the first game",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for dealing puzzles")
    args = parser.parse_args(argv)

    import tkinter as tk
    from tkinter import messagebox

    root = tk.Tk()

    def notify(notice: Notice) -> None:
        show = messagebox.showerror if notice.is_error else messagebox.showinfo
        show(notice.title, notice.message, parent=root)

    game = SudokuGame(random.Random(args.seed))
    game.new_game(Level[args.level.upper()])
    SudokuWindow(root, GameController(game, notify))
    root.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())