"""A desktop Sudoku game with hints, scoring and an animated solver."""

__version__ = "0.1.0"
__all__ = ["__version__"]