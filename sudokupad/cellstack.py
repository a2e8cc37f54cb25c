"""A bounded last-in, first-out stack of grid cells."""

from __future__ import annotations

Cell = tuple[int, int]


class CellStack:
    """Fixed-capacity stack of ``(row, column)`` pairs."""

    def __init__(self, capacity: int = 1024) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[Cell] = []

    @property
    def capacity(self) -> int:
        """Largest number of cells the stack can hold."""
        return self._capacity

    def push(self, cell: Cell) -> None:
        """Put a cell on top of the stack."""
        if self.is_full():
            raise OverflowError("The stack is full")
        row, col = cell
        self._items.append((row, col))

    def pop(self) -> Cell:
        """Remove the top cell and return it."""
        if self.is_empty():
            raise IndexError("The stack is empty")
        return self._items.pop()

    def top(self) -> Cell:
        """Return the top cell without removing it."""
        if self.is_empty():
            raise IndexError("The stack is empty")
        return self._items[-1]

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)