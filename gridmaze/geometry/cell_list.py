"""
Ordered sequence of cells used to track a run during generation.

Order is insertion order. Holds references into a grid's cells; it must not
outlive the grid or be used after a referenced cell is removed.
"""

from __future__ import annotations

import random
from collections.abc import Iterator

from gridmaze.geometry.grid import Cell


class CellList:
    """Append-at-tail sequence of cells with uniform random picking."""

    def __init__(self, start: Cell | None = None):
        self._cells: list[Cell] = []
        if start is not None:
            self._cells.append(start)

    def push(self, cell: Cell | None) -> None:
        if cell is not None:
            self._cells.append(cell)

    def pop(self) -> Cell | None:
        """Remove and return the last cell, or None when empty."""
        return self._cells.pop() if self._cells else None

    def remove(self, cell: Cell) -> bool:
        """Remove the first occurrence of ``cell``; False if it was not present."""
        for position, entry in enumerate(self._cells):
            if entry is cell:
                del self._cells[position]
                return True
        return False

    def first(self) -> Cell | None:
        return self._cells[0] if self._cells else None

    def last(self) -> Cell | None:
        return self._cells[-1] if self._cells else None

    def pick_random(self, rng: random.Random) -> Cell | None:
        """Uniform pick by position, or None when empty."""
        if not self._cells:
            return None
        return self._cells[rng.randrange(len(self._cells))]

    def clear(self) -> None:
        self._cells.clear()

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __contains__(self, cell: object) -> bool:
        return any(entry is cell for entry in self._cells)

    def __repr__(self) -> str:
        return f"CellList({self._cells!r})"
