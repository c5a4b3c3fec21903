"""
Grid graph for maze generation.

A ``MazeGrid`` is a fixed ``width x height`` arrangement of cell slots stored
row-major (``index = y * width + x``). A slot either holds a live ``Cell`` or
is empty because the cell was removed. Every cell has four link slots, one
per cardinal direction, holding the index of the linked neighbour or ``None``.

Invariants maintained by every mutating method:

- Links are symmetric: if A links to B in direction D then B links to A in
  ``D.opposite()``.
- Links only ever join grid-adjacent, non-diagonal live cells.
- No link references a removed cell.

Query methods never raise for out-of-range coordinates, ``None`` cells or
non-adjacent pairs; they return ``None`` or do nothing instead.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import TYPE_CHECKING, NamedTuple

import numpy as np

from gridmaze.geometry.directions import DIRECTION_COUNT, Direction, direction_between
from gridmaze.utils.exceptions import validate_dimensions

if TYPE_CHECKING:
    from numpy.typing import NDArray


class DirectionFlags(NamedTuple):
    """Snapshot of one boolean per cardinal direction."""

    north: bool
    east: bool
    south: bool
    west: bool

    def __invert__(self) -> DirectionFlags:
        return DirectionFlags(not self.north, not self.east, not self.south, not self.west)


class Cell:
    """
    A single grid position.

    Coordinates are fixed at creation; the link slots are the only mutable
    state and are managed by the owning ``MazeGrid``.
    """

    __slots__ = ("_index", "_x", "_y", "links")

    def __init__(self, x: int, y: int, index: int):
        self._x = x
        self._y = y
        self._index = index
        self.links: list[int | None] = [None] * DIRECTION_COUNT

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def index(self) -> int:
        return self._index

    @property
    def coords(self) -> tuple[int, int]:
        return (self._x, self._y)

    def is_linked(self, direction: Direction) -> bool:
        """Whether a passage leaves this cell in ``direction``."""
        return self.links[direction] is not None

    def linked_directions(self) -> list[Direction]:
        return [direction for direction in Direction if self.links[direction] is not None]

    def __repr__(self) -> str:
        return f"Cell({self._x},{self._y})"


class MazeGrid:
    """Rectangular grid of cells with symmetric cardinal links."""

    def __init__(self, width: int, height: int, all_linked: bool = False):
        """
        Initialize grid.

        Args:
            width: Number of columns
            height: Number of rows
            all_linked: Link every pair of adjacent cells up front
        """
        validate_dimensions(width, height, generator_name="MazeGrid")
        self.width = width
        self.height = height
        self._cells: list[Cell | None] = [
            Cell(x, y, y * width + x) for y in range(height) for x in range(width)
        ]
        self._cell_count = width * height

        if all_linked:
            self.link_all_adjacent()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def size(self) -> int:
        """Number of cell slots, live or removed."""
        return self.width * self.height

    @property
    def cell_count(self) -> int:
        """Number of live cells."""
        return self._cell_count

    @property
    def is_full(self) -> bool:
        return self._cell_count == self.size

    def cell_at(self, x: int, y: int) -> Cell | None:
        """Cell at (x, y), or None when out of bounds or removed."""
        if 0 <= x < self.width and 0 <= y < self.height:
            return self._cells[y * self.width + x]
        return None

    def cell_by_index(self, index: int | None) -> Cell | None:
        if index is None or not 0 <= index < self.size:
            return None
        return self._cells[index]

    def adjacent(self, cell: Cell | None, direction: Direction) -> Cell | None:
        """
        Cell one step from ``cell`` in ``direction`` by grid position.

        Link state is ignored; None at the boundary or when the neighbour
        slot is empty.
        """
        if not self._owns(cell):
            return None
        dx, dy = Direction(direction).offset
        return self.cell_at(cell.x + dx, cell.y + dy)

    def adjacent_cells(self, cell: Cell | None) -> list[Cell]:
        """All live grid neighbours of ``cell``."""
        return [n for n in (self.adjacent(cell, d) for d in Direction) if n is not None]

    def linked_neighbour(self, cell: Cell | None, direction: Direction) -> Cell | None:
        """Cell reached by following the passage leaving ``cell`` in ``direction``."""
        if not self._owns(cell):
            return None
        return self.cell_by_index(cell.links[direction])

    def linked_cells(self, cell: Cell | None) -> list[Cell]:
        return [n for n in (self.linked_neighbour(cell, d) for d in Direction) if n is not None]

    def cells(self) -> Iterator[Cell]:
        """Live cells in row-major order."""
        for cell in self._cells:
            if cell is not None:
                yield cell

    def unblocked_directions(self, cell: Cell | None) -> DirectionFlags:
        """Which directions currently have a passage. All False for None."""
        if cell is None:
            return DirectionFlags(False, False, False, False)
        links = cell.links
        return DirectionFlags(
            links[Direction.NORTH] is not None,
            links[Direction.EAST] is not None,
            links[Direction.SOUTH] is not None,
            links[Direction.WEST] is not None,
        )

    def blocked_directions(self, cell: Cell | None) -> DirectionFlags:
        """Complement of ``unblocked_directions``; all True for None."""
        return ~self.unblocked_directions(cell)

    def link_count(self) -> int:
        """Number of undirected passages in the grid."""
        return sum(
            cell.is_linked(Direction.EAST) + cell.is_linked(Direction.SOUTH) for cell in self.cells()
        )

    def is_contiguous(self) -> bool:
        """Whether every live cell can reach every other through grid adjacency."""
        start = next(self.cells(), None)
        if start is None:
            return True

        seen = {start.index}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for neighbour in self.adjacent_cells(current):
                if neighbour.index not in seen:
                    seen.add(neighbour.index)
                    queue.append(neighbour)
        return len(seen) == self._cell_count

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def link(self, cell1: Cell | None, cell2: Cell | None) -> None:
        """
        Create a passage between two grid-adjacent cells.

        No-op when either cell is None, they are the same cell, or they are
        not orthogonal neighbours.
        """
        if not (self._owns(cell1) and self._owns(cell2)) or cell1 is cell2:
            return
        direction = direction_between(cell2.x - cell1.x, cell2.y - cell1.y)
        if direction is None:
            return
        cell1.links[direction] = cell2.index
        cell2.links[direction.opposite()] = cell1.index

    def link_in_direction(self, cell: Cell | None, direction: Direction) -> None:
        """Link ``cell`` to its grid neighbour in ``direction`` if there is one."""
        neighbour = self.adjacent(cell, direction)
        if neighbour is None:
            return
        direction = Direction(direction)
        cell.links[direction] = neighbour.index
        neighbour.links[direction.opposite()] = cell.index

    def unlink(self, cell1: Cell | None, cell2: Cell | None) -> None:
        """Remove the passage between two cells, on both sides."""
        if not (self._owns(cell1) and self._owns(cell2)):
            return
        for direction in Direction:
            if cell1.links[direction] == cell2.index:
                cell1.links[direction] = None
            if cell2.links[direction] == cell1.index:
                cell2.links[direction] = None

    def unlink_in_direction(self, cell: Cell | None, direction: Direction) -> None:
        """Remove the passage leaving ``cell`` in ``direction``, on both sides."""
        if not self._owns(cell):
            return
        direction = Direction(direction)
        neighbour = self.cell_by_index(cell.links[direction])
        if neighbour is not None and neighbour.links[direction.opposite()] == cell.index:
            neighbour.links[direction.opposite()] = None
        cell.links[direction] = None

    def link_all_adjacent(self) -> None:
        """Open a passage between every pair of adjacent live cells."""
        for cell in self.cells():
            self.link_in_direction(cell, Direction.EAST)
            self.link_in_direction(cell, Direction.SOUTH)

    def unlink_all(self) -> None:
        """Close every passage."""
        for cell in self.cells():
            cell.links = [None] * DIRECTION_COUNT

    def remove_cell(self, x: int, y: int) -> None:
        """Remove the cell at (x, y), unlinking it from its neighbours first."""
        cell = self.cell_at(x, y)
        if cell is None:
            return
        for direction in Direction:
            self.unlink_in_direction(cell, direction)
        self._cells[cell.index] = None
        self._cell_count -= 1

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def to_numpy_array(self) -> NDArray[np.int32]:
        """
        Convert the maze to a wall/passage raster.

        Cell (x, y) maps to raster position (2y + 1, 2x + 1); the positions
        between two cells are opened when the cells are linked.

        Returns:
            Array of shape (2 * height + 1, 2 * width + 1) where 1 = wall,
            0 = passage. Removed cells stay wall.
        """
        maze = np.ones((2 * self.height + 1, 2 * self.width + 1), dtype=np.int32)

        for cell in self.cells():
            r, c = 2 * cell.y + 1, 2 * cell.x + 1
            maze[r, c] = 0
            if cell.is_linked(Direction.EAST):
                maze[r, c + 1] = 0
            if cell.is_linked(Direction.SOUTH):
                maze[r + 1, c] = 0

        return maze

    def _owns(self, cell: Cell | None) -> bool:
        return cell is not None and 0 <= cell.index < self.size and self._cells[cell.index] is cell

    def __repr__(self) -> str:
        return f"MazeGrid({self.width}x{self.height}, cells={self._cell_count}, links={self.link_count()})"
