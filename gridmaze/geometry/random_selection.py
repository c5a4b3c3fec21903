"""
Random selection over a maze grid.

All helpers query the grid only and keep no state of their own. Candidate
sets are at most four directions, so picks are made by rejection sampling
over ``Direction`` once the caller-visible "nothing to pick" case has been
ruled out.
"""

from __future__ import annotations

import random
from collections.abc import Callable

from gridmaze.geometry.directions import DIRECTION_COUNT, Direction
from gridmaze.geometry.grid import Cell, MazeGrid


def coin_flip(rng: random.Random) -> bool:
    return rng.random() < 0.5


def random_direction(rng: random.Random) -> Direction:
    """Uniform pick among the four directions."""
    return Direction(rng.randrange(DIRECTION_COUNT))


def random_cell(grid: MazeGrid, rng: random.Random) -> Cell | None:
    """
    Uniform pick among live cells.

    Draws coordinates until a live slot is hit, which is a single draw on a
    full grid. Returns None only when the grid has no live cells.
    """
    if grid.cell_count == 0:
        return None
    while True:
        cell = grid.cell_at(rng.randrange(grid.width), rng.randrange(grid.height))
        if cell is not None:
            return cell


def _pick_direction(rng: random.Random, accept: Callable[[Direction], bool]) -> Direction | None:
    if not any(accept(direction) for direction in Direction):
        return None
    while True:
        direction = random_direction(rng)
        if accept(direction):
            return direction


def random_linked_neighbour(grid: MazeGrid, cell: Cell | None, rng: random.Random) -> Cell | None:
    """Uniform pick among the cells ``cell`` has a passage to."""
    if cell is None:
        return None
    direction = _pick_direction(rng, lambda d: grid.linked_neighbour(cell, d) is not None)
    return None if direction is None else grid.linked_neighbour(cell, direction)


def random_unlinked_neighbour(grid: MazeGrid, cell: Cell | None, rng: random.Random) -> Cell | None:
    """Uniform pick among live grid neighbours that ``cell`` is not yet linked to."""
    if cell is None:
        return None
    direction = _pick_direction(
        rng, lambda d: not cell.is_linked(d) and grid.adjacent(cell, d) is not None
    )
    return None if direction is None else grid.adjacent(cell, direction)


def random_neighbour(grid: MazeGrid, cell: Cell | None, rng: random.Random) -> Cell | None:
    """Uniform pick among live grid neighbours, regardless of links."""
    if cell is None:
        return None
    direction = _pick_direction(rng, lambda d: grid.adjacent(cell, d) is not None)
    return None if direction is None else grid.adjacent(cell, direction)
