"""
Binary Tree maze generation.

Algorithm:
1. Close every passage
2. Visit cells row by row from the bottom row up, left to right
3. Link each cell either NORTH or EAST, tossing a fair coin when both
   neighbours exist and taking the only one available on the top row or
   rightmost column; the top-right cell links nowhere

Characteristics:
- Single pass, no bookkeeping
- Strong diagonal bias: the top row is one long EAST corridor and the
  rightmost column one long NORTH corridor
- Removed cells are skipped; on an irregular field the result is acyclic but
  may be split into several trees
"""

from __future__ import annotations

import random

from gridmaze.generators.base import is_trivial, resolve_rng
from gridmaze.geometry.directions import Direction
from gridmaze.geometry.grid import MazeGrid
from gridmaze.geometry.random_selection import coin_flip
from gridmaze.utils.logging import get_logger

logger = get_logger(__name__)


def generate_binary_tree_maze(grid: MazeGrid, rng: random.Random | None = None) -> MazeGrid:
    """Link every cell NORTH or EAST, forced at the boundary."""
    if is_trivial(grid):
        return grid
    rng = resolve_rng(rng)
    grid.unlink_all()

    for y in range(grid.height - 1, -1, -1):
        for x in range(grid.width):
            cell = grid.cell_at(x, y)
            if cell is None:
                continue
            can_north = grid.adjacent(cell, Direction.NORTH) is not None
            can_east = grid.adjacent(cell, Direction.EAST) is not None

            if can_north and can_east:
                direction = Direction.EAST if coin_flip(rng) else Direction.NORTH
            elif can_north:
                direction = Direction.NORTH
            elif can_east:
                direction = Direction.EAST
            else:
                continue
            grid.link_in_direction(cell, direction)

    logger.debug(f"Binary tree carved {grid.link_count()} passages")
    return grid
