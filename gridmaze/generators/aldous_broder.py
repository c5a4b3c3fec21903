"""
Aldous-Broder maze generation.

Algorithm:
1. Close every passage and start at a random live cell
2. Step to a uniformly random grid neighbour
3. If that neighbour has never been visited, carve the step just taken
4. Repeat from the neighbour until every live cell has been visited

Characteristics:
- Unbiased: every spanning tree of the grid is equally likely
- Slow: the walk keeps wandering through visited territory, so the
  expected number of steps grows faster than the number of cells
- Tolerates removed cells as long as the live cells are contiguous
"""

from __future__ import annotations

import random

from gridmaze.generators.base import is_trivial, require_contiguous, resolve_rng
from gridmaze.geometry.grid import MazeGrid
from gridmaze.geometry.random_selection import random_cell, random_direction
from gridmaze.utils.logging import get_logger

logger = get_logger(__name__)


def generate_aldous_broder_maze(grid: MazeGrid, rng: random.Random | None = None) -> MazeGrid:
    """Carve a uniform spanning tree into ``grid`` with a random walk."""
    if is_trivial(grid):
        return grid
    require_contiguous(grid, "aldous_broder")
    rng = resolve_rng(rng)
    grid.unlink_all()

    visited = [False] * grid.size
    current = random_cell(grid, rng)
    visited[current.index] = True
    visited_count = 1
    steps = 0

    while visited_count < grid.cell_count:
        direction = random_direction(rng)
        adjacent = grid.adjacent(current, direction)
        if adjacent is None:
            continue
        steps += 1
        if not visited[adjacent.index]:
            grid.link_in_direction(current, direction)
            visited[adjacent.index] = True
            visited_count += 1
        current = adjacent

    logger.debug(f"Aldous-Broder walk visited {visited_count} cells in {steps} steps")
    return grid
