"""
Hunt-and-Kill maze generation.

Algorithm:
1. Close every passage and start at a random live cell
2. Kill: walk to a random unvisited grid neighbour, carving as you go
3. Hunt: when the current cell has no unvisited neighbour, scan the grid
   row by row from the top-left for the first unvisited cell next to a
   visited one, carve into a random visited neighbour and resume the walk
4. Stop once every live cell has been visited

Characteristics:
- Long, winding corridors like recursive backtracking, without a stack
- Each hunt rescans from the top-left, so large grids cost quadratic time
- If a hunt finds nothing while cells remain unvisited, the live cells are
  not contiguous; generation stops with ``MazeInvariantError``
"""

from __future__ import annotations

import random

from gridmaze.generators.base import is_trivial, resolve_rng
from gridmaze.geometry.grid import Cell, MazeGrid
from gridmaze.geometry.random_selection import random_cell
from gridmaze.utils.exceptions import MazeInvariantError
from gridmaze.utils.logging import get_logger

logger = get_logger(__name__)


def generate_hunt_and_kill_maze(grid: MazeGrid, rng: random.Random | None = None) -> MazeGrid:
    """Carve a spanning tree into ``grid`` by alternating random walks and hunts."""
    if is_trivial(grid):
        return grid
    rng = resolve_rng(rng)
    grid.unlink_all()

    visited = [False] * grid.size
    current = random_cell(grid, rng)
    visited[current.index] = True
    visited_count = 1
    hunts = 0

    while visited_count < grid.cell_count:
        candidates = [n for n in grid.adjacent_cells(current) if not visited[n.index]]
        if candidates:
            following = rng.choice(candidates)
            grid.link(current, following)
            visited[following.index] = True
            visited_count += 1
            current = following
            continue

        hunts += 1
        found = _hunt(grid, visited, rng)
        if found is None:
            unvisited = [cell.coords for cell in grid.cells() if not visited[cell.index]]
            logger.error(f"Hunt failed with {len(unvisited)} unvisited cells remaining: {unvisited[:20]}")
            raise MazeInvariantError(
                "Failed to finish hunting: no unvisited cell borders the visited region",
                cells=unvisited,
                generator_name="hunt_and_kill",
            )
        visited[found.index] = True
        visited_count += 1
        current = found

    logger.debug(f"Hunt-and-Kill finished after {hunts} hunts")
    return grid


def _hunt(grid: MazeGrid, visited: list[bool], rng: random.Random) -> Cell | None:
    """First unvisited cell in row-major order with a visited neighbour, linked into the maze."""
    for cell in grid.cells():
        if visited[cell.index]:
            continue
        visited_neighbours = [n for n in grid.adjacent_cells(cell) if visited[n.index]]
        if visited_neighbours:
            grid.link(cell, rng.choice(visited_neighbours))
            return cell
    return None
