"""
Sidewinder maze generation.

Algorithm:
1. Close every passage
2. Row 0 (the northern boundary) becomes one EAST corridor
3. Every other row, bottom to top, is scanned left to right while growing a
   run of cells: toss a coin to carve EAST and extend the run, or close the
   run by carving NORTH from a random member of it
4. The last cell of a row always closes the run

Characteristics:
- Row-at-a-time, only the current run is remembered
- Like Binary Tree the northern row is a single corridor, but vertical
  passages are spread over each run instead of hugging one side
"""

from __future__ import annotations

import random

from gridmaze.generators.base import is_trivial, resolve_rng
from gridmaze.geometry.cell_list import CellList
from gridmaze.geometry.directions import Direction
from gridmaze.geometry.grid import MazeGrid
from gridmaze.geometry.random_selection import coin_flip
from gridmaze.utils.logging import get_logger

logger = get_logger(__name__)


def generate_sidewinder_maze(grid: MazeGrid, rng: random.Random | None = None) -> MazeGrid:
    """Carve row by row, closing each horizontal run with one NORTH passage."""
    if is_trivial(grid):
        return grid
    rng = resolve_rng(rng)
    grid.unlink_all()

    run = CellList()
    runs_closed = 0

    for y in range(grid.height - 1, -1, -1):
        for x in range(grid.width):
            cell = grid.cell_at(x, y)

            if y == 0:
                grid.link_in_direction(cell, Direction.EAST)
                continue

            if cell is None:
                runs_closed += _close_run(grid, run, rng)
                continue

            run.push(cell)
            if coin_flip(rng) and grid.adjacent(cell, Direction.EAST) is not None:
                grid.link_in_direction(cell, Direction.EAST)
            else:
                runs_closed += _close_run(grid, run, rng)

    logger.debug(f"Sidewinder closed {runs_closed} runs")
    return grid


def _close_run(grid: MazeGrid, run: CellList, rng: random.Random) -> int:
    """Carve NORTH from a random run member that has a northern neighbour, then start a new run."""
    if not run:
        return 0
    candidates = CellList()
    for member in run:
        if grid.adjacent(member, Direction.NORTH) is not None:
            candidates.push(member)
    grid.link_in_direction(candidates.pick_random(rng), Direction.NORTH)
    run.clear()
    return 1
