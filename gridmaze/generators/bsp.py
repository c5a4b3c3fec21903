"""
Recursive Binary Space Partition maze generation.

Works in the opposite direction to the other generators: it starts from a
grid with every adjacent pair linked and removes passages.

Algorithm:
1. Link every pair of adjacent cells; the whole grid is the first region
2. Split a region with a wall across its longer axis (random axis on ties)
   at a uniformly random offset
3. The wall unlinks every cell pair across it except one random gap
4. Split both halves the same way until every region is a single row or
   column

Characteristics:
- Long straight walls and a visibly rectangular, hierarchical layout
- Regions are kept on an explicit work stack, so memory is bounded by the
  number of pending regions and deep partitions never hit the interpreter's
  recursion limit
- Requires a full grid: a gap landing on a removed cell would disconnect
  the two halves
"""

from __future__ import annotations

import random
from typing import NamedTuple

from gridmaze.generators.base import is_trivial, require_full_grid, resolve_rng
from gridmaze.geometry.directions import Direction
from gridmaze.geometry.grid import MazeGrid
from gridmaze.geometry.random_selection import coin_flip
from gridmaze.utils.logging import get_logger

logger = get_logger(__name__)


class Region(NamedTuple):
    """Axis-aligned block of cells with top-left corner (x, y)."""

    x: int
    y: int
    width: int
    height: int

    @property
    def is_leaf(self) -> bool:
        """A single row or column cannot be split any further."""
        return self.width <= 1 or self.height <= 1


class Wall(NamedTuple):
    """
    Cells on the near side of a split wall.

    ``cells`` are the (x, y) positions whose passage in ``direction`` is
    removed; ``gap`` is the one position that keeps its passage.
    """

    direction: Direction
    cells: list[tuple[int, int]]
    gap: tuple[int, int]


def split_region(region: Region, rng: random.Random) -> tuple[Region, Region, Wall] | None:
    """
    Split ``region`` in two across its longer axis.

    Returns:
        The two child regions and the wall between them, or None when the
        region is already a single row or column.
    """
    if region.is_leaf:
        return None

    if region.width == region.height:
        vertical_wall = coin_flip(rng)
    else:
        vertical_wall = region.width > region.height

    if vertical_wall:
        # Wall runs north-south between column x + offset - 1 and x + offset
        offset = rng.randint(1, region.width - 1)
        first = Region(region.x, region.y, offset, region.height)
        second = Region(region.x + offset, region.y, region.width - offset, region.height)
        column = region.x + offset - 1
        cells = [(column, y) for y in range(region.y, region.y + region.height)]
        wall = Wall(Direction.EAST, cells, rng.choice(cells))
    else:
        offset = rng.randint(1, region.height - 1)
        first = Region(region.x, region.y, region.width, offset)
        second = Region(region.x, region.y + offset, region.width, region.height - offset)
        row = region.y + offset - 1
        cells = [(x, row) for x in range(region.x, region.x + region.width)]
        wall = Wall(Direction.SOUTH, cells, rng.choice(cells))

    return first, second, wall


def carve_partitions(grid: MazeGrid, rng: random.Random) -> int:
    """
    Partition a fully linked grid until every region is a row or column.

    Returns:
        Number of splits performed, at most ``cell_count - 1``.
    """
    splits = 0
    pending = [Region(0, 0, grid.width, grid.height)]

    while pending:
        result = split_region(pending.pop(), rng)
        if result is None:
            continue
        first, second, wall = result
        for x, y in wall.cells:
            if (x, y) != wall.gap:
                grid.unlink_in_direction(grid.cell_at(x, y), wall.direction)
        pending.append(second)
        pending.append(first)
        splits += 1

    return splits


def generate_bsp_maze(grid: MazeGrid, rng: random.Random | None = None) -> MazeGrid:
    """Carve a spanning tree by recursively walling off a fully open grid."""
    require_full_grid(grid, "bsp")
    if is_trivial(grid):
        return grid
    rng = resolve_rng(rng)
    grid.link_all_adjacent()

    splits = carve_partitions(grid, rng)
    logger.debug(f"BSP performed {splits} splits on {grid.width}x{grid.height} grid")
    return grid
