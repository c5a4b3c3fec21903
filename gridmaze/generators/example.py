"""
Demonstration generators.

These draw a single fixed path rather than a random spanning tree and exist
to exercise renderers and the maze file format:

- zig-zag: rows are walked alternately east and west, dropping south at
  the end of each row (a Hamiltonian path over the whole grid)
- spiral: a square spiral wound outward from the grid centre, turning
  clockwise, until it leaves the grid
- noop: leaves the grid exactly as given
"""

from __future__ import annotations

import random

from gridmaze.generators.base import require_full_grid, resolve_rng
from gridmaze.geometry.directions import Direction
from gridmaze.geometry.grid import MazeGrid
from gridmaze.geometry.random_selection import coin_flip, random_direction


def generate_example_maze(grid: MazeGrid, rng: random.Random | None = None) -> MazeGrid:
    """Either a spiral or a zig-zag, chosen by coin flip."""
    rng = resolve_rng(rng)
    if coin_flip(rng):
        return generate_spiral_maze(grid, rng)
    return generate_zig_zag_maze(grid, rng)


def generate_zig_zag_maze(grid: MazeGrid, rng: random.Random | None = None) -> MazeGrid:
    require_full_grid(grid, "zigzag")
    grid.unlink_all()

    eastward = True
    for y in range(grid.height):
        if eastward:
            for x in range(grid.width):
                direction = Direction.EAST if x < grid.width - 1 else Direction.SOUTH
                grid.link_in_direction(grid.cell_at(x, y), direction)
        else:
            for x in range(grid.width - 1, -1, -1):
                direction = Direction.WEST if x > 0 else Direction.SOUTH
                grid.link_in_direction(grid.cell_at(x, y), direction)
        eastward = not eastward
    return grid


def generate_spiral_maze(grid: MazeGrid, rng: random.Random | None = None) -> MazeGrid:
    """Wind a square spiral out of the centre in a random starting direction."""
    require_full_grid(grid, "spiral")
    rng = resolve_rng(rng)
    grid.unlink_all()

    half_size = min(grid.width, grid.height) // 2
    direction = random_direction(rng)
    cell = grid.cell_at(half_size, half_size)
    length = 1

    while cell is not None:
        for _ in range(2):
            for _ in range(length):
                if cell is None:
                    break
                grid.link_in_direction(cell, direction)
                cell = grid.adjacent(cell, direction)
            direction = direction.rotate_clockwise()
        length += 1
    return grid


def generate_noop_maze(grid: MazeGrid, rng: random.Random | None = None) -> MazeGrid:
    return grid
