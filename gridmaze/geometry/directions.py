"""
Cardinal directions on the maze grid.

The four directions form the cyclic order NORTH -> EAST -> SOUTH -> WEST.
Grid coordinates grow eastwards in x and southwards in y, so row 0 is the
northern boundary of the grid.
"""

from __future__ import annotations

from enum import IntEnum

DIRECTION_COUNT = 4


class Direction(IntEnum):
    """Cardinal direction, usable directly as an index into a cell's link slots."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def rotate_clockwise(self) -> Direction:
        """Next direction clockwise, wrapping WEST -> NORTH."""
        return Direction((self + 1) % DIRECTION_COUNT)

    def rotate_counter_clockwise(self) -> Direction:
        """Next direction counter-clockwise, wrapping NORTH -> WEST."""
        return Direction((self - 1) % DIRECTION_COUNT)

    def opposite(self) -> Direction:
        """NORTH <-> SOUTH, EAST <-> WEST."""
        return Direction((self + 2) % DIRECTION_COUNT)

    @property
    def offset(self) -> tuple[int, int]:
        """(dx, dy) of one step in this direction."""
        return _OFFSETS[self]


_OFFSETS = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
}


def rotate_clockwise(direction: Direction) -> Direction:
    return Direction(direction).rotate_clockwise()


def rotate_counter_clockwise(direction: Direction) -> Direction:
    return Direction(direction).rotate_counter_clockwise()


def opposite(direction: Direction) -> Direction:
    return Direction(direction).opposite()


def direction_between(dx: int, dy: int) -> Direction | None:
    """Direction of a single orthogonal step (dx, dy), or None for anything else."""
    for direction, step in _OFFSETS.items():
        if step == (dx, dy):
            return direction
    return None
