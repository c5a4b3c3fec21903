"""
Grid geometry for maze generation.

Contains the grid graph itself plus the helper structures generators build
on: direction arithmetic, random selection, run lists and the disjoint-set
forest.
"""

from __future__ import annotations

from .cell_list import CellList
from .cell_tree import CellTree
from .directions import DIRECTION_COUNT, Direction, opposite, rotate_clockwise, rotate_counter_clockwise
from .grid import Cell, DirectionFlags, MazeGrid
from .random_selection import (
    coin_flip,
    random_cell,
    random_direction,
    random_linked_neighbour,
    random_neighbour,
    random_unlinked_neighbour,
)

__all__ = [
    "DIRECTION_COUNT",
    "Cell",
    "CellList",
    "CellTree",
    "Direction",
    "DirectionFlags",
    "MazeGrid",
    "coin_flip",
    "opposite",
    "random_cell",
    "random_direction",
    "random_linked_neighbour",
    "random_neighbour",
    "random_unlinked_neighbour",
    "rotate_clockwise",
    "rotate_counter_clockwise",
]
