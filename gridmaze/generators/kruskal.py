"""
Randomized Kruskal maze generation using a disjoint-set forest.

Algorithm:
1. Close every passage and put every live cell in a tree of its own
2. Draw a random live cell and a random neighbour it is not linked to
3. If the two are in different trees, link them and merge the trees;
   otherwise discard the pair
4. Repeat until one tree holds every live cell

Characteristics:
- Random draws replace shuffling the full edge list; the distribution is the
  same but draws are rejected more often as the forest nears one tree
- Many short dead ends, little directional bias
- Tolerates removed cells as long as the live cells are contiguous
"""

from __future__ import annotations

import random

from gridmaze.generators.base import is_trivial, require_contiguous, resolve_rng
from gridmaze.geometry.cell_tree import CellTree
from gridmaze.geometry.grid import MazeGrid
from gridmaze.geometry.random_selection import random_cell, random_unlinked_neighbour
from gridmaze.utils.logging import get_logger

logger = get_logger(__name__)


def generate_kruskal_maze(grid: MazeGrid, rng: random.Random | None = None) -> MazeGrid:
    """Carve a spanning tree by merging random cell pairs from different trees."""
    if is_trivial(grid):
        return grid
    require_contiguous(grid, "kruskal")
    rng = resolve_rng(rng)
    grid.unlink_all()

    forest = CellTree(grid)
    anchor = next(grid.cells())
    draws = 0

    while forest.tree_size(anchor) < grid.cell_count:
        draws += 1
        cell = random_cell(grid, rng)
        unlinked = random_unlinked_neighbour(grid, cell, rng)
        if unlinked is None or forest.same_tree(cell, unlinked):
            continue
        grid.link(cell, unlinked)
        forest.union(cell, unlinked)

    logger.debug(f"Kruskal merged {len(forest)} cells after {draws} draws")
    return grid
