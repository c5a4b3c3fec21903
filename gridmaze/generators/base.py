"""Shared preconditions and plumbing for the maze generators."""

from __future__ import annotations

import random

from gridmaze.geometry.grid import MazeGrid
from gridmaze.utils.exceptions import ConfigurationError


def resolve_rng(rng: random.Random | None) -> random.Random:
    """Use the given random source, or a fresh unseeded one."""
    return rng if rng is not None else random.Random()


def is_trivial(grid: MazeGrid) -> bool:
    """Grids with at most one live cell are already a spanning tree."""
    return grid.cell_count <= 1


def require_full_grid(grid: MazeGrid, generator_name: str) -> None:
    if not grid.is_full:
        raise ConfigurationError(
            f"{generator_name} generation only works on full grids",
            generator_name=generator_name,
            suggested_action="Use a generator that tolerates removed cells (aldous, huntkill, kruskal)",
            diagnostic_data={
                "grid": f"{grid.width}x{grid.height}",
                "live_cells": grid.cell_count,
                "removed_cells": grid.size - grid.cell_count,
            },
        )


def require_contiguous(grid: MazeGrid, generator_name: str) -> None:
    if not grid.is_contiguous():
        raise ConfigurationError(
            "Live cells are split into separate regions, no spanning tree exists",
            generator_name=generator_name,
            suggested_action="Remove fewer cells so that every live cell has a path of live neighbours to the rest",
            diagnostic_data={"grid": f"{grid.width}x{grid.height}", "live_cells": grid.cell_count},
        )
