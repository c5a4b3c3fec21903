"""
Maze generation algorithms.

Every generator mutates a ``MazeGrid`` in place and returns it. Except for the
demonstration generators, each one leaves a spanning tree over the live cells:
every live cell reachable from every other, ``cell_count - 1`` passages.

Examples
--------
>>> from gridmaze.generators import MazeAlgorithm, MazeGenerator
>>> grid = MazeGenerator(20, 20, MazeAlgorithm.HUNT_AND_KILL).generate(seed=3)
"""

from __future__ import annotations

from .aldous_broder import generate_aldous_broder_maze
from .binary_tree import generate_binary_tree_maze
from .bsp import Region, Wall, carve_partitions, generate_bsp_maze, split_region
from .example import generate_example_maze, generate_noop_maze, generate_spiral_maze, generate_zig_zag_maze
from .hunt_and_kill import generate_hunt_and_kill_maze
from .kruskal import generate_kruskal_maze
from .registry import GENERATORS, MazeAlgorithm, MazeGenerator, algorithm_names, generate_maze, run_generator
from .sidewinder import generate_sidewinder_maze

__all__ = [
    "GENERATORS",
    "MazeAlgorithm",
    "MazeGenerator",
    "Region",
    "Wall",
    "algorithm_names",
    "carve_partitions",
    "generate_aldous_broder_maze",
    "generate_binary_tree_maze",
    "generate_bsp_maze",
    "generate_example_maze",
    "generate_hunt_and_kill_maze",
    "generate_kruskal_maze",
    "generate_maze",
    "generate_noop_maze",
    "generate_sidewinder_maze",
    "generate_spiral_maze",
    "generate_zig_zag_maze",
    "run_generator",
    "split_region",
]
