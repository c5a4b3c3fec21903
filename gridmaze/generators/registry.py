"""
Generator selection.

``MazeAlgorithm`` is the closed set of generators. Names typed by users are
resolved to a member once, at the boundary, and dispatch is a single lookup
into ``GENERATORS`` from there on.
"""

from __future__ import annotations

import random
from collections.abc import Callable
from enum import Enum

from gridmaze.generators.aldous_broder import generate_aldous_broder_maze
from gridmaze.generators.binary_tree import generate_binary_tree_maze
from gridmaze.generators.bsp import generate_bsp_maze
from gridmaze.generators.example import (
    generate_example_maze,
    generate_noop_maze,
    generate_spiral_maze,
    generate_zig_zag_maze,
)
from gridmaze.generators.hunt_and_kill import generate_hunt_and_kill_maze
from gridmaze.generators.kruskal import generate_kruskal_maze
from gridmaze.generators.sidewinder import generate_sidewinder_maze
from gridmaze.geometry.grid import MazeGrid
from gridmaze.utils.exceptions import ConfigurationError
from gridmaze.utils.logging import LoggedGeneration, get_logger

logger = get_logger(__name__)

GeneratorFunction = Callable[..., MazeGrid]


class MazeAlgorithm(Enum):
    """Available maze generation algorithms."""

    ALDOUS_BRODER = "aldous"
    HUNT_AND_KILL = "huntkill"
    BINARY_TREE = "binary"
    SIDEWINDER = "sidewinder"
    BSP = "bsp"
    KRUSKAL = "kruskal"
    EXAMPLE = "example"
    ZIG_ZAG = "zigzag"
    SPIRAL = "spiral"
    NOOP = "noop"

    @classmethod
    def from_name(cls, name: str | MazeAlgorithm) -> MazeAlgorithm:
        """
        Resolve a user-supplied algorithm token.

        Accepts the canonical values plus aliases, case-insensitively.

        Raises:
            ConfigurationError: If the token names no algorithm
        """
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            raise ConfigurationError(
                f"Algorithm must be given by name, got {type(name).__name__}",
                generator_name="MazeAlgorithm",
                suggested_action=f"Use one of: {', '.join(algorithm_names())}",
                diagnostic_data={"provided_value": repr(name)},
            )
        token = name.strip().lower().replace("-", "_")
        algorithm = _ALIASES.get(token)
        if algorithm is None:
            raise ConfigurationError(
                f"Unknown algorithm: {name!r}",
                generator_name="MazeAlgorithm",
                suggested_action=f"Use one of: {', '.join(algorithm_names())}",
                diagnostic_data={"provided_value": name},
            )
        return algorithm

    @property
    def produces_spanning_tree(self) -> bool:
        """Whether the generator guarantees a spanning tree on a full grid."""
        return self not in (MazeAlgorithm.EXAMPLE, MazeAlgorithm.ZIG_ZAG, MazeAlgorithm.SPIRAL, MazeAlgorithm.NOOP)

    @property
    def initial_state_linked(self) -> bool:
        """Whether the generator starts from a fully linked grid."""
        return self is MazeAlgorithm.BSP


_ALIASES: dict[str, MazeAlgorithm] = {algorithm.value: algorithm for algorithm in MazeAlgorithm}
_ALIASES.update(
    {
        "aldous_broder": MazeAlgorithm.ALDOUS_BRODER,
        "hunt": MazeAlgorithm.HUNT_AND_KILL,
        "kill": MazeAlgorithm.HUNT_AND_KILL,
        "hunt_and_kill": MazeAlgorithm.HUNT_AND_KILL,
        "tree": MazeAlgorithm.BINARY_TREE,
        "binary_tree": MazeAlgorithm.BINARY_TREE,
        "zig_zag": MazeAlgorithm.ZIG_ZAG,
        "none": MazeAlgorithm.NOOP,
    }
)

GENERATORS: dict[MazeAlgorithm, GeneratorFunction] = {
    MazeAlgorithm.ALDOUS_BRODER: generate_aldous_broder_maze,
    MazeAlgorithm.HUNT_AND_KILL: generate_hunt_and_kill_maze,
    MazeAlgorithm.BINARY_TREE: generate_binary_tree_maze,
    MazeAlgorithm.SIDEWINDER: generate_sidewinder_maze,
    MazeAlgorithm.BSP: generate_bsp_maze,
    MazeAlgorithm.KRUSKAL: generate_kruskal_maze,
    MazeAlgorithm.EXAMPLE: generate_example_maze,
    MazeAlgorithm.ZIG_ZAG: generate_zig_zag_maze,
    MazeAlgorithm.SPIRAL: generate_spiral_maze,
    MazeAlgorithm.NOOP: generate_noop_maze,
}


def algorithm_names() -> list[str]:
    """Every accepted algorithm token, canonical values first."""
    canonical = [algorithm.value for algorithm in MazeAlgorithm]
    return canonical + sorted(alias for alias in _ALIASES if alias not in canonical)


def run_generator(
    grid: MazeGrid,
    algorithm: str | MazeAlgorithm,
    rng: random.Random | None = None,
) -> MazeGrid:
    """Run one generator on an existing grid, in place."""
    algorithm = MazeAlgorithm.from_name(algorithm)
    with LoggedGeneration(logger, algorithm.name, grid):
        return GENERATORS[algorithm](grid, rng)


class MazeGenerator:
    """
    Maze generator bound to one grid and one algorithm.

    Example:
        >>> generator = MazeGenerator(20, 10, MazeAlgorithm.KRUSKAL)
        >>> grid = generator.generate(seed=42)
        >>> grid.link_count()
        199
    """

    def __init__(
        self,
        width: int,
        height: int,
        algorithm: str | MazeAlgorithm = MazeAlgorithm.ALDOUS_BRODER,
        all_linked: bool = False,
    ):
        """
        Initialize maze generator.

        Args:
            width: Number of columns in maze
            height: Number of rows in maze
            algorithm: Algorithm (or algorithm token) to use for generation
            all_linked: Start from a grid with every adjacent pair linked
        """
        self.algorithm = MazeAlgorithm.from_name(algorithm)
        self.grid = MazeGrid(width, height, all_linked=all_linked)

    @property
    def width(self) -> int:
        return self.grid.width

    @property
    def height(self) -> int:
        return self.grid.height

    def generate(self, seed: int | None = None) -> MazeGrid:
        """
        Generate a maze into the bound grid.

        Args:
            seed: Random seed for reproducibility

        Returns:
            The generated grid
        """
        return run_generator(self.grid, self.algorithm, random.Random(seed))


def generate_maze(
    width: int,
    height: int,
    algorithm: str | MazeAlgorithm = MazeAlgorithm.ALDOUS_BRODER,
    seed: int | None = None,
) -> MazeGrid:
    """
    High-level function to generate a maze.

    Args:
        width: Number of columns
        height: Number of rows
        algorithm: Algorithm name, e.g. 'aldous', 'huntkill', 'kruskal'
        seed: Random seed for reproducibility

    Returns:
        Generated maze grid

    Example:
        >>> grid = generate_maze(8, 8, algorithm="sidewinder", seed=7)
        >>> grid.cell_count, grid.link_count()
        (64, 63)
    """
    return MazeGenerator(width, height, algorithm).generate(seed=seed)
