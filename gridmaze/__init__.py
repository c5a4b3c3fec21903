from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("gridmaze")  # Matches the name in pyproject.toml
except PackageNotFoundError:
    # package is not installed
    __version__ = "0.0.0-dev"

from .config import MazeConfig  # noqa: E402
from .generators import MazeAlgorithm, MazeGenerator, generate_maze  # noqa: E402
from .geometry import Cell, Direction, DirectionFlags, MazeGrid  # noqa: E402
from .io import load_maze, read_maze, save_maze, write_maze  # noqa: E402
from .utils import (  # noqa: E402
    ConfigurationError,
    MazeError,
    MazeFormatError,
    MazeInvariantError,
    TruncatedMazeWarning,
    configure_logging,
    get_logger,
)

__all__ = [
    "Cell",
    "ConfigurationError",
    "Direction",
    "DirectionFlags",
    "MazeAlgorithm",
    "MazeConfig",
    "MazeError",
    "MazeFormatError",
    "MazeGenerator",
    "MazeGrid",
    "MazeInvariantError",
    "TruncatedMazeWarning",
    "__version__",
    "configure_logging",
    "generate_maze",
    "get_logger",
    "load_maze",
    "read_maze",
    "save_maze",
    "write_maze",
]
