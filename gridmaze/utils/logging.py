"""
Logging infrastructure for gridmaze.

Every module logs through ``get_logger(__name__)``. Levels are set globally
with ``configure_logging`` and can be raised or lowered per component, so
that e.g. the generators can run at DEBUG while file IO stays quiet::

    configure_logging(level="WARNING", component_levels={"generators": "DEBUG"})

Console output is colored through colorlog and always goes to stderr, which
keeps text renderings on stdout clean.
"""

from __future__ import annotations

import logging
import sys
import time
from collections.abc import Mapping
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

import colorlog

if TYPE_CHECKING:
    from gridmaze.geometry.grid import MazeGrid

ROOT_LOGGER = "gridmaze"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def _as_level(level: str | int) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper())
    return level


def _component_name(component: str) -> str:
    """Expand a short component key such as ``"io"`` to its logger name."""
    if component == ROOT_LOGGER or component.startswith(ROOT_LOGGER + "."):
        return component
    return f"{ROOT_LOGGER}.{component}"


class MazeFormatter(logging.Formatter):
    """Formatter for gridmaze records, colored when requested."""

    def __init__(self, use_colors: bool = False, include_location: bool = False):
        self.use_colors = use_colors
        self.include_location = include_location

        format_str = LOG_FORMAT
        if include_location:
            format_str += " (%(filename)s:%(lineno)d)"

        if use_colors:
            self.colored_formatter = colorlog.ColoredFormatter(
                "%(log_color)s" + format_str,
                datefmt=DATE_FORMAT,
                log_colors={
                    "DEBUG": "blue",
                    "INFO": "green",
                    "WARNING": "yellow",
                    "ERROR": "red",
                    "CRITICAL": "bold_red",
                },
            )

        super().__init__(format_str, datefmt=DATE_FORMAT)

    def format(self, record):
        if self.use_colors:
            return self.colored_formatter.format(record)
        return super().format(record)


class MazeLogger:
    """
    Class-level registry of gridmaze loggers and their shared settings.

    Never instantiated. ``configure`` rebuilds the handlers of every logger
    handed out so far.
    """

    _loggers: ClassVar[dict[str, logging.Logger]] = {}
    _component_levels: ClassVar[dict[str, int]] = {}
    _log_level = logging.WARNING
    _log_file_path: Path | None = None
    _use_colors = True
    _include_location = False

    @classmethod
    def configure(
        cls,
        level: str | int = "WARNING",
        component_levels: Mapping[str, str | int] | None = None,
        log_to_file: bool = False,
        log_file_path: str | Path | None = None,
        use_colors: bool = True,
        include_location: bool = False,
    ):
        """
        Configure global logging settings for gridmaze.

        Args:
            level: Default level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            component_levels: Level overrides keyed by component, either a
                full logger name or a name relative to ``gridmaze`` such as
                ``"generators"`` or ``"generators.kruskal"``. The longest
                matching key wins.
            log_to_file: Whether to also log to a file
            log_file_path: Log file, defaults to ``./logs/gridmaze_<time>.log``
            use_colors: Use colored terminal output
            include_location: Include file and line in messages
        """
        cls._log_level = _as_level(level)
        cls._component_levels = {
            _component_name(component): _as_level(value) for component, value in (component_levels or {}).items()
        }
        cls._use_colors = use_colors
        cls._include_location = include_location

        cls._log_file_path = None
        if log_to_file:
            if log_file_path is None:
                log_dir = Path.cwd() / "logs"
                log_dir.mkdir(exist_ok=True)
                cls._log_file_path = log_dir / f"gridmaze_{datetime.now():%Y%m%d_%H%M%S}.log"
            else:
                cls._log_file_path = Path(log_file_path)
                cls._log_file_path.parent.mkdir(parents=True, exist_ok=True)

        for logger in cls._loggers.values():
            cls._setup_logger(logger)

    @classmethod
    def level_for(cls, name: str) -> int:
        """Effective level for logger ``name`` under the current settings."""
        best = ""
        for component in cls._component_levels:
            if (name == component or name.startswith(component + ".")) and len(component) > len(best):
                best = component
        return cls._component_levels[best] if best else cls._log_level

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        if name not in cls._loggers:
            logger = logging.getLogger(name)
            cls._setup_logger(logger)
            cls._loggers[name] = logger
        return cls._loggers[name]

    @classmethod
    def _setup_logger(cls, logger: logging.Logger):
        level = cls.level_for(logger.name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.setLevel(level)

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(MazeFormatter(use_colors=cls._use_colors, include_location=cls._include_location))
        console_handler.setLevel(level)
        logger.addHandler(console_handler)

        if cls._log_file_path is not None:
            file_handler = logging.FileHandler(cls._log_file_path, encoding="utf-8")
            file_handler.setFormatter(MazeFormatter(use_colors=False, include_location=cls._include_location))
            file_handler.setLevel(level)
            logger.addHandler(file_handler)

        logger.propagate = False


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a logger for the current module.

    Args:
        name: Logger name (if None, uses calling module name)
    """
    if name is None:
        import inspect

        frame = inspect.currentframe()
        if frame and frame.f_back:
            name = frame.f_back.f_globals.get("__name__", ROOT_LOGGER)
        else:
            name = ROOT_LOGGER

    return MazeLogger.get_logger(name)


def configure_logging(**kwargs):
    """Configure global logging settings, see ``MazeLogger.configure``."""
    MazeLogger.configure(**kwargs)


class LoggedGeneration:
    """
    Context manager that times one generator run and logs what it carved.

    On success the passage count, live cell count and duration are logged at
    INFO. On failure the grid size and duration are logged at ERROR and the
    exception propagates.
    """

    def __init__(self, logger: logging.Logger, algorithm: str, grid: MazeGrid):
        self.logger = logger
        self.algorithm = algorithm
        self.grid = grid
        self.start_time: float | None = None
        self.duration: float | None = None
        self.links: int | None = None

    def __enter__(self):
        self.logger.debug(
            f"Starting {self.algorithm} on {self.grid.width}x{self.grid.height} grid "
            f"({self.grid.cell_count} live cells)"
        )
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration = time.perf_counter() - (self.start_time or 0.0)

        if exc_type is None:
            self.links = self.grid.link_count()
            self.logger.info(
                f"{self.algorithm} carved {self.links} passages over {self.grid.cell_count} cells "
                f"in {self.duration:.3f}s"
            )
        else:
            self.logger.error(
                f"{self.algorithm} failed on {self.grid.width}x{self.grid.height} grid "
                f"after {self.duration:.3f}s: {exc_val}"
            )

        return False
