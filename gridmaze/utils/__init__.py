"""Shared utilities: logging and the exception taxonomy."""

from __future__ import annotations

from .exceptions import (
    ConfigurationError,
    MazeError,
    MazeFormatError,
    MazeInvariantError,
    TruncatedMazeWarning,
    validate_dimensions,
)
from .logging import LoggedGeneration, configure_logging, get_logger

__all__ = [
    "ConfigurationError",
    "LoggedGeneration",
    "MazeError",
    "MazeFormatError",
    "MazeInvariantError",
    "TruncatedMazeWarning",
    "configure_logging",
    "get_logger",
    "validate_dimensions",
]
