"""Validated maze configuration and config-file helpers."""

from __future__ import annotations

from .maze_config import MazeConfig, load_config_file, save_config_file

__all__ = ["MazeConfig", "load_config_file", "save_config_file"]
