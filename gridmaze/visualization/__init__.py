"""Text and matplotlib renderings of maze grids."""

from __future__ import annotations

from .plot_render import render_maze, wall_segments
from .text_render import cell_glyph, format_maze

__all__ = ["cell_glyph", "format_maze", "render_maze", "wall_segments"]
