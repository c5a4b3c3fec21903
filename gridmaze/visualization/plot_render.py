"""
Matplotlib rendering of maze grids.

Only reads the grid: for every live cell the blocked directions decide which
of the four cell edges are drawn as wall lines.
"""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection

from gridmaze.geometry.grid import MazeGrid
from gridmaze.utils.logging import get_logger

logger = get_logger(__name__)

WALL_COLOR = "black"
WALL_LINE_WIDTH = 1.5
BACKGROUND_COLOR = "white"
ABSENT_COLOR = "lightgrey"
DPI = 100


def wall_segments(grid: MazeGrid, cell_size: int = 10) -> list[tuple[tuple[float, float], tuple[float, float]]]:
    """
    Line segments, in pixel coordinates, for every blocked cell edge.

    Pixel (0, 0) is the top-left corner of cell (0, 0); y grows downwards as
    it does for grid rows.
    """
    segments = []
    for cell in grid.cells():
        left, top = cell.x * cell_size, cell.y * cell_size
        right, bottom = left + cell_size, top + cell_size
        blocked = grid.blocked_directions(cell)
        if blocked.north:
            segments.append(((left, top), (right, top)))
        if blocked.south:
            segments.append(((left, bottom), (right, bottom)))
        if blocked.west:
            segments.append(((left, top), (left, bottom)))
        if blocked.east:
            segments.append(((right, top), (right, bottom)))
    return segments


def render_maze(
    grid: MazeGrid,
    cell_size: int = 10,
    filename: str | Path | None = None,
    show: bool = False,
) -> plt.Figure:
    """
    Draw ``grid`` with matplotlib.

    Args:
        grid: Maze to draw
        cell_size: Edge length of one cell in pixels
        filename: Save the figure here when given
        show: Open an interactive window and block until it is closed

    Returns:
        The matplotlib figure
    """
    width_px = grid.width * cell_size
    height_px = grid.height * cell_size

    fig, ax = plt.subplots(figsize=(max(width_px, 1) / DPI, max(height_px, 1) / DPI), dpi=DPI)
    fig.patch.set_facecolor(BACKGROUND_COLOR)
    ax.set_xlim(0, width_px)
    ax.set_ylim(height_px, 0)
    ax.set_aspect("equal")
    ax.axis("off")

    for y in range(grid.height):
        for x in range(grid.width):
            if grid.cell_at(x, y) is None:
                ax.add_patch(
                    plt.Rectangle((x * cell_size, y * cell_size), cell_size, cell_size, color=ABSENT_COLOR)
                )

    segments = wall_segments(grid, cell_size)
    ax.add_collection(LineCollection(segments, colors=WALL_COLOR, linewidths=WALL_LINE_WIDTH))

    if filename is not None:
        path = Path(filename)
        path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(path, dpi=DPI, bbox_inches="tight", pad_inches=0.05)
        logger.info(f"Saved maze image with {len(segments)} wall segments to {path}")

    if show:
        plt.show()

    return fig
