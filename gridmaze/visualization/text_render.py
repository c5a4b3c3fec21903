"""Box-drawing text rendering of a maze grid, one glyph per cell slot."""

from __future__ import annotations

from gridmaze.geometry.grid import DirectionFlags, MazeGrid

ABSENT_GLYPH = "#"

# Keyed by (north, east, south, west) open flags
_GLYPHS: dict[tuple[bool, bool, bool, bool], str] = {
    (True, True, True, True): "╬",
    (True, True, True, False): "╠",
    (True, False, True, True): "╣",
    (True, True, False, True): "╩",
    (False, True, True, True): "╦",
    (True, True, False, False): "╚",
    (True, False, False, True): "╝",
    (True, False, True, False): "║",
    (False, True, False, True): "═",
    (False, False, True, True): "╗",
    (False, True, True, False): "╔",
    (True, False, False, False): "╨",
    (False, False, True, False): "╥",
    (False, True, False, False): "╞",
    (False, False, False, True): "╡",
    (False, False, False, False): " ",
}


def cell_glyph(flags: DirectionFlags) -> str:
    return _GLYPHS[tuple(flags)]


def format_maze(grid: MazeGrid) -> str:
    """Render ``grid`` as text, one line per row, without a trailing newline."""
    lines = []
    for y in range(grid.height):
        row = []
        for x in range(grid.width):
            cell = grid.cell_at(x, y)
            if cell is None:
                row.append(ABSENT_GLYPH)
            else:
                row.append(cell_glyph(grid.unblocked_directions(cell)))
        lines.append("".join(row))
    return "\n".join(lines)
