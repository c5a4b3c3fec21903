"""Reading and writing the packed binary maze format."""

from __future__ import annotations

from .maze_file import (
    ABSENT_BIT,
    MAGIC,
    load_maze,
    pack_cell,
    pack_grid,
    read_maze,
    save_maze,
    unpack_cell,
    write_maze,
)

__all__ = [
    "ABSENT_BIT",
    "MAGIC",
    "load_maze",
    "pack_cell",
    "pack_grid",
    "read_maze",
    "save_maze",
    "unpack_cell",
    "write_maze",
]
