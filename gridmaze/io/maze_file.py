"""
Binary maze file format.

Layout::

    "MAZE"              4 bytes, ASCII magic
    width               int32, little-endian
    height              int32, little-endian
    cells               width * height bytes, row-major (y outer, x inner)

Each cell byte::

    ---D WSEN
    bit 0 = NORTH open, bit 1 = EAST open, bit 2 = SOUTH open,
    bit 3 = WEST open, bit 4 = cell absent (bits 0-3 ignored)

Bits 5-7 are written as zero and ignored on read. A file with fewer cell
bytes than the header announces is read as far as it goes; the remaining
cells keep their default unlinked state and a ``TruncatedMazeWarning`` is
emitted.
"""

from __future__ import annotations

import struct
import warnings
from pathlib import Path
from typing import BinaryIO

import numpy as np

from gridmaze.geometry.directions import Direction
from gridmaze.geometry.grid import Cell, DirectionFlags, MazeGrid
from gridmaze.utils.exceptions import MazeFormatError, TruncatedMazeWarning
from gridmaze.utils.logging import get_logger

logger = get_logger(__name__)

MAGIC = b"MAZE"
HEADER = struct.Struct("<ii")
READ_CHUNK = 1 << 16
# Largest grid built from a file that ends before its cell data does
MAX_TRUNCATED_CELLS = 1 << 22

NORTH_BIT = 1 << 0
EAST_BIT = 1 << 1
SOUTH_BIT = 1 << 2
WEST_BIT = 1 << 3
ABSENT_BIT = 1 << 4

_DIRECTION_BITS = (
    (Direction.NORTH, NORTH_BIT),
    (Direction.EAST, EAST_BIT),
    (Direction.SOUTH, SOUTH_BIT),
    (Direction.WEST, WEST_BIT),
)


def pack_cell(cell: Cell | None) -> int:
    """Pack one cell slot into a byte value."""
    if cell is None:
        return ABSENT_BIT
    packed = 0
    for direction, bit in _DIRECTION_BITS:
        if cell.is_linked(direction):
            packed |= bit
    return packed


def unpack_cell(byte: int) -> tuple[DirectionFlags, bool]:
    """Decode a cell byte into its open directions and the absent flag."""
    flags = DirectionFlags(
        bool(byte & NORTH_BIT),
        bool(byte & EAST_BIT),
        bool(byte & SOUTH_BIT),
        bool(byte & WEST_BIT),
    )
    return flags, bool(byte & ABSENT_BIT)


def pack_grid(grid: MazeGrid) -> bytes:
    """Header and cell bytes of ``grid``."""
    data = np.fromiter(
        (pack_cell(grid.cell_at(x, y)) for y in range(grid.height) for x in range(grid.width)),
        dtype=np.uint8,
        count=grid.size,
    )
    return MAGIC + HEADER.pack(grid.width, grid.height) + data.tobytes()


def write_maze(stream: BinaryIO, grid: MazeGrid) -> int:
    """
    Write ``grid`` to a binary stream.

    Returns:
        Number of bytes written
    """
    payload = pack_grid(grid)
    stream.write(payload)
    stream.flush()
    return len(payload)


def _read_cells(stream: BinaryIO, size: int) -> bytes:
    """Read up to ``size`` cell bytes, never requesting more than one chunk at a time."""
    buffer = bytearray()
    while len(buffer) < size:
        chunk = stream.read(min(READ_CHUNK, size - len(buffer)))
        if not chunk:
            break
        buffer.extend(chunk)
    return bytes(buffer)


def read_maze(stream: BinaryIO) -> MazeGrid:
    """
    Read a maze from a binary stream.

    Raises:
        MazeFormatError: If the magic number or header is missing or invalid
    """
    magic = stream.read(len(MAGIC))
    if magic != MAGIC:
        raise MazeFormatError("Not a valid maze file", diagnostic_data={"magic": repr(magic)})

    header = stream.read(HEADER.size)
    if len(header) != HEADER.size:
        raise MazeFormatError(
            "Could not read maze dimensions",
            diagnostic_data={"header_bytes": len(header), "expected_bytes": HEADER.size},
        )
    width, height = HEADER.unpack(header)
    if width < 1 or height < 1:
        raise MazeFormatError(
            f"Invalid maze dimensions {width}x{height}",
            diagnostic_data={"width": width, "height": height},
        )

    size = width * height
    data = np.frombuffer(_read_cells(stream, size), dtype=np.uint8)
    if len(data) < size and size > MAX_TRUNCATED_CELLS:
        raise MazeFormatError(
            f"Maze header claims {width}x{height} cells but the file holds only {len(data)}",
            diagnostic_data={"width": width, "height": height, "cell_bytes": len(data)},
        )
    grid = MazeGrid(width, height)

    for i, byte in enumerate(data):
        x, y = i % width, i // width
        flags, absent = unpack_cell(int(byte))
        if absent:
            grid.remove_cell(x, y)
            continue
        cell = grid.cell_at(x, y)
        for direction, is_open in zip(Direction, flags):
            if is_open:
                grid.link_in_direction(cell, direction)

    if len(data) < size:
        message = f"Missing cells in maze file: read {len(data)}/{size}"
        logger.warning(message)
        warnings.warn(message, TruncatedMazeWarning, stacklevel=2)

    return grid


def save_maze(path: str | Path, grid: MazeGrid) -> Path:
    """Write ``grid`` to ``path``, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        written = write_maze(f, grid)
    logger.info(f"Saved {grid.width}x{grid.height} maze ({written} bytes) to {path}")
    return path


def load_maze(path: str | Path) -> MazeGrid:
    """Read a maze file from ``path``."""
    path = Path(path)
    with open(path, "rb") as f:
        grid = read_maze(f)
    logger.info(f"Loaded {grid.width}x{grid.height} maze from {path}")
    return grid
