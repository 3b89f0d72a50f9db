"""Decoder for JMXVNVM1000 navigation mesh files.

Only the height map is extracted. Everything before it is a sequence of
count-prefixed tables whose byte size depends on counts read along the way,
so the decoder walks them with skips instead of parsing them:

    header              12 bytes
    navigation entries  u16 count, then per entry: 30 bytes, u16 n, n * 6 bytes
    navigation cells    u32 count, 4 bytes, then per cell: 16 bytes, u8 n, n * 2 bytes
    region links        u32 count, count * 27 bytes
    cell links          u32 count, count * 23 bytes
    texture map         96 * 96 * 8 bytes
    height map          97 * 97 float32, row-major

Whatever follows the height map is left unread.
"""

import logging
from pathlib import Path

import numpy as np

from .mesh_generation import DEFAULT_CELL_SPACING, heightmap_to_vertices
from .reader import ByteCursor
from .schemas import RegionOffset

logger = logging.getLogger(__name__)

HEIGHTMAP_SIZE = 97
HEADER_SIZE = 12

ENTRY_RECORD_SIZE = 30
ENTRY_EXTRA_SIZE = 6
CELL_HEADER_SIZE = 4
CELL_RECORD_SIZE = 16
CELL_EXTRA_SIZE = 2
REGION_LINK_SIZE = 27
CELL_LINK_SIZE = 23
TEXTURE_CELL_SIZE = 8

# Smallest possible record including its own sub-count field
MIN_ENTRY_SIZE = ENTRY_RECORD_SIZE + 2
MIN_CELL_SIZE = CELL_RECORD_SIZE + 1


def _skip_navigation_entries(cursor: ByteCursor) -> None:
    count = cursor.read_u16()
    cursor.require(count * MIN_ENTRY_SIZE, f"{count} navigation entries")
    for _ in range(count):
        cursor.skip(ENTRY_RECORD_SIZE)
        cursor.skip(cursor.read_u16() * ENTRY_EXTRA_SIZE)


def _skip_navigation_cells(cursor: ByteCursor) -> None:
    count = cursor.read_u32()
    cursor.skip(CELL_HEADER_SIZE)
    cursor.require(count * MIN_CELL_SIZE, f"{count} navigation cells")
    for _ in range(count):
        cursor.skip(CELL_RECORD_SIZE)
        cursor.skip(cursor.read_u8() * CELL_EXTRA_SIZE)


def decode_heightmap(cursor: ByteCursor, size: int = HEIGHTMAP_SIZE) -> np.ndarray:
    """Walks the navigation tables and reads the height map.

    Args:
        cursor: Cursor positioned at the start of the file.
        size: Number of height samples per side.

    Returns:
        (size, size) float32 array indexed as ``[y, x]``.

    Raises:
        TruncatedInput: If the file ends before the height map is complete.
        MalformedRecord: If a table declares more records than the file holds.
    """
    cursor.skip(HEADER_SIZE)
    _skip_navigation_entries(cursor)
    _skip_navigation_cells(cursor)

    region_links = cursor.read_u32()
    cursor.skip(region_links * REGION_LINK_SIZE)

    cell_links = cursor.read_u32()
    cursor.skip(cell_links * CELL_LINK_SIZE)

    cursor.skip((size - 1) * (size - 1) * TEXTURE_CELL_SIZE)

    heights = cursor.read_array("<f4", size * size).reshape((size, size))

    if cursor.remaining:
        logger.debug(f"Ignoring {cursor.remaining} trailing bytes")
    return heights


def decode_terrain(
    data: bytes,
    offset: RegionOffset,
    size: int = HEIGHTMAP_SIZE,
    cell_spacing: float = DEFAULT_CELL_SPACING,
) -> np.ndarray:
    """Decodes a tile and positions its height samples in world space.

    Args:
        data: Full contents of the .nvm file.
        offset: Region offset of the tile.
        size: Number of height samples per side.
        cell_spacing: Distance between neighbouring samples.

    Returns:
        (size * size, 3) float32 vertex array in row-major order.
    """
    heights = decode_heightmap(ByteCursor(data), size)
    return heightmap_to_vertices(heights, offset, cell_spacing)


def read_heightmap_file(path: str | Path, size: int = HEIGHTMAP_SIZE) -> np.ndarray:
    """Reads a .nvm file from disk and returns its height map."""
    data = Path(path).read_bytes()
    return decode_heightmap(ByteCursor(data), size)
