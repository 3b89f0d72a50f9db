"""Module for turning decoded height grids into triangle meshes."""

import numpy as np

from .schemas import RegionOffset, TerrainMesh

DEFAULT_CELL_SPACING = 20.0


def heightmap_to_vertices(
    heights: np.ndarray,
    offset: RegionOffset,
    cell_spacing: float = DEFAULT_CELL_SPACING,
) -> np.ndarray:
    """Positions a height grid in world space.

    Tiles are laid edge to edge: a tile spans ``cell_spacing * (size - 1)``
    units, so its origin sits at ``column * span`` on X and ``row * span`` on Y.

    Args:
        heights: (rows, cols) array of height samples, row-major.
        offset: Region offset of the tile.
        cell_spacing: Distance between neighbouring samples.

    Returns:
        (rows * cols, 3) float32 array; the vertex at grid (x, y) is at index
        ``y * cols + x``.
    """
    heights = np.asarray(heights, dtype=np.float32)
    if heights.ndim != 2:
        raise ValueError("heights must be a 2D grid")

    rows, cols = heights.shape
    span_x = cell_spacing * (cols - 1)
    span_y = cell_spacing * (rows - 1)

    grid_y, grid_x = np.mgrid[0:rows, 0:cols]

    vertices = np.empty((rows * cols, 3), dtype=np.float32)
    vertices[:, 0] = (grid_x * cell_spacing + offset.column * span_x).ravel()
    vertices[:, 1] = (grid_y * cell_spacing + offset.row * span_y).ravel()
    vertices[:, 2] = heights.ravel()
    return vertices


def generate_triangles(width: int, height: int) -> np.ndarray:
    """Splits every quad of a row-major vertex grid into two triangles.

    For the cell at row i, column j with ``a = i * width + j`` the triangles
    are ``(a, a+1, a+width)`` and ``(a+1, a+width, a+width+1)``, in that order.

    Args:
        width: Number of vertices per row.
        height: Number of rows.

    Returns:
        (2 * (width-1) * (height-1), 3) uint32 array of local indices.
    """
    if width < 1 or height < 1:
        raise ValueError("width and height must be >= 1")

    rows = np.arange(height - 1, dtype=np.uint32)[:, None] * np.uint32(width)
    cols = np.arange(width - 1, dtype=np.uint32)[None, :]
    a = (rows + cols).ravel()

    triangles = np.empty((2 * a.size, 3), dtype=np.uint32)
    triangles[0::2] = np.column_stack((a, a + 1, a + width))
    triangles[1::2] = np.column_stack((a + 1, a + width, a + width + 1))
    return triangles


def build_terrain_mesh(
    name: str,
    offset: RegionOffset,
    heights: np.ndarray,
    cell_spacing: float = DEFAULT_CELL_SPACING,
) -> TerrainMesh:
    """Builds the full mesh for one tile from its height grid."""
    height, width = np.shape(heights)
    return TerrainMesh(
        name=name,
        offset=offset,
        width=width,
        height=height,
        vertices=heightmap_to_vertices(heights, offset, cell_spacing),
        triangles=generate_triangles(width, height),
    )
