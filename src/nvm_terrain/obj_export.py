"""Wavefront .obj export for a collection of terrain tiles."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

import numpy as np

from .errors import OutputWriteFailure
from .schemas import TerrainMesh

logger = logging.getLogger(__name__)

HEADER_COMMENT = "# Generated by nvm-terrain"
DEFAULT_OBJECT_NAME = "Terrain"


@dataclass
class ObjExportSummary:
    """Counts of what was written to the OBJ document."""

    groups: int = 0
    vertices: int = 0
    faces: int = 0


def format_coordinate(value: np.float32, precision: int | None = None) -> str:
    """Formats a coordinate with a period as decimal separator.

    Args:
        value: Coordinate value.
        precision: Fixed number of decimals, or None for the shortest decimal
            that reads back as the same float32.
    """
    if precision is None:
        return np.format_float_positional(np.float32(value), unique=True, trim="-")
    return f"{float(value):.{precision}f}"


def _write_group(
    stream: TextIO,
    mesh: TerrainMesh,
    index_offset: int,
    precision: int | None,
) -> int:
    """Writes one tile as an OBJ group and returns the next index offset."""
    stream.write("\n")
    stream.write(f"g {mesh.group_name}\n")

    for x, y, z in mesh.vertices:
        stream.write(
            f"v {format_coordinate(x, precision)} "
            f"{format_coordinate(y, precision)} "
            f"{format_coordinate(z, precision)}\n"
        )

    # OBJ indices are 1-based and global across groups
    faces = mesh.triangles.astype(np.int64) + index_offset
    for a, b, c in faces.tolist():
        stream.write(f"f {a} {b} {c}\n")

    return index_offset + mesh.width * mesh.height


def write_obj(
    meshes: Iterable[TerrainMesh],
    stream: TextIO,
    object_name: str = DEFAULT_OBJECT_NAME,
    precision: int | None = None,
) -> ObjExportSummary:
    """Streams all meshes into one OBJ object, one group per mesh.

    Vertices are not shared between groups; seams between neighbouring tiles
    stay unwelded.

    Args:
        meshes: Tiles in the order they should appear.
        stream: Open text stream to write to.
        object_name: Name of the OBJ object.
        precision: Decimal places for coordinates, see ``format_coordinate``.

    Returns:
        ObjExportSummary with the number of groups, vertices and faces written.
    """
    summary = ObjExportSummary()
    stream.write(f"{HEADER_COMMENT}\n")
    stream.write(f"o {object_name}\n")

    index_offset = 1
    for mesh in meshes:
        index_offset = _write_group(stream, mesh, index_offset, precision)
        summary.groups += 1
        summary.vertices += mesh.vertex_count
        summary.faces += mesh.triangle_count

    return summary


def export_to_obj(
    meshes: Iterable[TerrainMesh],
    output_path: str | Path,
    object_name: str = DEFAULT_OBJECT_NAME,
    precision: int | None = None,
) -> ObjExportSummary:
    """Writes all meshes to a Wavefront .obj file.

    Args:
        meshes: Tiles in the order they should appear.
        output_path: Path to save the .obj file.
        object_name: Name of the OBJ object.
        precision: Decimal places for coordinates, see ``format_coordinate``.

    Raises:
        OutputWriteFailure: If the file cannot be opened or written.
    """
    output_path = Path(output_path)
    try:
        with open(output_path, "w", encoding="utf-8", newline="\n") as f:
            summary = write_obj(meshes, f, object_name, precision)
    except OSError as exc:
        raise OutputWriteFailure(f"Failed to write {output_path}: {exc}") from exc

    logger.info(
        f"Saved {summary.groups} tile(s) to {output_path} "
        f"({summary.vertices} vertices, {summary.faces} faces)"
    )
    return summary
