"""Convert JMXVNVM1000 terrain navigation tiles into a Wavefront OBJ mesh."""

from .errors import (
    MalformedRecord,
    NoUsableInput,
    NvmTerrainError,
    OutputWriteFailure,
    TerrainDecodeError,
    TruncatedInput,
    UnrecognizedFilename,
)
from .schemas import RegionOffset, TerrainMesh

__all__ = [
    "MalformedRecord",
    "NoUsableInput",
    "NvmTerrainError",
    "OutputWriteFailure",
    "RegionOffset",
    "TerrainDecodeError",
    "TerrainMesh",
    "TruncatedInput",
    "UnrecognizedFilename",
]
