"""Pydantic models for decoded terrain tiles."""

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class RegionOffset(BaseModel):
    """Tile coordinate taken from the region code in a filename."""

    model_config = ConfigDict(frozen=True)

    row: int = Field(..., ge=0, le=0xFF, description="Tile row (first hex pair).")
    column: int = Field(
        ..., ge=0, le=0xFF, description="Tile column (second hex pair)."
    )


class TerrainMesh(BaseModel):
    """One decoded tile: a row-major vertex grid and its triangulation."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    name: str = Field(..., description="Source filename of the tile.")
    offset: RegionOffset = Field(..., description="Region offset of the tile.")
    width: int = Field(..., gt=0, description="Number of grid columns.")
    height: int = Field(..., gt=0, description="Number of grid rows.")
    vertices: np.ndarray = Field(
        ..., description="(width*height, 3) float32 array of X, Y, Z."
    )
    triangles: np.ndarray = Field(
        ..., description="(2*(width-1)*(height-1), 3) uint32 local vertex indices."
    )

    @field_validator("vertices")
    @classmethod
    def _freeze_vertices(cls, value: np.ndarray) -> np.ndarray:
        value = np.array(value, dtype=np.float32)
        value.flags.writeable = False
        return value

    @field_validator("triangles")
    @classmethod
    def _freeze_triangles(cls, value: np.ndarray) -> np.ndarray:
        value = np.array(value, dtype=np.uint32).reshape((-1, 3))
        value.flags.writeable = False
        return value

    @model_validator(mode="after")
    def _check_grid(self) -> "TerrainMesh":
        expected_vertices = self.width * self.height
        if self.vertices.shape != (expected_vertices, 3):
            raise ValueError(
                f"Expected vertices of shape ({expected_vertices}, 3), "
                f"got {self.vertices.shape}"
            )
        expected_triangles = 2 * (self.width - 1) * (self.height - 1)
        if self.triangles.shape[0] != expected_triangles:
            raise ValueError(
                f"Expected {expected_triangles} triangles, "
                f"got {self.triangles.shape[0]}"
            )
        if self.triangles.size and int(self.triangles.max()) >= expected_vertices:
            raise ValueError("Triangle index out of range of the vertex grid")
        return self

    @property
    def vertex_count(self) -> int:
        return self.width * self.height

    @property
    def triangle_count(self) -> int:
        return int(self.triangles.shape[0])

    @property
    def group_name(self) -> str:
        """OBJ group name, e.g. ``nv_0102.nvm_1x2``."""
        return f"{self.name}_{self.offset.row}x{self.offset.column}"
