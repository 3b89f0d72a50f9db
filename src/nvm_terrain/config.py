"""Configuration for a terrain extraction run."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class ExtractionConfig:
    """Configuration for converting .nvm tiles into one OBJ file.

    Attributes:
        output_path: Where the merged OBJ document is written.
        input_dir: Directory scanned for tiles when no paths are given.
        extension: Tile file extension, including the dot.
        object_name: Name of the single OBJ object.
        cell_spacing: World distance between neighbouring height samples.
        precision: Decimal places for coordinates. None writes the shortest
            decimal that round-trips the float32 value.
    """

    # Paths
    output_path: Path = field(default_factory=lambda: Path("Terrain.obj"))
    input_dir: Path = field(default_factory=lambda: Path("."))
    extension: str = ".nvm"

    # Output
    object_name: str = "Terrain"
    cell_spacing: float = 20.0
    precision: int | None = None

    def __post_init__(self):
        """Convert string paths to Path objects."""
        if isinstance(self.output_path, str):
            self.output_path = Path(self.output_path)
        if isinstance(self.input_dir, str):
            self.input_dir = Path(self.input_dir)
        if self.precision is not None and self.precision < 0:
            raise ValueError("precision must be >= 0")
