"""Main pipeline for converting .nvm tiles into one OBJ mesh."""

import logging
from collections.abc import Iterable
from pathlib import Path

from .config import ExtractionConfig
from .decoder import read_heightmap_file
from .errors import NoUsableInput, TerrainDecodeError, UnrecognizedFilename
from .mesh_generation import build_terrain_mesh
from .obj_export import ObjExportSummary, export_to_obj
from .region import parse_region_offset
from .schemas import TerrainMesh

logger = logging.getLogger(__name__)


class TerrainExtractionPipeline:
    """Pipeline to decode terrain tiles and merge them into one OBJ file.

    Attributes:
        config: Run configuration.
    """

    def __init__(self, config: ExtractionConfig | None = None):
        """Initializes the pipeline.

        Args:
            config: Optional run configuration. Defaults to ExtractionConfig().
        """
        self.config = config or ExtractionConfig()

    def discover_inputs(self) -> list[Path]:
        """Lists tiles in the configured input directory, sorted by name."""
        return sorted(
            path
            for path in self.config.input_dir.glob(f"*{self.config.extension}")
            if path.is_file()
        )

    def load_tile(self, path: str | Path) -> TerrainMesh:
        """Decodes one tile file into a mesh.

        Raises:
            UnrecognizedFilename: If the filename carries no region code.
            TerrainDecodeError: If the binary content cannot be decoded.
            OSError: If the file cannot be read.
        """
        path = Path(path)
        offset = parse_region_offset(path.name, self.config.extension)
        heights = read_heightmap_file(path)
        return build_terrain_mesh(path.name, offset, heights, self.config.cell_spacing)

    def load_tiles(self, paths: Iterable[str | Path]) -> list[TerrainMesh]:
        """Decodes every tile it can, in order, skipping unusable files."""
        meshes = []
        for path in paths:
            logger.info(f"Loading {path}")
            try:
                mesh = self.load_tile(path)
            except UnrecognizedFilename as exc:
                logger.warning(f"Skipping {path}: {exc}")
                continue
            except TerrainDecodeError as exc:
                logger.warning(f"Skipping {path}: cannot decode terrain ({exc})")
                continue
            except OSError as exc:
                logger.warning(f"Skipping {path}: cannot read file ({exc})")
                continue

            logger.debug(
                f"Decoded {mesh.name} at region {mesh.offset.row}x{mesh.offset.column}"
            )
            meshes.append(mesh)

        return meshes

    def run(self, paths: Iterable[str | Path] | None = None) -> ObjExportSummary:
        """Runs the pipeline.

        Args:
            paths: Tiles to convert. Defaults to every tile in the input dir.

        Returns:
            ObjExportSummary of the written document.

        Raises:
            NoUsableInput: If no tile could be decoded. Nothing is written.
            OutputWriteFailure: If writing the OBJ file fails.
        """
        if paths is None:
            paths = self.discover_inputs()
        paths = list(paths)

        meshes = self.load_tiles(paths)
        if not meshes:
            raise NoUsableInput(
                f"No usable {self.config.extension} files among {len(paths)} input(s)"
            )

        logger.info(f"Generating {self.config.output_path}...")
        return export_to_obj(
            meshes,
            self.config.output_path,
            object_name=self.config.object_name,
            precision=self.config.precision,
        )
