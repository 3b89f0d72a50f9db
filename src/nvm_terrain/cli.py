"""Command line entry point for the terrain converter."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .config import ExtractionConfig
from .errors import NoUsableInput, OutputWriteFailure
from .pipeline import TerrainExtractionPipeline

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nvm-terrain",
        description="Convert .nvm terrain tiles into a single Wavefront .obj mesh.",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        type=Path,
        help="Tiles to convert. Defaults to every .nvm file in --input-dir.",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=Path("Terrain.obj"),
        help="Output .obj file.",
    )
    parser.add_argument(
        "--input-dir",
        type=Path,
        default=Path("."),
        help="Directory scanned for tiles when no paths are given.",
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=None,
        help="Fixed decimals for coordinates (default: shortest exact form).",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging."
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Convert tiles and return a process exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO, format="%(message)s"
    )

    config = ExtractionConfig(
        output_path=args.output,
        input_dir=args.input_dir,
        precision=args.precision,
    )
    pipeline = TerrainExtractionPipeline(config)

    try:
        pipeline.run(args.paths or None)
    except NoUsableInput as exc:
        logger.error(f"Error: {exc}")
        return 1
    except OutputWriteFailure as exc:
        logger.error(f"Error: {exc}")
        return 1

    logger.info(f"{config.output_path} created successfully!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
