"""Region code parsing for tile filenames."""

import re
from pathlib import Path

from .errors import UnrecognizedFilename
from .schemas import RegionOffset

DEFAULT_EXTENSION = ".nvm"


def parse_region_offset(
    filename: str | Path, extension: str = DEFAULT_EXTENSION
) -> RegionOffset:
    """Extracts the tile's (row, column) from its region code.

    The filename must end in four hex digits right before the extension,
    e.g. ``nv_6a5d.nvm``. The first pair is the row, the second the column.

    Args:
        filename: File name or path of the tile.
        extension: Expected file extension, including the dot.

    Returns:
        RegionOffset parsed from the two hex pairs.

    Raises:
        UnrecognizedFilename: If the name does not carry a region code.
    """
    name = Path(filename).name
    pattern = re.compile(
        r"([0-9a-f]{2})([0-9a-f]{2})" + re.escape(extension) + "$", re.IGNORECASE
    )
    match = pattern.search(name)
    if match is None:
        raise UnrecognizedFilename(
            f"Region offset cannot be extracted from filename {name!r}"
        )
    return RegionOffset(row=int(match.group(1), 16), column=int(match.group(2), 16))
