import struct

import numpy as np
import pytest

GRID = 97


def build_nvm(
    heights: np.ndarray | None = None,
    entries: tuple[int, ...] = (),
    cells: tuple[int, ...] = (),
    region_links: int = 0,
    cell_links: int = 0,
    trailing: bytes = b"",
) -> bytes:
    """Builds a JMXVNVM1000 payload.

    ``entries`` and ``cells`` hold the sub-count of each record.
    """
    if heights is None:
        heights = np.zeros((GRID, GRID), dtype=np.float32)
    size = heights.shape[0]

    parts = [b"JMXVNVM1000\x00"]

    parts.append(struct.pack("<H", len(entries)))
    for sub_count in entries:
        parts.append(b"\xaa" * 30 + struct.pack("<H", sub_count) + b"\xbb" * (6 * sub_count))

    parts.append(struct.pack("<I", len(cells)) + b"\x00" * 4)
    for sub_count in cells:
        parts.append(b"\xcc" * 16 + struct.pack("<B", sub_count) + b"\xdd" * (2 * sub_count))

    parts.append(struct.pack("<I", region_links) + b"\xee" * (27 * region_links))
    parts.append(struct.pack("<I", cell_links) + b"\xff" * (23 * cell_links))
    parts.append(b"\x11" * ((size - 1) * (size - 1) * 8))
    parts.append(np.asarray(heights, dtype="<f4").tobytes())
    parts.append(trailing)
    return b"".join(parts)


@pytest.fixture
def nvm_bytes():
    return build_nvm


@pytest.fixture
def write_tile(tmp_path):
    """Writes a tile into tmp_path and returns its path."""

    def _write(name: str, data: bytes | None = None):
        path = tmp_path / name
        path.write_bytes(build_nvm() if data is None else data)
        return path

    return _write
