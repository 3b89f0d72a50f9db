import numpy as np
import pytest

from nvm_terrain.decoder import (
    HEIGHTMAP_SIZE,
    decode_heightmap,
    decode_terrain,
    read_heightmap_file,
)
from nvm_terrain.errors import MalformedRecord, TerrainDecodeError, TruncatedInput
from nvm_terrain.reader import ByteCursor
from nvm_terrain.schemas import RegionOffset


def ramp_heights(size: int = HEIGHTMAP_SIZE) -> np.ndarray:
    return np.arange(size * size, dtype=np.float32).reshape((size, size)) * 0.5


def test_decodes_minimal_tile(nvm_bytes):
    heights = decode_heightmap(ByteCursor(nvm_bytes()))

    assert heights.shape == (97, 97)
    assert heights.dtype == np.float32
    assert not heights.any()


def test_skips_variable_length_tables(nvm_bytes):
    expected = ramp_heights()
    data = nvm_bytes(
        heights=expected,
        entries=(0, 3, 1),
        cells=(2, 0, 255),
        region_links=4,
        cell_links=2,
    )

    heights = decode_heightmap(ByteCursor(data))

    np.testing.assert_array_equal(heights, expected)


def test_trailing_bytes_are_ignored(nvm_bytes):
    expected = ramp_heights()
    cursor = ByteCursor(nvm_bytes(heights=expected, trailing=b"\x01" * 180))

    heights = decode_heightmap(cursor)

    np.testing.assert_array_equal(heights, expected)
    assert cursor.remaining == 180


def test_decode_terrain_vertices(nvm_bytes):
    heights = ramp_heights()
    offset = RegionOffset(row=2, column=3)

    vertices = decode_terrain(nvm_bytes(heights=heights), offset)

    assert vertices.shape == (97 * 97, 3)
    for y, x in [(0, 0), (0, 96), (5, 7), (96, 96)]:
        vx, vy, vz = vertices[y * 97 + x]
        assert vx == x * 20 + 3 * 1920
        assert vy == y * 20 + 2 * 1920
        assert vz == heights[y, x]
    np.testing.assert_array_equal(vertices[:, 2], heights.ravel())


def test_truncated_heightmap(nvm_bytes):
    data = nvm_bytes()[:-4]

    with pytest.raises(TruncatedInput):
        decode_heightmap(ByteCursor(data))


def test_truncated_header():
    with pytest.raises(TruncatedInput):
        decode_heightmap(ByteCursor(b"JMXVNVM1000"))


def test_entry_count_larger_than_file(nvm_bytes):
    data = bytearray(nvm_bytes())
    # navigation entry count directly follows the 12-byte header
    data[12:14] = (0xFFFF).to_bytes(2, "little")

    with pytest.raises(MalformedRecord, match="navigation entries"):
        decode_heightmap(ByteCursor(bytes(data)))


def test_cell_count_larger_than_file(nvm_bytes):
    data = bytearray(nvm_bytes())
    data[14:18] = (0x7FFFFFFF).to_bytes(4, "little")

    with pytest.raises(MalformedRecord, match="navigation cells"):
        decode_heightmap(ByteCursor(bytes(data)))


def test_link_count_overshoot_is_a_decode_error(nvm_bytes):
    data = bytearray(nvm_bytes())
    # region link count follows the 4-byte cell count and 4 reserved bytes
    data[22:26] = (0x00FFFFFF).to_bytes(4, "little")

    with pytest.raises(TerrainDecodeError):
        decode_heightmap(ByteCursor(bytes(data)))


def test_read_heightmap_file(write_tile):
    path = write_tile("nv_0000.nvm")

    heights = read_heightmap_file(path)

    assert heights.shape == (97, 97)
