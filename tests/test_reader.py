import struct

import numpy as np
import pytest

from nvm_terrain.errors import MalformedRecord, TruncatedInput
from nvm_terrain.reader import ByteCursor


def test_reads_little_endian_scalars():
    data = struct.pack("<BHIf", 7, 0x1234, 0xDEADBEEF, 1.5)
    cursor = ByteCursor(data)

    assert cursor.read_u8() == 7
    assert cursor.read_u16() == 0x1234
    assert cursor.read_u32() == 0xDEADBEEF
    assert cursor.read_f32() == 1.5
    assert cursor.position == len(data)
    assert cursor.remaining == 0


def test_truncated_read_keeps_position():
    cursor = ByteCursor(b"\x01\x02\x03")
    cursor.skip(2)

    with pytest.raises(TruncatedInput):
        cursor.read_u16()

    assert cursor.position == 2
    assert cursor.read_u8() == 3


def test_skip_is_clamped_and_fails_on_next_read():
    cursor = ByteCursor(b"\x00" * 4)
    cursor.skip(100)

    assert cursor.position == 4
    with pytest.raises(TruncatedInput):
        cursor.read_u8()


def test_skip_rejects_negative_count():
    with pytest.raises(ValueError, match="skip"):
        ByteCursor(b"\x00").skip(-1)


def test_read_array():
    values = np.array([1.0, -2.5, 3.25], dtype="<f4")
    cursor = ByteCursor(b"\x09" + values.tobytes())
    cursor.skip(1)

    result = cursor.read_array("<f4", 3)

    np.testing.assert_array_equal(result, values)
    assert result.flags.writeable
    with pytest.raises(TruncatedInput):
        cursor.read_array("<f4", 1)


def test_require():
    cursor = ByteCursor(b"\x00" * 8)
    cursor.require(8, "table")

    with pytest.raises(MalformedRecord, match="table"):
        cursor.require(9, "table")
