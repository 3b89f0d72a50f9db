"""Forward-only little-endian reader over an in-memory byte buffer."""

import struct

import numpy as np

from .errors import MalformedRecord, TruncatedInput


class ByteCursor:
    """Sequential reader with fail-fast bounds checking.

    Reads never move past the end of the source; they raise ``TruncatedInput``
    instead and leave the position untouched. Skips are clamped to the end of
    the source, so an overshooting skip surfaces on the next read.

    Attributes:
        position: Offset of the next byte to read.
    """

    def __init__(self, data: bytes):
        self._data = memoryview(data)
        self.position = 0

    @property
    def size(self) -> int:
        return len(self._data)

    @property
    def remaining(self) -> int:
        return self.size - self.position

    def _take(self, count: int, what: str) -> int:
        if count > self.remaining:
            raise TruncatedInput(
                f"Need {count} bytes for {what} at offset {self.position}, "
                f"only {self.remaining} left"
            )
        start = self.position
        self.position += count
        return start

    def read_scalar(self, fmt: str):
        """Reads one scalar described by a ``struct`` format character.

        Args:
            fmt: Format character without byte-order prefix ("B", "H", "I", "f").

        Returns:
            The decoded int or float.
        """
        layout = struct.Struct("<" + fmt)
        start = self._take(layout.size, f"'{fmt}' scalar")
        return layout.unpack_from(self._data, start)[0]

    def read_u8(self) -> int:
        return self.read_scalar("B")

    def read_u16(self) -> int:
        return self.read_scalar("H")

    def read_u32(self) -> int:
        return self.read_scalar("I")

    def read_f32(self) -> float:
        return self.read_scalar("f")

    def read_array(self, dtype: str, count: int) -> np.ndarray:
        """Reads ``count`` consecutive little-endian values into a new array.

        Args:
            dtype: Numpy dtype string, e.g. "<f4".
            count: Number of values to read.

        Returns:
            A writable 1D array that owns its memory.
        """
        itemsize = np.dtype(dtype).itemsize
        start = self._take(itemsize * count, f"{count} x {dtype}")
        return np.frombuffer(self._data, dtype=dtype, count=count, offset=start).copy()

    def skip(self, count: int) -> None:
        if count < 0:
            raise ValueError("skip count must be >= 0")
        self.position = min(self.position + count, self.size)

    def require(self, count: int, what: str) -> None:
        """Raises ``MalformedRecord`` unless ``count`` bytes are still available."""
        if count > self.remaining:
            raise MalformedRecord(
                f"{what} needs at least {count} bytes at offset {self.position}, "
                f"only {self.remaining} left"
            )
