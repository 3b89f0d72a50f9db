"""Exceptions raised while converting terrain tiles."""


class NvmTerrainError(Exception):
    """Base class for all terrain conversion errors."""


class UnrecognizedFilename(NvmTerrainError):
    """The filename does not end in a two-byte hex region code."""


class TerrainDecodeError(NvmTerrainError):
    """The binary tile could not be decoded."""


class TruncatedInput(TerrainDecodeError):
    """A read needed more bytes than the source has left."""


class MalformedRecord(TerrainDecodeError):
    """A declared record count cannot fit in the remaining bytes."""


class NoUsableInput(NvmTerrainError):
    """No tile could be decoded, so there is nothing to export."""


class OutputWriteFailure(NvmTerrainError):
    """Writing the merged OBJ document failed."""
