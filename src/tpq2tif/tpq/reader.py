"""Cursor over an in-memory TPQ buffer."""

from __future__ import annotations

import struct

from tpq2tif.errors import TruncatedInput

UINT32 = struct.Struct("<I")
FLOAT64 = struct.Struct("<d")


class ByteReader:
    """Sequential little-endian reader over a read-only byte buffer."""

    def __init__(self, data: bytes, position: int = 0) -> None:
        self._data = memoryview(data)
        self._position = position

    def __len__(self) -> int:
        return len(self._data)

    @property
    def position(self) -> int:
        return self._position

    def seek(self, position: int) -> None:
        if position < 0:
            raise ValueError("Reader position must be non-negative.")
        self._position = position

    def read(self, size: int, what: str) -> bytes:
        """Consume exactly ``size`` bytes or raise TruncatedInput."""
        start = self._position
        available = max(0, len(self._data) - start)
        if available < size:
            raise TruncatedInput(what, start, size, available)
        self._position = start + size
        return bytes(self._data[start : start + size])

    def read_u32(self, what: str) -> int:
        return UINT32.unpack(self.read(UINT32.size, what))[0]

    def read_f64(self, what: str) -> float:
        return FLOAT64.unpack(self.read(FLOAT64.size, what))[0]

    def tail(self, offset: int, what: str) -> memoryview:
        """Return the buffer from ``offset`` to the end without moving the cursor."""
        if offset >= len(self._data):
            raise TruncatedInput(what, offset, 1, 0)
        return self._data[offset:]
