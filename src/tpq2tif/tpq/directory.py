"""Tile directory iteration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from tpq2tif.errors import TruncatedInput
from tpq2tif.tpq.header import DIRECTORY_OFFSET, TpqHeader
from tpq2tif.tpq.reader import UINT32, ByteReader


@dataclass(frozen=True)
class TileRef:
    """Directory entry for one maplet."""

    index: int
    row: int
    col: int
    offset: int


def check_directory(reader: ByteReader, header: TpqHeader) -> None:
    """Raise TruncatedInput unless the buffer holds every directory entry."""
    needed = UINT32.size * header.tile_count
    available = max(0, len(reader) - DIRECTORY_OFFSET)
    if available < needed:
        raise TruncatedInput("tile directory", DIRECTORY_OFFSET, needed, available)


def iter_tile_refs(reader: ByteReader, header: TpqHeader) -> Iterator[TileRef]:
    """Yield directory entries row by row, reading one offset per step.

    The directory's extent is checked before the first entry is produced,
    so a header declaring more tiles than the file can hold fails early.
    """
    check_directory(reader, header)
    reader.seek(DIRECTORY_OFFSET)
    index = 0
    for row in range(header.lat_count):
        for col in range(header.long_count):
            offset = reader.read_u32(f"tile {index} offset")
            yield TileRef(index=index, row=row, col=col, offset=offset)
            index += 1
