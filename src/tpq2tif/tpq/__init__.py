"""TPQ container decoding helpers and exports."""

from tpq2tif.tpq.directory import TileRef, check_directory, iter_tile_refs
from tpq2tif.tpq.header import (
    DIRECTORY_OFFSET,
    HEADER_LAYOUT,
    HEADER_REGION_SIZE,
    HEADER_SIZE,
    TEXT_CAPACITY,
    TpqHeader,
    decode_header,
    encode_header,
    read_header,
)
from tpq2tif.tpq.reader import ByteReader

__all__ = [
    "ByteReader",
    "DIRECTORY_OFFSET",
    "HEADER_LAYOUT",
    "HEADER_REGION_SIZE",
    "HEADER_SIZE",
    "TEXT_CAPACITY",
    "TileRef",
    "TpqHeader",
    "check_directory",
    "decode_header",
    "encode_header",
    "iter_tile_refs",
    "read_header",
]
