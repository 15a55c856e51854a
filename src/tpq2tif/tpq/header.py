"""TPQ header decoding.

The header is a fixed sequence of little-endian numbers and null-terminated
text fields at the start of the file. Fields fill a prefix of the first
1024 bytes; the tile directory starts right after that region.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from tpq2tif.tpq.reader import FLOAT64, UINT32, ByteReader

LOGGER = logging.getLogger("tpq2tif.tpq.header")

HEADER_REGION_SIZE = 1024
DIRECTORY_OFFSET = HEADER_REGION_SIZE
RESERVED_FIELD = "_reserved"

# (field name, kind, capacity in bytes)
HEADER_LAYOUT: tuple[tuple[str, str, int], ...] = (
    ("version", "u32", UINT32.size),
    ("w_long", "f64", FLOAT64.size),
    ("n_lat", "f64", FLOAT64.size),
    ("e_long", "f64", FLOAT64.size),
    ("s_lat", "f64", FLOAT64.size),
    ("topo", "text", 220),
    ("quad_name", "text", 128),
    ("state_name", "text", 32),
    ("source", "text", 32),
    ("year1", "text", 4),
    ("year2", "text", 4),
    ("contour", "text", 24),
    ("extension", "text", 4),
    ("color_depth", "u32", UINT32.size),
    (RESERVED_FIELD, "u32", UINT32.size),
    ("long_count", "u32", UINT32.size),
    ("lat_count", "u32", UINT32.size),
    ("maplet_width", "u32", UINT32.size),
    ("maplet_height", "u32", UINT32.size),
)

HEADER_SIZE = sum(capacity for _, _, capacity in HEADER_LAYOUT)
TEXT_CAPACITY = {name: capacity for name, kind, capacity in HEADER_LAYOUT if kind == "text"}


@dataclass(frozen=True)
class TpqHeader:
    """Decoded TPQ header."""

    version: int
    w_long: float
    n_lat: float
    e_long: float
    s_lat: float
    topo: str
    quad_name: str
    state_name: str
    source: str
    year1: str
    year2: str
    contour: str
    extension: str
    color_depth: int
    long_count: int
    lat_count: int
    maplet_width: int
    maplet_height: int

    @property
    def tile_count(self) -> int:
        return self.long_count * self.lat_count

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """Return (west, south, east, north) in degrees."""
        return (self.w_long, self.s_lat, self.e_long, self.n_lat)


def _decode_text(raw: bytes, name: str) -> str:
    """Cut a fixed-capacity text field at its terminator and decode it."""
    capacity = len(raw)
    guarded = raw + b"\x00"
    value = guarded[: min(guarded.index(0), capacity)]
    try:
        return value.decode("utf-8")
    except UnicodeDecodeError as exc:
        LOGGER.warning("Header field %s is not valid UTF-8 (%s); decoding lossily.", name, exc)
        return value.decode("utf-8", errors="replace")


def decode_header(reader: ByteReader) -> TpqHeader:
    """Decode the header fields from the reader's current position.

    The reader is left just past the last header field; callers seek to
    ``DIRECTORY_OFFSET`` before reading the tile directory.
    """
    values: dict[str, Any] = {}
    for name, kind, capacity in HEADER_LAYOUT:
        if kind == "u32":
            value: Any = reader.read_u32(name)
        elif kind == "f64":
            value = reader.read_f64(name)
        else:
            value = _decode_text(reader.read(capacity, name), name)
        if name != RESERVED_FIELD:
            values[name] = value
    return TpqHeader(**values)


def read_header(data: bytes) -> TpqHeader:
    """Decode the header at the start of a complete TPQ buffer."""
    return decode_header(ByteReader(data))


def encode_header(header: TpqHeader) -> bytes:
    """Encode a header into the zero-padded 1024-byte header region."""
    parts: list[bytes] = []
    for name, kind, capacity in HEADER_LAYOUT:
        if name == RESERVED_FIELD:
            parts.append(UINT32.pack(0))
            continue
        value = getattr(header, name)
        if kind == "u32":
            parts.append(UINT32.pack(value))
        elif kind == "f64":
            parts.append(FLOAT64.pack(value))
        else:
            encoded = value.encode("utf-8")
            if len(encoded) > capacity:
                raise ValueError(f"Header field {name} exceeds {capacity} bytes.")
            parts.append(encoded.ljust(capacity, b"\x00"))
    payload = b"".join(parts)
    return payload.ljust(HEADER_REGION_SIZE, b"\x00")
