from __future__ import annotations

import io
from dataclasses import replace
from pathlib import Path
from typing import Sequence

from PIL import Image

from tpq2tif.tpq.header import TpqHeader, encode_header
from tpq2tif.tpq.reader import UINT32

RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)
BLACK = (0, 0, 0)


def jpeg_bytes(
    color: tuple[int, int, int],
    size: tuple[int, int] = (256, 256),
) -> bytes:
    """Encode a solid-color JPEG maplet."""
    buffer = io.BytesIO()
    Image.new("RGB", size, color).save(buffer, format="JPEG", quality=95)
    return buffer.getvalue()


def make_header(**overrides) -> TpqHeader:
    """Return a plausible Colorado quad header with optional overrides."""
    header = TpqHeader(
        version=1,
        w_long=-105.0,
        n_lat=40.0,
        e_long=-104.5,
        s_lat=39.5,
        topo="TOPO! Colorado",
        quad_name="Boulder",
        state_name="CO",
        source="USGS",
        year1="1965",
        year2="1994",
        contour="40 feet",
        extension="jpg",
        color_depth=24,
        long_count=2,
        lat_count=1,
        maplet_width=256,
        maplet_height=256,
    )
    return replace(header, **overrides)


def build_tpq(header: TpqHeader, tiles: Sequence[bytes]) -> bytes:
    """Lay out header region, tile directory, and maplets back to back."""
    offset = 1024 + UINT32.size * len(tiles)
    offsets = []
    for tile in tiles:
        offsets.append(offset)
        offset += len(tile)
    directory = b"".join(UINT32.pack(value) for value in offsets)
    return encode_header(header) + directory + b"".join(tiles)


def write_tpq(path: Path, header: TpqHeader, tiles: Sequence[bytes]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(build_tpq(header, tiles))
    return path
