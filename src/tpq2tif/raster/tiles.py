"""Maplet decoding through Pillow."""

from __future__ import annotations

import io

import numpy as np
from PIL import Image

from tpq2tif.errors import TileDecodeFailure
from tpq2tif.tpq.directory import TileRef
from tpq2tif.tpq.reader import ByteReader


def decode_tile(reader: ByteReader, ref: TileRef) -> np.ndarray:
    """Decode the JPEG at a directory offset into a (4, height, width) RGBA array.

    Pillow stops at the JPEG end-of-image marker, so the bytes of the
    following maplets are never consumed.
    """
    payload = reader.tail(ref.offset, f"tile {ref.index} data")
    try:
        with Image.open(io.BytesIO(payload), formats=["JPEG"]) as image:
            image.load()
            rgba = image.convert("RGBA")
    except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as exc:
        raise TileDecodeFailure(ref.index, ref.row, ref.col, ref.offset, str(exc)) from exc
    return np.asarray(rgba, dtype=np.uint8).transpose(2, 0, 1)
