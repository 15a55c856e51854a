"""Maplet mosaic assembly."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from tpq2tif.errors import TileSizeMismatch
from tpq2tif.raster.tiles import decode_tile
from tpq2tif.tpq.directory import TileRef, iter_tile_refs
from tpq2tif.tpq.header import TpqHeader
from tpq2tif.tpq.reader import ByteReader

LOGGER = logging.getLogger("tpq2tif.raster.mosaic")

TILE_SIZE_POLICIES = ("header", "measured")
BACKGROUND = 255


@dataclass(frozen=True)
class Mosaic:
    """Assembled RGBA raster in band-major (4, height, width) layout."""

    pixels: np.ndarray
    tile_width: int
    tile_height: int
    tile_count: int

    @property
    def width(self) -> int:
        return int(self.pixels.shape[2])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[1])


def _blank_canvas(header: TpqHeader, tile_width: int, tile_height: int) -> np.ndarray:
    """Allocate an opaque white RGBA canvas for the tile grid."""
    if tile_width <= 0 or tile_height <= 0:
        raise ValueError("Tile dimensions must be positive.")
    return np.full(
        (4, header.lat_count * tile_height, header.long_count * tile_width),
        BACKGROUND,
        dtype=np.uint8,
    )


def _place_tile(canvas: np.ndarray, ref: TileRef, tile: np.ndarray) -> None:
    """Copy a tile's colour bands into its cell; the canvas alpha stays opaque."""
    height, width = tile.shape[1], tile.shape[2]
    x = ref.col * width
    y = ref.row * height
    canvas[:3, y : y + height, x : x + width] = tile[:3]
    LOGGER.debug(
        "Placed maplet.",
        extra={"tile": ref.index, "row": ref.row, "col": ref.col, "offset": ref.offset},
    )


def assemble_mosaic(
    data: bytes,
    header: TpqHeader,
    *,
    tile_size: str = "header",
) -> Mosaic:
    """Decode every maplet and paste it into its grid cell.

    ``tile_size`` selects where cell dimensions come from: ``"header"`` uses
    the declared maplet size, ``"measured"`` uses the first decoded tile.
    """
    if tile_size not in TILE_SIZE_POLICIES:
        raise ValueError(f"Unknown tile size policy: {tile_size}")
    if header.long_count == 0 or header.lat_count == 0:
        raise ValueError("TPQ tile grid is empty.")

    reader = ByteReader(data)
    refs = iter_tile_refs(reader, header)
    first = next(refs)
    first_tile = decode_tile(reader, first)
    height, width = first_tile.shape[1], first_tile.shape[2]
    if tile_size == "header":
        tile_width, tile_height = header.maplet_width, header.maplet_height
    else:
        tile_width, tile_height = width, height
        if (width, height) != (header.maplet_width, header.maplet_height):
            LOGGER.info(
                "Measured maplet size %dx%d differs from header %dx%d.",
                width,
                height,
                header.maplet_width,
                header.maplet_height,
            )
    # Checked before allocating so a bogus header size never sizes the canvas.
    if (width, height) != (tile_width, tile_height):
        raise TileSizeMismatch(first.index, (tile_width, tile_height), (width, height))

    canvas = _blank_canvas(header, tile_width, tile_height)
    _place_tile(canvas, first, first_tile)
    for ref in refs:
        tile = decode_tile(reader, ref)
        if (tile.shape[2], tile.shape[1]) != (tile_width, tile_height):
            raise TileSizeMismatch(
                ref.index, (tile_width, tile_height), (tile.shape[2], tile.shape[1])
            )
        _place_tile(canvas, ref, tile)

    return Mosaic(
        pixels=canvas,
        tile_width=tile_width,
        tile_height=tile_height,
        tile_count=header.tile_count,
    )
