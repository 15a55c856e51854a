"""Raster assembly helpers and exports."""

from tpq2tif.raster.mosaic import TILE_SIZE_POLICIES, Mosaic, assemble_mosaic
from tpq2tif.raster.tiles import decode_tile

__all__ = [
    "Mosaic",
    "TILE_SIZE_POLICIES",
    "assemble_mosaic",
    "decode_tile",
]
