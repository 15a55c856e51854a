"""GeoTIFF output for assembled mosaics."""

from __future__ import annotations

import logging
import warnings
from pathlib import Path

import rasterio
from rasterio.crs import CRS as RasterioCRS
from rasterio.errors import NotGeoreferencedWarning, RasterioError

from tpq2tif.errors import CleanupFailure, GeoreferencingFailure
from tpq2tif.geo.georef import Georeference
from tpq2tif.raster.mosaic import Mosaic

LOGGER = logging.getLogger("tpq2tif.writer")


def _write_pixels(path: Path, mosaic: Mosaic, *, compression: str | None) -> None:
    """Write the RGBA bands without spatial metadata.

    Band 4 is declared through the ``ALPHA`` creation option; GTiff keeps that
    in the TIFF ExtraSamples tag, so it survives the later ``r+`` reopen.
    """
    profile = {
        "driver": "GTiff",
        "width": mosaic.width,
        "height": mosaic.height,
        "count": 4,
        "dtype": "uint8",
        "photometric": "RGB",
        "alpha": "YES",
    }
    if compression:
        profile["compress"] = compression
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", NotGeoreferencedWarning)
        with rasterio.open(path, "w", **profile) as dataset:
            dataset.write(mosaic.pixels)


def _stamp_georeference(path: Path, georef: Georeference) -> None:
    """Open the written raster for update and set its CRS and transform."""
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", NotGeoreferencedWarning)
        with rasterio.open(path, "r+") as dataset:
            dataset.crs = RasterioCRS.from_wkt(georef.crs.to_wkt())
            dataset.transform = georef.transform


def write_geotiff(
    path: Path,
    mosaic: Mosaic,
    georef: Georeference,
    *,
    compression: str | None = None,
) -> Path:
    """Write a mosaic as a georeferenced GeoTIFF.

    The file is removed again if georeferencing fails, so a raster without
    spatial metadata is never left behind.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    _write_pixels(path, mosaic, compression=compression)
    LOGGER.debug("Wrote %dx%d RGBA raster to %s.", mosaic.width, mosaic.height, path)
    try:
        _stamp_georeference(path, georef)
    except (RasterioError, OSError, ValueError) as exc:
        LOGGER.error("Georeferencing %s failed: %s", path, exc)
        try:
            path.unlink()
        except OSError as cleanup_exc:
            raise CleanupFailure(path, exc, cleanup_exc) from exc
        raise GeoreferencingFailure(path) from exc
    return path
