"""Affine transform and CRS derivation for assembled mosaics."""

from __future__ import annotations

from dataclasses import dataclass

from pyproj import CRS
from rasterio.transform import Affine

from tpq2tif.geo.crs import nad27_geographic_crs, nad27_utm_crs
from tpq2tif.geo.utm import lat_long_to_utm_nad27
from tpq2tif.tpq.header import TpqHeader

GEOREF_STRATEGIES = ("utm", "geographic")


@dataclass(frozen=True)
class Georeference:
    """Pixel-to-world mapping paired with the CRS its coordinates live in."""

    transform: Affine
    crs: CRS
    strategy: str
    zone: int | None = None

    def to_gdal(self) -> tuple[float, float, float, float, float, float]:
        """Return (origin_x, pixel_width, 0, origin_y, 0, pixel_height)."""
        return self.transform.to_gdal()


def _check_size(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise ValueError("Raster dimensions must be positive.")


def georeference_utm(header: TpqHeader, width: int, height: int) -> Georeference:
    """Georeference in NAD27 UTM with the origin on the top-left pixel center."""
    _check_size(width, height)
    top_northing, left_easting, zone = lat_long_to_utm_nad27(header.n_lat, header.w_long)
    bottom_northing, right_easting, _ = lat_long_to_utm_nad27(header.s_lat, header.e_long)

    x_scale = (right_easting - left_easting) / width
    y_scale = -(top_northing - bottom_northing) / height
    transform = Affine.from_gdal(
        left_easting + x_scale / 2.0,
        x_scale,
        0.0,
        top_northing + y_scale / 2.0,
        0.0,
        y_scale,
    )
    return Georeference(
        transform=transform,
        crs=nad27_utm_crs(zone),
        strategy="utm",
        zone=zone,
    )


def georeference_geographic(header: TpqHeader, width: int, height: int) -> Georeference:
    """Georeference directly on the header's NAD27 latitude/longitude box."""
    _check_size(width, height)
    x_scale = (header.e_long - header.w_long) / width
    y_scale = -(header.n_lat - header.s_lat) / height
    transform = Affine.from_gdal(header.w_long, x_scale, 0.0, header.n_lat, 0.0, y_scale)
    return Georeference(
        transform=transform,
        crs=nad27_geographic_crs(),
        strategy="geographic",
    )


def georeference(
    header: TpqHeader,
    width: int,
    height: int,
    *,
    strategy: str = "utm",
) -> Georeference:
    """Derive the georeference for a raster covering the header's bounds."""
    if strategy == "utm":
        return georeference_utm(header, width, height)
    if strategy == "geographic":
        return georeference_geographic(header, width, height)
    raise ValueError(f"Unknown georeferencing strategy: {strategy}")
