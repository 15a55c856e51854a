"""Geodetic helpers and exports."""

from tpq2tif.geo.crs import NAD27_GEOGRAPHIC_WKT, nad27_geographic_crs, nad27_utm_crs
from tpq2tif.geo.georef import (
    GEOREF_STRATEGIES,
    Georeference,
    georeference,
    georeference_geographic,
    georeference_utm,
)
from tpq2tif.geo.utm import ProjectedCorner, central_meridian, lat_long_to_utm_nad27, utm_zone

__all__ = [
    "GEOREF_STRATEGIES",
    "Georeference",
    "NAD27_GEOGRAPHIC_WKT",
    "ProjectedCorner",
    "central_meridian",
    "georeference",
    "georeference_geographic",
    "georeference_utm",
    "lat_long_to_utm_nad27",
    "nad27_geographic_crs",
    "nad27_utm_crs",
    "utm_zone",
]
