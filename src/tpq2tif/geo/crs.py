"""CRS definitions for NAD27 outputs."""

from __future__ import annotations

from pyproj import CRS

NAD27_UTM_EPSG_BASE = 26700
# EPSG:26701..26722; codes past 26722 are state plane systems.
NAD27_UTM_ZONES = range(1, 23)

# Explicit NAD27 geographic definition on the Clarke 1866 ellipsoid.
NAD27_GEOGRAPHIC_WKT = (
    'GEOGCS["NAD27",'
    'DATUM["North_American_Datum_1927",'
    'SPHEROID["Clarke 1866",6378206.4,294.978698213898,AUTHORITY["EPSG","7008"]],'
    'AUTHORITY["EPSG","6267"]],'
    'PRIMEM["Greenwich",0,AUTHORITY["EPSG","8901"]],'
    'UNIT["degree",0.0174532925199433,AUTHORITY["EPSG","9122"]],'
    'AXIS["Latitude",NORTH],'
    'AXIS["Longitude",EAST],'
    'AUTHORITY["EPSG","4267"]]'
)


def nad27_utm_crs(zone: int) -> CRS:
    """Return the NAD27 / UTM CRS for a zone number."""
    if zone not in NAD27_UTM_ZONES:
        raise ValueError(f"UTM zone {zone} has no NAD27 EPSG code.")
    return CRS.from_epsg(NAD27_UTM_EPSG_BASE + zone)


def nad27_geographic_crs() -> CRS:
    """Return the explicit NAD27 geographic CRS."""
    return CRS.from_wkt(NAD27_GEOGRAPHIC_WKT)
