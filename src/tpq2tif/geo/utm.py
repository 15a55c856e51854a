"""Geographic to UTM conversion on the NAD27 (Clarke 1866) ellipsoid.

Third-order Krüger series for the transverse Mercator projection, see
https://en.wikipedia.org/wiki/Universal_Transverse_Mercator_coordinate_system#Simplified_formulae
"""

from __future__ import annotations

import math
from typing import NamedTuple

SEMI_MAJOR_AXIS = 6378206.4
FLATTENING = 1.0 / 294.978698214
SCALE_FACTOR = 0.9996
FALSE_EASTING = 500000.0

_N = FLATTENING / (2.0 - FLATTENING)
_A = SEMI_MAJOR_AXIS / (1.0 + _N) * (1.0 + _N**2 / 4.0 + _N**4 / 64.0)
_ALPHA = (
    _N / 2.0 - 2.0 / 3.0 * _N**2 + 5.0 / 16.0 * _N**3,
    13.0 / 48.0 * _N**2 - 3.0 / 5.0 * _N**3,
    61.0 / 240.0 * _N**3,
)
_CONFORMAL = 2.0 * math.sqrt(_N) / (1.0 + _N)


class ProjectedCorner(NamedTuple):
    """UTM coordinates of one geographic point."""

    northing: float
    easting: float
    zone: int


def utm_zone(long: float) -> int:
    """Return the UTM zone number for a longitude in degrees."""
    return math.floor((long + 186.0) / 6.0)


def central_meridian(zone: int) -> float:
    """Return the central meridian of a UTM zone in degrees."""
    return -183.0 + zone * 6.0


def lat_long_to_utm_nad27(lat: float, long: float) -> ProjectedCorner:
    """Project a latitude/longitude in degrees to NAD27 UTM.

    No false northing is applied; TPQ quads are northern hemisphere only.
    Longitudes outside [-180, 180) are not wrapped before choosing a zone.
    """
    zone = utm_zone(long)
    delta_long = math.radians(long) - math.radians(central_meridian(zone))
    lat_rad = math.radians(lat)

    # asinh(tan(lat)) == atanh(sin(lat)), finite at the poles.
    t = math.sinh(
        math.asinh(math.tan(lat_rad))
        - _CONFORMAL * math.atanh(_CONFORMAL * math.sin(lat_rad))
    )
    xi = math.atan(t / math.cos(delta_long))
    eta = math.atanh(math.sin(delta_long) / math.sqrt(1.0 + t * t))

    easting_series = eta
    northing_series = xi
    for k, alpha in enumerate(_ALPHA, start=1):
        easting_series += alpha * math.cos(2 * k * xi) * math.sinh(2 * k * eta)
        northing_series += alpha * math.sin(2 * k * xi) * math.cosh(2 * k * eta)

    easting = FALSE_EASTING + SCALE_FACTOR * _A * easting_series
    northing = SCALE_FACTOR * _A * northing_series
    return ProjectedCorner(northing=northing, easting=easting, zone=zone)
