from __future__ import annotations

import pytest

from tpq2tif.geo.crs import NAD27_GEOGRAPHIC_WKT, nad27_geographic_crs, nad27_utm_crs
from tpq2tif.geo.georef import georeference
from tpq2tif.geo.utm import lat_long_to_utm_nad27
from tests.utils import make_header


def test_utm_georeference() -> None:
    header = make_header()
    georef = georeference(header, 512, 256)

    top, left, zone = lat_long_to_utm_nad27(40.0, -105.0)
    bottom, right, _ = lat_long_to_utm_nad27(39.5, -104.5)
    x_scale = (right - left) / 512
    y_scale = -(top - bottom) / 256
    origin_x, width, row_rot, origin_y, col_rot, height = georef.to_gdal()

    assert georef.strategy == "utm"
    assert georef.zone == zone == 13
    assert georef.crs.to_epsg() == 26713
    assert width == pytest.approx(x_scale)
    assert height == pytest.approx(y_scale)
    assert origin_x == pytest.approx(left + x_scale / 2)
    assert origin_y == pytest.approx(top + y_scale / 2)
    assert row_rot == 0.0
    assert col_rot == 0.0


def test_geographic_georeference() -> None:
    header = make_header()
    georef = georeference(header, 500, 250, strategy="geographic")

    assert georef.to_gdal() == pytest.approx((-105.0, 0.001, 0.0, 40.0, 0.0, -0.002))
    assert georef.zone is None
    assert georef.crs.is_geographic
    assert georef.crs.to_epsg() == 4267


@pytest.mark.parametrize("strategy", ["utm", "geographic"])
def test_pixel_height_is_negative(strategy: str) -> None:
    header = make_header(w_long=-70.5, n_lat=44.25, e_long=-70.375, s_lat=44.125)
    georef = georeference(header, 100, 300, strategy=strategy)

    assert georef.transform.e < 0
    assert georef.transform.a > 0


def test_crs_matches_coordinate_space() -> None:
    header = make_header()

    assert georeference(header, 10, 10, strategy="utm").crs.is_projected
    assert georeference(header, 10, 10, strategy="geographic").crs.is_geographic


def test_unknown_strategy() -> None:
    with pytest.raises(ValueError, match="georeferencing strategy"):
        georeference(make_header(), 10, 10, strategy="mercator")


def test_zero_sized_raster() -> None:
    with pytest.raises(ValueError, match="positive"):
        georeference(make_header(), 0, 10)


def test_utm_crs_range() -> None:
    assert nad27_utm_crs(1).to_epsg() == 26701
    assert nad27_utm_crs(22).to_epsg() == 26722
    with pytest.raises(ValueError, match="zone 31"):
        nad27_utm_crs(31)


def test_geographic_crs_is_clarke_1866() -> None:
    crs = nad27_geographic_crs()

    assert "Clarke 1866" in NAD27_GEOGRAPHIC_WKT
    assert crs.ellipsoid.semi_major_metre == pytest.approx(6378206.4)
    assert crs.ellipsoid.inverse_flattening == pytest.approx(294.978698214)
