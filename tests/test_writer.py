from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import numpy as np
import pytest
import rasterio
from rasterio.enums import ColorInterp
from rasterio.errors import RasterioError

from tpq2tif import writer
from tpq2tif.errors import CleanupFailure, GeoreferencingFailure
from tpq2tif.geo.georef import Georeference, georeference
from tpq2tif.raster.mosaic import Mosaic
from tests.utils import make_header


def _mosaic(width: int = 8, height: int = 4) -> Mosaic:
    pixels = np.full((4, height, width), 255, dtype=np.uint8)
    pixels[0, :, : width // 2] = 10
    return Mosaic(pixels=pixels, tile_width=width // 2, tile_height=height, tile_count=2)


def test_write_geotiff_utm(tmp_path: Path) -> None:
    mosaic = _mosaic()
    georef = georeference(make_header(), mosaic.width, mosaic.height)
    output = tmp_path / "out" / "quad.tif"

    writer.write_geotiff(output, mosaic, georef)

    with rasterio.open(output) as dataset:
        assert dataset.count == 4
        assert (dataset.width, dataset.height) == (8, 4)
        assert dataset.crs.to_epsg() == 26713
        assert dataset.transform.almost_equals(georef.transform)
        data = dataset.read()
    assert np.array_equal(data, mosaic.pixels)


def test_write_geotiff_geographic_compressed(tmp_path: Path) -> None:
    mosaic = _mosaic()
    georef = georeference(make_header(), mosaic.width, mosaic.height, strategy="geographic")
    output = tmp_path / "quad.tif"

    writer.write_geotiff(output, mosaic, georef, compression="deflate")

    with rasterio.open(output) as dataset:
        assert dataset.crs.is_geographic
        assert dataset.transform.c == pytest.approx(-105.0)
        assert dataset.transform.f == pytest.approx(40.0)
        assert dataset.compression is not None


def test_georeferencing_failure_removes_output(tmp_path: Path, monkeypatch) -> None:
    def fail(*_args, **_kwargs):
        raise RasterioError("cannot set CRS")

    monkeypatch.setattr(writer, "_stamp_georeference", fail)
    mosaic = _mosaic()
    output = tmp_path / "quad.tif"

    with pytest.raises(GeoreferencingFailure) as excinfo:
        writer.write_geotiff(output, mosaic, georeference(make_header(), 8, 4))

    assert not isinstance(excinfo.value, CleanupFailure)
    assert excinfo.value.path == output
    assert isinstance(excinfo.value.__cause__, RasterioError)
    assert not output.exists()


def test_cleanup_failure_carries_both_errors(tmp_path: Path, monkeypatch) -> None:
    def fail(*_args, **_kwargs):
        raise RasterioError("cannot set CRS")

    def refuse_unlink(self, *args, **kwargs):
        raise PermissionError("read-only directory")

    monkeypatch.setattr(writer, "_stamp_georeference", fail)
    monkeypatch.setattr(Path, "unlink", refuse_unlink)
    output = tmp_path / "quad.tif"

    with pytest.raises(CleanupFailure) as excinfo:
        writer.write_geotiff(output, _mosaic(), georeference(make_header(), 8, 4))

    assert isinstance(excinfo.value.error, RasterioError)
    assert isinstance(excinfo.value.cleanup_error, PermissionError)
    assert "read-only directory" in str(excinfo.value)
    assert output.exists()


@pytest.mark.parametrize("strategy", ["utm", "geographic"])
def test_alpha_band_survives_georeferencing(tmp_path: Path, strategy: str) -> None:
    mosaic = _mosaic()
    georef = georeference(make_header(), mosaic.width, mosaic.height, strategy=strategy)
    output = tmp_path / f"{strategy}.tif"

    writer.write_geotiff(output, mosaic, georef)

    with rasterio.open(output) as dataset:
        assert dataset.crs is not None
        assert dataset.colorinterp == (
            ColorInterp.red,
            ColorInterp.green,
            ColorInterp.blue,
            ColorInterp.alpha,
        )


def test_unparseable_crs_removes_output(tmp_path: Path) -> None:
    mosaic = _mosaic()
    valid = georeference(make_header(), mosaic.width, mosaic.height)
    broken = Georeference(
        transform=valid.transform,
        crs=SimpleNamespace(to_wkt=lambda: "GEOGCS[broken"),
        strategy="utm",
    )
    output = tmp_path / "quad.tif"

    with pytest.raises(GeoreferencingFailure) as excinfo:
        writer.write_geotiff(output, mosaic, broken)

    assert not isinstance(excinfo.value, CleanupFailure)
    assert excinfo.value.__cause__ is not None
    assert not output.exists()


def test_output_path_that_is_a_directory(tmp_path: Path) -> None:
    mosaic = _mosaic()
    output = tmp_path / "quad.tif"
    output.mkdir()

    with pytest.raises((RasterioError, OSError)):
        writer.write_geotiff(output, mosaic, georeference(make_header(), 8, 4))

    assert output.is_dir()
