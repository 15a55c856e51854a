"""TPQ to GeoTIFF conversion pipeline."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from tpq2tif.geo.georef import Georeference, georeference
from tpq2tif.raster.mosaic import assemble_mosaic
from tpq2tif.settings import ConvertSettings
from tpq2tif.tpq.header import TpqHeader, read_header
from tpq2tif.writer import write_geotiff

LOGGER = logging.getLogger("tpq2tif.convert")

STDIN_SOURCE = "-"


@dataclass(frozen=True)
class ConversionResult:
    """Summary of a finished conversion."""

    output_path: Path
    header: TpqHeader
    width: int
    height: int
    tile_width: int
    tile_height: int
    tile_count: int
    georef: Georeference


def read_input(source: str | Path) -> bytes:
    """Read a whole TPQ file, or standard input for ``-``."""
    if str(source) == STDIN_SOURCE:
        return sys.stdin.buffer.read()
    return Path(source).read_bytes()


def _format_degrees(value: float) -> str:
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def default_output_name(header: TpqHeader) -> str:
    """Return the output filename derived from the quad's northwest corner."""
    return f"map_{_format_degrees(header.w_long)}_{_format_degrees(header.n_lat)}.tif"


def convert_tpq(
    data: bytes,
    output_path: Path | None = None,
    *,
    settings: ConvertSettings | None = None,
) -> ConversionResult:
    """Convert an in-memory TPQ file into a georeferenced GeoTIFF.

    Every tile is decoded before anything is written, so a malformed input
    never leaves an output file behind.
    """
    settings = settings or ConvertSettings()
    header = read_header(data)
    LOGGER.debug("Decoded TPQ header: %s", header)
    LOGGER.info(
        "Quad %r (%s): %dx%d maplets of %dx%d pixels.",
        header.quad_name,
        header.state_name,
        header.long_count,
        header.lat_count,
        header.maplet_width,
        header.maplet_height,
    )

    mosaic = assemble_mosaic(data, header, tile_size=settings.tile_size)
    georef = georeference(
        header,
        mosaic.width,
        mosaic.height,
        strategy=settings.georeferencing,
    )
    LOGGER.debug("Geotransform (%s): %s", georef.strategy, georef.to_gdal())

    target = Path(output_path) if output_path else Path(default_output_name(header))
    write_geotiff(target, mosaic, georef, compression=settings.compression)
    LOGGER.info("Wrote %dx%d mosaic to %s.", mosaic.width, mosaic.height, target)
    return ConversionResult(
        output_path=target,
        header=header,
        width=mosaic.width,
        height=mosaic.height,
        tile_width=mosaic.tile_width,
        tile_height=mosaic.tile_height,
        tile_count=mosaic.tile_count,
        georef=georef,
    )
