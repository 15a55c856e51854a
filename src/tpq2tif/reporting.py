"""Header summaries and conversion report construction."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Mapping

from tpq2tif.contracts import SCHEMA_VERSION
from tpq2tif.convert import ConversionResult
from tpq2tif.tpq.header import TpqHeader


def _utc_now() -> str:
    """Return the current UTC timestamp as ISO8601."""
    return datetime.now(timezone.utc).isoformat()


def header_summary(header: TpqHeader) -> dict[str, Any]:
    """Return the decoded header grouped for display."""
    west, south, east, north = header.bounds
    return {
        "version": header.version,
        "quad_name": header.quad_name,
        "state_name": header.state_name,
        "topo": header.topo,
        "source": header.source,
        "years": [header.year1, header.year2],
        "contour": header.contour,
        "extension": header.extension,
        "color_depth": header.color_depth,
        "bounds": {
            "west": west,
            "south": south,
            "east": east,
            "north": north,
        },
        "grid": {"columns": header.long_count, "rows": header.lat_count},
        "maplet_size": [header.maplet_width, header.maplet_height],
    }


def build_report(
    result: ConversionResult,
    *,
    source: str,
    settings: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Create a conversion report dictionary."""
    crs = result.georef.crs
    return {
        "schema_version": SCHEMA_VERSION,
        "created_at": _utc_now(),
        "input": source,
        "output": str(result.output_path),
        "settings": dict(settings or {}),
        "header": header_summary(result.header),
        "raster": {
            "width": result.width,
            "height": result.height,
            "bands": 4,
            "tile_size": [result.tile_width, result.tile_height],
            "tile_count": result.tile_count,
        },
        "georeference": {
            "strategy": result.georef.strategy,
            "zone": result.georef.zone,
            "transform": list(result.georef.to_gdal()),
            "crs": {"epsg": crs.to_epsg(), "wkt": crs.to_wkt()},
        },
    }
