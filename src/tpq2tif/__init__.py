"""Convert Maptech TPQ topographic quads into georeferenced GeoTIFFs."""

__version__ = "0.1.0"
