"""JSON schemas bundled with tpq2tif."""
