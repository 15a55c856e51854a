"""Schema validation helpers for settings files and conversion reports."""

from __future__ import annotations

import json
from importlib import resources
from typing import Any, Mapping

import jsonschema

SCHEMA_VERSION = "1"


def _load_schema(name: str) -> dict[str, Any]:
    """Load a JSON schema bundled in the package."""
    with resources.files("tpq2tif.schemas").joinpath(name).open("r", encoding="utf-8") as handle:
        return json.load(handle)


def validate_settings(payload: Mapping[str, Any]) -> None:
    """Validate a settings payload against the schema."""
    schema = _load_schema("settings.schema.json")
    jsonschema.validate(payload, schema)


def validate_conversion_report(report: Mapping[str, Any]) -> None:
    """Validate a conversion report against the schema."""
    schema = _load_schema("conversion_report.schema.json")
    jsonschema.validate(report, schema)
