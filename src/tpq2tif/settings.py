"""Conversion settings discovery and loading."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import jsonschema

from tpq2tif.contracts import validate_settings
from tpq2tif.errors import SettingsError

ENV_SETTINGS = "TPQ2TIF_CONFIG"
SETTINGS_FILENAME = "tpq2tif.json"


@dataclass(frozen=True)
class ConvertSettings:
    """Options controlling a single conversion."""

    georeferencing: str = "utm"
    tile_size: str = "header"
    compression: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "georeferencing": self.georeferencing,
            "tile_size": self.tile_size,
            "compression": self.compression,
        }

    def with_overrides(self, **overrides: Any) -> ConvertSettings:
        """Return a copy with every non-None override applied."""
        values = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **values)


def _default_candidate_paths() -> list[Path]:
    """Return default settings locations in priority order."""
    return [Path.cwd() / SETTINGS_FILENAME]


def _load_candidate(candidate: Path) -> ConvertSettings | None:
    """Load settings from a single candidate path."""
    if not candidate.exists():
        return None
    try:
        payload = json.loads(candidate.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise SettingsError(f"Unable to read settings from {candidate}: {exc}") from exc
    try:
        validate_settings(payload)
    except jsonschema.ValidationError as exc:
        raise SettingsError(f"Invalid settings in {candidate}: {exc.message}") from exc
    return ConvertSettings(**payload)


def load_settings(path: Path | None = None) -> ConvertSettings:
    """Load conversion settings from JSON, falling back to defaults."""
    if path:
        if not path.exists():
            raise SettingsError(f"Settings file not found: {path}")
        return _load_candidate(path) or ConvertSettings()
    env_path = os.environ.get(ENV_SETTINGS)
    if env_path:
        return _load_candidate(Path(env_path)) or ConvertSettings()
    for candidate in _default_candidate_paths():
        result = _load_candidate(candidate)
        if result is not None:
            return result
    return ConvertSettings()
