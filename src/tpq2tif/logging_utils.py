"""Console and file logging for tpq2tif.

Records emitted while a maplet is being placed carry ``tile``, ``row``,
``col`` and ``offset`` extras. The JSON formatter groups them under a
``maplet`` object and the human formatter turns them into a short prefix
such as ``[maplet 3 r1c0 @4096]``.
"""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

MAPLET_FIELDS = ("tile", "row", "col", "offset")

# Attributes every LogRecord has, plus the ones formatters add later.
_STANDARD_FIELDS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime", "taskName"}


@dataclass(frozen=True)
class LogOptions:
    """Console verbosity and the optional JSON log file."""

    verbose: int = 0
    quiet: bool = False
    log_file: Path | None = None
    json_console: bool = False


def maplet_context(record: logging.LogRecord) -> dict[str, int]:
    """Return the maplet fields attached to a record, keyed by field name."""
    return {
        field: getattr(record, field)
        for field in MAPLET_FIELDS
        if getattr(record, field, None) is not None
    }


def _other_extras(record: logging.LogRecord) -> dict[str, Any]:
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _STANDARD_FIELDS and key not in MAPLET_FIELDS
    }


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with maplet context as a nested object."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, timezone.utc)
        payload: dict[str, Any] = {
            "timestamp": created.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        maplet = maplet_context(record)
        if maplet:
            payload["maplet"] = maplet
        extra = _other_extras(record)
        if extra:
            payload["extra"] = extra
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


class HumanFormatter(logging.Formatter):
    """Prefix records that concern a maplet with its index and grid cell."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        maplet = maplet_context(record)
        if "tile" not in maplet:
            return message
        prefix = f"maplet {maplet['tile']}"
        if "row" in maplet and "col" in maplet:
            prefix += f" r{maplet['row']}c{maplet['col']}"
        if "offset" in maplet:
            prefix += f" @{maplet['offset']}"
        return f"[{prefix}] {message}"


def _console_level(options: LogOptions) -> int:
    if options.quiet:
        return logging.WARNING
    if options.verbose > 0:
        return logging.DEBUG
    return logging.INFO


def configure_logging(options: LogOptions) -> logging.Logger:
    """Install the console handler and, if requested, a JSON file handler.

    The file handler always records DEBUG so per-maplet placement is kept
    even when the console is quiet.
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(_console_level(options))
    if options.json_console:
        console.setFormatter(JsonFormatter())
    else:
        console.setFormatter(HumanFormatter("%(levelname)s: %(message)s"))
    root.addHandler(console)

    if options.log_file:
        options.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(options.log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(JsonFormatter())
        root.addHandler(file_handler)

    return root
