"""Command-line interface for tpq2tif."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from tpq2tif import __version__
from tpq2tif.contracts import validate_conversion_report
from tpq2tif.convert import convert_tpq, read_input
from tpq2tif.errors import CleanupFailure, TpqError
from tpq2tif.geo.georef import GEOREF_STRATEGIES
from tpq2tif.logging_utils import LogOptions, configure_logging
from tpq2tif.raster.mosaic import TILE_SIZE_POLICIES
from tpq2tif.reporting import build_report, header_summary
from tpq2tif.settings import load_settings
from tpq2tif.tpq.header import read_header

LOGGER = logging.getLogger("tpq2tif.cli")


def _add_convert_parser(subparsers: argparse._SubParsersAction) -> None:
    """Register the convert subcommand and its arguments."""
    convert = subparsers.add_parser("convert", help="Convert a TPQ file to a GeoTIFF.")
    convert.add_argument("input", help="Path to a TPQ file, or - for standard input.")
    convert.add_argument(
        "-o",
        "--output",
        help="Output GeoTIFF path (default: map_<west>_<north>.tif).",
    )
    convert.add_argument(
        "--georef",
        choices=GEOREF_STRATEGIES,
        help="Georeference in NAD27 UTM or directly in NAD27 latitude/longitude.",
    )
    convert.add_argument(
        "--tile-size",
        choices=TILE_SIZE_POLICIES,
        help="Take maplet size from the header or from the first decoded tile.",
    )
    convert.add_argument("--compress", help="GeoTIFF compression (e.g. deflate, lzw).")
    convert.add_argument("--config", help="Path to a JSON settings file.")
    convert.add_argument("--report", help="Write a JSON conversion report to this path.")


def _add_info_parser(subparsers: argparse._SubParsersAction) -> None:
    """Register the info subcommand."""
    info = subparsers.add_parser("info", help="Print a TPQ header as JSON.")
    info.add_argument("input", help="Path to a TPQ file, or - for standard input.")


def _add_version_parser(subparsers: argparse._SubParsersAction) -> None:
    """Register the version subcommand."""
    subparsers.add_parser("version", help="Print the tpq2tif version.")


def _run_convert(args: argparse.Namespace) -> int:
    settings = load_settings(Path(args.config) if args.config else None).with_overrides(
        georeferencing=args.georef,
        tile_size=args.tile_size,
        compression=args.compress,
    )
    data = read_input(args.input)
    result = convert_tpq(
        data,
        Path(args.output) if args.output else None,
        settings=settings,
    )
    if args.report:
        report = build_report(result, source=args.input, settings=settings.as_dict())
        validate_conversion_report(report)
        report_path = Path(args.report)
        report_path.parent.mkdir(parents=True, exist_ok=True)
        report_path.write_text(json.dumps(report, indent=2), encoding="utf-8")
        LOGGER.info("Conversion report written to %s.", report_path)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the CLI entrypoint and return an exit code."""
    parser = argparse.ArgumentParser(
        prog="tpq2tif",
        description="Convert Maptech TPQ quads into georeferenced GeoTIFFs",
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (repeatable).",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Reduce log output to warnings and errors.",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        help="Emit logs as JSON on stderr.",
    )
    parser.add_argument(
        "--log-file",
        help="Optional path for JSON log output.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_convert_parser(subparsers)
    _add_info_parser(subparsers)
    _add_version_parser(subparsers)

    args = parser.parse_args(argv)
    log_file_value = getattr(args, "log_file", None)
    log_options = LogOptions(
        verbose=getattr(args, "verbose", 0) or 0,
        quiet=bool(getattr(args, "quiet", False)),
        log_file=Path(log_file_value) if log_file_value else None,
        json_console=bool(getattr(args, "log_json", False)),
    )
    configure_logging(log_options)

    if args.command == "version":
        print(__version__)
        return 0
    try:
        if args.command == "info":
            header = read_header(read_input(args.input))
            print(json.dumps(header_summary(header), indent=2))
            return 0
        if args.command == "convert":
            return _run_convert(args)
    except CleanupFailure as exc:
        LOGGER.critical("%s Remove %s by hand.", exc, exc.path)
        return 2
    except (TpqError, OSError, ValueError) as exc:
        LOGGER.error("%s", exc)
        return 1
    parser.error(f"Unknown command: {args.command}")
    return 2
