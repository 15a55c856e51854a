"""Error kinds raised while converting TPQ files."""

from __future__ import annotations

from pathlib import Path


class TpqError(Exception):
    """Base class for conversion failures."""


class TruncatedInput(TpqError, ValueError):
    """The input ended before a field, directory entry, or tile was read."""

    def __init__(self, what: str, offset: int, needed: int, available: int) -> None:
        self.what = what
        self.offset = offset
        self.needed = needed
        self.available = available
        super().__init__(
            f"Truncated input reading {what} at offset {offset}: "
            f"needed {needed} bytes, {available} available."
        )


class TileDecodeFailure(TpqError):
    """An embedded maplet is not a decodable JPEG image."""

    def __init__(self, index: int, row: int, col: int, offset: int, reason: str) -> None:
        self.index = index
        self.row = row
        self.col = col
        self.offset = offset
        super().__init__(
            f"Tile {index} (row {row}, col {col}) at offset {offset} "
            f"could not be decoded: {reason}"
        )


class TileSizeMismatch(TpqError):
    """A decoded maplet does not match the grid cell size."""

    def __init__(
        self,
        index: int,
        expected: tuple[int, int],
        actual: tuple[int, int],
    ) -> None:
        self.index = index
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Tile {index} is {actual[0]}x{actual[1]} pixels, "
            f"expected {expected[0]}x{expected[1]}."
        )


class GeoreferencingFailure(TpqError):
    """CRS or transform could not be stamped on the written raster."""

    def __init__(self, path: Path, message: str | None = None) -> None:
        self.path = Path(path)
        super().__init__(message or f"Failed to georeference {self.path}; output removed.")


class CleanupFailure(GeoreferencingFailure):
    """Georeferencing failed and the partial output could not be removed."""

    def __init__(self, path: Path, error: BaseException, cleanup_error: BaseException) -> None:
        self.error = error
        self.cleanup_error = cleanup_error
        super().__init__(
            path,
            f"Failed to georeference {path} ({error}) and could not remove it "
            f"({cleanup_error}).",
        )


class SettingsError(TpqError, ValueError):
    """A settings file is unreadable or does not match the settings schema."""
