"""Module entrypoint for `python -m tpq2tif`."""

from __future__ import annotations

from tpq2tif.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
