from __future__ import annotations

import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

import pytest  # noqa: E402

from tpq2tif import settings  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch, tmp_path) -> None:
    """Prevent local settings files from bleeding into tests."""
    monkeypatch.setenv(settings.ENV_SETTINGS, str(tmp_path / "missing_settings.json"))


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """Undo handlers installed by configure_logging during a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
