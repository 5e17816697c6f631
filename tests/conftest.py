import os
import sys
from datetime import datetime
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from core.config import get_settings  # noqa: E402
from core.services import instants  # noqa: E402

FROZEN_NOW = datetime(2024, 3, 15, 13, 5, 30)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    # No .env from the repo or the user home leaks into the defaults under test
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    for name in list(os.environ):
        if name.upper().startswith("DATE_UTILS_"):
            monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def frozen_now(monkeypatch):
    monkeypatch.setattr(instants, "now", lambda: FROZEN_NOW)
    return FROZEN_NOW
