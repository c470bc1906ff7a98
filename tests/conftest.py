import os
import sys
from pathlib import Path

import pytest

# Make 'light_emitter' importable from src/ without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))


@pytest.fixture(autouse=True)
def _clean_settings_env(monkeypatch):
    """Keep LIGHT_EMITTER_* variables from the outer shell out of the tests."""
    for key in list(os.environ):
        if key.startswith("LIGHT_EMITTER_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def reg():
    from light_emitter import EventRegistry

    return EventRegistry()
