"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _clean_currency_env(monkeypatch):
    """Keep a developer's CURRENCY_* settings (or .env) out of the tests."""
    for name in ("CURRENCY_DECIMAL_PLACES", "CURRENCY_UNIT_NAME", "CURRENCY_SHOW_WORDS"):
        monkeypatch.delenv(name, raising=False)
    yield
