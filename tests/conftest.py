"""
pytest configuration

- force the non-interactive matplotlib backend
- keep environment overrides from a developer's .env out of the tests
"""

import os

import matplotlib
import pytest

from anywheresolarsystem.models import GeoPoint

matplotlib.use("Agg")

VANCOUVER = GeoPoint(49.273251, -123.103767)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.setenv("MPLBACKEND", os.getenv("MPLBACKEND", "Agg"))
    monkeypatch.delenv("SOLAR_SYSTEM_CORRECTED_PROJECTION", raising=False)
    monkeypatch.delenv("SOLAR_SYSTEM_RING_POINTS", raising=False)


@pytest.fixture
def vancouver() -> GeoPoint:
    return VANCOUVER
