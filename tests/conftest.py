"""
Pytest configuration for relative-standing tests.
"""

from decimal import Decimal

import pytest

from relative_standing.core.config import get_settings

SETTINGS_ENV_VARS = (
    "LOG_LEVEL",
    "DEBUG",
    "DECIMAL_PRECISION",
    "DEFAULT_HIGHER_IS_BETTER",
    "SMALL_SAMPLE_WARNING_THRESHOLD",
    "LOWER_IS_BETTER_METRICS",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Run every test against default settings, uncached."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def five_values():
    """Evenly spaced sample where every step is 25 percentile points."""
    return [Decimal(v) for v in (10, 20, 30, 40, 50)]


@pytest.fixture
def four_values():
    """Sample where neighbouring observations are a third of the range apart."""
    return [Decimal(v) for v in (10, 20, 30, 40)]
