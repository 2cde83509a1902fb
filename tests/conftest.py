"""Root conftest — shared test configuration.

Invariants:
    - Settings cache cleared around every test so env overrides never leak
    - fixed_clock pins "now" to Wednesday 2024-03-20 10:15 UTC (ISO week 12 of 2024)
"""

from datetime import datetime, timezone

import pytest

from cherry_time.config import get_settings
from cherry_time.infrastructure.clock import FixedClock


FIXED_NOW = datetime(2024, 3, 20, 10, 15, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock(FIXED_NOW)
