"""CalendarQueries tests — clock-driven lookups over the pure core.

Tests cover:
    - current_week / current_month read the injected clock
    - Default zone comes from settings; explicit zone wins
    - upcoming_weeks uses the configured horizon
    - period_between logs and re-raises rejected input
    - week_period / end_of_current_week
"""

import logging
from datetime import date, datetime, timezone

import pytest

from cherry_time.config import Settings
from cherry_time.core.errors import InvalidPeriodError, UnknownTimeZoneError
from cherry_time.core.month_year import MonthYear
from cherry_time.core.period import Period
from cherry_time.core.week_of_year import WeekOfYear
from cherry_time.infrastructure.clock import FixedClock, SystemClock
from cherry_time.services.calendar_queries import CalendarQueries


LOGGER = "cherry_time.services.calendar_queries"


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


@pytest.fixture
def settings() -> Settings:
    return Settings(default_time_zone="UTC", upcoming_weeks=2, _env_file=None)


@pytest.fixture
def queries(fixed_clock, settings) -> CalendarQueries:
    return CalendarQueries(clock=fixed_clock, settings=settings)


# ─── Defaults ────────────────────────────────────────────────────

def test_defaults_to_system_clock_and_cached_settings(monkeypatch):
    monkeypatch.delenv("CHERRY_TIME_DEFAULT_TIME_ZONE", raising=False)
    service = CalendarQueries()
    assert isinstance(service.clock, SystemClock)
    assert service.settings.default_time_zone == "UTC"


# ─── Current week / month ────────────────────────────────────────

def test_current_week(queries):
    assert queries.current_week() == WeekOfYear.of(12, 2024)


def test_current_week_logs_debug(queries, caplog):
    caplog.set_level(logging.DEBUG, logger=LOGGER)
    queries.current_week()
    record = next(r for r in caplog.records if r.name == LOGGER)
    assert record.week == 12
    assert record.year == 2024


def test_current_month_uses_settings_zone():
    clock = FixedClock(utc(2024, 3, 31, 12))
    service = CalendarQueries(
        clock=clock, settings=Settings(default_time_zone="Pacific/Kiritimati", _env_file=None),
    )
    assert service.current_month() == MonthYear.of(4, 2024)


def test_current_month_explicit_zone_wins(queries, fixed_clock):
    fixed_clock.set(utc(2024, 3, 31, 23))
    assert queries.current_month() == MonthYear.of(3, 2024)
    assert queries.current_month("Asia/Tokyo") == MonthYear.of(4, 2024)


def test_current_month_unknown_zone_logs_and_raises(queries, caplog):
    caplog.set_level(logging.WARNING, logger=LOGGER)
    with pytest.raises(UnknownTimeZoneError):
        queries.current_month("Nowhere/Land")
    record = next(r for r in caplog.records if r.name == LOGGER)
    assert record.levelno == logging.WARNING
    assert record.error_code == "UNKNOWN_TIME_ZONE"


# ─── Upcoming weeks ──────────────────────────────────────────────

def test_upcoming_weeks_uses_configured_horizon(queries):
    assert queries.upcoming_weeks() == [
        WeekOfYear.of(12, 2024), WeekOfYear.of(13, 2024), WeekOfYear.of(14, 2024),
    ]


def test_upcoming_weeks_explicit_count(queries):
    assert len(queries.upcoming_weeks(0)) == 1
    assert len(queries.upcoming_weeks(10)) == 11


# ─── Periods ─────────────────────────────────────────────────────

def test_period_between(queries):
    period = queries.period_between(utc(2024, 1, 1, 23), utc(2024, 1, 9, 1), "Europe/Paris")
    assert period == Period(date(2024, 1, 2), date(2024, 1, 9))


def test_period_between_rejects_reversed_instants(queries, caplog):
    caplog.set_level(logging.WARNING, logger=LOGGER)
    with pytest.raises(InvalidPeriodError):
        queries.period_between(utc(2024, 5, 10), utc(2024, 5, 1))
    record = next(r for r in caplog.records if r.name == LOGGER)
    assert record.error_code == "INVALID_PERIOD"


def test_week_period_defaults_to_now(queries):
    assert queries.week_period() == Period(date(2024, 3, 18), date(2024, 3, 24))


def test_week_period_for_instant(queries):
    assert queries.week_period(utc(2021, 1, 1)) == Period(date(2020, 12, 28), date(2021, 1, 3))


def test_end_of_current_week(queries):
    assert queries.end_of_current_week() == utc(2024, 3, 24, 23, 59, 59)
