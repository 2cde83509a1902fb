"""ISO Calendar — pure Gregorian and ISO-8601 week arithmetic.

Invariants:
    - Weeks run Monday–Sunday; week 1 is the week holding the year's first Thursday
    - A year has 53 ISO weeks iff Jan 1 is a Thursday, or it is leap and Jan 1 is a Wednesday
    - Weekdays and week numbers come from date.isocalendar(), never from locale
    - Every returned instant is UTC-aware; naive input instants are read as UTC
    - Supported years are those of datetime.date (1–9999); stepping outside raises

Design Decisions:
    - Plain functions over a calendar object: no field-by-field mutation, nothing shared
    - Built on datetime.date: proleptic Gregorian and ISO weeks by construction
    - Week numbers are range-checked before date.fromisocalendar() so the error names the year length
"""

import re
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from cherry_time.core.domain_types import (
    LAST_MILLISECOND_MICROS,
    WeekNumber,
    WeekYear,
    Weekday,
)
from cherry_time.core.errors import (
    FormatError,
    InvalidArgumentError,
    InvalidMonthError,
    InvalidWeekError,
    UnknownTimeZoneError,
)


_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_ISO_DATE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_UTC_NAMES = frozenset({"UTC", "Etc/UTC", "Z"})


# ─── Gregorian basics ────────────────────────────────────────────

def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Number of days in the month: 28–31, leap February included."""
    if not 1 <= month <= 12:
        raise InvalidMonthError(month)
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def iso_weekday(day: date) -> Weekday:
    """ISO weekday of a date."""
    return Weekday(day.isoweekday())


def add_days(day: date, days: int) -> date:
    """Shift a date, surfacing overflow past year 1 or 9999 as InvalidArgumentError."""
    try:
        return day + timedelta(days=days)
    except OverflowError as exc:
        raise InvalidArgumentError(
            f"Shifting {day.isoformat()} by {days} day(s) leaves the supported "
            f"year range {date.min.year}–{date.max.year}",
        ) from exc


def check_year(year: int) -> int:
    """Reject years the date type cannot represent."""
    if isinstance(year, bool) or not isinstance(year, int):
        raise InvalidArgumentError(f"Year must be an integer, got {year!r}")
    if not date.min.year <= year <= date.max.year:
        raise InvalidArgumentError(
            f"Year {year} is outside the supported range "
            f"{date.min.year}–{date.max.year}",
        )
    return year


def _jan_first(year: int) -> date:
    return date(check_year(year), 1, 1)


# ─── ISO-8601 weeks ──────────────────────────────────────────────

def weeks_in_year(year: int) -> int:
    """52 or 53, by the Jan-1 weekday rule."""
    first = iso_weekday(_jan_first(year))
    if first == Weekday.THURSDAY:
        return 53
    if first == Weekday.WEDNESDAY and is_leap_year(year):
        return 53
    return 52


def monday_of(day: date) -> date:
    """Monday of the ISO week the date falls in."""
    return add_days(day, -(iso_weekday(day) - 1))


def iso_week_of(day: date) -> tuple[WeekYear, WeekNumber]:
    """(week-year, week) of a date by the Thursday rule."""
    week_year, week, _ = day.isocalendar()
    return WeekYear(week_year), WeekNumber(week)


def monday_of_iso_week(week: int, year: int) -> date:
    """Monday opening the given ISO week. Raises InvalidWeekError when out of range."""
    if isinstance(week, bool) or not isinstance(week, int):
        raise InvalidWeekError(week, year, None)
    try:
        total = weeks_in_year(year)
    except InvalidArgumentError as exc:
        raise InvalidWeekError(week, year, None) from exc
    if not 1 <= week <= total:
        raise InvalidWeekError(week, year, total)
    return date.fromisocalendar(year, week, Weekday.MONDAY)


# ─── Instants ────────────────────────────────────────────────────

def to_utc(instant: datetime) -> datetime:
    """Normalise an instant to UTC; naive datetimes are taken as already UTC."""
    if instant.tzinfo is None or instant.utcoffset() is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def start_of_day(day: date) -> datetime:
    """00:00:00.000 UTC of the date."""
    return datetime.combine(day, time.min, tzinfo=timezone.utc)


def end_of_day(day: date) -> datetime:
    """23:59:59.999 UTC of the date."""
    return datetime.combine(
        day, time(23, 59, 59, LAST_MILLISECOND_MICROS), tzinfo=timezone.utc,
    )


def resolve_zone(zone: str | tzinfo | None = None) -> tzinfo:
    """IANA identifier (or tzinfo) to tzinfo. None means UTC."""
    if zone is None:
        return timezone.utc
    if isinstance(zone, tzinfo):
        return zone
    if zone in _UTC_NAMES:
        return timezone.utc
    try:
        return ZoneInfo(zone)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise UnknownTimeZoneError(zone) from exc


def date_in_zone(instant: datetime, zone: str | tzinfo | None = None) -> date:
    """Calendar date of an instant as seen from the zone (UTC by default)."""
    return to_utc(instant).astimezone(resolve_zone(zone)).date()


# ─── Parsing ─────────────────────────────────────────────────────

def parse_iso_date(text: str, field_name: str | None = None) -> date:
    """Strict YYYY-MM-DD parser. Raises FormatError on anything else."""
    if not isinstance(text, str) or not _ISO_DATE.fullmatch(text):
        raise FormatError(text, field_name)
    try:
        return date.fromisoformat(text)
    except ValueError as exc:
        raise FormatError(text, field_name) from exc
