"""Period — an inclusive closed date interval [start_date, end_date].

Invariants:
    - start_date <= end_date; violated at construction → InvalidPeriodError
    - Dates only, no time-of-day; instants are reduced to a calendar date in a zone
    - to_month_years()/to_week_years() are inclusive, ordered, deduplicated, never empty
    - overlaps() is symmetric; contains(p) implies overlaps(p)
    - Equality and hash come from (start_date, end_date); no ordering is defined

Design Decisions:
    - One interval-intersection predicate for overlap; no directional variants
    - Decomposition steps a MonthYear/WeekOfYear cursor from start to end, so it
      terminates after one step per month/week spanned
"""

from dataclasses import dataclass
from datetime import date, datetime, tzinfo

from cherry_time.core.errors import InvalidPeriodError
from cherry_time.core.iso_calendar import (
    date_in_zone,
    parse_iso_date,
    start_of_day,
    to_utc,
)
from cherry_time.core.month_year import MonthYear
from cherry_time.core.week_of_year import WeekOfYear


@dataclass(frozen=True)
class Period:
    """Inclusive date interval — pure value, no IO."""

    start_date: date
    end_date: date  # str accepted on input, parsed as YYYY-MM-DD

    def __post_init__(self):
        for name in ("start_date", "end_date"):
            value = getattr(self, name)
            if isinstance(value, str):
                value = parse_iso_date(value, name)
            elif isinstance(value, datetime):
                # datetime is a date subclass; keep only the calendar date.
                value = value.date()
            elif not isinstance(value, date):
                raise TypeError(
                    f"{name} must be a date or YYYY-MM-DD string, got {type(value).__name__}"
                )
            object.__setattr__(self, name, value)
        if self.start_date > self.end_date:
            raise InvalidPeriodError(self.start_date, self.end_date)

    # ─── Construction ────────────────────────────────────────────

    @classmethod
    def from_instants(
        cls, start: datetime, end: datetime, zone: str | tzinfo | None = None,
    ) -> "Period":
        """Period between the calendar dates of two instants as seen from the zone."""
        return cls(date_in_zone(start, zone), date_in_zone(end, zone))

    @classmethod
    def parse(cls, start_text: str, end_text: str) -> "Period":
        """Period from two YYYY-MM-DD strings. FormatError on malformed text."""
        return cls(
            parse_iso_date(start_text, "start_date"),
            parse_iso_date(end_text, "end_date"),
        )

    # ─── Membership ──────────────────────────────────────────────

    def contains(self, other: "date | datetime | Period") -> bool:
        """Date/instant inside the period, or another period entirely inside it.

        Instants are reduced to their UTC calendar date.
        """
        if isinstance(other, Period):
            return self.start_date <= other.start_date and self.end_date >= other.end_date
        if isinstance(other, datetime):
            other = to_utc(other).date()
        return self.start_date <= other <= self.end_date

    def overlaps(self, other: "Period") -> bool:
        """True iff the two inclusive intervals share at least one day."""
        return self.start_date <= other.end_date and other.start_date <= self.end_date

    def is_within(self, unit: MonthYear | WeekOfYear) -> bool:
        """True iff the period touches the given month or week."""
        if isinstance(unit, WeekOfYear):
            return unit in self.to_week_years()
        return unit in self.to_month_years()

    # ─── Decomposition ───────────────────────────────────────────

    def to_month_years(self) -> list[MonthYear]:
        """Every month touched by a day of the period, in order."""
        cursor = MonthYear.from_date(self.start_date)
        last = MonthYear.from_date(self.end_date)
        months = [cursor]
        while cursor < last:
            cursor = cursor.next()
            months.append(cursor)
        return months

    def to_week_years(self) -> list[WeekOfYear]:
        """Every ISO week touched by a day of the period, Monday to Monday."""
        cursor = WeekOfYear.from_date(self.start_date)
        last = WeekOfYear.from_date(self.end_date)
        weeks = [cursor]
        while cursor < last:
            cursor = cursor.next_week()
            weeks.append(cursor)
        return weeks

    # ─── Views ───────────────────────────────────────────────────

    @property
    def days(self) -> int:
        """Inclusive length in days; a single-day period has length 1."""
        return (self.end_date - self.start_date).days + 1

    def start_instant(self) -> datetime:
        return start_of_day(self.start_date)

    def end_instant(self) -> datetime:
        return start_of_day(self.end_date)

    def __str__(self) -> str:
        return f"{self.start_date.isoformat()}/{self.end_date.isoformat()}"
