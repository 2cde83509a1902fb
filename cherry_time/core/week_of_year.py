"""Week Of Year — an ISO-8601 week (Monday–Sunday) of a week-numbering year.

Invariants:
    - (week, year) follow the Thursday rule; year is the WEEK-year, so Dec 29–31 may be
      week 1 of year + 1 and Jan 1–3 may be week 52/53 of year - 1
    - week is an int in 1..weeks_in_year(year); violated at construction → InvalidWeekError
    - first_day_of_week() is Monday 00:00:00.000 UTC, last_day_of_week() is the following
      Sunday 23:59:59.999 UTC, exactly 6 days later
    - Identity, hash and order come from (year, week) only; the Monday anchor is derived
    - Immutable: every step returns a new instance

Design Decisions:
    - Frozen dataclass; the anchor is an excluded field filled in __post_init__
    - Stepping moves the anchor by whole weeks and re-derives (week, year) from it,
      so week-year rollovers need no special cases
    - No locale, no "first day of week" setting: the rule lives in iso_calendar
"""

from dataclasses import dataclass, field
from datetime import date, datetime, time, timezone
from typing import TYPE_CHECKING

from cherry_time.core.boundary_protocols import Clock
from cherry_time.core.domain_types import DAYS_PER_WEEK, Weekday
from cherry_time.core.iso_calendar import (
    add_days,
    end_of_day,
    iso_week_of,
    monday_of,
    monday_of_iso_week,
    start_of_day,
    to_utc,
)
from cherry_time.core.month_year import MonthYear

if TYPE_CHECKING:
    from cherry_time.core.period import Period


@dataclass(frozen=True, order=True)
class WeekOfYear:
    """An ISO week — pure value, no IO."""

    year: int
    week: int
    _monday: date = field(init=False, repr=False, compare=False, hash=False)

    def __post_init__(self):
        object.__setattr__(self, "_monday", monday_of_iso_week(self.week, self.year))

    # ─── Construction ────────────────────────────────────────────

    @classmethod
    def of(cls, week: int, year: int) -> "WeekOfYear":
        """Week `week` of ISO week-year `year`. Raises InvalidWeekError if out of range."""
        return cls(year=year, week=week)

    @classmethod
    def from_date(cls, day: date) -> "WeekOfYear":
        week_year, week = iso_week_of(day)
        return cls(year=week_year, week=week)

    @classmethod
    def from_instant(cls, instant: datetime) -> "WeekOfYear":
        """Week holding the instant, read in UTC."""
        return cls.from_date(to_utc(instant).date())

    @classmethod
    def now(cls, clock: Clock) -> "WeekOfYear":
        return cls.from_instant(clock.now())

    # ─── Stepping ────────────────────────────────────────────────

    def add_weeks(self, weeks: int) -> "WeekOfYear":
        """Shift by whole weeks (negative goes back); lands on a Monday every time."""
        return WeekOfYear.from_date(add_days(self._monday, weeks * DAYS_PER_WEEK))

    def next_week(self) -> "WeekOfYear":
        return self.add_weeks(1)

    def previous_week(self) -> "WeekOfYear":
        return self.add_weeks(-1)

    def next_weeks(self, number: int) -> list["WeekOfYear"]:
        """This week followed by the next `number` weeks (number + 1 items)."""
        weeks = [self]
        current = self
        for _ in range(number):
            current = current.next_week()
            weeks.append(current)
        return weeks

    def add_years(self, years: int) -> "WeekOfYear":
        """Same week number in week-year + years. Raises InvalidWeekError if it has none."""
        return WeekOfYear(self.year + years, self.week)

    # ─── Boundaries ──────────────────────────────────────────────

    def to_instant(self) -> datetime:
        return start_of_day(self._monday)

    def first_day_of_week(self) -> datetime:
        return start_of_day(self._monday)

    def last_day_of_week(self) -> datetime:
        return end_of_day(add_days(self._monday, Weekday.SUNDAY - Weekday.MONDAY))

    def _ends_before(self, limit: datetime) -> bool:
        # The last ISO week of 9999 closes after date.max, so it never ends before a limit.
        if self._monday > add_days(date.max, -(Weekday.SUNDAY - Weekday.MONDAY)):
            return False
        return self.last_day_of_week() < limit

    def contains(self, instant: datetime) -> bool:
        """True iff first_day_of_week() <= instant <= last_day_of_week()."""
        moment = to_utc(instant)
        return self.first_day_of_week() <= moment <= self.last_day_of_week()

    # ─── Conversions ─────────────────────────────────────────────

    def to_month_years(self) -> list[MonthYear]:
        """Month of the Monday, then the Sunday's month if the week straddles a boundary."""
        first = MonthYear.from_instant(self.first_day_of_week())
        last = MonthYear.from_instant(self.last_day_of_week())
        if first == last:
            return [first]
        return [first, last]

    def to_period(self) -> "Period":
        """Period spanning Monday through Sunday."""
        from cherry_time.core.period import Period

        return Period.from_instants(self.first_day_of_week(), self.last_day_of_week())

    # ─── Comparison ──────────────────────────────────────────────

    def is_before(self, other: "WeekOfYear") -> bool:
        return self < other

    def is_after(self, other: "WeekOfYear") -> bool:
        return self > other

    # ─── Sequences ───────────────────────────────────────────────

    @staticmethod
    def range_between(start: datetime, end: datetime) -> list["WeekOfYear"]:
        """Weeks from the one holding start while their last day is before end.

        Strict: end's own week is included only if it finishes before end.
        """
        limit = to_utc(end)
        weeks = []
        current = WeekOfYear.from_instant(start)
        while current._ends_before(limit):
            weeks.append(current)
            current = current.next_week()
        return weeks

    @staticmethod
    def instant_just_before_next_week(instant: datetime) -> datetime:
        """23:59:59 UTC on the Sunday closing the instant's week."""
        sunday = add_days(monday_of(to_utc(instant).date()), Weekday.SUNDAY - Weekday.MONDAY)
        return datetime.combine(sunday, time(23, 59, 59), tzinfo=timezone.utc)

    @property
    def iso_code(self) -> str:
        return f"{self.year:04d}-W{self.week:02d}"

    def __str__(self) -> str:
        return f"week {self.week} of {self.year}"
