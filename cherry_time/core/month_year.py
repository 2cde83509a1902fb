"""Month Year — a calendar month in a given proleptic Gregorian year.

Invariants:
    - month is always 1–12; violated at construction → InvalidMonthError
    - Immutable: next()/previous() return new instances
    - Ordered year-major, month-minor; equality and hash come from (year, month)
    - first_instant() is 00:00:00.000 UTC of day 1, last_instant() is 23:59:59.999 UTC
      of the month's real last day (28–31)

Design Decisions:
    - Frozen dataclass with field order (year, month): ordering falls out of the tuple
    - of(month, year) keeps the month-first calling convention of the public API
    - range_between is strict (last_instant < end); Period.to_month_years is the inclusive form
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, tzinfo

from cherry_time.core.boundary_protocols import Clock
from cherry_time.core.domain_types import MONTHS_PER_YEAR, Month
from cherry_time.core.errors import InvalidMonthError
from cherry_time.core.iso_calendar import (
    check_year,
    date_in_zone,
    days_in_month,
    end_of_day,
    start_of_day,
    to_utc,
)


@dataclass(frozen=True, order=True)
class MonthYear:
    """A month of a year — pure value, no IO."""

    year: int
    month: int

    def __post_init__(self):
        if isinstance(self.month, bool) or not isinstance(self.month, int):
            raise InvalidMonthError(self.month)
        if not 1 <= self.month <= MONTHS_PER_YEAR:
            raise InvalidMonthError(self.month)
        check_year(self.year)
        # Month enum members hash and compare like ints; store the plain int.
        object.__setattr__(self, "month", int(self.month))

    # ─── Construction ────────────────────────────────────────────

    @classmethod
    def of(cls, month: int, year: int) -> "MonthYear":
        return cls(year=year, month=month)

    @classmethod
    def from_date(cls, day: date) -> "MonthYear":
        return cls(year=day.year, month=day.month)

    @classmethod
    def from_instant(
        cls, instant: datetime, zone: str | tzinfo | None = None,
    ) -> "MonthYear":
        """Month holding the instant as seen from the zone (UTC by default)."""
        return cls.from_date(date_in_zone(instant, zone))

    @classmethod
    def now(cls, clock: Clock, zone: str | tzinfo | None = None) -> "MonthYear":
        return cls.from_instant(clock.now(), zone)

    # ─── Stepping ────────────────────────────────────────────────

    def next(self) -> "MonthYear":
        """Following month; December rolls into January of the next year."""
        if self.month == Month.DECEMBER:
            return MonthYear(self.year + 1, Month.JANUARY)
        return MonthYear(self.year, self.month + 1)

    def previous(self) -> "MonthYear":
        """Preceding month; January rolls back into December of the previous year."""
        if self.month == Month.JANUARY:
            return MonthYear(self.year - 1, Month.DECEMBER)
        return MonthYear(self.year, self.month - 1)

    # ─── Boundaries ──────────────────────────────────────────────

    @property
    def days_in_month(self) -> int:
        return days_in_month(self.year, self.month)

    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    def last_day(self) -> date:
        return date(self.year, self.month, self.days_in_month)

    def first_instant(self) -> datetime:
        return start_of_day(self.first_day())

    def last_instant(self) -> datetime:
        return end_of_day(self.last_day())

    def contains(self, instant: datetime) -> bool:
        """True iff first_instant() <= instant <= last_instant()."""
        moment = to_utc(instant)
        return self.first_instant() <= moment <= self.last_instant()

    # ─── Comparison ──────────────────────────────────────────────

    def is_before(self, other: "MonthYear") -> bool:
        return self < other

    def is_after(self, other: "MonthYear") -> bool:
        return self > other

    # ─── Sequences ───────────────────────────────────────────────

    @staticmethod
    def range_between(start: datetime, end: datetime) -> list["MonthYear"]:
        """Months from the one holding start while their last instant is before end.

        Strict: end's own month is included only if it finishes before end.
        """
        limit = to_utc(end)
        months = []
        current = MonthYear.from_instant(start)
        while current.last_instant() < limit:
            months.append(current)
            if (current.year, current.month) == (date.max.year, Month.DECEMBER):
                break
            current = current.next()
        return months

    @staticmethod
    def distinct_months_for(
        instants: Iterable[datetime], zone: str | tzinfo | None = None,
    ) -> list["MonthYear"]:
        """Months of the instants, first-seen order, duplicates dropped."""
        seen: dict[MonthYear, None] = {}
        for instant in instants:
            seen.setdefault(MonthYear.from_instant(instant, zone), None)
        return list(seen)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"
