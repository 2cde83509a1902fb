"""Domain Types — rich types that replace bare integers across the codebase.

Invariants:
    - WeekNumber is 1–53 (upper bound depends on the week-year)
    - WeekYear is the ISO week-numbering year, not necessarily the calendar year
    - Weekday values follow ISO-8601 numbering: Monday == 1, Sunday == 7

Design Decisions:
    - NewType over wrapper classes: zero runtime cost, full type-checker support
    - int Enums for Month/Weekday: compare and index like the numbers they stand for
"""

from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

WeekNumber = NewType("WeekNumber", int)     # 1–53
WeekYear = NewType("WeekYear", int)         # ISO week-numbering year


# ─── Constants ───────────────────────────────────────────────────

DAYS_PER_WEEK: int = 7
MONTHS_PER_YEAR: int = 12
# Last representable millisecond of a day, expressed in microseconds.
LAST_MILLISECOND_MICROS: int = 999_000


# ─── Enums ───────────────────────────────────────────────────────

class Month(int, Enum):
    """Gregorian months, numbered 1–12."""
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12


class Weekday(int, Enum):
    """ISO-8601 weekdays — Monday starts the week."""
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7
