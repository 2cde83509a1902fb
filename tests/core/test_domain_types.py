"""Domain Types — verifies enum numbering and constants.

Tests:
    - Month enum numbers 1–12 and compares like int
    - Weekday follows ISO numbering (Monday == 1, Sunday == 7)
"""

from datetime import date

from cherry_time.core.domain_types import DAYS_PER_WEEK, MONTHS_PER_YEAR, Month, Weekday


def test_month_has_twelve_members_numbered_from_one():
    assert len(Month) == MONTHS_PER_YEAR
    assert Month.JANUARY == 1
    assert Month.DECEMBER == 12


def test_weekday_uses_iso_numbering():
    assert len(Weekday) == DAYS_PER_WEEK
    assert Weekday.MONDAY == 1
    assert Weekday.SUNDAY == 7
    assert Weekday(date(2024, 3, 24).isoweekday()) is Weekday.SUNDAY
