"""Calendar Schemas — Pydantic models for serialising MonthYear, WeekOfYear and Period.

Invariants:
    - MonthYearSchema.month: 1–12; WeekOfYearSchema.week: 1–53
    - Year-specific week ranges are checked by the domain constructor, not here
    - PeriodSchema dates serialise as YYYY-MM-DD strings

Design Decisions:
    - Field constraints catch shape errors; to_domain() surfaces domain errors unchanged
      (InvalidWeekError, InvalidPeriodError) so callers see one taxonomy
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from cherry_time.core.month_year import MonthYear
from cherry_time.core.period import Period
from cherry_time.core.week_of_year import WeekOfYear


class MonthYearSchema(BaseModel):
    """Month of a year."""
    model_config = ConfigDict(frozen=True)

    year: int = Field(ge=1, le=9999)
    month: int = Field(ge=1, le=12)

    @classmethod
    def from_domain(cls, value: MonthYear) -> "MonthYearSchema":
        return cls(year=value.year, month=value.month)

    def to_domain(self) -> MonthYear:
        return MonthYear.of(self.month, self.year)


class WeekOfYearSchema(BaseModel):
    """ISO week of a week-year."""
    model_config = ConfigDict(frozen=True)

    year: int = Field(ge=1, le=9999)
    week: int = Field(ge=1, le=53)

    @classmethod
    def from_domain(cls, value: WeekOfYear) -> "WeekOfYearSchema":
        return cls(year=value.year, week=value.week)

    def to_domain(self) -> WeekOfYear:
        return WeekOfYear.of(self.week, self.year)


class PeriodSchema(BaseModel):
    """Inclusive date interval."""
    model_config = ConfigDict(frozen=True)

    start_date: date
    end_date: date

    @classmethod
    def from_domain(cls, value: Period) -> "PeriodSchema":
        return cls(start_date=value.start_date, end_date=value.end_date)

    def to_domain(self) -> Period:
        return Period(self.start_date, self.end_date)
