"""Error Hierarchy — typed, categorized exceptions for every calendar failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Raised synchronously at construction time; never caught inside the core
    - InvalidArgumentError and FormatError are also ValueError, so generic callers still work
    - to_dict() produces a stable envelope; no partial object is ever returned alongside it

Design Decisions:
    - Single hierarchy with CherryTimeError base: callers catch one type (ADR: uniform error shape)
    - ErrorContext as dataclass: offending field/value travel with the error, not in the message only
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class ErrorCategory(str, Enum):
    """High-level error categories."""
    VALIDATION = "validation"
    PARSING = "parsing"


@dataclass
class ErrorContext:
    """Which input was rejected, and when."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    field_name: str | None = None
    value: Any = None
    debug_info: dict[str, Any] | None = None


class CherryTimeError(Exception):
    """Base exception for all cherry_time errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_dict(self) -> dict:
        """Convert to a JSON-compatible error envelope."""
        value = self.context.value
        if isinstance(value, (date, datetime)):
            value = value.isoformat()
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "field": self.context.field_name,
                    "value": value,
                    "debug_info": self.context.debug_info,
                },
            }
        }


# ─── Validation Errors ──────────────────────────────────────────

class InvalidArgumentError(CherryTimeError, ValueError):
    """A constructor argument violates a value-type invariant."""
    def __init__(
        self,
        message: str,
        code: str = "INVALID_ARGUMENT",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.VALIDATION, ErrorSeverity.ERROR, context,
        )


class InvalidMonthError(InvalidArgumentError):
    """Month number outside 1–12."""
    def __init__(self, month: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field_name, ctx.value = "month", month
        super().__init__(
            f"Month must be between 1 and 12, got {month}",
            "INVALID_MONTH", ctx,
        )
        self.month = month


class InvalidWeekError(InvalidArgumentError):
    """Week number not an integer, or outside the ISO range of its week-year."""
    def __init__(
        self, week: int, year: int, weeks_in_year: int | None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.field_name, ctx.value = "week", week
        if isinstance(week, bool) or not isinstance(week, int):
            message = f"Week must be an integer, got {week!r} for {year}"
        elif weeks_in_year is None:
            message = f"Week {week} of {year} is outside the supported year range"
        else:
            message = (
                f"Week {week} of {year} is out of range: "
                f"{year} has {weeks_in_year} ISO weeks"
            )
        super().__init__(message, "INVALID_WEEK", ctx)
        self.week = week
        self.year = year
        self.weeks_in_year = weeks_in_year


class InvalidPeriodError(InvalidArgumentError):
    """Period end date precedes its start date."""
    def __init__(
        self, start_date: date, end_date: date, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.field_name, ctx.value = "end_date", end_date
        super().__init__(
            f"Period end date {end_date.isoformat()} precedes "
            f"start date {start_date.isoformat()}",
            "INVALID_PERIOD", ctx,
        )
        self.start_date = start_date
        self.end_date = end_date


class UnknownTimeZoneError(InvalidArgumentError):
    """Time-zone identifier not found in the IANA database."""
    def __init__(self, zone: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field_name, ctx.value = "zone", zone
        super().__init__(
            f"Unknown time zone '{zone}'", "UNKNOWN_TIME_ZONE", ctx,
        )
        self.zone = zone


# ─── Parsing Errors ─────────────────────────────────────────────

class FormatError(CherryTimeError, ValueError):
    """Textual date does not match YYYY-MM-DD."""
    def __init__(
        self, value: str, field_name: str | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.field_name, ctx.value = field_name, value
        super().__init__(
            f"Expected a date in YYYY-MM-DD format, got {value!r}",
            "FORMAT_ERROR", ErrorCategory.PARSING, ErrorSeverity.ERROR, ctx,
        )
        self.value = value
