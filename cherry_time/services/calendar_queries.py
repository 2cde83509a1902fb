"""Calendar Queries — "what week/month is it" answered against an injected clock.

Invariants:
    - The clock is read once per query; each answer is a fresh immutable value
    - zone=None falls back to Settings.default_time_zone, never to the host's local zone
    - Core errors are logged at WARNING and re-raised unchanged

Design Decisions:
    - Thin shell over core: all arithmetic stays in core/, this layer only supplies
      "now", the default zone and logging (ADR: functional core, imperative shell)
    - Clock and settings injected through __init__; defaults are SystemClock and get_settings()
"""

import logging
from datetime import datetime

from cherry_time.config import Settings, get_settings
from cherry_time.core.boundary_protocols import Clock
from cherry_time.core.errors import CherryTimeError
from cherry_time.core.month_year import MonthYear
from cherry_time.core.period import Period
from cherry_time.core.week_of_year import WeekOfYear
from cherry_time.infrastructure.clock import SystemClock

logger = logging.getLogger(__name__)


class CalendarQueries:
    """Clock-driven calendar lookups."""

    def __init__(self, clock: Clock | None = None, settings: Settings | None = None):
        self.clock = clock or SystemClock()
        self.settings = settings or get_settings()

    def _zone(self, zone: str | None) -> str:
        return zone or self.settings.default_time_zone

    def current_week(self) -> WeekOfYear:
        week = WeekOfYear.now(self.clock)
        logger.debug(
            "Resolved current week %s", week,
            extra={"week": week.week, "year": week.year},
        )
        return week

    def current_month(self, zone: str | None = None) -> MonthYear:
        tz = self._zone(zone)
        try:
            month = MonthYear.now(self.clock, tz)
        except CherryTimeError as e:
            logger.warning(
                "Rejected month query: %s", e.message,
                extra={"zone": tz, "error_code": e.code},
            )
            raise
        logger.debug(
            "Resolved current month %s", month,
            extra={"zone": tz, "month": month.month, "year": month.year},
        )
        return month

    def upcoming_weeks(self, count: int | None = None) -> list[WeekOfYear]:
        """Current week plus the next `count` (configured horizon by default)."""
        horizon = self.settings.upcoming_weeks if count is None else count
        return self.current_week().next_weeks(horizon)

    def period_between(
        self, start: datetime, end: datetime, zone: str | None = None,
    ) -> Period:
        tz = self._zone(zone)
        try:
            period = Period.from_instants(start, end, tz)
        except CherryTimeError as e:
            logger.warning(
                "Rejected period query: %s", e.message,
                extra={"zone": tz, "error_code": e.code},
            )
            raise
        logger.debug(
            "Resolved period %s", period,
            extra={
                "zone": tz,
                "start_date": period.start_date.isoformat(),
                "end_date": period.end_date.isoformat(),
            },
        )
        return period

    def week_period(self, instant: datetime | None = None) -> Period:
        """Monday–Sunday period of the instant's week (now by default)."""
        moment = instant or self.clock.now()
        return WeekOfYear.from_instant(moment).to_period()

    def end_of_current_week(self) -> datetime:
        """23:59:59 UTC on the Sunday closing the current week."""
        return WeekOfYear.instant_just_before_next_week(self.clock.now())
