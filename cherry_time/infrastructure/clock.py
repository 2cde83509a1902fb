"""Clocks — concrete implementations of the core Clock protocol.

Invariants:
    - now() always returns a timezone-aware UTC datetime
    - FixedClock never advances on its own

Design Decisions:
    - SystemClock is the only place the library reads the wall clock
"""

from datetime import datetime, timezone


class SystemClock:
    """Wall clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """Clock pinned to one instant — for tests and replays."""

    def __init__(self, instant: datetime):
        self.set(instant)

    def now(self) -> datetime:
        return self._instant

    def set(self, instant: datetime) -> None:
        """Move the pinned instant."""
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        self._instant = instant.astimezone(timezone.utc)
