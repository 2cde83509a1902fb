"""Clock tests — system and fixed clocks satisfy the core Clock contract."""

from datetime import datetime, timedelta, timezone

from cherry_time.infrastructure.clock import FixedClock, SystemClock


def test_system_clock_is_utc_aware():
    now = SystemClock().now()
    assert now.tzinfo is timezone.utc
    assert abs(datetime.now(timezone.utc) - now) < timedelta(seconds=5)


def test_fixed_clock_normalises_to_utc():
    plus_two = timezone(timedelta(hours=2))
    clock = FixedClock(datetime(2024, 3, 20, 12, 0, tzinfo=plus_two))
    assert clock.now() == datetime(2024, 3, 20, 10, 0, tzinfo=timezone.utc)
    assert clock.now().tzinfo is timezone.utc


def test_fixed_clock_reads_naive_as_utc_and_can_move():
    clock = FixedClock(datetime(2024, 1, 1))
    assert clock.now() == datetime(2024, 1, 1, tzinfo=timezone.utc)
    clock.set(datetime(2024, 6, 1, 8))
    assert clock.now() == datetime(2024, 6, 1, 8, tzinfo=timezone.utc)
