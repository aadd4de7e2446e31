"""Test the booking sync horizon."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from salonsync.sync.window import BOOKING_WINDOW_DAYS, booking_window

NOW = datetime(2025, 6, 10, 12, 0, tzinfo=timezone.utc)


def test_window_bounds():
    window = booking_window(NOW)
    assert window.start_date == date(2025, 5, 11)
    assert window.end_date == date(2025, 7, 10)


def test_window_uses_utc_dates():
    # 01:00 at +03:00 is still the previous day in UTC
    local_now = datetime(2025, 6, 10, 1, 0, tzinfo=timezone(timedelta(hours=3)))
    window = booking_window(local_now)
    assert window.start_date == date(2025, 5, 10)
    assert window.end_date == date(2025, 7, 9)


def test_contains_inclusive():
    window = booking_window(NOW)
    span = timedelta(days=BOOKING_WINDOW_DAYS)
    naive_now = NOW.replace(tzinfo=None)
    assert window.contains(naive_now - span)
    assert window.contains(naive_now + span)
    assert window.contains(naive_now - timedelta(days=29))
    assert not window.contains(naive_now - timedelta(days=31))
    assert not window.contains(naive_now + timedelta(days=31))
