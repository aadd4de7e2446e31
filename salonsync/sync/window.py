"""Fixed booking reconciliation horizon."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone

# Fixed policy: widening the horizon is a product decision, not a setting.
BOOKING_WINDOW_DAYS = 30


@dataclass(frozen=True)
class SyncWindow:
    start_date: date
    end_date: date

    def contains(self, day: date | datetime) -> bool:
        """True when the calendar date falls inside the window (both ends inclusive)."""
        if isinstance(day, datetime):
            day = day.date()
        return self.start_date <= day <= self.end_date


def booking_window(now: datetime | None = None) -> SyncWindow:
    """Trailing 30 days through leading 30 days around ``now`` (UTC dates)."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    span = timedelta(days=BOOKING_WINDOW_DAYS)
    return SyncWindow(start_date=(now - span).date(), end_date=(now + span).date())
