"""Sync audit log - one append-only row per entity class per sync run."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, BranchScopedMixin

SYNC_TYPES = ("staff", "services", "bookings")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SyncStatus(BranchScopedMixin, Base):
    __tablename__ = "sync_status"

    # Integer PK keeps insertion order stable for "latest entry" queries.
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    sync_type: Mapped[str] = mapped_column(String(20), index=True)  # staff, services, bookings
    status: Mapped[str] = mapped_column(String(20))  # success, error
    synced_count: Mapped[int] = mapped_column(Integer, default=0)
    error_message: Mapped[str | None] = mapped_column(Text, default=None)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)

    def __repr__(self) -> str:
        return f"<SyncStatus {self.sync_type} {self.status}>"
