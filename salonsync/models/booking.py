"""Booking model.

Start/end are stored as naive UTC instants; the platform does not send an
explicit end time, so ``ends_at_utc`` is derived from the seance length.
"""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, UUIDMixin, TimestampMixin, BranchScopedMixin, PlatformSyncMixin


class Booking(UUIDMixin, TimestampMixin, BranchScopedMixin, PlatformSyncMixin, Base):
    __tablename__ = "booking"
    __table_args__ = (
        UniqueConstraint("branch_id", "platform_record_id", name="uq_booking_branch_platform_id"),
        Index("ix_booking_branch_start", "branch_id", "starts_at_utc"),
    )

    platform_record_id: Mapped[str] = mapped_column(String(100), index=True)
    staff_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("staff.id", ondelete="SET NULL"), default=None
    )
    service_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("service.id", ondelete="SET NULL"), default=None
    )
    starts_at_utc: Mapped[datetime] = mapped_column(DateTime)
    ends_at_utc: Mapped[datetime] = mapped_column(DateTime)
    status: Mapped[str] = mapped_column(String(20), default="booked")  # booked/cancelled/completed
    is_mobile: Mapped[bool] = mapped_column(Boolean, default=False)
    client_name: Mapped[str | None] = mapped_column(String(200), default=None)
    client_phone: Mapped[str | None] = mapped_column(String(50), default=None)

    # Relationships
    staff: Mapped["Staff | None"] = relationship()  # noqa: F821
    service: Mapped["Service | None"] = relationship()  # noqa: F821

    def __repr__(self) -> str:
        return f"<Booking {self.platform_record_id!r} {self.status}>"
