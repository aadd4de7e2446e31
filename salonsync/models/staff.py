"""Staff model."""

from __future__ import annotations

from sqlalchemy import Boolean, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, UUIDMixin, TimestampMixin, BranchScopedMixin, PlatformSyncMixin


class Staff(UUIDMixin, TimestampMixin, BranchScopedMixin, PlatformSyncMixin, Base):
    __tablename__ = "staff"
    __table_args__ = (
        UniqueConstraint("branch_id", "platform_staff_id", name="uq_staff_branch_platform_id"),
    )

    platform_staff_id: Mapped[str] = mapped_column(String(100), index=True)
    name: Mapped[str] = mapped_column(String(200))
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)

    def __repr__(self) -> str:
        return f"<Staff {self.name!r}>"
