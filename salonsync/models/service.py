"""Service (catalog item) model."""

from __future__ import annotations

from sqlalchemy import Boolean, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, UUIDMixin, TimestampMixin, BranchScopedMixin, PlatformSyncMixin


class Service(UUIDMixin, TimestampMixin, BranchScopedMixin, PlatformSyncMixin, Base):
    __tablename__ = "service"
    __table_args__ = (
        UniqueConstraint("branch_id", "platform_service_id", name="uq_service_branch_platform_id"),
    )

    platform_service_id: Mapped[str] = mapped_column(String(100), index=True)
    name: Mapped[str] = mapped_column(String(200))
    duration_minutes: Mapped[int] = mapped_column(Integer, default=60)
    is_mobile: Mapped[bool] = mapped_column(Boolean, default=False)

    def __repr__(self) -> str:
        return f"<Service {self.name!r}>"
