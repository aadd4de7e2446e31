"""Branch and per-branch platform credential models."""

from __future__ import annotations

import uuid

from sqlalchemy import ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, UUIDMixin, TimestampMixin


class Branch(UUIDMixin, TimestampMixin, Base):
    """A tenant's physical location. Branches without a company id never sync."""

    __tablename__ = "branch"

    name: Mapped[str] = mapped_column(String(200))
    platform_company_id: Mapped[str | None] = mapped_column(String(100), default=None)

    credential: Mapped["BranchCredential | None"] = relationship(
        back_populates="branch", cascade="all, delete-orphan", uselist=False
    )

    def __repr__(self) -> str:
        return f"<Branch {self.name!r}>"


class BranchCredential(UUIDMixin, TimestampMixin, Base):
    """Partner + user token pair. Written by the settings UI, read-only to sync."""

    __tablename__ = "integration_settings"

    branch_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("branch.id", ondelete="CASCADE"), unique=True, index=True
    )
    partner_token: Mapped[str | None] = mapped_column(Text, default=None)
    user_token: Mapped[str | None] = mapped_column(Text, default=None)

    branch: Mapped["Branch"] = relationship(back_populates="credential")
