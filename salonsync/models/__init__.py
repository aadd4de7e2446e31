"""Sync models - re-exports all models and Base.metadata."""

from .base import Base, UUIDMixin, TimestampMixin, BranchScopedMixin, PlatformSyncMixin
from .branch import Branch, BranchCredential
from .staff import Staff
from .service import Service
from .booking import Booking
from .sync_status import SyncStatus

__all__ = [
    "Base",
    "UUIDMixin",
    "TimestampMixin",
    "BranchScopedMixin",
    "PlatformSyncMixin",
    "Branch",
    "BranchCredential",
    "Staff",
    "Service",
    "Booking",
    "SyncStatus",
]
