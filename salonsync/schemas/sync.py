"""Sync schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class SyncResult(BaseModel):
    created: int = 0
    updated: int = 0
    skipped: int = 0
    errors: list[str] = []

    @property
    def synced(self) -> int:
        return self.created + self.updated


class EntitySyncDetail(BaseModel):
    count: int = 0
    status: str = "error"
    error: str | None = None


class SyncDetails(BaseModel):
    staff: EntitySyncDetail = Field(default_factory=EntitySyncDetail)
    services: EntitySyncDetail = Field(default_factory=EntitySyncDetail)
    bookings: EntitySyncDetail = Field(default_factory=EntitySyncDetail)


class SyncResponse(BaseModel):
    success: bool = True
    staff: int = 0
    services: int = 0
    bookings: int = 0
    details: SyncDetails = Field(default_factory=SyncDetails)


class SyncRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Raw value; the route validates it so bad ids get the {"error": ...} shape
    branch_id: str | int | None = Field(default=None, alias="branchId")


class SyncStatusEntry(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    sync_type: str
    status: str
    synced_count: int
    error_message: str | None = None
    created_at: datetime
