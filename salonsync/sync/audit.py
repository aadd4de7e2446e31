"""Sync audit log - append-only outcome per entity class per run."""

from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.sync_status import SYNC_TYPES, SyncStatus


async def log_sync_status(
    db: AsyncSession,
    branch_id: uuid.UUID,
    sync_type: str,
    status: str,
    synced_count: int,
    error_message: str | None = None,
) -> SyncStatus:
    entry = SyncStatus(
        branch_id=branch_id,
        sync_type=sync_type,
        status=status,
        synced_count=synced_count,
        error_message=error_message,
    )
    db.add(entry)
    await db.commit()
    return entry


async def list_sync_history(
    db: AsyncSession,
    branch_id: uuid.UUID,
    *,
    sync_type: str | None = None,
    limit: int = 50,
) -> list[SyncStatus]:
    stmt = select(SyncStatus).where(SyncStatus.branch_id == branch_id)
    if sync_type:
        stmt = stmt.where(SyncStatus.sync_type == sync_type)
    stmt = stmt.order_by(SyncStatus.id.desc()).limit(limit)
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def latest_sync_status(db: AsyncSession, branch_id: uuid.UUID) -> dict[str, SyncStatus | None]:
    """Most recent audit entry per entity class (None if never synced)."""
    latest: dict[str, SyncStatus | None] = {}
    for sync_type in SYNC_TYPES:
        entries = await list_sync_history(db, branch_id, sync_type=sync_type, limit=1)
        latest[sync_type] = entries[0] if entries else None
    return latest


def summarize_latest(latest: dict[str, SyncStatus | None]) -> dict[str, dict | None]:
    """Shape for the dashboard status widget: status/count/error/when per class."""
    return {
        sync_type: (
            {
                "status": entry.status,
                "count": entry.synced_count,
                "error": entry.error_message,
                "synced_at": entry.created_at,
            }
            if entry
            else None
        )
        for sync_type, entry in latest.items()
    }
