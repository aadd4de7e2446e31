"""Import staff from the platform."""

from __future__ import annotations

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from ..models.staff import Staff
from ..platform.client import PlatformClient, PlatformCredentials
from ..schemas.sync import SyncResult
from .field_mapper import platform_id, staff_to_local
from .upsert import reconcile_record

log = logging.getLogger(__name__)


async def import_staff(db: AsyncSession, branch_id: uuid.UUID, staff_data: list[dict]) -> SyncResult:
    """Upsert staff by (branch, platform staff id). Absent staff are left untouched."""
    result = SyncResult()
    for item in staff_data:
        remote_id = platform_id(item.get("id"))
        if remote_id is None:
            result.skipped += 1
            continue
        await reconcile_record(
            db, result,
            entity="staff", model=Staff, key_attr="platform_staff_id",
            branch_id=branch_id, remote_id=remote_id, fields=staff_to_local(item),
        )

    log.info(
        "Staff import for branch %s: %d created, %d updated, %d skipped, %d failed",
        branch_id, result.created, result.updated, result.skipped, len(result.errors),
    )
    return result


async def sync_staff(db: AsyncSession, platform: PlatformClient, creds: PlatformCredentials) -> SyncResult:
    staff_data = await platform.staff.list(creds.company_id)
    log.info("Found %d staff members", len(staff_data))
    return await import_staff(db, creds.branch_id, staff_data)
