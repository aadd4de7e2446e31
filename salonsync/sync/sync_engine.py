"""Sync orchestrator - runs the three reconcilers for one branch.

Each entity class runs inside its own failure boundary: a fetch or
persistence failure in one class is audited and reported, and the other
classes still run. Only configuration errors abort the whole call, and they
are raised before any remote request is made.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from ..platform.client import PlatformClient, PlatformCredentials
from ..schemas.sync import EntitySyncDetail, SyncResponse
from .audit import log_sync_status
from .credentials import resolve_credentials
from .import_bookings import sync_bookings
from .import_services import sync_services
from .import_staff import sync_staff

log = logging.getLogger(__name__)


def _get_platform_client(creds: PlatformCredentials) -> PlatformClient:
    """Get a platform client for a branch's credentials."""
    return PlatformClient(creds)


async def _run_entity(db: AsyncSession, branch_id: uuid.UUID, sync_type: str, step) -> EntitySyncDetail:
    detail = EntitySyncDetail()
    try:
        result = await step()
    except Exception as e:
        log.exception("Error syncing %s for branch %s", sync_type, branch_id)
        await db.rollback()
        detail.error = str(e) or e.__class__.__name__
        await log_sync_status(db, branch_id, sync_type, "error", 0, detail.error)
        return detail

    detail.count = result.synced
    detail.status = "success"
    await log_sync_status(db, branch_id, sync_type, "success", detail.count, None)
    return detail


async def run_sync(db: AsyncSession, branch_id: uuid.UUID, *, now: datetime | None = None) -> SyncResponse:
    """Run a full staff/services/bookings sync for one branch.

    Always writes exactly three audit entries once credentials resolve.
    """
    creds = await resolve_credentials(db, branch_id)
    log.info("Starting sync for branch %s (company %s)", creds.branch_id, creds.company_id)

    response = SyncResponse()
    async with _get_platform_client(creds) as platform:
        response.details.staff = await _run_entity(
            db, creds.branch_id, "staff", lambda: sync_staff(db, platform, creds)
        )
        response.details.services = await _run_entity(
            db, creds.branch_id, "services", lambda: sync_services(db, platform, creds)
        )
        response.details.bookings = await _run_entity(
            db, creds.branch_id, "bookings", lambda: sync_bookings(db, platform, creds, now=now)
        )

    response.staff = response.details.staff.count
    response.services = response.details.services.count
    response.bookings = response.details.bookings.count
    log.info(
        "Sync finished for branch %s: staff=%d services=%d bookings=%d",
        creds.branch_id, response.staff, response.services, response.bookings,
    )
    return response
