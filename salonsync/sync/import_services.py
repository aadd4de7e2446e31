"""Import services from the platform."""

from __future__ import annotations

import logging
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from ..models.service import Service
from ..platform.client import PlatformClient, PlatformCredentials
from ..schemas.sync import SyncResult
from .field_mapper import platform_id, service_to_local
from .upsert import reconcile_record

log = logging.getLogger(__name__)


async def import_services(db: AsyncSession, branch_id: uuid.UUID, services_data: list[dict]) -> SyncResult:
    """Upsert services by (branch, platform service id)."""
    result = SyncResult()
    for item in services_data:
        remote_id = platform_id(item.get("id"))
        if remote_id is None:
            result.skipped += 1
            continue
        await reconcile_record(
            db, result,
            entity="service", model=Service, key_attr="platform_service_id",
            branch_id=branch_id, remote_id=remote_id, fields=service_to_local(item),
        )

    log.info(
        "Services import for branch %s: %d created, %d updated, %d skipped, %d failed",
        branch_id, result.created, result.updated, result.skipped, len(result.errors),
    )
    return result


async def sync_services(db: AsyncSession, platform: PlatformClient, creds: PlatformCredentials) -> SyncResult:
    services_data = await platform.services.list(creds.company_id)
    log.info("Found %d services", len(services_data))
    return await import_services(db, creds.branch_id, services_data)
