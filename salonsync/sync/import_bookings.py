"""Import bookings (platform records) from the platform.

Unlike staff and services, every mutable booking field is re-derived and
overwritten on each pass: remote cancellations and reschedules must show up
locally, and staff/service links that were unresolved on an earlier pass
fill in once those entities have been synced.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timedelta

from sqlalchemy.ext.asyncio import AsyncSession

from ..models.booking import Booking
from ..platform.client import PlatformClient, PlatformCredentials
from ..schemas.sync import SyncResult
from .field_mapper import (
    DEFAULT_DURATION_MINUTES,
    as_int,
    booking_status,
    client_fields,
    first_service,
    parse_remote,
    platform_id,
    record_staff_id,
    to_utc,
)
from .identity import IdentityResolver
from .upsert import reconcile_record
from .window import SyncWindow, booking_window

log = logging.getLogger(__name__)


async def _seance_minutes(
    record: dict,
    service: dict | None,
    service_id: uuid.UUID | None,
    resolver: IdentityResolver,
) -> int:
    """Record length -> listed service length -> synced service duration -> 60."""
    minutes = as_int(record.get("seance_length"))
    if minutes is None and service is not None:
        minutes = as_int(service.get("seance_length"))
    if minutes is None:
        minutes = await resolver.service_duration(service_id)
    return minutes or DEFAULT_DURATION_MINUTES


async def import_bookings(
    db: AsyncSession,
    branch_id: uuid.UUID,
    records: list[dict],
    *,
    window: SyncWindow | None = None,
) -> SyncResult:
    """Upsert bookings by (branch, platform record id).

    Records whose start falls outside ``window`` are skipped and existing
    rows for them are left as they are.
    """
    result = SyncResult()
    resolver = IdentityResolver(db, branch_id)

    for record in records:
        remote_id = platform_id(record.get("id"))
        if remote_id is None:
            result.skipped += 1
            continue

        remote_start = parse_remote(record.get("datetime"))
        if remote_start is None:
            result.skipped += 1
            result.errors.append(
                f"Booking {remote_id}: unparseable datetime {record.get('datetime')!r}"
            )
            continue
        # The platform selects records by its own calendar date, not the UTC one
        if window is not None and not window.contains(remote_start.date()):
            result.skipped += 1
            continue
        starts_at = to_utc(remote_start)

        staff_id = await resolver.resolve("staff", record_staff_id(record))
        service = first_service(record)
        service_id = await resolver.resolve("services", service.get("id")) if service else None
        minutes = await _seance_minutes(record, service, service_id, resolver)

        fields = {
            "staff_id": staff_id,
            "service_id": service_id,
            "starts_at_utc": starts_at,
            "ends_at_utc": starts_at + timedelta(minutes=minutes),
            "status": booking_status(record.get("attendance")),
            # Mobile status is established elsewhere; this feed cannot tell.
            "is_mobile": False,
            **client_fields(record),
        }
        await reconcile_record(
            db, result,
            entity="booking", model=Booking, key_attr="platform_record_id",
            branch_id=branch_id, remote_id=remote_id, fields=fields,
        )

    log.info(
        "Bookings import for branch %s: %d created, %d updated, %d skipped, %d failed",
        branch_id, result.created, result.updated, result.skipped, len(result.errors),
    )
    return result


async def sync_bookings(
    db: AsyncSession,
    platform: PlatformClient,
    creds: PlatformCredentials,
    *,
    now: datetime | None = None,
) -> SyncResult:
    window = booking_window(now)
    records = await platform.records.list(creds.company_id, window.start_date, window.end_date)
    log.info("Found %d bookings between %s and %s", len(records), window.start_date, window.end_date)
    return await import_bookings(db, creds.branch_id, records, window=window)
