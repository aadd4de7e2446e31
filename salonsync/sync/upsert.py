"""Natural-key upsert shared by the reconcilers."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..errors import PersistenceError
from ..models.base import Base
from ..schemas.sync import SyncResult

log = logging.getLogger(__name__)


async def upsert_by_natural_key(
    db: AsyncSession,
    model: type[Base],
    key_attr: str,
    branch_id: uuid.UUID,
    remote_id: str,
    fields: dict[str, Any],
) -> bool:
    """Insert or overwrite the row keyed by (branch_id, remote_id).

    Commits on success. Returns True when a new row was created.
    """
    key_column = getattr(model, key_attr)
    stmt = select(model).where(model.branch_id == branch_id, key_column == remote_id)
    row = (await db.execute(stmt)).scalar_one_or_none()

    created = row is None
    if created:
        row = model(branch_id=branch_id, **{key_attr: remote_id})
        db.add(row)

    for name, value in fields.items():
        setattr(row, name, value)
    row.last_synced_at = datetime.now(timezone.utc)

    await db.commit()
    return created


async def reconcile_record(
    db: AsyncSession,
    result: SyncResult,
    *,
    entity: str,
    model: type[Base],
    key_attr: str,
    branch_id: uuid.UUID,
    remote_id: str,
    fields: dict[str, Any],
) -> None:
    """Upsert one record; a failure is logged and recorded, never raised.

    Each record commits on its own, so rolling back a failed one leaves the
    rest of the batch intact.
    """
    try:
        created = await upsert_by_natural_key(db, model, key_attr, branch_id, remote_id, fields)
    except SQLAlchemyError as exc:
        await db.rollback()
        err = PersistenceError(entity, remote_id, str(exc))
        log.error("%s", err)
        result.errors.append(str(err))
        return

    if created:
        result.created += 1
    else:
        result.updated += 1
