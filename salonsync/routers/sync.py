"""Sync routes - manual/periodic trigger and status for the dashboard."""

from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..errors import ConfigurationError
from ..schemas.sync import SyncRequest, SyncStatusEntry
from ..sync.audit import latest_sync_status, list_sync_history, summarize_latest

log = logging.getLogger(__name__)

router = APIRouter(tags=["sync"])


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


@router.post("/sync")
async def trigger_sync(body: SyncRequest | None = None, db: AsyncSession = Depends(get_db)):
    if body is None or body.branch_id in (None, ""):
        return _error("branchId is required", 400)
    try:
        branch_id = uuid.UUID(str(body.branch_id))
    except ValueError:
        return _error(f"Invalid branchId: {body.branch_id}", 400)

    try:
        from ..sync.sync_engine import run_sync
        result = await run_sync(db, branch_id)
    except ConfigurationError as e:
        return _error(str(e), e.status_code)
    except Exception as e:
        log.exception("Sync error for branch %s", branch_id)
        return _error(str(e) or "Unknown error", 500)

    return result.model_dump()


@router.get("/branches/{branch_id}/sync-status")
async def sync_status(branch_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    return summarize_latest(await latest_sync_status(db, branch_id))


@router.get("/branches/{branch_id}/sync-history", response_model=list[SyncStatusEntry])
async def sync_history(
    branch_id: uuid.UUID,
    sync_type: str | None = None,
    limit: int = Query(50, ge=1, le=500),
    db: AsyncSession = Depends(get_db),
):
    return await list_sync_history(db, branch_id, sync_type=sync_type, limit=limit)
