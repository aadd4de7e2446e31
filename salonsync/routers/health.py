"""Health and readiness checks."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..database import get_db
from ..models.sync_status import SyncStatus

log = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check(db: AsyncSession = Depends(get_db)):
    await db.execute(text("SELECT 1"))
    return {"status": "healthy", "service": "salonsync"}


@router.get("/ready")
async def readiness_check(db: AsyncSession = Depends(get_db)):
    """Ready once the schema is in place: a sync run has to write its audit rows."""
    try:
        await db.execute(select(SyncStatus.id).limit(1))
    except SQLAlchemyError as e:
        log.error("Readiness check failed: %s", e)
        return JSONResponse(
            {"status": "not_ready", "service": "salonsync", "error": "sync tables unavailable"},
            status_code=503,
        )
    return {"status": "ready", "service": "salonsync"}
