"""Health endpoint tests for the sync app."""

from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from salonsync.database import engine_options


@pytest.mark.asyncio
async def test_health_endpoint(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy", "service": "salonsync"}


@pytest.mark.asyncio
async def test_ready_endpoint(client: AsyncClient):
    resp = await client.get("/ready")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ready"


@pytest.mark.asyncio
async def test_ready_without_schema_is_503():
    from salonsync.app import app
    from salonsync.database import get_db

    bare = create_async_engine("sqlite+aiosqlite:///:memory:")
    session_factory = async_sessionmaker(bare, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
            resp = await c.get("/ready")
    finally:
        app.dependency_overrides.clear()
        await bare.dispose()

    assert resp.status_code == 503
    assert resp.json()["status"] == "not_ready"


def test_engine_options_per_backend():
    assert "pool_pre_ping" not in engine_options("sqlite+aiosqlite:///:memory:")
    assert engine_options("postgresql+asyncpg://db/sync")["pool_pre_ping"] is True
