"""Async test fixtures for sync tests using SQLite."""

from __future__ import annotations

import uuid
from typing import Callable

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from salonsync.database import get_db
from salonsync.models.base import Base
from salonsync.models.branch import Branch, BranchCredential
from salonsync.platform.client import PlatformClient, PlatformCredentials

PLATFORM_URL = "https://platform.test/api/v1"
COMPANY_ID = "4564"


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest_asyncio.fixture
async def engine():
    eng = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine):
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def branch(db: AsyncSession):
    b = Branch(id=uuid.uuid4(), name="Test Branch", platform_company_id=COMPANY_ID)
    b.credential = BranchCredential(partner_token="partner-abc", user_token="user-xyz")
    db.add(b)
    await db.commit()
    await db.refresh(b)
    return b


def make_platform(creds: PlatformCredentials, handler: Callable[[httpx.Request], httpx.Response]):
    """PlatformClient whose requests are answered by ``handler``."""
    return PlatformClient(creds, base_url=PLATFORM_URL, transport=httpx.MockTransport(handler))


def platform_handler(routes: dict, seen: list | None = None):
    """Route requests by path suffix.

    A route value is either a JSON payload answered with 200 or a callable
    taking the request and returning an ``httpx.Response``.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        for suffix, response in routes.items():
            if request.url.path.endswith(suffix):
                if callable(response):
                    return response(request)
                return httpx.Response(200, json=response)
        return httpx.Response(404, text="not found")

    return handler


@pytest_asyncio.fixture
async def client(engine):
    """HTTPX async test client against the sync app."""
    from salonsync.app import app

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
