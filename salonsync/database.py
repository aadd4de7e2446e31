"""Async database engine and session factory."""

from __future__ import annotations

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from .config import settings


def engine_options(database_url: str) -> dict[str, Any]:
    """Per-backend engine options.

    SQLite is local and single-file; server databases get connection
    liveness checks since a sync run can sit idle on slow platform calls.
    """
    options: dict[str, Any] = {"echo": settings.echo_sql}
    if not database_url.startswith("sqlite"):
        options["pool_pre_ping"] = True
    return options


engine = create_async_engine(settings.database_url, **engine_options(settings.database_url))
async_session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_db():
    """FastAPI dependency that yields a session; each sync step commits on its own."""
    async with async_session_factory() as session:
        yield session
