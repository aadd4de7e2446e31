"""Alembic environment - runs migrations with a sync driver.

The database URL comes from application settings; async driver suffixes are
stripped so Alembic can use a plain synchronous connection.
"""

from __future__ import annotations

from alembic import context
from sqlalchemy import create_engine, pool

from salonsync.config import settings
from salonsync.models import Base

config = context.config
target_metadata = Base.metadata

_ASYNC_DRIVERS = {
    "+aiosqlite": "",
    "+asyncpg": "+psycopg",
}


def _sync_url(url: str) -> str:
    for async_driver, sync_driver in _ASYNC_DRIVERS.items():
        url = url.replace(async_driver, sync_driver)
    return url


def run_migrations_offline() -> None:
    context.configure(
        url=_sync_url(settings.database_url),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    engine = create_engine(_sync_url(settings.database_url), poolclass=pool.NullPool)
    with engine.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()
    engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
