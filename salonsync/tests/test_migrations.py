"""Smoke tests for Alembic migrations."""

from __future__ import annotations

from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from salonsync.config import settings


def test_alembic_upgrade_creates_sync_tables(tmp_path: Path, monkeypatch):
    db_path = tmp_path / "salonsync_migrations.db"
    monkeypatch.setattr(settings, "database_url", f"sqlite+aiosqlite:///{db_path}")

    package_root = Path(__file__).resolve().parents[1]
    cfg = Config(str(package_root / "alembic.ini"))
    command.upgrade(cfg, "head")

    engine = create_engine(f"sqlite:///{db_path}")
    try:
        inspector = inspect(engine)
        tables = set(inspector.get_table_names())
        booking_columns = {c["name"] for c in inspector.get_columns("booking")}
    finally:
        engine.dispose()

    assert {"branch", "integration_settings", "staff", "service", "booking", "sync_status"} <= tables
    assert {"platform_record_id", "starts_at_utc", "ends_at_utc", "staff_id", "service_id"} <= booking_columns

    command.downgrade(cfg, "base")
