"""Sync engine configuration via pydantic-settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class SyncSettings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///salonsync.db"
    echo_sql: bool = False
    app_title: str = "Salon Sync"
    log_level: str = "INFO"
    cors_origins: str = "*"

    # Booking platform
    platform_base_url: str = "https://api.yclients.com/api/v1"
    platform_accept: str = "application/vnd.yclients.v2+json"
    platform_timeout_seconds: float = 30.0

    model_config = {"env_prefix": "SALONSYNC_", "env_file": ".env", "extra": "ignore"}

    @property
    def cors_origins_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


settings = SyncSettings()
