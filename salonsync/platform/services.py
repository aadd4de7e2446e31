"""Services API - company service catalog."""

from __future__ import annotations

from typing import Any, TYPE_CHECKING

from .normalize import extract_records

if TYPE_CHECKING:
    from .client import PlatformClient


class ServicesAPI:
    def __init__(self, client: "PlatformClient"):
        self._client = client

    async def list(self, company_id: str) -> list[dict[str, Any]]:
        """List all services for a company. Partner-only auth is sufficient."""
        payload = await self._client._get(f"/company/{company_id}/services", resource="services")
        return extract_records(payload)
