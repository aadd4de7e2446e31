"""Records API - bookings within a date window."""

from __future__ import annotations

from datetime import date
from typing import Any, TYPE_CHECKING

from ..errors import PermissionDenied, RemoteUnavailable
from .normalize import extract_records

if TYPE_CHECKING:
    from .client import PlatformClient


class RecordsAPI:
    """Records API.

    Usage:
        async with PlatformClient(credentials) as platform:
            records = await platform.records.list("4564", date(2025, 5, 1), date(2025, 6, 30))
    """

    def __init__(self, client: "PlatformClient"):
        self._client = client

    async def list(self, company_id: str, start_date: date, end_date: date) -> list[dict[str, Any]]:
        """List records with a start date in ``[start_date, end_date]``.

        Requires the compound partner + user credential.
        """
        try:
            payload = await self._client._get(
                f"/records/{company_id}",
                resource="records",
                require_user=True,
                start_date=start_date.isoformat(),
                end_date=end_date.isoformat(),
            )
        except RemoteUnavailable as exc:
            if exc.status_code == 403:
                raise PermissionDenied("records", exc.body) from exc
            raise
        return extract_records(payload)
