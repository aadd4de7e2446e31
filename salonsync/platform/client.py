"""Booking platform API client - typed wrapper over the platform REST API.

The platform uses a two-part authorization header: a long-lived partner token
and a short-lived user token (``Bearer <partner>, User <user>``). Staff and
service endpoints accept partner-only auth; the records endpoint needs both.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

import httpx

from ..config import settings
from ..errors import MissingUserToken, RemoteRejected, RemoteUnavailable

if TYPE_CHECKING:
    from .staff import StaffAPI
    from .services import ServicesAPI
    from .records import RecordsAPI

log = logging.getLogger(__name__)


@dataclass
class PlatformCredentials:
    """Resolved per-branch platform credentials."""

    branch_id: uuid.UUID
    company_id: str
    partner_token: str
    user_token: str | None = None
    branch_name: str | None = None

    @property
    def has_user_token(self) -> bool:
        return bool(self.user_token)

    def authorization(self, require_user: bool = False) -> str:
        """Compose the Authorization header value.

        The user part is included whenever a user token is stored. Raises
        MissingUserToken when ``require_user`` is set and there is none.
        """
        if self.user_token:
            return f"Bearer {self.partner_token}, User {self.user_token}"
        if require_user:
            raise MissingUserToken()
        return f"Bearer {self.partner_token}"

    def to_dict(self) -> dict[str, Any]:
        """Export credentials as dictionary with tokens masked."""
        return {
            "branch_id": str(self.branch_id),
            "company_id": self.company_id,
            "partner_token": (self.partner_token[:6] + "...") if self.partner_token else None,
            "user_token": (self.user_token[:6] + "...") if self.user_token else None,
        }


class PlatformClient:
    """Booking platform client with per-resource sub-APIs.

    Usage:
        async with PlatformClient(credentials) as platform:
            staff = await platform.staff.list(credentials.company_id)
    """

    def __init__(
        self,
        credentials: PlatformCredentials,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.credentials = credentials
        self.base_url = base_url or settings.platform_base_url
        self.timeout = timeout if timeout is not None else settings.platform_timeout_seconds
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

        self._staff: StaffAPI | None = None
        self._services: ServicesAPI | None = None
        self._records: RecordsAPI | None = None

    async def __aenter__(self) -> "PlatformClient":
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
            headers={
                "Accept": settings.platform_accept,
                "Content-Type": "application/json",
            },
        )

        from .staff import StaffAPI
        from .services import ServicesAPI
        from .records import RecordsAPI

        self._staff = StaffAPI(self)
        self._services = ServicesAPI(self)
        self._records = RecordsAPI(self)
        return self

    async def __aexit__(self, *args):
        if self._client:
            await self._client.aclose()

    @property
    def staff(self) -> "StaffAPI":
        """Staff API."""
        if not self._staff:
            raise RuntimeError("Client not initialized. Use 'async with' context.")
        return self._staff

    @property
    def services(self) -> "ServicesAPI":
        """Services API."""
        if not self._services:
            raise RuntimeError("Client not initialized. Use 'async with' context.")
        return self._services

    @property
    def records(self) -> "RecordsAPI":
        """Records (bookings) API."""
        if not self._records:
            raise RuntimeError("Client not initialized. Use 'async with' context.")
        return self._records

    async def _get(
        self,
        endpoint: str,
        *,
        resource: str,
        require_user: bool = False,
        **params,
    ) -> Any:
        """Make a single GET request and return the decoded JSON payload.

        Raises RemoteUnavailable for transport failures, non-2xx statuses and
        unreadable bodies; RemoteRejected when the payload says success=false.
        """
        if self._client is None:
            raise RuntimeError("Client not initialized. Use 'async with' context.")

        auth = self.credentials.authorization(require_user=require_user)
        log.info("Fetching %s from %s (auth %s...)", resource, endpoint, auth[:16])

        try:
            resp = await self._client.get(
                endpoint, params=params or None, headers={"Authorization": auth}
            )
        except httpx.HTTPError as exc:
            log.error("Platform %s request failed: %s", resource, exc)
            raise RemoteUnavailable(resource, None, str(exc) or exc.__class__.__name__) from exc

        if not resp.is_success:
            log.error("Platform %s API error response (%s): %s", resource, resp.status_code, resp.text)
            raise RemoteUnavailable(resource, resp.status_code, resp.text)

        try:
            payload = resp.json()
        except ValueError as exc:
            raise RemoteUnavailable(resource, resp.status_code, resp.text) from exc

        if isinstance(payload, dict) and payload.get("success") is False:
            meta = payload.get("meta")
            message = meta.get("message") if isinstance(meta, dict) else None
            log.error("Platform %s API success=false: %s", resource, meta)
            raise RemoteRejected(resource, message)

        return payload
