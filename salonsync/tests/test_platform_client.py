"""Test the platform client against a mocked transport."""

from __future__ import annotations

import uuid
from datetime import date

import httpx
import pytest

from salonsync.errors import (
    MissingUserToken,
    PermissionDenied,
    RemoteRejected,
    RemoteUnavailable,
)
from salonsync.platform.client import PlatformClient, PlatformCredentials
from salonsync.tests.conftest import make_platform, platform_handler


def _creds(user_token: str | None = "user-xyz") -> PlatformCredentials:
    return PlatformCredentials(
        branch_id=uuid.uuid4(), company_id="4564", partner_token="partner-abc", user_token=user_token
    )


class TestCredentials:
    def test_compound_authorization(self):
        assert _creds().authorization() == "Bearer partner-abc, User user-xyz"

    def test_partner_only_authorization(self):
        assert _creds(None).authorization() == "Bearer partner-abc"

    def test_require_user_without_token(self):
        with pytest.raises(MissingUserToken):
            _creds(None).authorization(require_user=True)

    def test_to_dict_masks_tokens(self):
        data = _creds().to_dict()
        assert data["partner_token"] == "partne..."
        assert data["user_token"] == "user-x..."
        assert "partner-abc" not in str(data)


class TestPlatformClient:
    @pytest.mark.asyncio
    async def test_not_initialized(self):
        client = PlatformClient(_creds())
        with pytest.raises(RuntimeError):
            client.staff

    @pytest.mark.asyncio
    async def test_staff_request_headers(self):
        seen: list[httpx.Request] = []
        handler = platform_handler({"/staff": [{"id": 1, "name": "Anna"}]}, seen)
        async with make_platform(_creds(), handler) as platform:
            staff = await platform.staff.list("4564")

        assert staff == [{"id": 1, "name": "Anna"}]
        request = seen[0]
        assert request.url.path == "/api/v1/company/4564/staff"
        assert request.headers["Accept"] == "application/vnd.yclients.v2+json"
        assert request.headers["Authorization"] == "Bearer partner-abc, User user-xyz"

    @pytest.mark.asyncio
    async def test_services_partner_only(self):
        seen: list[httpx.Request] = []
        handler = platform_handler({"/services": {"success": True, "data": [{"id": 10}]}}, seen)
        async with make_platform(_creds(None), handler) as platform:
            services = await platform.services.list("4564")

        assert services == [{"id": 10}]
        assert seen[0].headers["Authorization"] == "Bearer partner-abc"

    @pytest.mark.asyncio
    async def test_records_window_params(self):
        seen: list[httpx.Request] = []
        handler = platform_handler({"/records/4564": {"data": [{"id": 100}]}}, seen)
        async with make_platform(_creds(), handler) as platform:
            records = await platform.records.list("4564", date(2025, 5, 11), date(2025, 7, 10))

        assert records == [{"id": 100}]
        assert seen[0].url.params["start_date"] == "2025-05-11"
        assert seen[0].url.params["end_date"] == "2025-07-10"

    @pytest.mark.asyncio
    async def test_records_need_user_token_before_any_request(self):
        seen: list[httpx.Request] = []
        handler = platform_handler({"/records/4564": []}, seen)
        async with make_platform(_creds(None), handler) as platform:
            with pytest.raises(MissingUserToken):
                await platform.records.list("4564", date(2025, 5, 1), date(2025, 6, 30))
        assert seen == []

    @pytest.mark.asyncio
    async def test_records_403_is_permission_denied(self):
        handler = platform_handler(
            {"/records/4564": lambda r: httpx.Response(403, text='{"message":"Access denied"}')}
        )
        async with make_platform(_creds(), handler) as platform:
            with pytest.raises(PermissionDenied) as exc_info:
                await platform.records.list("4564", date(2025, 5, 1), date(2025, 6, 30))

        err = exc_info.value
        assert isinstance(err, RemoteUnavailable)
        assert err.status_code == 403
        assert "Access denied" in str(err)
        assert "access rights" in str(err)

    @pytest.mark.asyncio
    async def test_staff_403_is_plain_unavailable(self):
        handler = platform_handler({"/staff": lambda r: httpx.Response(403, text="forbidden")})
        async with make_platform(_creds(), handler) as platform:
            with pytest.raises(RemoteUnavailable) as exc_info:
                await platform.staff.list("4564")
        assert not isinstance(exc_info.value, PermissionDenied)

    @pytest.mark.asyncio
    async def test_non_2xx_is_unavailable(self):
        handler = platform_handler({"/services": lambda r: httpx.Response(502, text="bad gateway")})
        async with make_platform(_creds(), handler) as platform:
            with pytest.raises(RemoteUnavailable) as exc_info:
                await platform.services.list("4564")
        assert exc_info.value.status_code == 502
        assert str(exc_info.value) == "Platform services API error: 502 - bad gateway"

    @pytest.mark.asyncio
    async def test_transport_error_is_unavailable(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        async with make_platform(_creds(), handler) as platform:
            with pytest.raises(RemoteUnavailable) as exc_info:
                await platform.staff.list("4564")
        assert exc_info.value.status_code is None
        assert "timed out" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_non_json_body_is_unavailable(self):
        handler = platform_handler({"/staff": lambda r: httpx.Response(200, text="<html>")})
        async with make_platform(_creds(), handler) as platform:
            with pytest.raises(RemoteUnavailable):
                await platform.staff.list("4564")

    @pytest.mark.asyncio
    async def test_success_false_is_rejected(self):
        handler = platform_handler(
            {"/staff": {"success": False, "data": None, "meta": {"message": "Company not found"}}}
        )
        async with make_platform(_creds(), handler) as platform:
            with pytest.raises(RemoteRejected) as exc_info:
                await platform.staff.list("4564")
        assert exc_info.value.upstream_message == "Company not found"

    @pytest.mark.asyncio
    async def test_success_false_without_message(self):
        handler = platform_handler({"/services": {"success": False}})
        async with make_platform(_creds(), handler) as platform:
            with pytest.raises(RemoteRejected, match="Unknown error"):
                await platform.services.list("4564")
