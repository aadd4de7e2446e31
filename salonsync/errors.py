"""Sync error taxonomy.

Configuration errors abort a whole sync call before any remote request is
made. Remote and persistence errors are caught per entity class by the
orchestrator and turned into audit entries.
"""

from __future__ import annotations


class SyncError(Exception):
    """Base class for all sync engine failures."""


class ConfigurationError(SyncError):
    """A branch is not configured well enough to talk to the platform."""

    status_code = 400


class MissingBranch(ConfigurationError):
    status_code = 404

    def __init__(self, branch_id=None):
        self.branch_id = branch_id
        super().__init__("Branch not found")


class MissingPlatformCompanyId(ConfigurationError):
    def __init__(self):
        super().__init__("Platform company ID not configured")


class MissingPartnerToken(ConfigurationError):
    def __init__(self):
        super().__init__("Platform integration not configured. Please add Partner Token.")


class MissingUserToken(ConfigurationError):
    """Partner-only credentials cover staff/services but not bookings."""

    def __init__(self):
        super().__init__(
            "User Token is required for syncing records. Please add it in Integration Settings."
        )


class RemoteError(SyncError):
    """The platform could not deliver a usable payload."""


class RemoteUnavailable(RemoteError):
    """Non-2xx response, transport failure, or an unreadable body."""

    def __init__(self, resource: str, status_code: int | None, body: str, message: str | None = None):
        self.resource = resource
        self.status_code = status_code
        self.body = body
        if message is None:
            status = status_code if status_code is not None else "transport"
            message = f"Platform {resource} API error: {status} - {body}"
        super().__init__(message)


class PermissionDenied(RemoteUnavailable):
    """403 from the records endpoint, with remediation guidance."""

    def __init__(self, resource: str, body: str):
        message = (
            f"Platform {resource} API error: 403 - {body}. "
            "The User Token most likely lacks permission to view records for this company. "
            "Check the user's access rights in the platform (Users -> Access rights -> "
            "schedule/API access) or generate a User Token for a user with full rights."
        )
        super().__init__(resource, 403, body, message=message)


class RemoteRejected(RemoteError):
    """The platform answered 2xx but flagged the payload with success=false."""

    def __init__(self, resource: str, upstream_message: str | None):
        self.resource = resource
        self.upstream_message = upstream_message or "Unknown error"
        super().__init__(f"Platform {resource} API error: success=false - {self.upstream_message}")


class PersistenceError(SyncError):
    """A single record could not be written to the local store."""

    def __init__(self, entity: str, platform_id: str, detail: str):
        self.entity = entity
        self.platform_id = platform_id
        self.detail = detail
        super().__init__(f"Failed to upsert {entity} {platform_id}: {detail}")
