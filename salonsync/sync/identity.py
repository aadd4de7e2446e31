"""Platform id -> local id resolution within one branch."""

from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.service import Service
from ..models.staff import Staff
from .field_mapper import platform_id

# entity class -> (model, platform id column)
_LOOKUPS = {
    "staff": (Staff, Staff.platform_staff_id),
    "services": (Service, Service.platform_service_id),
}


class IdentityResolver:
    """Point lookups against already-synced staff/services.

    Never creates rows: an unknown platform id resolves to None so the
    booking is stored with a null link that a later pass fills in.
    """

    def __init__(self, db: AsyncSession, branch_id: uuid.UUID):
        self.db = db
        self.branch_id = branch_id
        self._cache: dict[tuple[str, str], uuid.UUID | None] = {}

    async def resolve(self, entity_class: str, remote_id) -> uuid.UUID | None:
        if entity_class not in _LOOKUPS:
            raise ValueError(f"Unknown entity class: {entity_class}")
        pid = platform_id(remote_id)
        if pid is None:
            return None

        key = (entity_class, pid)
        if key in self._cache:
            return self._cache[key]

        model, column = _LOOKUPS[entity_class]
        stmt = select(model.id).where(model.branch_id == self.branch_id, column == pid)
        local_id = (await self.db.execute(stmt)).scalar_one_or_none()
        self._cache[key] = local_id
        return local_id

    async def service_duration(self, local_service_id: uuid.UUID | None) -> int | None:
        """Duration of an already-synced service, used when a record omits it."""
        if local_service_id is None:
            return None
        stmt = select(Service.duration_minutes).where(Service.id == local_service_id)
        return (await self.db.execute(stmt)).scalar_one_or_none()
