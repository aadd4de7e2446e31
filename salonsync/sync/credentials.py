"""Credential resolution for a branch's platform integration."""

from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..errors import MissingBranch, MissingPartnerToken, MissingPlatformCompanyId
from ..models.branch import Branch, BranchCredential
from ..platform.client import PlatformCredentials


async def resolve_credentials(db: AsyncSession, branch_id: uuid.UUID) -> PlatformCredentials:
    """Load the branch and its credential pair.

    The user token is optional here; whether it is needed depends on the
    entity class (see PlatformCredentials.authorization).
    """
    branch = (await db.execute(select(Branch).where(Branch.id == branch_id))).scalar_one_or_none()
    if branch is None:
        raise MissingBranch(branch_id)

    company_id = (branch.platform_company_id or "").strip()
    if not company_id:
        raise MissingPlatformCompanyId()

    stmt = select(BranchCredential).where(BranchCredential.branch_id == branch_id)
    cred = (await db.execute(stmt)).scalar_one_or_none()
    partner_token = (cred.partner_token or "").strip() if cred else ""
    if not partner_token:
        raise MissingPartnerToken()

    user_token = (cred.user_token or "").strip() or None
    return PlatformCredentials(
        branch_id=branch.id,
        branch_name=branch.name,
        company_id=company_id,
        partner_token=partner_token,
        user_token=user_token,
    )
