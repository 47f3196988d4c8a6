"""
Seller profile repository — data access for the seller_profiles table.

Repository rules:
- Pure data-access logic only
- Every function receives AsyncSession explicitly
- Functions flush, but never commit
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from findora.core.constants import VerificationStatus
from findora.db.models.base import utcnow
from findora.db.models.seller_profile import SellerProfile


async def create_seller_profile(
    db: AsyncSession,
    *,
    user_id: int,
    terms_accepted_at: datetime | None = None,
    **fields: Any,
) -> SellerProfile:
    """Insert a PENDING seller profile for `user_id`.

    Raises sqlalchemy IntegrityError on flush when the user already has one.
    """
    profile = SellerProfile(
        user_id=user_id,
        terms_accepted_at=terms_accepted_at,
        verification_status=VerificationStatus.PENDING.value,
        **fields,
    )
    db.add(profile)
    await db.flush()
    return profile


async def get_seller_profile_by_user_id(db: AsyncSession, user_id: int) -> SellerProfile | None:
    """Fetch the profile owned by a user."""
    stmt = select(SellerProfile).where(SellerProfile.user_id == user_id)
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def count_seller_profiles_for_user(db: AsyncSession, user_id: int) -> int:
    """Number of profiles stored for a user (0 or 1 while the invariant holds)."""
    stmt = select(func.count()).select_from(SellerProfile).where(SellerProfile.user_id == user_id)
    result = await db.execute(stmt)
    return result.scalar_one()


async def mark_documents_submitted(db: AsyncSession, profile: SellerProfile) -> SellerProfile:
    """Stamp the moment the seller handed in a complete document set."""
    profile.documents_submitted_at = utcnow()
    await db.flush()
    return profile
