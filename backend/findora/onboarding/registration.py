"""
Seller registration and profile lookup.

Registration writes the profile row and promotes the user to SELLER in one
transaction: both become durable on the same commit or neither does.  The
unique constraint on `seller_profiles.user_id` settles races between two
registrations from the same user; the loser gets ConflictError.
"""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from findora.api.schemas.seller import SellerRegistrationRequest
from findora.core.constants import UserRole
from findora.core.errors import ConflictError, InternalError, NotFoundError
from findora.core.logging import get_logger
from findora.db.models.base import utcnow
from findora.db.models.seller_profile import SellerProfile
from findora.db.models.user import User
from findora.repositories import seller_profiles as seller_repository
from findora.repositories import users as user_repository

logger = get_logger(__name__)

DUPLICATE_PROFILE_MESSAGE = "You already have a seller profile"


async def register_seller(
    db: AsyncSession,
    user: User,
    payload: SellerRegistrationRequest,
) -> SellerProfile:
    """Create the caller's seller profile and grant the SELLER role."""
    user_id = user.id  # rollback expires `user`
    existing = await seller_repository.get_seller_profile_by_user_id(db, user_id)
    if existing is not None:
        raise ConflictError(DUPLICATE_PROFILE_MESSAGE)

    fields = payload.profile_fields()
    terms_accepted_at = utcnow() if payload.terms_accepted else None

    try:
        profile = await seller_repository.create_seller_profile(
            db,
            user_id=user_id,
            terms_accepted_at=terms_accepted_at,
            **fields,
        )
        await user_repository.set_role(db, user, UserRole.SELLER.value)
        await db.commit()
    except IntegrityError as exc:
        await db.rollback()
        logger.warning("Duplicate seller registration rejected", user_id=user_id)
        raise ConflictError(DUPLICATE_PROFILE_MESSAGE) from exc
    except SQLAlchemyError as exc:
        await db.rollback()
        logger.exception("Seller registration failed", user_id=user_id)
        raise InternalError() from exc

    logger.info(
        "Seller profile created",
        user_id=user_id,
        seller_id=str(profile.id),
        business_type=profile.business_type,
    )
    return profile


async def get_seller_profile(db: AsyncSession, user: User) -> SellerProfile:
    """Return the caller's profile or raise NotFoundError."""
    try:
        profile = await seller_repository.get_seller_profile_by_user_id(db, user.id)
    except SQLAlchemyError as exc:
        logger.exception("Seller profile lookup failed", user_id=user.id)
        raise InternalError() from exc

    if profile is None:
        raise NotFoundError("Seller profile not found")
    return profile
