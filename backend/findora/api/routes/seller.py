"""Seller registration and profile endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from findora.api.deps import get_current_seller, get_current_user, get_db
from findora.api.schemas.seller import (
    SellerCreated,
    SellerProfileOut,
    SellerProfileResponse,
    SellerRegistrationRequest,
    SellerRegistrationResponse,
)
from findora.db.models.seller_profile import SellerProfile
from findora.db.models.user import User
from findora.onboarding import registration

router = APIRouter(prefix="/seller", tags=["Seller"])


@router.post(
    "/register",
    response_model=SellerRegistrationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register_seller(
    payload: SellerRegistrationRequest,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> SellerRegistrationResponse:
    """Create the caller's seller profile (status PENDING) and make them a seller."""
    profile = await registration.register_seller(db, current_user, payload)
    return SellerRegistrationResponse(
        message="Seller profile created successfully",
        seller=SellerCreated.model_validate(profile),
    )


@router.get("/profile", response_model=SellerProfileResponse)
async def read_seller_profile(
    profile: SellerProfile = Depends(get_current_seller),
) -> SellerProfileResponse:
    """Return the caller's seller profile."""
    return SellerProfileResponse(seller=SellerProfileOut.model_validate(profile))
