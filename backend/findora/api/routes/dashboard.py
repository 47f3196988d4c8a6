"""Buyer and seller dashboard views."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from findora.api.deps import get_current_seller, get_current_user, get_db
from findora.api.routes.documents import build_checklist
from findora.api.schemas.dashboard import (
    DashboardResponse,
    SellerDashboardResponse,
    SellerStats,
    SellerSummary,
    UserSummary,
    VerificationBadge,
)
from findora.api.schemas.seller import SellerProfileOut
from findora.core.constants import VERIFICATION_BADGE_LABELS, VerificationStatus
from findora.db.models.seller_profile import SellerProfile
from findora.db.models.user import User
from findora.onboarding import verification
from findora.repositories import seller_profiles as seller_repository

router = APIRouter(tags=["Dashboard"])


def verification_badge(status: str) -> VerificationBadge:
    """Badge for a verification status; unknown values show as Pending."""
    try:
        known = VerificationStatus(status)
    except ValueError:
        known = VerificationStatus.PENDING
    return VerificationBadge(status=known, label=VERIFICATION_BADGE_LABELS[known])


@router.get("/dashboard", response_model=DashboardResponse)
async def read_dashboard(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> DashboardResponse:
    """Signed-in user's overview, including seller status when they have one."""
    profile = await seller_repository.get_seller_profile_by_user_id(db, current_user.id)

    seller = None
    if profile is not None:
        badge = verification_badge(profile.verification_status)
        seller = SellerSummary(
            id=profile.id,
            business_name=profile.business_name,
            verification_status=badge.status,
            badge=badge,
        )

    return DashboardResponse(
        user=UserSummary.model_validate(current_user),
        seller=seller,
        can_register_as_seller=profile is None,
    )


@router.get("/seller/dashboard", response_model=SellerDashboardResponse)
async def read_seller_dashboard(
    db: AsyncSession = Depends(get_db),
    profile: SellerProfile = Depends(get_current_seller),
) -> SellerDashboardResponse:
    """Seller overview: verification badge, stats and document checklist."""
    documents = await verification.list_documents(db, profile)
    badge = verification_badge(profile.verification_status)
    return SellerDashboardResponse(
        seller=SellerProfileOut.model_validate(profile),
        badge=badge,
        stats=SellerStats(
            total_sales=profile.total_sales,
            average_rating=profile.average_rating,
            total_ratings=profile.total_ratings,
        ),
        pending_verification=badge.status == VerificationStatus.PENDING,
        documents=build_checklist(profile, documents),
    )
