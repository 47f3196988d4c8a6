"""Dashboard view schemas."""

from __future__ import annotations

import uuid

from findora.api.schemas.common import CamelModel
from findora.api.schemas.documents import DocumentChecklist
from findora.api.schemas.seller import SellerProfileOut
from findora.core.constants import UserRole, VerificationStatus


class VerificationBadge(CamelModel):
    status: VerificationStatus
    label: str


class SellerStats(CamelModel):
    total_sales: int
    average_rating: float
    total_ratings: int


class UserSummary(CamelModel):
    id: int
    email: str
    full_name: str
    role: UserRole


class SellerSummary(CamelModel):
    id: uuid.UUID
    business_name: str
    verification_status: VerificationStatus
    badge: VerificationBadge


class DashboardResponse(CamelModel):
    """Landing dashboard for any signed-in user."""

    user: UserSummary
    seller: SellerSummary | None
    can_register_as_seller: bool


class SellerDashboardResponse(CamelModel):
    seller: SellerProfileOut
    badge: VerificationBadge
    stats: SellerStats
    pending_verification: bool
    documents: DocumentChecklist
