"""
SellerProfile — the business-registration record for one user.

One row per user (unique `user_id`).  Created once by the registration
endpoint; `verification_status` is moved past PENDING only by the review
process.  Rating and sales aggregates are maintained elsewhere and are
read-only here.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import JSON, Boolean, DateTime, Float, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from findora.db.models.base import Base, generate_uuid, utcnow


class SellerProfile(Base):
    """Seller business, address, legal, payout and category details."""

    __tablename__ = "seller_profiles"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=generate_uuid)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False, index=True
    )

    # ── Business ──────────────────────────────
    business_name: Mapped[str] = mapped_column(String(255), nullable=False)
    business_type: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    website: Mapped[Optional[str]] = mapped_column(String(2048), nullable=True)
    phone: Mapped[str] = mapped_column(String(50), nullable=False)
    business_email: Mapped[Optional[str]] = mapped_column(String(320), nullable=True)
    contact_person_name: Mapped[str] = mapped_column(String(255), nullable=False)

    # ── Address ───────────────────────────────
    address_line1: Mapped[str] = mapped_column(String(255), nullable=False)
    address_line2: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    city: Mapped[str] = mapped_column(String(100), nullable=False)
    state: Mapped[str] = mapped_column(String(100), nullable=False)
    country: Mapped[str] = mapped_column(String(100), nullable=False)
    postal_code: Mapped[str] = mapped_column(String(20), nullable=False)

    # ── Tax / legal ───────────────────────────
    tax_id: Mapped[str] = mapped_column(String(100), nullable=False)
    gst_vat_number: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    business_license: Mapped[str] = mapped_column(String(100), nullable=False)
    years_in_business: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    # ── Social links ──────────────────────────
    facebook_url: Mapped[Optional[str]] = mapped_column(String(2048), nullable=True)
    instagram_url: Mapped[Optional[str]] = mapped_column(String(2048), nullable=True)
    linkedin_url: Mapped[Optional[str]] = mapped_column(String(2048), nullable=True)
    twitter_url: Mapped[Optional[str]] = mapped_column(String(2048), nullable=True)

    # ── Payout ────────────────────────────────
    bank_account_holder: Mapped[str] = mapped_column(String(255), nullable=False)
    bank_name: Mapped[str] = mapped_column(String(255), nullable=False)
    account_number: Mapped[str] = mapped_column(String(64), nullable=False)
    ifsc_swift_code: Mapped[str] = mapped_column(String(64), nullable=False)
    bank_branch_address: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # ── Catalog / shipping ────────────────────
    product_categories: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    manages_own_shipping: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    needs_shipping_help: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # ── Terms ─────────────────────────────────
    terms_accepted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    terms_accepted_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    # ── Verification ──────────────────────────
    verification_status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="PENDING", index=True
    )  # PENDING | IN_REVIEW | VERIFIED | REJECTED | PREMIUM
    documents_submitted_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    # ── Aggregates (maintained elsewhere) ─────
    average_rating: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    total_ratings: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    total_sales: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # ── Audit timestamps ─────────────────────
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )

    def __repr__(self) -> str:
        return f"<SellerProfile {self.id} user={self.user_id} {self.business_name!r} status={self.verification_status}>"
