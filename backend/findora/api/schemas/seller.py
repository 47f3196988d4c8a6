"""
Seller registration and profile schemas.

`SellerRegistrationRequest` is the single source of truth for what a valid
registration looks like: the API validates request bodies with it and the
registration wizard validates its accumulated form data with it before
submitting.
"""

from __future__ import annotations

import re
import uuid
from datetime import datetime
from typing import Any

from pydantic import (
    AnyHttpUrl,
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    TypeAdapter,
    ValidationError,
    ValidationInfo,
    field_validator,
)
from pydantic.alias_generators import to_camel

from findora.api.schemas.common import CamelModel
from findora.core.constants import PRODUCT_CATEGORIES, BusinessType, VerificationStatus

PHONE_PATTERN = re.compile(r"^[+]?[0-9\s\-()]{10,}$")

_HTTP_URL = TypeAdapter(AnyHttpUrl)

_URL_MESSAGES = {
    "website": "Please enter a valid URL (e.g., https://example.com)",
    "facebook_url": "Please enter a valid Facebook URL",
    "instagram_url": "Please enter a valid Instagram URL",
    "linkedin_url": "Please enter a valid LinkedIn URL",
    "twitter_url": "Please enter a valid Twitter URL",
}

_OPTIONAL_TEXT_FIELDS = (
    "description",
    "website",
    "business_email",
    "address_line2",
    "gst_vat_number",
    "years_in_business",
    "facebook_url",
    "instagram_url",
    "linkedin_url",
    "twitter_url",
    "bank_branch_address",
)


class SellerRegistrationRequest(BaseModel):
    """Full seller registration payload."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    # ── Business information ─────────────────
    business_name: str = Field(..., min_length=2, max_length=255)
    business_type: BusinessType
    description: str | None = Field(None, min_length=10, max_length=500)
    website: str | None = Field(None, max_length=2048)
    phone: str = Field(..., max_length=50)
    business_email: EmailStr | None = None

    # ── Contact person ────────────────────────
    contact_person_name: str = Field(..., min_length=2, max_length=255)

    # ── Business address ──────────────────────
    address_line1: str = Field(..., min_length=5, max_length=255)
    address_line2: str | None = Field(None, max_length=255)
    city: str = Field(..., min_length=2, max_length=100)
    state: str = Field(..., min_length=2, max_length=100)
    country: str = Field(..., min_length=2, max_length=100)
    postal_code: str = Field(..., min_length=3, max_length=20)

    # ── Tax & legal ───────────────────────────
    tax_id: str = Field(..., min_length=5, max_length=100)
    gst_vat_number: str | None = Field(None, max_length=100)
    business_license: str = Field(..., min_length=3, max_length=100)
    years_in_business: int | None = Field(None, ge=0, le=100)

    # ── Social media ──────────────────────────
    facebook_url: str | None = Field(None, max_length=2048)
    instagram_url: str | None = Field(None, max_length=2048)
    linkedin_url: str | None = Field(None, max_length=2048)
    twitter_url: str | None = Field(None, max_length=2048)

    # ── Payment ───────────────────────────────
    bank_account_holder: str = Field(..., min_length=2, max_length=255)
    bank_name: str = Field(..., min_length=2, max_length=255)
    account_number: str = Field(..., min_length=8, max_length=64)
    ifsc_swift_code: str = Field(..., min_length=8, max_length=64)
    bank_branch_address: str | None = None

    # ── Categories & shipping ─────────────────
    product_categories: list[str]
    manages_own_shipping: bool = True
    needs_shipping_help: bool = False

    # ── Terms ─────────────────────────────────
    terms_accepted: bool

    @field_validator(*_OPTIONAL_TEXT_FIELDS, mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("phone")
    @classmethod
    def _check_phone(cls, value: str) -> str:
        if not PHONE_PATTERN.fullmatch(value):
            raise ValueError("Please enter a valid phone number (e.g., +1 555-123-4567)")
        return value

    @field_validator("website", "facebook_url", "instagram_url", "linkedin_url", "twitter_url")
    @classmethod
    def _check_url(cls, value: str | None, info: ValidationInfo) -> str | None:
        if value is None:
            return value
        try:
            _HTTP_URL.validate_python(value)
        except ValidationError:
            raise ValueError(_URL_MESSAGES[info.field_name]) from None
        # Keep what the seller typed; AnyHttpUrl would append a trailing slash
        return value

    @field_validator("product_categories")
    @classmethod
    def _check_categories(cls, value: list[str]) -> list[str]:
        selected = list(dict.fromkeys(category.strip() for category in value))
        if not selected:
            raise ValueError("Please select at least one product category")
        unknown = [category for category in selected if category not in PRODUCT_CATEGORIES]
        if unknown:
            raise ValueError(f"Unknown product category: {', '.join(unknown)}")
        return selected

    @field_validator("terms_accepted")
    @classmethod
    def _require_terms(cls, value: bool) -> bool:
        if value is not True:
            raise ValueError("You must accept the terms and conditions")
        return value

    def profile_fields(self) -> dict[str, Any]:
        """Column values for a new SellerProfile row."""
        return self.model_dump(mode="json")


class SellerCreated(CamelModel):
    """Public projection returned once a profile is created."""

    id: uuid.UUID
    business_name: str
    business_type: BusinessType
    verification_status: VerificationStatus
    created_at: datetime


class SellerRegistrationResponse(BaseModel):
    message: str
    seller: SellerCreated


class SellerProfileOut(CamelModel):
    """Read-only projection of a seller profile.  No payout or tax data."""

    id: uuid.UUID
    business_name: str
    business_type: BusinessType
    description: str | None
    website: str | None
    phone: str
    verification_status: str  # raw value; the dashboard badge maps unknown ones to Pending
    average_rating: float
    total_ratings: int
    total_sales: int
    created_at: datetime
    updated_at: datetime


class SellerProfileResponse(BaseModel):
    seller: SellerProfileOut
