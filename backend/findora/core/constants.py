"""Shared constants and enums used across the application."""

from enum import StrEnum


class UserRole(StrEnum):
    """Roles carried by an authenticated identity."""

    BUYER = "BUYER"
    SELLER = "SELLER"
    ADMIN = "ADMIN"


class BusinessType(StrEnum):
    """Legal form of a seller's business."""

    INDIVIDUAL = "INDIVIDUAL"
    SOLE_PROPRIETORSHIP = "SOLE_PROPRIETORSHIP"
    PARTNERSHIP = "PARTNERSHIP"
    LLC = "LLC"
    CORPORATION = "CORPORATION"
    NONPROFIT = "NONPROFIT"


class VerificationStatus(StrEnum):
    """Stage of seller vetting. Only the review process moves it past PENDING."""

    PENDING = "PENDING"
    IN_REVIEW = "IN_REVIEW"
    VERIFIED = "VERIFIED"
    REJECTED = "REJECTED"
    PREMIUM = "PREMIUM"


class DocumentType(StrEnum):
    """Verification documents a seller can upload."""

    ID_FRONT = "ID_FRONT"
    ID_BACK = "ID_BACK"
    BUSINESS_LICENSE = "BUSINESS_LICENSE"
    TAX_DOCUMENT = "TAX_DOCUMENT"
    BANK_STATEMENT = "BANK_STATEMENT"
    UTILITY_BILL = "UTILITY_BILL"


# Fixed catalog shared by the registration wizard and the API
PRODUCT_CATEGORIES: tuple[str, ...] = (
    "Electronics",
    "Fashion & Clothing",
    "Home & Garden",
    "Health & Beauty",
    "Sports & Outdoors",
    "Books & Media",
    "Toys & Games",
    "Automotive",
    "Food & Beverages",
    "Art & Crafts",
    "Jewelry & Accessories",
    "Pet Supplies",
    "Office & Business",
    "Baby & Kids",
    "Music & Instruments",
    "Other",
)

BUSINESS_TYPE_LABELS: dict[BusinessType, str] = {
    BusinessType.INDIVIDUAL: "Individual",
    BusinessType.SOLE_PROPRIETORSHIP: "Sole Proprietorship",
    BusinessType.PARTNERSHIP: "Partnership",
    BusinessType.LLC: "LLC",
    BusinessType.CORPORATION: "Corporation",
    BusinessType.NONPROFIT: "Non-Profit",
}

VERIFICATION_BADGE_LABELS: dict[VerificationStatus, str] = {
    VerificationStatus.PENDING: "Pending",
    VerificationStatus.IN_REVIEW: "In Review",
    VerificationStatus.VERIFIED: "Verified",
    VerificationStatus.REJECTED: "Rejected",
    VerificationStatus.PREMIUM: "Premium",
}

# (label, required) per document type
DOCUMENT_REQUIREMENTS: dict[DocumentType, tuple[str, bool]] = {
    DocumentType.ID_FRONT: ("Government ID (Front)", True),
    DocumentType.ID_BACK: ("Government ID (Back)", True),
    DocumentType.BUSINESS_LICENSE: ("Business License", False),
    DocumentType.TAX_DOCUMENT: ("Tax Document", False),
    DocumentType.BANK_STATEMENT: ("Bank Statement", False),
    DocumentType.UTILITY_BILL: ("Utility Bill", False),
}

ALLOWED_DOCUMENT_CONTENT_TYPES: frozenset[str] = frozenset(
    {"image/jpeg", "image/jpg", "image/png", "application/pdf"}
)
