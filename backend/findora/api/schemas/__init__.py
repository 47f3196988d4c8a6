"""API schema package."""

from findora.api.schemas.auth import CurrentUserResponse, LoginRequest, SignupRequest, TokenResponse
from findora.api.schemas.seller import (
    SellerCreated,
    SellerProfileOut,
    SellerProfileResponse,
    SellerRegistrationRequest,
    SellerRegistrationResponse,
)

__all__ = [
    "LoginRequest",
    "SignupRequest",
    "TokenResponse",
    "CurrentUserResponse",
    "SellerRegistrationRequest",
    "SellerRegistrationResponse",
    "SellerCreated",
    "SellerProfileOut",
    "SellerProfileResponse",
]
