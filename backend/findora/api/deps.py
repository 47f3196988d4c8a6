"""Shared dependencies for API routes."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, AsyncGenerator

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from findora.core.config import settings
from findora.core.errors import UnauthorizedError
from findora.core.security import decode_access_token
from findora.db.models.seller_profile import SellerProfile
from findora.db.models.user import User
from findora.db.session import get_db as _get_db
from findora.onboarding import registration
from findora.repositories import users as user_repository
from findora.storage.object_store import InMemoryObjectStore, ObjectStore, S3ObjectStore

security_scheme = HTTPBearer(auto_error=False)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield an async DB session."""
    async for session in _get_db():
        yield session


@lru_cache
def get_object_store() -> ObjectStore:
    """Document store selected by STORAGE_BACKEND."""
    if settings.STORAGE_BACKEND == "memory":
        return InMemoryObjectStore()
    return S3ObjectStore.from_settings(settings)


async def get_current_token_payload(
    credentials: HTTPAuthorizationCredentials | None = Depends(security_scheme),
) -> dict[str, Any]:
    """Extract and validate JWT payload from bearer token."""
    if credentials is None:
        raise UnauthorizedError("Authentication required")

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise UnauthorizedError("Invalid or expired token")
    return payload


async def get_current_user(
    db: AsyncSession = Depends(get_db),
    token_payload: dict[str, Any] = Depends(get_current_token_payload),
) -> User:
    """Resolve the active user behind the bearer token."""
    subject = token_payload.get("sub")
    try:
        user_id = int(subject)
    except (TypeError, ValueError):
        raise UnauthorizedError("Invalid authentication token") from None

    user = await user_repository.get_active_user_by_id(db, user_id)
    if user is None:
        raise UnauthorizedError("Invalid or inactive user")

    return user


async def get_current_seller(
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> SellerProfile:
    """The caller's seller profile; NotFound when they have not registered."""
    return await registration.get_seller_profile(db, current_user)
