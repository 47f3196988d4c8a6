"""Authentication endpoints for sign-up, login and current-user introspection."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from findora.api.deps import get_current_user, get_db
from findora.api.schemas.auth import CurrentUserResponse, LoginRequest, SignupRequest, TokenResponse
from findora.core.config import settings
from findora.core.errors import ConflictError, UnauthorizedError
from findora.core.logging import get_logger
from findora.core.security import create_access_token
from findora.db.models.user import User
from findora.repositories import users as user_repository

logger = get_logger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])


def _to_response(user: User) -> CurrentUserResponse:
    return CurrentUserResponse(
        id=user.id,
        email=user.email,
        full_name=user.full_name,
        role=user.role,
        is_active=user.is_active,
        created_at=user.created_at,
        updated_at=user.updated_at,
        last_login_at=user.last_login_at,
    )


@router.post("/signup", response_model=CurrentUserResponse, status_code=status.HTTP_201_CREATED)
async def signup(payload: SignupRequest, db: AsyncSession = Depends(get_db)) -> CurrentUserResponse:
    """Create a buyer account."""
    if await user_repository.get_user_by_email(db, payload.email) is not None:
        raise ConflictError("An account with this email already exists")

    try:
        user = await user_repository.create_user(
            db,
            email=payload.email,
            password=payload.password,
            full_name=payload.full_name,
        )
        await db.commit()
    except IntegrityError as exc:
        await db.rollback()
        raise ConflictError("An account with this email already exists") from exc

    logger.info("User signed up", user_id=user.id)
    return _to_response(user)


@router.post("/login", response_model=TokenResponse)
async def login(payload: LoginRequest, db: AsyncSession = Depends(get_db)) -> TokenResponse:
    """Authenticate a user and issue an access token."""
    user = await user_repository.authenticate_user(
        db,
        email=payload.username,
        password=payload.password,
    )
    if user is None:
        raise UnauthorizedError("Invalid credentials")

    await user_repository.record_login(db, user.id)

    access_token = create_access_token(
        {
            "sub": str(user.id),
            "role": user.role,
            "email": user.email,
        }
    )
    return TokenResponse(
        access_token=access_token,
        token_type="bearer",
        expires_in=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )


@router.get("/me", response_model=CurrentUserResponse)
async def read_current_user(current_user: User = Depends(get_current_user)) -> CurrentUserResponse:
    """Return the currently authenticated active user."""
    return _to_response(current_user)
