"""
User repository containing all data-access operations for the users table.

Repository rules:
- Pure data-access logic only
- Every function receives AsyncSession explicitly
- Functions flush, but never commit
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from findora.core.constants import UserRole
from findora.core.security import hash_password, verify_password
from findora.db.models.user import User


async def create_user(
    db: AsyncSession,
    *,
    email: str,
    password: str,
    full_name: str,
    role: str = UserRole.BUYER.value,
) -> User:
    """Create a new user with a hashed password."""
    user = User(
        email=email.lower().strip(),
        hashed_password=hash_password(password),
        full_name=full_name.strip(),
        role=role.upper(),
        last_login_at=None,
    )
    db.add(user)
    await db.flush()
    return user


async def get_user_by_id(db: AsyncSession, user_id: int) -> User | None:
    """Fetch a user by primary key."""
    return await db.get(User, user_id)


async def get_active_user_by_id(db: AsyncSession, user_id: int) -> User | None:
    """Fetch an active user by primary key."""
    stmt = select(User).where(User.id == user_id, User.is_active.is_(True))
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    """Fetch a user by email address (case-insensitive)."""
    stmt = select(User).where(User.email == email.lower().strip())
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def authenticate_user(
    db: AsyncSession,
    *,
    email: str,
    password: str,
) -> User | None:
    """Validate credentials and return active user on success."""
    user = await get_user_by_email(db, email)
    if user is None or not user.is_active:
        return None
    if not verify_password(password, user.hashed_password):
        return None
    return user


async def set_role(db: AsyncSession, user: User, role: str) -> User:
    """Change a user's role."""
    user.role = role.upper()
    await db.flush()
    return user


async def record_login(db: AsyncSession, user_id: int) -> None:
    """Stamp last_login_at on successful authentication."""
    stmt = update(User).where(User.id == user_id).values(last_login_at=datetime.now(timezone.utc))
    await db.execute(stmt)
    await db.flush()
