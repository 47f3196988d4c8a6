"""
Seed initial users for development.
Run: python -m scripts.seed_users  (from backend/)
"""

import asyncio

from findora.db.session import async_session
from findora.repositories.users import create_user, get_user_by_email


SEED_USERS = [
    {
        "email": "admin@findora.dev",
        "password": "admin12345",  # Change in production!
        "full_name": "Findora Admin",
        "role": "ADMIN",
    },
    {
        "email": "buyer@findora.dev",
        "password": "buyer12345",
        "full_name": "Demo Buyer",
        "role": "BUYER",
    },
]


async def seed():
    """Insert seed users, skipping any that already exist."""
    created = 0
    async with async_session() as session:
        for data in SEED_USERS:
            if await get_user_by_email(session, data["email"]) is not None:
                print(f"  Skipped existing user: {data['email']}")
                continue
            user = await create_user(db=session, **data)
            created += 1
            print(f"  Created user: {user.email} ({user.role})")
        await session.commit()
    print(f"Seeded {created} users.")


if __name__ == "__main__":
    asyncio.run(seed())
