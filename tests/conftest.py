"""
Shared fixtures.

Every test gets its own SQLite database file and an in-memory object store;
the API dependencies are overridden to use them.
"""

import os

# Configure before anything imports findora.core.config
os.environ["DATABASE_URI"] = "sqlite+aiosqlite://"
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["APP_ENV"] = "test"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from findora.api.deps import get_db, get_object_store
from findora.core.security import create_access_token
from findora.db.models import Base
from findora.main import app
from findora.repositories.users import create_user
from findora.storage.object_store import InMemoryObjectStore


@pytest.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'findora-test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def object_store():
    return InMemoryObjectStore()


@pytest.fixture
async def client(session_factory, object_store):
    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_object_store] = lambda: object_store
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
async def user(session_factory):
    async with session_factory() as session:
        user = await create_user(
            session,
            email="bea@findora.dev",
            password="buyer-pass-123",
            full_name="Bea Buyer",
        )
        await session.commit()
    return user


@pytest.fixture
def auth_headers(user):
    token = create_access_token({"sub": str(user.id), "role": user.role, "email": user.email})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def registration_answers():
    """A complete, valid registration form keyed the way clients send it."""
    return {
        "businessName": "Acme Goods",
        "businessType": "LLC",
        "description": "Handmade home goods and kitchenware.",
        "website": "https://acme.example.com",
        "businessEmail": "sales@acmegoods.com",
        "contactPersonName": "Ada Lovelace",
        "phone": "+1 555-123-4567",
        "addressLine1": "12 Market Street",
        "addressLine2": "",
        "city": "Springfield",
        "state": "IL",
        "country": "United States",
        "postalCode": "62701",
        "facebookUrl": "",
        "instagramUrl": "https://instagram.com/acme",
        "linkedinUrl": "",
        "twitterUrl": "",
        "taxId": "12-3456789",
        "gstVatNumber": "",
        "businessLicense": "LIC-2024",
        "yearsInBusiness": 3,
        "bankAccountHolder": "Acme Goods LLC",
        "bankName": "First Bank",
        "accountNumber": "0012345678",
        "ifscSwiftCode": "FBNKUS33",
        "bankBranchAddress": "",
        "productCategories": ["Home & Garden", "Art & Crafts"],
        "managesOwnShipping": True,
        "needsShippingHelp": False,
        "termsAccepted": True,
    }


@pytest.fixture
async def seller_headers(client, auth_headers, registration_answers):
    """Auth headers for a user who has completed seller registration."""
    response = await client.post("/api/seller/register", json=registration_answers, headers=auth_headers)
    assert response.status_code == 201
    return auth_headers
