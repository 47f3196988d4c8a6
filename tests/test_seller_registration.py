"""Seller registration and profile endpoints."""

from datetime import datetime

import pytest
from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError

from findora.db.models.seller_profile import SellerProfile
from findora.repositories import seller_profiles
from findora.repositories.users import get_user_by_id


async def _profile_count(session_factory, user_id):
    async with session_factory() as session:
        return await seller_profiles.count_seller_profiles_for_user(session, user_id)


async def _role(session_factory, user_id):
    async with session_factory() as session:
        user = await get_user_by_id(session, user_id)
        return user.role


def _naive(value):
    return datetime.fromisoformat(value).replace(tzinfo=None)


class TestRegisterSeller:
    async def test_creates_pending_profile_and_grants_seller_role(
        self, client, auth_headers, registration_answers, session_factory, user
    ):
        response = await client.post("/api/seller/register", json=registration_answers, headers=auth_headers)

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Seller profile created successfully"
        assert set(body["seller"]) == {"id", "businessName", "businessType", "verificationStatus", "createdAt"}
        assert body["seller"]["businessName"] == "Acme Goods"
        assert body["seller"]["verificationStatus"] == "PENDING"

        assert await _role(session_factory, user.id) == "SELLER"
        async with session_factory() as session:
            profile = await seller_profiles.get_seller_profile_by_user_id(session, user.id)
        assert profile.product_categories == ["Home & Garden", "Art & Crafts"]
        assert profile.terms_accepted_at is not None
        assert profile.address_line2 is None
        assert profile.years_in_business == 3

    async def test_years_in_business_zero_is_kept(
        self, client, auth_headers, registration_answers, session_factory, user
    ):
        registration_answers["yearsInBusiness"] = 0
        response = await client.post("/api/seller/register", json=registration_answers, headers=auth_headers)

        assert response.status_code == 201
        async with session_factory() as session:
            profile = await seller_profiles.get_seller_profile_by_user_id(session, user.id)
        assert profile.years_in_business == 0

    @pytest.mark.parametrize(
        "field",
        ["businessName", "businessType", "phone", "contactPersonName", "addressLine1", "city", "state", "country",
         "postalCode", "taxId", "businessLicense", "bankAccountHolder", "bankName", "accountNumber", "ifscSwiftCode",
         "productCategories", "termsAccepted"],
    )
    async def test_missing_required_field_is_rejected(
        self, client, auth_headers, registration_answers, session_factory, user, field
    ):
        registration_answers.pop(field)
        response = await client.post("/api/seller/register", json=registration_answers, headers=auth_headers)

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Invalid input"
        assert field in body["errors"]["fieldErrors"]
        assert await _profile_count(session_factory, user.id) == 0
        assert await _role(session_factory, user.id) == "BUYER"

    @pytest.mark.parametrize(
        "field, value, message",
        [
            ("productCategories", [], "Please select at least one product category"),
            ("termsAccepted", False, "You must accept the terms and conditions"),
            ("phone", "12345", "Please enter a valid phone number (e.g., +1 555-123-4567)"),
            ("website", "not a url", "Please enter a valid URL (e.g., https://example.com)"),
            ("productCategories", ["Spaceships"], "Unknown product category: Spaceships"),
        ],
    )
    async def test_business_rules(self, client, auth_headers, registration_answers, field, value, message):
        registration_answers[field] = value
        response = await client.post("/api/seller/register", json=registration_answers, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["errors"]["fieldErrors"][field] == [message]

    async def test_short_values_use_server_minimums(self, client, auth_headers, registration_answers):
        registration_answers.update(accountNumber="1234567", addressLine1="1 St", taxId="1234")
        response = await client.post("/api/seller/register", json=registration_answers, headers=auth_headers)

        assert response.status_code == 400
        assert set(response.json()["errors"]["fieldErrors"]) == {"accountNumber", "addressLine1", "taxId"}

    async def test_second_registration_conflicts(
        self, client, auth_headers, registration_answers, session_factory, user
    ):
        first = await client.post("/api/seller/register", json=registration_answers, headers=auth_headers)
        registration_answers["businessName"] = "Acme Two"
        second = await client.post("/api/seller/register", json=registration_answers, headers=auth_headers)

        assert first.status_code == 201
        assert second.status_code == 409
        assert second.json() == {"message": "You already have a seller profile"}
        assert await _profile_count(session_factory, user.id) == 1

    async def test_concurrent_registration_loses_on_unique_constraint(
        self, client, auth_headers, registration_answers, session_factory, user, monkeypatch
    ):
        # Another request already inserted a profile, but the pre-check missed it
        async with session_factory() as session:
            session.add(
                SellerProfile(
                    user_id=user.id,
                    business_name="Winner",
                    business_type="LLC",
                    phone="+1 555-000-0000",
                    contact_person_name="First Caller",
                    address_line1="1 Winner Way",
                    city="Springfield",
                    state="IL",
                    country="United States",
                    postal_code="62701",
                    tax_id="99-0000000",
                    business_license="LIC-1",
                    bank_account_holder="Winner",
                    bank_name="First Bank",
                    account_number="00000000",
                    ifsc_swift_code="FBNKUS33",
                    product_categories=["Other"],
                    terms_accepted=True,
                )
            )
            await session.commit()

        async def no_existing_profile(db, user_id):
            return None

        monkeypatch.setattr(seller_profiles, "get_seller_profile_by_user_id", no_existing_profile)
        response = await client.post("/api/seller/register", json=registration_answers, headers=auth_headers)
        monkeypatch.undo()

        assert response.status_code == 409
        assert await _profile_count(session_factory, user.id) == 1
        assert await _role(session_factory, user.id) == "BUYER"

    async def test_persistence_failure_is_internal_error(
        self, client, auth_headers, registration_answers, session_factory, user, monkeypatch
    ):
        async def broken_create(db, **kwargs):
            raise SQLAlchemyError("connection reset")

        monkeypatch.setattr(seller_profiles, "create_seller_profile", broken_create)
        response = await client.post("/api/seller/register", json=registration_answers, headers=auth_headers)

        assert response.status_code == 500
        assert response.json() == {"message": "Internal server error"}
        assert await _role(session_factory, user.id) == "BUYER"

    async def test_phone_longer_than_column_is_rejected(
        self, client, auth_headers, registration_answers, session_factory, user
    ):
        registration_answers["phone"] = "+1 " + "5" * 70
        response = await client.post("/api/seller/register", json=registration_answers, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["errors"]["fieldErrors"]["phone"] == ["String should have at most 50 characters"]
        assert await _profile_count(session_factory, user.id) == 0

    async def test_requires_authentication(self, client, registration_answers):
        response = await client.post("/api/seller/register", json=registration_answers)

        assert response.status_code == 401
        assert response.json() == {"message": "Authentication required"}
        assert response.headers["WWW-Authenticate"] == "Bearer"

    async def test_rejects_invalid_token(self, client, registration_answers):
        response = await client.post(
            "/api/seller/register",
            json=registration_answers,
            headers={"Authorization": "Bearer not-a-jwt"},
        )

        assert response.status_code == 401


class TestSellerProfile:
    async def test_not_found_before_registration(self, client, auth_headers):
        response = await client.get("/api/seller/profile", headers=auth_headers)

        assert response.status_code == 404
        assert response.json() == {"message": "Seller profile not found"}

    async def test_returns_public_projection(self, client, seller_headers):
        response = await client.get("/api/seller/profile", headers=seller_headers)

        assert response.status_code == 200
        seller = response.json()["seller"]
        assert seller["businessName"] == "Acme Goods"
        assert seller["businessType"] == "LLC"
        assert seller["website"] == "https://acme.example.com"
        assert seller["verificationStatus"] == "PENDING"
        assert seller["averageRating"] == 0.0
        assert seller["totalRatings"] == 0
        assert seller["totalSales"] == 0
        for private in ("accountNumber", "taxId", "ifscSwiftCode", "bankName"):
            assert private not in seller

    async def test_requires_authentication(self, client):
        response = await client.get("/api/seller/profile")

        assert response.status_code == 401

    async def test_matches_registration_response(self, client, auth_headers, registration_answers):
        created = await client.post("/api/seller/register", json=registration_answers, headers=auth_headers)
        fetched = await client.get("/api/seller/profile", headers=auth_headers)

        assert created.status_code == 201
        assert fetched.status_code == 200
        registered = created.json()["seller"]
        seller = fetched.json()["seller"]
        for key in ("id", "businessName", "businessType", "verificationStatus"):
            assert seller[key] == registered[key]
        # SQLite drops the UTC offset on read
        assert _naive(seller["createdAt"]) == _naive(registered["createdAt"])

    async def test_unknown_stored_status_is_returned_as_is(self, client, seller_headers, session_factory, user):
        async with session_factory() as session:
            await session.execute(
                update(SellerProfile).where(SellerProfile.user_id == user.id).values(verification_status="SUSPENDED")
            )
            await session.commit()

        response = await client.get("/api/seller/profile", headers=seller_headers)

        assert response.status_code == 200
        assert response.json()["seller"]["verificationStatus"] == "SUSPENDED"
