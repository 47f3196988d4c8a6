"""Sign-up, login and current-user endpoints."""


class TestSignup:
    async def test_creates_buyer(self, client):
        response = await client.post(
            "/api/auth/signup",
            json={"email": "New.Buyer@Findora.dev", "password": "longenough", "full_name": "New Buyer"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["email"] == "new.buyer@findora.dev"
        assert body["role"] == "BUYER"

    async def test_duplicate_email(self, client, user):
        response = await client.post(
            "/api/auth/signup",
            json={"email": "bea@findora.dev", "password": "longenough", "full_name": "Bea Again"},
        )

        assert response.status_code == 409
        assert response.json() == {"message": "An account with this email already exists"}

    async def test_short_password(self, client):
        response = await client.post(
            "/api/auth/signup",
            json={"email": "short@findora.dev", "password": "short", "full_name": "Short Pass"},
        )

        assert response.status_code == 400
        assert "password" in response.json()["errors"]["fieldErrors"]


class TestLogin:
    async def test_issues_token_usable_on_me(self, client, user):
        response = await client.post(
            "/api/auth/login",
            json={"username": "bea@findora.dev", "password": "buyer-pass-123"},
        )

        assert response.status_code == 200
        token = response.json()["access_token"]
        me = await client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert me.status_code == 200
        assert me.json()["email"] == "bea@findora.dev"
        assert me.json()["last_login_at"] is not None

    async def test_wrong_password(self, client, user):
        response = await client.post(
            "/api/auth/login",
            json={"username": "bea@findora.dev", "password": "wrong-password"},
        )

        assert response.status_code == 401
        assert response.json() == {"message": "Invalid credentials"}
