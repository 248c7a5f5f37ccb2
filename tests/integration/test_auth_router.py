"""
Integration tests for planner auth router.

Tests registration and login at /api/v1/auth.
"""

import pytest

from tests.fixtures.factories import DEFAULT_PASSWORD


class TestRegister:
    """Test POST /api/v1/auth/register endpoint."""

    def test_creates_account(self, client):
        response = client.post(
            "/api/v1/auth/register",
            json={"email": "New.Planner@Example.com", "password": "long-enough-pw", "display_name": "Nia"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["success"] is True
        assert data["data"]["email"] == "new.planner@example.com"
        assert "password_hash" not in data["data"]

    def test_duplicate_email(self, client, test_user):
        response = client.post(
            "/api/v1/auth/register",
            json={"email": test_user.email, "password": "long-enough-pw"},
        )
        assert response.status_code == 409

    @pytest.mark.parametrize(
        "payload",
        [
            {"email": "not-an-email", "password": "long-enough-pw"},
            {"email": "a@b.c", "password": "short"},
            {"password": "long-enough-pw"},
        ],
    )
    def test_invalid_payload(self, client, payload):
        response = client.post("/api/v1/auth/register", json=payload)
        assert response.status_code == 422


class TestLogin:
    """Test POST /api/v1/auth/login endpoint."""

    def test_returns_token(self, client, test_user):
        response = client.post(
            "/api/v1/auth/login",
            json={"email": test_user.email, "password": DEFAULT_PASSWORD},
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["token"]
        assert data["token_type"] == "bearer"
        assert data["expires_in"] == 24 * 3600

    def test_token_works_for_me(self, client, test_user):
        login = client.post(
            "/api/v1/auth/login",
            json={"email": test_user.email, "password": DEFAULT_PASSWORD},
        )
        token = login.json()["data"]["token"]

        response = client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200
        assert response.json()["data"]["id"] == test_user.id

    def test_wrong_password(self, client, test_user):
        response = client.post(
            "/api/v1/auth/login",
            json={"email": test_user.email, "password": "wrong-password"},
        )
        assert response.status_code == 401

    def test_unknown_email(self, client):
        response = client.post(
            "/api/v1/auth/login",
            json={"email": "nobody@example.com", "password": DEFAULT_PASSWORD},
        )
        assert response.status_code == 401

    def test_rate_limited(self, client, test_user):
        """Login is limited per client."""
        statuses = [
            client.post("/api/v1/auth/login", json={"email": test_user.email, "password": "wrong-password"}).status_code
            for _ in range(11)
        ]
        assert statuses[:10] == [401] * 10
        assert statuses[10] == 429

    def test_me_requires_token(self, client):
        assert client.get("/api/v1/auth/me").status_code == 401
