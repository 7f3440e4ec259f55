"""Unit tests for the user endpoints."""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio

SIGN_IN = {
    "googleId": "google-42",
    "email": "sam@example.com",
    "name": "Sam Rivera",
    "pictureUrl": "https://example.com/sam.png",
    "accessToken": "ya29.first",
    "refreshToken": "1//first",
}


class TestUpsertUser:
    async def test_creates_user(self, client: AsyncClient):
        response = await client.post("/api/users/upsert", json=SIGN_IN)
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["user"]["id"] == "google-42"
        assert body["user"]["email"] == "sam@example.com"
        assert body["user"]["last_sync_at"] is not None
        assert "access_token" not in body["user"]
        assert "refresh_token" not in body["user"]

    async def test_repeat_sign_in_updates_same_user(self, client: AsyncClient, session):
        from totalfit.core.database.repositories import UserRepository

        await client.post("/api/users/upsert", json=SIGN_IN)
        response = await client.post(
            "/api/users/upsert",
            json={**SIGN_IN, "email": "sam.rivera@example.com", "accessToken": "ya29.second", "refreshToken": None},
        )
        assert response.status_code == 200
        assert response.json()["user"]["email"] == "sam.rivera@example.com"

        user = await UserRepository(session).get_by_google_id("google-42")
        assert user.access_token == "ya29.second"
        assert user.refresh_token == "1//first"

    @pytest.mark.parametrize("missing", ["googleId", "email"])
    async def test_requires_google_id_and_email(self, client: AsyncClient, missing):
        payload = {key: value for key, value in SIGN_IN.items() if key != missing}
        response = await client.post("/api/users/upsert", json=payload)
        assert response.status_code == 400
        assert response.json() == {"error": "Google ID and email are required"}


class TestGetUser:
    async def test_get_user(self, client: AsyncClient):
        await client.post("/api/users/upsert", json=SIGN_IN)
        response = await client.get("/api/users/google-42")
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["data"]["name"] == "Sam Rivera"

    async def test_unknown_user(self, client: AsyncClient):
        response = await client.get("/api/users/nobody")
        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "User not found"}
