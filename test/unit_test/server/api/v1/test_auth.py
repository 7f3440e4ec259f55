"""
Unit tests for the Google OAuth2 sign-in endpoints.

Google is simulated with ``httpx.MockTransport``; the callback tests also
check that the signed-in user is stored.
"""

from urllib.parse import parse_qs, urlparse

import httpx
import pytest
from httpx import AsyncClient

from totalfit.core.database.repositories import UserRepository
from totalfit.integrations import GoogleOAuthClient
from totalfit.server.core.config import settings
from totalfit.server.services.deps import get_google_oauth_client

pytestmark = pytest.mark.asyncio

REDIRECT_URI = "http://localhost:3000/api/auth/callback"

TOKENS = {
    "access_token": "ya29.access",
    "refresh_token": "1//refresh",
    "expires_in": 3599,
    "token_type": "Bearer",
    "scope": "openid email profile",
}
PROFILE = {
    "id": "google-42",
    "email": "sam@example.com",
    "name": "Sam Rivera",
    "picture": "https://example.com/sam.png",
}


def google_handler(
    token_status: int = 200,
    revoke_status: int = 200,
    token_response: httpx.Response | None = None,
    profile: dict = PROFILE,
):
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/token":
            if token_response is not None:
                return token_response
            if token_status != 200:
                return httpx.Response(token_status, json={"error": "invalid_grant"})
            return httpx.Response(200, json=TOKENS)
        if request.url.path == "/oauth2/v2/userinfo":
            return httpx.Response(200, json=profile)
        if request.url.path == "/revoke":
            return httpx.Response(revoke_status)
        return httpx.Response(404)

    return handler


@pytest.fixture
def google_with(override_dependency, mock_http_client):
    def _install(handler):
        override_dependency(
            get_google_oauth_client,
            GoogleOAuthClient("client-id", "client-secret", REDIRECT_URI, client=mock_http_client(handler)),
        )

    return _install


def redirect_params(response: httpx.Response):
    location = urlparse(response.headers["location"])
    return location, {key: values[0] for key, values in parse_qs(location.query).items()}


class TestSignIn:
    async def test_redirects_to_consent_screen(self, client: AsyncClient, google_with):
        google_with(google_handler())
        response = await client.get("/api/auth/google", params={"state": "xyz"})

        assert response.status_code == 307
        location, params = redirect_params(response)
        assert location.netloc == "accounts.google.com"
        assert params["client_id"] == "client-id"
        assert params["redirect_uri"] == REDIRECT_URI
        assert params["state"] == "xyz"

    async def test_not_configured(self, client: AsyncClient, monkeypatch):
        monkeypatch.setattr(settings, "google_client_id", None)
        response = await client.get("/api/auth/google")
        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Google OAuth is not configured on the server"}


class TestTokenExchange:
    async def test_exchange(self, client: AsyncClient, google_with):
        google_with(google_handler())
        response = await client.post("/api/auth/token", json={"code": "4/abc"})
        assert response.status_code == 200
        assert response.json() == TOKENS

    async def test_code_required(self, client: AsyncClient, google_with):
        google_with(google_handler())
        response = await client.post("/api/auth/token", json={})
        assert response.status_code == 400
        assert response.json() == {"error": "Authorization code is required"}

    async def test_rejected_code(self, client: AsyncClient, google_with):
        google_with(google_handler(token_status=400))
        response = await client.post("/api/auth/token", json={"code": "bad"})
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to exchange code for token"}


class TestCallback:
    async def test_stores_user_and_redirects_with_tokens(self, client: AsyncClient, google_with, session):
        google_with(google_handler())
        response = await client.get("/api/auth/callback", params={"code": "4/abc"})

        assert response.status_code == 307
        location, params = redirect_params(response)
        assert f"{location.scheme}://{location.netloc}" == settings.google.app_url.rstrip("/")
        assert location.path == "/auth/complete"
        assert params["access_token"] == "ya29.access"
        assert params["refresh_token"] == "1//refresh"
        assert params["user_id"] == "google-42"
        assert params["user_email"] == "sam@example.com"

        user = await UserRepository(session).get_by_id("google-42")
        assert user is not None
        assert user.email == "sam@example.com"
        assert user.refresh_token == "1//refresh"

    async def test_google_error_is_forwarded(self, client: AsyncClient, google_with):
        google_with(google_handler())
        response = await client.get("/api/auth/callback", params={"error": "access_denied"})
        location, params = redirect_params(response)
        assert location.path == "/"
        assert params == {"error": "access_denied"}

    async def test_missing_code(self, client: AsyncClient, google_with):
        google_with(google_handler())
        response = await client.get("/api/auth/callback")
        _, params = redirect_params(response)
        assert params == {"error": "missing_code"}

    async def test_failed_exchange(self, client: AsyncClient, google_with):
        google_with(google_handler(token_status=400))
        response = await client.get("/api/auth/callback", params={"code": "bad"})
        _, params = redirect_params(response)
        assert params == {"error": "auth_failed"}

    async def test_unreadable_token_response(self, client: AsyncClient, google_with):
        google_with(google_handler(token_response=httpx.Response(200, text="<html>maintenance</html>")))
        response = await client.get("/api/auth/callback", params={"code": "good"})
        location, params = redirect_params(response)
        assert location.path == "/"
        assert params == {"error": "auth_failed"}

    async def test_profile_without_email(self, client: AsyncClient, google_with, session):
        google_with(google_handler(profile={"id": "google-42"}))
        response = await client.get("/api/auth/callback", params={"code": "good"})
        _, params = redirect_params(response)
        assert params == {"error": "auth_failed"}
        assert await UserRepository(session).get_by_google_id("google-42") is None


class TestRefreshAndRevoke:
    async def test_refresh(self, client: AsyncClient, google_with):
        google_with(google_handler())
        response = await client.post("/api/auth/refresh", json={"refreshToken": "1//refresh"})
        assert response.status_code == 200
        assert response.json() == {
            "access_token": "ya29.access",
            "expires_in": 3599,
            "token_type": "Bearer",
            "scope": "openid email profile",
        }

    async def test_refresh_token_required(self, client: AsyncClient, google_with):
        google_with(google_handler())
        response = await client.post("/api/auth/refresh", json={})
        assert response.status_code == 400
        assert response.json() == {"error": "Refresh token is required"}

    async def test_refresh_rejected(self, client: AsyncClient, google_with):
        google_with(google_handler(token_status=400))
        response = await client.post("/api/auth/refresh", json={"refreshToken": "expired"})
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to refresh token"}

    async def test_revoke(self, client: AsyncClient, google_with):
        google_with(google_handler())
        response = await client.post("/api/auth/revoke", json={"token": "ya29.access"})
        assert response.status_code == 200
        assert response.json() == {"success": True}

    async def test_revoke_rejected(self, client: AsyncClient, google_with):
        google_with(google_handler(revoke_status=400))
        response = await client.post("/api/auth/revoke", json={"token": "ya29.access"})
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to revoke token"}

    async def test_revoke_token_required(self, client: AsyncClient, google_with):
        google_with(google_handler())
        response = await client.post("/api/auth/revoke", json={})
        assert response.status_code == 400
