"""Google OAuth2 sign-in client.

Wraps Google's documented OAuth2 web-server flow endpoints:

- authorization: ``https://accounts.google.com/o/oauth2/v2/auth``
- token exchange and refresh: ``https://oauth2.googleapis.com/token``
- user profile: ``https://www.googleapis.com/oauth2/v2/userinfo``
- revocation: ``https://oauth2.googleapis.com/revoke``

Only the basic ``openid email profile`` scopes are requested; the access type
is ``offline`` with ``prompt=consent`` so Google always returns a refresh token.
"""

from __future__ import annotations

import time
from typing import Optional, Type, TypeVar
from urllib.parse import urlencode

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from totalfit.core.logging_config import get_logger
from totalfit.core.monitoring import log_upstream_call

from .errors import UpstreamApiError, UpstreamRequestError

logger = get_logger(__name__)

PROVIDER = "google"

GOOGLE_AUTH_URL = "https://accounts.google.com/o/oauth2/v2/auth"
GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"
GOOGLE_USERINFO_URL = "https://www.googleapis.com/oauth2/v2/userinfo"
GOOGLE_REVOKE_URL = "https://oauth2.googleapis.com/revoke"
SIGN_IN_SCOPES = "openid email profile"

ResponseModel = TypeVar("ResponseModel", bound=BaseModel)


class GoogleTokens(BaseModel):
    """Token endpoint response."""

    model_config = ConfigDict(extra="allow")

    access_token: str
    refresh_token: Optional[str] = None
    expires_in: Optional[int] = None
    token_type: Optional[str] = None
    scope: Optional[str] = None
    id_token: Optional[str] = None


class GoogleUserInfo(BaseModel):
    """Profile returned by the v2 userinfo endpoint."""

    model_config = ConfigDict(extra="allow")

    id: str
    email: str
    name: str = ""
    picture: Optional[str] = None


class GoogleOAuthClient:
    """Async client for Google's OAuth2 endpoints.

    Args:
        client_id: OAuth2 client ID.
        client_secret: OAuth2 client secret.
        redirect_uri: Callback URL registered for the client.
        timeout: HTTP timeout for the internal client.
        client: Optional preconfigured ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        *,
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self._http = client or httpx.AsyncClient(timeout=timeout)

    async def aclose(self) -> None:
        await self._http.aclose()

    def build_authorization_url(self, state: Optional[str] = None) -> str:
        params = {
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "response_type": "code",
            "scope": SIGN_IN_SCOPES,
            "access_type": "offline",
            "prompt": "consent",
        }
        if state:
            params["state"] = state
        return f"{GOOGLE_AUTH_URL}?{urlencode(params)}"

    async def _send(self, operation: str, request: httpx.Request) -> httpx.Response:
        started = time.time()
        try:
            response = await self._http.send(request)
        except httpx.HTTPError as e:
            log_upstream_call(PROVIDER, None, (time.time() - started) * 1000)
            logger.error(f"Google {operation} request failed: {e}", exc_info=True)
            raise UpstreamRequestError(f"Google {operation} request failed: {e}", provider=PROVIDER) from e
        log_upstream_call(PROVIDER, response.status_code, (time.time() - started) * 1000)

        if not response.is_success:
            logger.error(f"Google {operation} failed with status {response.status_code}: {response.text}")
            raise UpstreamApiError(
                f"Google {operation} failed",
                status_code=response.status_code,
                details=response.text,
                provider=PROVIDER,
            )
        return response

    def _parse(self, operation: str, response: httpx.Response, model: Type[ResponseModel]) -> ResponseModel:
        try:
            return model.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error(f"Google {operation} returned an unreadable body: {e}")
            raise UpstreamRequestError(
                f"Google {operation} returned an unreadable body",
                status_code=response.status_code,
                details=response.text,
                provider=PROVIDER,
            ) from e

    async def _token_request(self, operation: str, form: dict) -> GoogleTokens:
        request = self._http.build_request(
            "POST",
            GOOGLE_TOKEN_URL,
            data={**form, "client_id": self.client_id, "client_secret": self.client_secret},
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )
        response = await self._send(operation, request)
        return self._parse(operation, response, GoogleTokens)

    async def exchange_code(self, code: str) -> GoogleTokens:
        """Exchange an authorization code for access and refresh tokens."""
        return await self._token_request(
            "token exchange",
            {"code": code, "redirect_uri": self.redirect_uri, "grant_type": "authorization_code"},
        )

    async def refresh_access_token(self, refresh_token: str) -> GoogleTokens:
        """Obtain a new access token; Google does not return a new refresh token here."""
        return await self._token_request(
            "token refresh", {"refresh_token": refresh_token, "grant_type": "refresh_token"}
        )

    async def get_user_info(self, access_token: str) -> GoogleUserInfo:
        request = self._http.build_request(
            "GET", GOOGLE_USERINFO_URL, headers={"Authorization": f"Bearer {access_token}"}
        )
        response = await self._send("userinfo", request)
        return self._parse("userinfo", response, GoogleUserInfo)

    async def revoke(self, token: str) -> None:
        request = self._http.build_request(
            "POST",
            GOOGLE_REVOKE_URL,
            params={"token": token},
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )
        await self._send("revoke", request)
