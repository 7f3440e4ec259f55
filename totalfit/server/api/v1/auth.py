"""
Google OAuth2 sign-in endpoints.

Implements the server side of the authorization-code flow: redirect to
Google, handle the callback, and refresh or revoke tokens for the web client.
The callback hands the tokens to the web app's ``/auth/complete`` page as
query parameters.
"""

from urllib.parse import urlencode

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse, RedirectResponse

from totalfit.core.database.repositories import UserRepository
from totalfit.core.logging_config import get_logger
from totalfit.core.models.io.auth import (
    RefreshTokenRequest,
    RefreshTokenResponse,
    RevokeTokenRequest,
    TokenExchangeRequest,
)
from totalfit.integrations import UpstreamApiError
from totalfit.server.services.deps import GoogleOAuthClientDep, SessionDep, SettingsDep

logger = get_logger(__name__)

router = APIRouter(tags=["auth"])


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _app_redirect(app_url: str, path: str, params: dict) -> RedirectResponse:
    return RedirectResponse(f"{app_url.rstrip('/')}{path}?{urlencode(params)}")


@router.get(
    "/google",
    summary="Start Google Sign-In",
    description="Redirect the browser to Google's consent screen.",
    response_class=RedirectResponse,
)
async def google_sign_in(client: GoogleOAuthClientDep, state: str | None = None) -> RedirectResponse:
    return RedirectResponse(client.build_authorization_url(state=state))


@router.post(
    "/token",
    summary="Exchange Authorization Code",
    description="Exchange a Google authorization code for access and refresh tokens.",
    responses={
        200: {"description": "Google token response"},
        400: {"description": "Code missing"},
        500: {"description": "Google rejected the code"},
    },
)
async def exchange_token(request: TokenExchangeRequest, client: GoogleOAuthClientDep) -> JSONResponse:
    if not request.code:
        return _error(status.HTTP_400_BAD_REQUEST, "Authorization code is required")
    try:
        tokens = await client.exchange_code(request.code)
    except UpstreamApiError:
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to exchange code for token")
    return JSONResponse(content=tokens.model_dump(exclude_none=True))


@router.get(
    "/callback",
    summary="Google OAuth Callback",
    description="Complete sign-in: exchange the code, load the Google profile, store the user "
    "and redirect to the web app.",
    response_class=RedirectResponse,
)
async def google_callback(
    client: GoogleOAuthClientDep,
    session: SessionDep,
    app_settings: SettingsDep,
    code: str | None = None,
    error: str | None = None,
) -> RedirectResponse:
    """
    Handle Google's redirect back to the app.

    - **error**: set by Google when the user declined; forwarded to the web app.
    - **code**: the authorization code to exchange.

    Failing to store the user is logged and does not abort sign-in.
    """
    app_url = app_settings.google.app_url
    if error:
        logger.error(f"OAuth error: {error}")
        return _app_redirect(app_url, "/", {"error": error})
    if not code:
        return _app_redirect(app_url, "/", {"error": "missing_code"})

    try:
        tokens = await client.exchange_code(code)
        user_info = await client.get_user_info(tokens.access_token)
    except UpstreamApiError as e:
        logger.error(f"OAuth callback error: {e.message}")
        return _app_redirect(app_url, "/", {"error": "auth_failed"})

    try:
        await UserRepository(session).upsert_google_user(
            google_id=user_info.id,
            email=user_info.email,
            name=user_info.name,
            picture_url=user_info.picture,
            access_token=tokens.access_token,
            refresh_token=tokens.refresh_token,
        )
        logger.info(f"Stored Google user {user_info.id}")
    except Exception as e:
        await session.rollback()
        logger.error(f"Failed to save user {user_info.id} to database: {e}", exc_info=True)

    return _app_redirect(
        app_url,
        "/auth/complete",
        {
            "access_token": tokens.access_token,
            "refresh_token": tokens.refresh_token or "",
            "user_id": user_info.id,
            "user_email": user_info.email,
            "user_name": user_info.name,
            "user_picture": user_info.picture or "",
        },
    )


@router.post(
    "/refresh",
    summary="Refresh Access Token",
    description="Obtain a new Google access token from a refresh token.",
    response_model=RefreshTokenResponse,
    responses={
        400: {"description": "Refresh token missing"},
        500: {"description": "Google rejected the refresh token"},
    },
)
async def refresh_token(request: RefreshTokenRequest, client: GoogleOAuthClientDep):
    if not request.refresh_token:
        return _error(status.HTTP_400_BAD_REQUEST, "Refresh token is required")
    try:
        tokens = await client.refresh_access_token(request.refresh_token)
    except UpstreamApiError:
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to refresh token")
    return RefreshTokenResponse(
        access_token=tokens.access_token,
        expires_in=tokens.expires_in,
        token_type=tokens.token_type,
        scope=tokens.scope,
    )


@router.post(
    "/revoke",
    summary="Revoke Token",
    description="Revoke a Google access or refresh token (sign-out).",
    responses={400: {"description": "Token missing"}, 500: {"description": "Google rejected the revocation"}},
)
async def revoke_token(request: RevokeTokenRequest, client: GoogleOAuthClientDep):
    if not request.token:
        return _error(status.HTTP_400_BAD_REQUEST, "Token is required")
    try:
        await client.revoke(request.token)
    except UpstreamApiError:
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to revoke token")
    return {"success": True}
