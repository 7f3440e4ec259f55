"""
Request-scoped dependencies.

Provides the settings object, the injury-analysis service and the
third-party API clients to route handlers. Each client is opened for the
request and closed afterwards; tests replace these factories through
``app.dependency_overrides``.
"""

from typing import Annotated, AsyncGenerator, Optional

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from totalfit.core.database import get_session
from totalfit.core.errors import ConfigurationError
from totalfit.injury_analysis import AthleteService
from totalfit.integrations import ClarifaiClient, FatSecretClient, GoogleOAuthClient
from totalfit.server.core.config import Settings, settings


def get_settings() -> Settings:
    return settings


SettingsDep = Annotated[Settings, Depends(get_settings)]
SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_athlete_service(session: SessionDep) -> AthleteService:
    return AthleteService(session)


async def get_fatsecret_client(app_settings: SettingsDep) -> AsyncGenerator[Optional[FatSecretClient], None]:
    """FatSecret client, or ``None`` when the consumer credentials are not configured."""
    config = app_settings.fatsecret
    if not config.is_configured:
        yield None
        return
    client = FatSecretClient(
        config.consumer_key,
        config.consumer_secret,
        api_url=config.api_url,
        timeout=app_settings.http_timeout_seconds,
    )
    try:
        yield client
    finally:
        await client.aclose()


async def get_clarifai_client(app_settings: SettingsDep) -> AsyncGenerator[Optional[ClarifaiClient], None]:
    """Clarifai client, or ``None`` when no PAT is configured."""
    config = app_settings.clarifai
    if not config.is_configured:
        yield None
        return
    client = ClarifaiClient(config.pat, api_url=config.api_url, timeout=app_settings.http_timeout_seconds)
    try:
        yield client
    finally:
        await client.aclose()


async def get_google_oauth_client(app_settings: SettingsDep) -> AsyncGenerator[GoogleOAuthClient, None]:
    """Google OAuth2 client.

    Raises:
        ConfigurationError: The Google client ID or secret is missing
    """
    config = app_settings.google
    if not (config.client_id and config.client_secret):
        raise ConfigurationError("Google OAuth is not configured on the server")
    client = GoogleOAuthClient(
        config.client_id,
        config.client_secret,
        config.redirect_uri,
        timeout=app_settings.http_timeout_seconds,
    )
    try:
        yield client
    finally:
        await client.aclose()


AthleteServiceDep = Annotated[AthleteService, Depends(get_athlete_service)]
FatSecretClientDep = Annotated[Optional[FatSecretClient], Depends(get_fatsecret_client)]
ClarifaiClientDep = Annotated[Optional[ClarifaiClient], Depends(get_clarifai_client)]
GoogleOAuthClientDep = Annotated[GoogleOAuthClient, Depends(get_google_oauth_client)]
