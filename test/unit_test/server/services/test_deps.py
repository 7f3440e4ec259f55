"""Unit tests for server services dependencies.

Tests verify that the provider clients are built from the settings, closed
after the request, and skipped when their credentials are missing.
"""

import pytest

from totalfit.core.errors import ConfigurationError
from totalfit.injury_analysis import AthleteService
from totalfit.integrations import ClarifaiClient, FatSecretClient, GoogleOAuthClient
from totalfit.server.core.config import Settings
from totalfit.server.services.deps import (
    AthleteServiceDep,
    get_athlete_service,
    get_clarifai_client,
    get_fatsecret_client,
    get_google_oauth_client,
    get_settings,
    settings,
)

pytestmark = pytest.mark.asyncio


def make_settings(**values) -> Settings:
    defaults = {
        "FATSECRET_KEY": None,
        "FATSECRET_SECRET": None,
        "CLARIFAI_PAT": None,
        "GOOGLE_CLIENT_ID": None,
        "GOOGLE_CLIENT_SECRET": None,
    }
    return Settings(**{**defaults, **values})


async def resolve(generator):
    """Enter a dependency generator and return its value and the generator for cleanup."""
    value = await generator.__anext__()
    return value, generator


async def finish(generator):
    with pytest.raises(StopAsyncIteration):
        await generator.__anext__()


class TestSettingsAndService:
    async def test_get_settings_returns_global_settings(self):
        assert get_settings() is settings

    async def test_athlete_service_uses_request_session(self, session):
        service = get_athlete_service(session)
        assert isinstance(service, AthleteService)
        assert service.session is session

    async def test_athlete_service_dep_uses_factory(self):
        assert AthleteServiceDep.__metadata__[0].dependency is get_athlete_service


class TestFatSecretClientDependency:
    async def test_none_without_credentials(self):
        client, generator = await resolve(get_fatsecret_client(make_settings()))
        assert client is None
        await finish(generator)

    async def test_client_from_settings(self):
        app_settings = make_settings(
            FATSECRET_KEY="key", FATSECRET_SECRET="secret", FATSECRET_API_URL="https://fs.test/server.api"
        )
        client, generator = await resolve(get_fatsecret_client(app_settings))
        assert isinstance(client, FatSecretClient)
        assert client.api_url == "https://fs.test/server.api"
        await finish(generator)
        assert client._http.is_closed


class TestClarifaiClientDependency:
    async def test_none_without_pat(self):
        client, generator = await resolve(get_clarifai_client(make_settings()))
        assert client is None
        await finish(generator)

    async def test_client_from_settings(self):
        client, generator = await resolve(get_clarifai_client(make_settings(CLARIFAI_PAT="pat-123")))
        assert isinstance(client, ClarifaiClient)
        assert client.pat == "pat-123"
        await finish(generator)
        assert client._http.is_closed


class TestGoogleOAuthClientDependency:
    async def test_missing_credentials_raise(self):
        with pytest.raises(ConfigurationError, match="Google OAuth is not configured"):
            await get_google_oauth_client(make_settings(GOOGLE_CLIENT_ID="id")).__anext__()

    async def test_client_from_settings(self):
        app_settings = make_settings(
            GOOGLE_CLIENT_ID="id", GOOGLE_CLIENT_SECRET="secret", APP_URL="https://totalfit.example/"
        )
        client, generator = await resolve(get_google_oauth_client(app_settings))
        assert isinstance(client, GoogleOAuthClient)
        assert client.redirect_uri == "https://totalfit.example/api/auth/callback"
        await finish(generator)
        assert client._http.is_closed
