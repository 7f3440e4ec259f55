"""Unit tests for server configuration settings model.

Tests verify that the Settings model binds the environment variables listed
in the .env.example file and that the grouped provider configurations work
as expected.
"""

from pathlib import Path

import pytest

from totalfit.server.core.config import (
    DEFAULT_CLARIFAI_API_URL,
    DEFAULT_FATSECRET_API_URL,
    ClarifaiConfig,
    CORSConfig,
    FatSecretConfig,
    GoogleOAuthConfig,
    Settings,
)


@pytest.fixture
def env_example_path() -> Path:
    """Get path to .env.example file."""
    return Path(__file__).resolve().parents[4] / ".env.example"


@pytest.fixture
def env_example_vars(env_example_path: Path) -> dict[str, str]:
    """Parse .env.example file and return environment variables."""
    env_vars = {}
    with open(env_example_path) as f:
        for line in f:
            line = line.strip()
            # Skip comments and empty lines
            if not line or line.startswith("#"):
                continue
            if "=" in line:
                key, value = line.split("=", 1)
                env_vars[key.strip()] = value.strip()
    return env_vars


class TestSettingsBinding:
    """Test Settings model environment variable binding."""

    def test_example_lists_every_setting(self, env_example_vars: dict[str, str]):
        documented = set(env_example_vars)
        commented = {"FATSECRET_API_URL", "CLARIFAI_API_URL", "CORS_ALLOW_METHODS", "CORS_ALLOW_HEADERS"}
        aliases = {field.alias for field in Settings.model_fields.values()}
        assert aliases - commented <= documented

    def test_server_binding(self, env_example_vars: dict[str, str], monkeypatch):
        for key in ("TOTALFIT_SERVER_HOST", "TOTALFIT_SERVER_PORT", "TOTALFIT_LOG_LEVEL", "TOTALFIT_ENV"):
            monkeypatch.setenv(key, env_example_vars[key])

        settings = Settings()
        assert settings.server_host == env_example_vars["TOTALFIT_SERVER_HOST"]
        assert settings.server_port == int(env_example_vars["TOTALFIT_SERVER_PORT"])
        assert settings.log_level == env_example_vars["TOTALFIT_LOG_LEVEL"]
        assert settings.is_development

    def test_http_timeout_binding(self, monkeypatch):
        monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "12.5")
        assert Settings().http_timeout_seconds == 12.5

    def test_database_url_binding(self):
        """The test suite points DATABASE_URL at in-memory SQLite."""
        assert Settings().database_url == "sqlite+aiosqlite:///:memory:"

    def test_cors_binding(self, env_example_vars: dict[str, str], monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", '["https://totalfit.example", "http://localhost:3000"]')
        monkeypatch.setenv("CORS_ALLOW_CREDENTIALS", env_example_vars["CORS_ALLOW_CREDENTIALS"])

        cors = Settings().cors
        assert isinstance(cors, CORSConfig)
        assert cors.origins == ["https://totalfit.example", "http://localhost:3000"]
        assert cors.allow_credentials is True
        assert cors.allow_methods == ["*"]

    def test_production_environment(self, monkeypatch):
        monkeypatch.setenv("TOTALFIT_ENV", "production")
        assert not Settings().is_development


class TestProviderConfigs:
    def test_fatsecret_from_settings(self, monkeypatch):
        monkeypatch.setenv("FATSECRET_KEY", "key")
        monkeypatch.setenv("FATSECRET_SECRET", "secret")

        fatsecret = Settings().fatsecret
        assert isinstance(fatsecret, FatSecretConfig)
        assert fatsecret.consumer_key == "key"
        assert fatsecret.api_url == DEFAULT_FATSECRET_API_URL
        assert fatsecret.is_configured

    @pytest.mark.parametrize("values", [{}, {"FATSECRET_KEY": "key"}, {"FATSECRET_KEY": "", "FATSECRET_SECRET": ""}])
    def test_fatsecret_needs_both_credentials(self, values):
        assert not FatSecretConfig.model_validate(values).is_configured

    def test_clarifai(self):
        assert not ClarifaiConfig.model_validate({}).is_configured
        clarifai = ClarifaiConfig.model_validate({"CLARIFAI_PAT": "pat"})
        assert clarifai.is_configured
        assert clarifai.api_url == DEFAULT_CLARIFAI_API_URL

    def test_google_redirect_uri(self):
        google = GoogleOAuthConfig.model_validate(
            {"GOOGLE_CLIENT_ID": "id", "GOOGLE_CLIENT_SECRET": "secret", "APP_URL": "https://totalfit.example/"}
        )
        assert google.client_id == "id"
        assert google.redirect_uri == "https://totalfit.example/api/auth/callback"

    def test_google_defaults_to_local_web_app(self):
        assert GoogleOAuthConfig.model_validate({}).redirect_uri == "http://localhost:3000/api/auth/callback"
