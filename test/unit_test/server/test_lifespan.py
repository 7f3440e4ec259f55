"""
Unit tests for FastAPI application lifespan management.

Tests verify that startup creates the schema through ``init_db`` and that a
database failure is logged without stopping the server.
"""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi import FastAPI

pytestmark = pytest.mark.asyncio


class TestLifespan:
    """Test application startup and shutdown events."""

    async def test_startup_initializes_database(self):
        from totalfit.server.main import lifespan

        with patch("totalfit.server.main.init_db", new_callable=AsyncMock) as mock_init_db:
            async with lifespan(FastAPI()):
                mock_init_db.assert_awaited_once()

    async def test_startup_and_shutdown_are_logged(self):
        from totalfit.server.main import lifespan

        with (
            patch("totalfit.server.main.init_db", new_callable=AsyncMock),
            patch("totalfit.server.main.logger") as mock_logger,
        ):
            async with lifespan(FastAPI()):
                pass

        calls = [call[0][0] for call in mock_logger.info.call_args_list]
        assert any("Starting up TotalFit Server" in call for call in calls)
        assert any("Database initialized successfully" in call for call in calls)
        assert any("Shutting down TotalFit Server" in call for call in calls)

    async def test_database_failure_does_not_abort_startup(self):
        from totalfit.server.main import lifespan

        with (
            patch("totalfit.server.main.init_db", new_callable=AsyncMock) as mock_init_db,
            patch("totalfit.server.main.logger") as mock_logger,
        ):
            mock_init_db.side_effect = Exception("Database connection failed")
            async with lifespan(FastAPI()):
                pass

        mock_logger.error.assert_called_once()
        assert "Database initialization failed" in mock_logger.error.call_args[0][0]


class TestApplication:
    def test_documentation_lives_under_api_prefix(self):
        from totalfit.server.main import app

        assert app.openapi_url == "/api/openapi.json"
        assert app.docs_url == "/api/docs"
        assert app.title == "TotalFit"

    def test_routes_are_registered(self):
        from totalfit.server.main import app

        paths = set(app.openapi()["paths"])
        assert {
            "/health",
            "/api/fatsecret",
            "/api/clarifai",
            "/api/auth/callback",
            "/api/users/upsert",
            "/api/users/{user_id}/health-score",
            "/api/athletes/{athlete_id}/injury-risk",
            "/api/activities/log",
            "/api/recovery/daily-update",
        } <= paths

    def test_run_uses_configured_host_and_port(self):
        from totalfit.server import main

        with patch("totalfit.server.main.uvicorn.run") as mock_run:
            main.run()

        mock_run.assert_called_once_with(
            "totalfit.server.main:app",
            host=main.settings.server_host,
            port=main.settings.server_port,
            log_level=main.settings.log_level.lower(),
        )
