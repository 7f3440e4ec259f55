"""
Unit tests for server exception handlers.

Tests cover the TotalFit error envelope, the JSON not-found response and the
global handler for unexpected exceptions, both called directly and through a
small application.
"""

import json
from unittest.mock import Mock, patch

import pytest
from fastapi import FastAPI, Request
from httpx import ASGITransport, AsyncClient
from starlette.exceptions import HTTPException as StarletteHTTPException

from totalfit.core.errors import ConfigurationError, NotFoundError, TotalFitError, ValidationFailedError
from totalfit.server.exception_handlers import setup_exception_handlers
from totalfit.server.exception_handlers.domain_handler import not_found_handler, totalfit_error_handler
from totalfit.server.exception_handlers.global_handler import global_exception_handler


@pytest.fixture
def mock_request():
    """Create a mock request object."""
    request = Mock(spec=Request)
    request.method = "GET"
    request.url.path = "/api/athletes/a1"
    request.query_params = {"date": "2025-03-15"}
    request.client = Mock()
    request.client.host = "127.0.0.1"
    return request


class TestTotalFitErrorHandler:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "exc,status_code",
        [
            (NotFoundError("Athlete not found"), 404),
            (ValidationFailedError("athlete_id and activity_type are required"), 400),
            (ConfigurationError("Google OAuth is not configured on the server"), 500),
            (TotalFitError("Conflict", status_code=409), 409),
        ],
    )
    async def test_renders_envelope_with_status(self, mock_request, exc, status_code):
        response = await totalfit_error_handler(mock_request, exc)
        assert response.status_code == status_code
        assert json.loads(response.body) == {"success": False, "error": exc.message}

    @pytest.mark.asyncio
    async def test_server_errors_are_logged_as_errors(self, mock_request):
        with patch("totalfit.server.exception_handlers.domain_handler.logger") as mock_logger:
            await totalfit_error_handler(mock_request, ConfigurationError("missing", details={"key": "X"}))

        mock_logger.error.assert_called_once()
        assert mock_logger.error.call_args[1]["extra"] == {"details": {"key": "X"}}
        mock_logger.info.assert_not_called()

    @pytest.mark.asyncio
    async def test_client_errors_are_logged_as_info(self, mock_request):
        with patch("totalfit.server.exception_handlers.domain_handler.logger") as mock_logger:
            await totalfit_error_handler(mock_request, NotFoundError("Athlete not found"))

        mock_logger.info.assert_called_once()
        mock_logger.error.assert_not_called()


class TestNotFoundHandler:
    @pytest.mark.asyncio
    async def test_not_found_envelope(self, mock_request):
        response = await not_found_handler(mock_request, StarletteHTTPException(status_code=404))
        assert response.status_code == 404
        assert json.loads(response.body) == {
            "success": False,
            "error": "Not found",
            "path": "/api/athletes/a1",
            "method": "GET",
        }

    @pytest.mark.asyncio
    async def test_other_http_errors_keep_default_rendering(self, mock_request):
        response = await not_found_handler(
            mock_request, StarletteHTTPException(status_code=405, detail="Method Not Allowed")
        )
        assert response.status_code == 405
        assert json.loads(response.body) == {"detail": "Method Not Allowed"}


class TestGlobalExceptionHandler:
    """Test suite for global exception handler."""

    @pytest.mark.asyncio
    async def test_returns_500_with_error_id(self, mock_request):
        exc = ValueError("Test error")
        with patch("totalfit.server.exception_handlers.global_handler.logger"):
            response = await global_exception_handler(mock_request, exc)

        assert response.status_code == 500
        assert json.loads(response.body) == {
            "detail": "Internal server error",
            "error_id": id(exc),
            "error_type": "ValueError",
        }

    @pytest.mark.asyncio
    async def test_logs_request_context(self, mock_request):
        with patch("totalfit.server.exception_handlers.global_handler.logger") as mock_logger:
            await global_exception_handler(mock_request, KeyError("athlete_id"))

        mock_logger.error.assert_called_once()
        call_args = mock_logger.error.call_args
        assert "Unhandled exception" in call_args[0][0]
        assert call_args[1]["exc_info"] is True
        extra = call_args[1]["extra"]
        assert extra["method"] == "GET"
        assert extra["path"] == "/api/athletes/a1"
        assert extra["query_params"] == {"date": "2025-03-15"}
        assert extra["client"] == "127.0.0.1"
        assert extra["error_type"] == "KeyError"

    @pytest.mark.asyncio
    async def test_handles_missing_client(self, mock_request):
        mock_request.client = None
        with patch("totalfit.server.exception_handlers.global_handler.logger") as mock_logger:
            await global_exception_handler(mock_request, RuntimeError("boom"))

        assert mock_logger.error.call_args[1]["extra"]["client"] == "unknown"

    @pytest.mark.asyncio
    async def test_reports_to_monitoring(self, mock_request):
        exc = RuntimeError("boom")
        with (
            patch("totalfit.server.exception_handlers.global_handler.logger"),
            patch("totalfit.server.exception_handlers.global_handler.log_error") as mock_log_error,
        ):
            await global_exception_handler(mock_request, exc)

        mock_log_error.assert_called_once_with(
            "RuntimeError", "boom", {"error_id": id(exc), "path": "/api/athletes/a1"}
        )


class TestSetupExceptionHandlers:
    def test_registers_handlers(self):
        app = FastAPI()
        setup_exception_handlers(app)

        assert app.exception_handlers[TotalFitError] is totalfit_error_handler
        assert app.exception_handlers[StarletteHTTPException] is not_found_handler
        assert app.exception_handlers[Exception] is global_exception_handler

    @pytest.mark.asyncio
    async def test_handlers_through_an_application(self):
        app = FastAPI()
        setup_exception_handlers(app)

        @app.get("/missing")
        async def missing():
            raise NotFoundError("Athlete not found")

        @app.get("/crash")
        async def crash():
            raise RuntimeError("boom")

        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            missing_response = await client.get("/missing")
            crash_response = await client.get("/crash")

        assert missing_response.status_code == 404
        assert missing_response.json() == {"success": False, "error": "Athlete not found"}
        assert crash_response.status_code == 500
        assert crash_response.json()["error_type"] == "RuntimeError"
