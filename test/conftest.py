from __future__ import annotations

import os
from datetime import date
from pathlib import Path
from typing import AsyncGenerator
from unittest.mock import patch

import httpx
import pytest
import pytest_asyncio
from dotenv import load_dotenv
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel.pool import StaticPool

TEST_ROOT = Path(__file__).resolve().parent
# Optional local overrides for the test run
load_dotenv(TEST_ROOT / ".env", override=False)

# Use in-memory SQLite; must be set before the application settings are imported
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
os.environ["DATABASE_URL"] = TEST_DATABASE_URL

FIXED_TODAY = date(2025, 3, 15)


@pytest.fixture(autouse=True)
def _global_offline_http_guard(monkeypatch: pytest.MonkeyPatch):
    """Block real network traffic; ``MockTransport`` and ``ASGITransport`` clients are unaffected."""

    def offline_sync(self, request):
        raise RuntimeError(f"External HTTP blocked by global offline guard: {request.url}")

    async def offline_async(self, request):
        raise RuntimeError(f"External HTTP blocked by global offline guard (async): {request.url}")

    monkeypatch.setattr(httpx.HTTPTransport, "handle_request", offline_sync, raising=True)
    monkeypatch.setattr(httpx.AsyncHTTPTransport, "handle_async_request", offline_async, raising=True)


@pytest.fixture
def fixed_today():
    """Pin ``clock.utc_today`` so date-relative windows are deterministic."""
    with patch("totalfit.core.clock.utc_today", return_value=FIXED_TODAY):
        yield FIXED_TODAY


@pytest_asyncio.fixture
async def test_engine():
    """In-memory SQLite engine with every table created."""
    from totalfit.core.database import create_all

    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all(engine)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_maker(test_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture(name="session")
async def session_fixture(session_maker) -> AsyncGenerator[AsyncSession, None]:
    """Create a new session for each test."""
    async with session_maker() as session:
        yield session


@pytest_asyncio.fixture
async def app(session_maker):
    """The application with its database dependency pointed at the test engine."""
    from totalfit.core.database import get_session
    from totalfit.server.main import app as fastapi_app

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        async with session_maker() as session:
            yield session

    fastapi_app.dependency_overrides[get_session] = get_session_override
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest_asyncio.fixture(name="client")
async def client_fixture(app) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client bound to the application through ``ASGITransport``."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client
