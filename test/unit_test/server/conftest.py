"""Fixtures shared by the server endpoint tests."""

from typing import Any, Callable, Dict

import httpx
import pytest
import pytest_asyncio
from httpx import AsyncClient


@pytest.fixture
def override_dependency(app) -> Callable[[Callable, Any], None]:
    """Make a dependency resolve to a fixed value for the current test."""

    def _override(dependency: Callable, value: Any) -> None:
        app.dependency_overrides[dependency] = lambda: value

    return _override


@pytest.fixture
def mock_http_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.AsyncClient]:
    """Build an ``httpx.AsyncClient`` answered by a handler function."""

    def _build(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _build


@pytest_asyncio.fixture
async def created_athlete(client: AsyncClient) -> Dict[str, Any]:
    response = await client.post(
        "/api/athletes",
        json={
            "name": "Jordan Lee",
            "user_id": "coach-1",
            "primary_sport": "Basketball",
            "position": "Guard",
            "team": "Hawks",
        },
    )
    assert response.status_code == 201
    return response.json()["data"]
