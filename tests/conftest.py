"""Pytest fixtures and configuration."""

import os
from collections.abc import AsyncIterator, Iterator
from typing import Any
from unittest.mock import AsyncMock, patch

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

# Set test environment variables before importing the app
os.environ.setdefault("TMDB_API_KEY", "test-api-key")
os.environ.setdefault("DEBUG", "true")

from movie_gateway.main import app
from movie_gateway.services.tmdb import TMDBClient

TEST_API_KEY = "test-api-key"
TEST_BASE_URL = "https://api.themoviedb.org/3"


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client for testing FastAPI endpoints."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def tmdb_client() -> TMDBClient:
    """Create a TMDB client for testing."""
    return TMDBClient(api_key=TEST_API_KEY, base_url=TEST_BASE_URL)


@pytest.fixture
def upstream(tmdb_client: TMDBClient) -> Iterator[tuple[dict[str, Any], AsyncMock]]:
    """Replace the client's HTTP layer with canned answers keyed by endpoint path.

    Yields the routes dict (path -> ``httpx.Response`` or exception to raise)
    and the mocked ``httpx.AsyncClient`` so tests can inspect the calls made.
    """
    routes: dict[str, Any] = {}

    async def request(method: str, url: str, params: dict[str, Any] | None = None) -> httpx.Response:
        answer = routes[url]
        if isinstance(answer, Exception):
            raise answer
        return answer

    with patch.object(tmdb_client, "_get_client") as mock_get_client:
        mock_client = AsyncMock()
        mock_client.request.side_effect = request
        mock_get_client.return_value = mock_client
        yield routes, mock_client
