"""Tests for application logging."""

import logging

import httpx
import pytest

import movie_gateway.main  # noqa: F401  (configures logging)
from movie_gateway.services.tmdb import TMDBClient

SECRET_KEY = "secret-key-do-not-log"


def top_rated(request: httpx.Request) -> httpx.Response:
    assert request.url.params["api_key"] == SECRET_KEY
    return httpx.Response(200, json={"page": 1, "results": [{"id": 1, "title": "A"}]})


async def test_api_key_never_logged(caplog: pytest.LogCaptureFixture) -> None:
    """The key travels in the query string, so request URLs must stay out of the logs."""
    tmdb = TMDBClient(api_key=SECRET_KEY, base_url="https://api.themoviedb.org/3")
    tmdb._client = httpx.AsyncClient(
        base_url=tmdb.base_url,
        headers=tmdb.default_headers,
        transport=httpx.MockTransport(top_rated),
    )

    with caplog.at_level(logging.DEBUG):
        async with tmdb:
            movies = await tmdb.get_top_rated_movies()

    assert [m.id for m in movies] == [1]
    assert caplog.records
    assert not [r for r in caplog.records if SECRET_KEY in r.getMessage()]


def test_httpx_request_logging_is_quiet() -> None:
    assert not logging.getLogger("httpx").isEnabledFor(logging.INFO)
