"""TMDB (The Movie Database) API client service."""

from collections.abc import AsyncIterator
from typing import Any

import httpx

from movie_gateway.config import Settings, get_settings
from movie_gateway.schemas.external import (
    TMDBCastMember,
    TMDBMovieDetails,
    TMDBMovieResult,
    TMDBPage,
    TMDBReview,
    TMDBTvShowDetails,
    TMDBTvShowResult,
    TMDBVideo,
)
from movie_gateway.services.base import (
    BaseAPIClient,
    ConfigurationError,
    InvalidArgumentError,
)
from movie_gateway.services.search import SearchHit, discriminate
from movie_gateway.services.shapes import Endpoint, Entity, Paged, Unwrapped


FIRST_PAGE = {"page": 1}


class TMDBClient(BaseAPIClient):
    """Client for The Movie Database (TMDB) v3 API.

    Every call appends the API key and the configured language. Each endpoint
    declares its response shape in ``ENDPOINTS``; the public methods only pick
    the endpoint and validate arguments.
    """

    ENDPOINTS: dict[str, Endpoint[Any]] = {
        # Listings
        "discover_movies": Endpoint(
            "discover/movie",
            Paged(TMDBMovieResult),
            {"sort_by": "popularity.desc", "include_adult": "false", "include_video": "false"},
        ),
        "discover_tv_shows": Endpoint(
            "discover/tv",
            Paged(TMDBTvShowResult),
            {"sort_by": "popularity.desc", "include_null_first_air_dates": "false"},
        ),
        "top_rated_movies": Endpoint(
            "movie/top_rated", Unwrapped("results", TMDBMovieResult), FIRST_PAGE
        ),
        "upcoming_movies": Endpoint(
            "movie/upcoming", Unwrapped("results", TMDBMovieResult), FIRST_PAGE
        ),
        "popular_movies": Endpoint(
            "movie/popular", Unwrapped("results", TMDBMovieResult), FIRST_PAGE
        ),
        "top_rated_tv_shows": Endpoint(
            "tv/top_rated", Unwrapped("results", TMDBTvShowResult), FIRST_PAGE
        ),
        "popular_tv_shows": Endpoint(
            "tv/popular", Unwrapped("results", TMDBTvShowResult), FIRST_PAGE
        ),
        "search_multi": Endpoint(
            "search/multi",
            Unwrapped("results", dict[str, Any]),
            {"page": 1, "include_adult": "false"},
        ),
        # Movie relations
        "movie_details": Endpoint("movie/{id}", Entity(TMDBMovieDetails)),
        "movie_credits": Endpoint("movie/{id}/credits", Unwrapped("cast", TMDBCastMember)),
        "movie_reviews": Endpoint(
            "movie/{id}/reviews", Unwrapped("results", TMDBReview), FIRST_PAGE
        ),
        "movie_videos": Endpoint("movie/{id}/videos", Unwrapped("results", TMDBVideo)),
        # TV show relations
        "tv_details": Endpoint("tv/{id}", Entity(TMDBTvShowDetails)),
        "tv_credits": Endpoint("tv/{id}/credits", Unwrapped("cast", TMDBCastMember)),
        "tv_reviews": Endpoint("tv/{id}/reviews", Unwrapped("results", TMDBReview), FIRST_PAGE),
        "tv_videos": Endpoint("tv/{id}/videos", Unwrapped("results", TMDBVideo)),
    }

    def __init__(
        self,
        api_key: str,
        base_url: str,
        timeout: float = 10.0,
        language: str = "en-US",
    ) -> None:
        """Initialize the TMDB client.

        Args:
            api_key: TMDB v3 API key.
            base_url: TMDB base URL.
            timeout: Request timeout in seconds.
            language: Response language code sent with every request.

        Raises:
            ConfigurationError: If the API key or base URL is missing.
        """
        if not api_key:
            raise ConfigurationError("TMDB API key is required")
        if not base_url:
            raise ConfigurationError("TMDB base URL is required")

        self._api_key = api_key
        self.language = language
        super().__init__(base_url=base_url, timeout=timeout)

    @classmethod
    def from_settings(cls, settings: Settings) -> "TMDBClient":
        """Build a client from application settings."""
        return cls(
            api_key=settings.tmdb_api_key,
            base_url=settings.tmdb_base_url,
            timeout=settings.tmdb_timeout,
            language=settings.tmdb_language,
        )

    @property
    def default_headers(self) -> dict[str, str]:
        return {"Accept": "application/json"}

    @property
    def default_params(self) -> dict[str, Any]:
        return {"api_key": self._api_key, "language": self.language}

    def _error_message(self, response: httpx.Response) -> str | None:
        """TMDB error bodies look like ``{"status_code": 7, "status_message": "..."}``."""
        try:
            body = response.json()
        except ValueError:
            return None
        if isinstance(body, dict) and isinstance(body.get("status_message"), str):
            return body["status_message"]
        return None

    async def _fetch(
        self,
        name: str,
        params: dict[str, Any] | None = None,
        **path_args: Any,
    ) -> Any:
        endpoint = self.ENDPOINTS[name]
        path = endpoint.format(**path_args)
        request_params = dict(endpoint.params)
        if params:
            request_params.update(params)
        data = await self.get(path, params=request_params)
        return endpoint.shape.decode(data, path)

    # Listings

    async def discover_movies(self, page: int = 1) -> TMDBPage[TMDBMovieResult]:
        """Get one page of movies sorted by popularity.

        Args:
            page: Page number (1-based).

        Returns:
            The page with ``page`` and ``total_results`` as reported by TMDB.
        """
        return await self._fetch("discover_movies", params={"page": _check_page(page)})

    async def discover_tv_shows(self, page: int = 1) -> TMDBPage[TMDBTvShowResult]:
        """Get one page of TV shows sorted by popularity.

        Args:
            page: Page number (1-based).

        Returns:
            The page with ``page`` and ``total_results`` as reported by TMDB.
        """
        return await self._fetch("discover_tv_shows", params={"page": _check_page(page)})

    async def get_top_rated_movies(self) -> list[TMDBMovieResult]:
        return await self._fetch("top_rated_movies")

    async def get_upcoming_movies(self) -> list[TMDBMovieResult]:
        return await self._fetch("upcoming_movies")

    async def get_popular_movies(self) -> list[TMDBMovieResult]:
        return await self._fetch("popular_movies")

    async def get_top_rated_tv_shows(self) -> list[TMDBTvShowResult]:
        return await self._fetch("top_rated_tv_shows")

    async def get_popular_tv_shows(self) -> list[TMDBTvShowResult]:
        return await self._fetch("popular_tv_shows")

    async def search_multi(self, query: str) -> list[SearchHit]:
        """Search movies and TV shows by name.

        Args:
            query: Search query string.

        Returns:
            Movie and TV show results in upstream order. People and other
            media types are dropped.
        """
        items = await self._fetch("search_multi", params={"query": query})
        return discriminate(items, self.ENDPOINTS["search_multi"].path)

    # Movie relations

    async def get_movie_details(self, movie_id: int) -> TMDBMovieDetails:
        """Get detailed information about a specific movie.

        Raises:
            NotFoundError: If the movie is not found.
        """
        return await self._fetch("movie_details", id=_check_id(movie_id))

    async def get_movie_credits(self, movie_id: int) -> list[TMDBCastMember]:
        return await self._fetch("movie_credits", id=_check_id(movie_id))

    async def get_movie_reviews(self, movie_id: int) -> list[TMDBReview]:
        """Get the first page of reviews for a movie."""
        return await self._fetch("movie_reviews", id=_check_id(movie_id))

    async def get_movie_videos(self, movie_id: int) -> list[TMDBVideo]:
        return await self._fetch("movie_videos", id=_check_id(movie_id))

    # TV show relations

    async def get_tv_show_details(self, tv_id: int) -> TMDBTvShowDetails:
        """Get detailed information about a specific TV show.

        Raises:
            NotFoundError: If the show is not found.
        """
        return await self._fetch("tv_details", id=_check_id(tv_id))

    async def get_tv_show_credits(self, tv_id: int) -> list[TMDBCastMember]:
        return await self._fetch("tv_credits", id=_check_id(tv_id))

    async def get_tv_show_reviews(self, tv_id: int) -> list[TMDBReview]:
        """Get the first page of reviews for a TV show."""
        return await self._fetch("tv_reviews", id=_check_id(tv_id))

    async def get_tv_show_videos(self, tv_id: int) -> list[TMDBVideo]:
        return await self._fetch("tv_videos", id=_check_id(tv_id))


def _check_id(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidArgumentError(f"Identifier must be a non-negative integer, got {value!r}")
    return value


def _check_page(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidArgumentError(f"Page must be a positive integer, got {value!r}")
    return value


async def get_tmdb_client() -> AsyncIterator[TMDBClient]:
    """Provide a TMDB client for the duration of one request.

    Can be used as a FastAPI dependency.
    """
    client = TMDBClient.from_settings(get_settings())
    try:
        yield client
    finally:
        await client.close()
