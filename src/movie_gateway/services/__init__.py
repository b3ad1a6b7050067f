"""Upstream API clients and response decoding."""

from movie_gateway.services.base import (
    BaseAPIClient,
    ConfigurationError,
    EnvelopeError,
    GatewayError,
    InvalidArgumentError,
    NotFoundError,
    UpstreamError,
    UpstreamTimeoutError,
)
from movie_gateway.services.search import MediaType, SearchHit, discriminate
from movie_gateway.services.tmdb import TMDBClient, get_tmdb_client

__all__ = [
    "BaseAPIClient",
    "ConfigurationError",
    "EnvelopeError",
    "GatewayError",
    "InvalidArgumentError",
    "NotFoundError",
    "UpstreamError",
    "UpstreamTimeoutError",
    "MediaType",
    "SearchHit",
    "discriminate",
    "TMDBClient",
    "get_tmdb_client",
]
