"""Pydantic schemas for upstream payloads."""

from movie_gateway.schemas.external import (
    TMDBCastMember,
    TMDBCreator,
    TMDBGenre,
    TMDBMovieDetails,
    TMDBMovieResult,
    TMDBPage,
    TMDBReview,
    TMDBReviewAuthor,
    TMDBSeason,
    TMDBTvShowDetails,
    TMDBTvShowResult,
    TMDBVideo,
)

__all__ = [
    # Listings
    "TMDBMovieResult",
    "TMDBTvShowResult",
    "TMDBPage",
    # Details
    "TMDBMovieDetails",
    "TMDBTvShowDetails",
    "TMDBGenre",
    "TMDBCreator",
    "TMDBSeason",
    # Relations
    "TMDBCastMember",
    "TMDBReview",
    "TMDBReviewAuthor",
    "TMDBVideo",
]
