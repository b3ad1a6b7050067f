"""Pydantic schemas for TMDB API responses."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

T = TypeVar("T", bound=BaseModel)


class TMDBModel(BaseModel):
    """Base for upstream payloads; unknown fields are ignored, models are immutable."""

    model_config = ConfigDict(extra="ignore", frozen=True)


# Listing entities
class TMDBMovieResult(TMDBModel):
    """A single movie from a TMDB listing or search."""

    id: int = Field(description="TMDB movie ID")
    title: str | None = Field(default=None, description="Movie title")
    poster_path: str | None = Field(default=None, description="Poster image path")
    release_date: str | None = Field(default=None, description="Release date (YYYY-MM-DD)")
    vote_average: float | None = Field(default=None, description="Average vote score")


class TMDBTvShowResult(TMDBModel):
    """A single TV show from a TMDB listing or search."""

    id: int = Field(description="TMDB TV show ID")
    name: str | None = Field(default=None, description="TV show name")
    poster_path: str | None = Field(default=None, description="Poster image path")
    first_air_date: str | None = Field(default=None, description="First air date (YYYY-MM-DD)")
    vote_average: float | None = Field(default=None, description="Average vote score")


class TMDBPage(TMDBModel, Generic[T]):
    """A paged listing envelope, as reported by the upstream."""

    page: int = Field(description="Current page number")
    total_results: int = Field(description="Total number of results")
    total_pages: int | None = Field(default=None, description="Total number of pages")
    results: list[T] = Field(description="Page results")


# Details
class TMDBGenre(TMDBModel):
    id: int
    name: str | None = None


class TMDBCreator(TMDBModel):
    id: int
    name: str | None = None
    profile_path: str | None = None


class TMDBSeason(TMDBModel):
    id: int
    air_date: str | None = None
    episode_count: int | None = None
    name: str | None = None
    poster_path: str | None = None
    season_number: int | None = None


class TMDBMovieDetails(TMDBModel):
    """Detailed movie information from TMDB."""

    id: int = Field(description="TMDB movie ID")
    title: str | None = Field(default=None, description="Movie title")
    genres: list[TMDBGenre] | None = Field(default=None, description="Genres")
    poster_path: str | None = Field(default=None, description="Poster image path")
    release_date: str | None = Field(default=None, description="Release date")
    revenue: int | None = Field(default=None, description="Box office revenue")
    runtime: int | None = Field(default=None, description="Runtime in minutes")
    vote_average: float | None = Field(default=None, description="Average vote score")


class TMDBTvShowDetails(TMDBModel):
    """Detailed TV show information from TMDB."""

    id: int = Field(description="TMDB TV show ID")
    name: str | None = Field(default=None, description="TV show name")
    created_by: list[TMDBCreator] | None = Field(default=None, description="Show creators")
    first_air_date: str | None = Field(default=None, description="First air date")
    last_air_date: str | None = Field(default=None, description="Last air date")
    genres: list[TMDBGenre] | None = Field(default=None, description="Genres")
    number_of_episodes: int | None = Field(default=None, description="Episode count")
    number_of_seasons: int | None = Field(default=None, description="Season count")
    poster_path: str | None = Field(default=None, description="Poster image path")
    seasons: list[TMDBSeason] | None = Field(default=None, description="Seasons")
    vote_average: float | None = Field(default=None, description="Average vote score")


# Related sequences
class TMDBCastMember(TMDBModel):
    """A single cast member from TMDB credits."""

    id: int = Field(description="TMDB person ID")
    name: str | None = Field(default=None, description="Person's name")
    profile_path: str | None = Field(default=None, description="Profile image path")
    character: str | None = Field(default=None, description="Character name")


class TMDBReviewAuthor(TMDBModel):
    """Author block of a TMDB review."""

    name: str | None = None
    avatar_path: str | None = None
    rating: str | None = None

    @field_validator("rating", mode="before")
    @classmethod
    def rating_to_str(cls, v: object) -> object:
        """TMDB sends the rating as a number; the graph exposes it as a string."""
        if isinstance(v, int | float) and not isinstance(v, bool):
            return str(v)
        return v


class TMDBReview(TMDBModel):
    """A single user review from TMDB."""

    id: str | None = Field(default=None, description="Review ID")
    content: str | None = Field(default=None, description="Review text")
    author_details: TMDBReviewAuthor | None = Field(default=None, description="Author")


class TMDBVideo(TMDBModel):
    """A trailer, teaser or clip hosted on a video site."""

    id: str | None = Field(default=None, description="Video ID")
    name: str | None = Field(default=None, description="Video title")
    key: str | None = Field(default=None, description="Key on the hosting site")
    site: str | None = Field(default=None, description="Hosting site (YouTube, Vimeo)")
    type: str | None = Field(default=None, description="Trailer, Teaser, Clip, ...")
