"""GraphQL object types and their relation resolvers.

Base fields of ``Movie`` and ``TvShow`` come from the listing that produced
them. ``details``, ``credits``, ``reviews`` and ``videos`` are resolved on
demand from the parent ``id`` only, one upstream call each.
"""

from typing import Annotated

import strawberry
from strawberry.types import Info

from movie_gateway.graphql.context import GraphQLContext
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
from movie_gateway.services.search import SearchHit

ContextInfo = Info[GraphQLContext, None]


@strawberry.type
class Genres:
    id: int
    name: str | None = None

    @classmethod
    def from_tmdb(cls, genre: TMDBGenre) -> "Genres":
        return cls(id=genre.id, name=genre.name)


@strawberry.type
class Seasons:
    id: int
    air_date: str | None = None
    episode_count: int | None = None
    name: str | None = None
    poster_path: str | None = None
    season_number: int | None = None

    @classmethod
    def from_tmdb(cls, season: TMDBSeason) -> "Seasons":
        return cls(
            id=season.id,
            air_date=season.air_date,
            episode_count=season.episode_count,
            name=season.name,
            poster_path=season.poster_path,
            season_number=season.season_number,
        )


@strawberry.type(
    description="These are the people that created a Tv Show, to be used in the Tv Show details type."
)
class Creators:
    id: int
    name: str | None = None
    profile_path: str | None = None

    @classmethod
    def from_tmdb(cls, creator: TMDBCreator) -> "Creators":
        return cls(id=creator.id, name=creator.name, profile_path=creator.profile_path)


@strawberry.type(description="Movie/Tv Show cast")
class Cast:
    id: int
    name: str | None = None
    profile_path: str | None = None
    character: str | None = None

    @classmethod
    def from_tmdb(cls, member: TMDBCastMember) -> "Cast":
        return cls(
            id=member.id,
            name=member.name,
            profile_path=member.profile_path,
            character=member.character,
        )


@strawberry.type(description="A movie/Tv Show review author")
class Author:
    name: str | None = None
    avatar_path: str | None = None
    rating: str | None = None

    @classmethod
    def from_tmdb(cls, author: TMDBReviewAuthor) -> "Author":
        return cls(name=author.name, avatar_path=author.avatar_path, rating=author.rating)


@strawberry.type(description="Movie/TvShows reviews")
class Reviews:
    author_details: Author | None = None
    content: str | None = None
    id: str | None = None

    @classmethod
    def from_tmdb(cls, review: TMDBReview) -> "Reviews":
        author = review.author_details
        return cls(
            author_details=Author.from_tmdb(author) if author is not None else None,
            content=review.content,
            id=review.id,
        )


@strawberry.type(description="Videos is used to retrieve trailers for movies/ Tv Shows")
class Videos:
    name: str | None = None
    key: str | None = None
    site: str | None = None
    type: str | None = None
    id: str | None = None

    @classmethod
    def from_tmdb(cls, video: TMDBVideo) -> "Videos":
        return cls(name=video.name, key=video.key, site=video.site, type=video.type, id=video.id)


@strawberry.type
class MovieDetails:
    id: int
    genres: list[Genres | None] | None = None
    poster_path: str | None = None
    release_date: str | None = None
    revenue: float | None = None
    runtime: int | None = None
    title: str | None = None
    vote_average: float | None = None

    @classmethod
    def from_tmdb(cls, details: TMDBMovieDetails) -> "MovieDetails":
        return cls(
            id=details.id,
            genres=_convert(Genres, details.genres),
            poster_path=details.poster_path,
            release_date=details.release_date,
            revenue=float(details.revenue) if details.revenue is not None else None,
            runtime=details.runtime,
            title=details.title,
            vote_average=details.vote_average,
        )


@strawberry.type
class TvShowDetails:
    id: int
    created_by: list[Creators | None] | None = None
    first_air_date: str | None = None
    genres: list[Genres | None] | None = None
    last_air_date: str | None = None
    name: str | None = None
    number_of_episodes: int | None = None
    number_of_seasons: int | None = None
    poster_path: str | None = None
    seasons: list[Seasons | None] | None = None
    vote_average: float | None = None

    @classmethod
    def from_tmdb(cls, details: TMDBTvShowDetails) -> "TvShowDetails":
        return cls(
            id=details.id,
            created_by=_convert(Creators, details.created_by),
            first_air_date=details.first_air_date,
            genres=_convert(Genres, details.genres),
            last_air_date=details.last_air_date,
            name=details.name,
            number_of_episodes=details.number_of_episodes,
            number_of_seasons=details.number_of_seasons,
            poster_path=details.poster_path,
            seasons=_convert(Seasons, details.seasons),
            vote_average=details.vote_average,
        )


@strawberry.type(description="The Movies type represents movies retrieved from discover movies")
class Movie:
    id: int
    poster_path: str | None = None
    release_date: str | None = None
    title: str | None = None
    vote_average: float | None = None

    @classmethod
    def from_tmdb(cls, movie: TMDBMovieResult) -> "Movie":
        return cls(
            id=movie.id,
            poster_path=movie.poster_path,
            release_date=movie.release_date,
            title=movie.title,
            vote_average=movie.vote_average,
        )

    @strawberry.field(description="Details of this movie")
    async def details(self, info: ContextInfo) -> MovieDetails | None:
        return MovieDetails.from_tmdb(await info.context.tmdb.get_movie_details(self.id))

    @strawberry.field(description="People/actors involved in this movie")
    async def credits(self, info: ContextInfo) -> list[Cast] | None:
        return [Cast.from_tmdb(m) for m in await info.context.tmdb.get_movie_credits(self.id)]

    @strawberry.field(description="First page of reviews for this movie")
    async def reviews(self, info: ContextInfo) -> list[Reviews | None] | None:
        return [Reviews.from_tmdb(r) for r in await info.context.tmdb.get_movie_reviews(self.id)]

    @strawberry.field(description="Trailer videos for this movie")
    async def videos(self, info: ContextInfo) -> list[Videos | None] | None:
        return [Videos.from_tmdb(v) for v in await info.context.tmdb.get_movie_videos(self.id)]


@strawberry.type(description="The Tv Shows type represents tv shows retrieved from discover Tv Shows")
class TvShow:
    id: int
    poster_path: str | None = None
    vote_average: float | None = None
    first_air_date: str | None = None
    name: str | None = None

    @classmethod
    def from_tmdb(cls, show: TMDBTvShowResult) -> "TvShow":
        return cls(
            id=show.id,
            poster_path=show.poster_path,
            vote_average=show.vote_average,
            first_air_date=show.first_air_date,
            name=show.name,
        )

    @strawberry.field(description="Details of this tv show")
    async def details(self, info: ContextInfo) -> TvShowDetails | None:
        return TvShowDetails.from_tmdb(await info.context.tmdb.get_tv_show_details(self.id))

    @strawberry.field(description="People involved in this tv show")
    async def credits(self, info: ContextInfo) -> list[Cast] | None:
        return [Cast.from_tmdb(m) for m in await info.context.tmdb.get_tv_show_credits(self.id)]

    @strawberry.field(description="First page of reviews for this tv show")
    async def reviews(self, info: ContextInfo) -> list[Reviews | None] | None:
        return [
            Reviews.from_tmdb(r) for r in await info.context.tmdb.get_tv_show_reviews(self.id)
        ]

    @strawberry.field(description="Trailer videos for this tv show")
    async def videos(self, info: ContextInfo) -> list[Videos | None] | None:
        return [Videos.from_tmdb(v) for v in await info.context.tmdb.get_tv_show_videos(self.id)]


@strawberry.type
class Movies:
    page: int
    results: list[Movie]
    total_results: int

    @classmethod
    def from_tmdb(cls, page: TMDBPage[TMDBMovieResult]) -> "Movies":
        return cls(
            page=page.page,
            results=[Movie.from_tmdb(m) for m in page.results],
            total_results=page.total_results,
        )


@strawberry.type
class TvShows:
    page: int
    results: list[TvShow]
    total_results: int

    @classmethod
    def from_tmdb(cls, page: TMDBPage[TMDBTvShowResult]) -> "TvShows":
        return cls(
            page=page.page,
            results=[TvShow.from_tmdb(s) for s in page.results],
            total_results=page.total_results,
        )


Search = Annotated[
    Movie | TvShow,
    strawberry.union("Search", description="The Search returns either Movies or TvShows"),
]


def search_result(hit: SearchHit) -> Movie | TvShow:
    """Map a decoded search hit onto its graph variant."""
    if isinstance(hit, TMDBMovieResult):
        return Movie.from_tmdb(hit)
    return TvShow.from_tmdb(hit)


def _convert(graph_type, items):
    if items is None:
        return None
    return [graph_type.from_tmdb(item) for item in items]
