"""Top-level GraphQL query resolvers."""

import strawberry

from movie_gateway.graphql.types import (
    ContextInfo,
    Movie,
    Movies,
    Search,
    TvShow,
    TvShows,
    search_result,
)


async def resolve_movies(info: ContextInfo, page: int = 1) -> Movies:
    """Movies from the discover endpoint, used for the movie section of the frontend."""
    return Movies.from_tmdb(await info.context.tmdb.discover_movies(page))


async def resolve_tv_shows(info: ContextInfo, page: int = 1) -> TvShows:
    """Tv shows from the discover endpoint."""
    return TvShows.from_tmdb(await info.context.tmdb.discover_tv_shows(page))


async def resolve_movies_legacy(info: ContextInfo, page: int) -> Movies:
    return await resolve_movies(info, page)


async def resolve_tv_shows_legacy(info: ContextInfo, page: int) -> TvShows:
    return await resolve_tv_shows(info, page)


async def resolve_top_rated_movies(info: ContextInfo) -> list[Movie]:
    return [Movie.from_tmdb(m) for m in await info.context.tmdb.get_top_rated_movies()]


async def resolve_upcoming_movies(info: ContextInfo) -> list[Movie]:
    return [Movie.from_tmdb(m) for m in await info.context.tmdb.get_upcoming_movies()]


async def resolve_popular_movies(info: ContextInfo) -> list[Movie]:
    return [Movie.from_tmdb(m) for m in await info.context.tmdb.get_popular_movies()]


async def resolve_top_rated_tv_shows(info: ContextInfo) -> list[TvShow]:
    return [TvShow.from_tmdb(s) for s in await info.context.tmdb.get_top_rated_tv_shows()]


async def resolve_popular_tv_shows(info: ContextInfo) -> list[TvShow]:
    return [TvShow.from_tmdb(s) for s in await info.context.tmdb.get_popular_tv_shows()]


async def resolve_search(info: ContextInfo, name: str) -> list[Search] | None:
    """Movies and tv shows matching ``name``; people are left out."""
    return [search_result(hit) for hit in await info.context.tmdb.search_multi(name)]


_RENAMED = "Renamed to {}"


@strawberry.type
class Query:
    list_movies: Movies = strawberry.field(
        resolver=resolve_movies,
        name="listMovies",
        description="Popular movies from discover, one page at a time",
    )
    list_tv_shows: TvShows = strawberry.field(
        resolver=resolve_tv_shows,
        name="listTvShows",
        description="Popular tv shows from discover, one page at a time",
    )
    top_rated_movies: list[Movie] = strawberry.field(
        resolver=resolve_top_rated_movies,
        name="topRatedMovies",
        description="Top rated movies on TMDB",
    )
    upcoming_movies: list[Movie] = strawberry.field(
        resolver=resolve_upcoming_movies,
        name="upcomingMovies",
        description="Movies about to be released",
    )
    popular_movies: list[Movie] = strawberry.field(
        resolver=resolve_popular_movies,
        name="popularMovies",
        description="Movies popular right now",
    )
    top_rated_tv_shows: list[TvShow] = strawberry.field(
        resolver=resolve_top_rated_tv_shows,
        name="topRatedTvShows",
        description="Top rated tv shows on TMDB",
    )
    popular_tv_shows: list[TvShow] = strawberry.field(
        resolver=resolve_popular_tv_shows,
        name="popularTvShows",
        description="Tv shows popular right now",
    )
    search: list[Search] | None = strawberry.field(
        resolver=resolve_search,
        description="Either TvShows or movies depending on the client's input",
    )

    # Field names used by the first frontend release
    get_movies: Movies = strawberry.field(
        resolver=resolve_movies_legacy,
        name="getMovies",
        deprecation_reason=_RENAMED.format("listMovies"),
    )
    get_tv_shows: TvShows = strawberry.field(
        resolver=resolve_tv_shows_legacy,
        name="getTvShows",
        deprecation_reason=_RENAMED.format("listTvShows"),
    )
    get_top_rated_movies: list[Movie] = strawberry.field(
        resolver=resolve_top_rated_movies,
        name="getTopRatedMovies",
        deprecation_reason=_RENAMED.format("topRatedMovies"),
    )
    get_upcoming_movies: list[Movie] = strawberry.field(
        resolver=resolve_upcoming_movies,
        name="getUpcomingMovies",
        deprecation_reason=_RENAMED.format("upcomingMovies"),
    )
    get_top_rated_tv_shows: list[TvShow] = strawberry.field(
        resolver=resolve_top_rated_tv_shows,
        name="getTopRatedTvShows",
        deprecation_reason=_RENAMED.format("topRatedTvShows"),
    )
