"""Per-request GraphQL context."""

from fastapi import Depends
from strawberry.fastapi import BaseContext

from movie_gateway.services.tmdb import TMDBClient, get_tmdb_client


class GraphQLContext(BaseContext):
    """Context handed to every resolver of one GraphQL request."""

    def __init__(self, tmdb: TMDBClient) -> None:
        super().__init__()
        self.tmdb = tmdb


async def get_context(tmdb: TMDBClient = Depends(get_tmdb_client)) -> GraphQLContext:
    """FastAPI dependency building the context; the client is closed after the request."""
    return GraphQLContext(tmdb=tmdb)
