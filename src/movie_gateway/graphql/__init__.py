"""
GraphQL Package

The graph schema over the TMDB API, built with Strawberry GraphQL.

Query resolvers produce base Movie/TvShow entities from one upstream
listing or search call. Relation fields (details, credits, reviews, videos)
are resolved lazily, one upstream call per requested field per entity, and
sibling fields may run concurrently.

A failing upstream call nulls only the field that needed it; the error is
reported in the ``errors`` list next to whatever data did resolve.

Example Query:
    query {
        search(name: "Dune") {
            ... on Movie { title details { runtime } }
            ... on TvShow { name }
        }
    }
"""

from graphql import GraphQLError
from strawberry import Schema
from strawberry.extensions import MaskErrors
from strawberry.fastapi import GraphQLRouter
from strawberry.schema.config import StrawberryConfig

from movie_gateway.config import Settings
from movie_gateway.graphql.context import GraphQLContext, get_context
from movie_gateway.graphql.queries import Query
from movie_gateway.services.base import GatewayError


def should_mask_error(error: GraphQLError) -> bool:
    """Hide messages of unexpected exceptions; gateway and query errors are shown as-is."""
    original = error.original_error
    return original is not None and not isinstance(original, GatewayError | GraphQLError)


schema = Schema(
    query=Query,
    # Field names follow the upstream payloads (poster_path, total_results, ...)
    config=StrawberryConfig(auto_camel_case=False),
    extensions=[lambda: MaskErrors(should_mask_error=should_mask_error)],
)


def create_graphql_router(settings: Settings) -> GraphQLRouter:
    """
    Create the GraphQL router for FastAPI.

    Returns:
        GraphQLRouter configured with schema and context
    """
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide=settings.graphql_ide or None,
    )


__all__ = ["schema", "create_graphql_router", "GraphQLContext", "should_mask_error"]
