"""Discrimination of TMDB multi-search results into typed variants."""

import logging
from collections.abc import Iterable, Mapping
from enum import StrEnum
from typing import Any

from pydantic import ValidationError

from movie_gateway.schemas.external import TMDBMovieResult, TMDBTvShowResult
from movie_gateway.services.base import EnvelopeError

logger = logging.getLogger(__name__)

SearchHit = TMDBMovieResult | TMDBTvShowResult


class MediaType(StrEnum):
    """Values TMDB puts in the ``media_type`` field of multi-search results."""

    MOVIE = "movie"
    TV = "tv"
    PERSON = "person"


# Tags without an entry here (person, or anything TMDB adds later) are filtered out.
SEARCH_VARIANTS: Mapping[str, type[SearchHit]] = {
    MediaType.MOVIE: TMDBMovieResult,
    MediaType.TV: TMDBTvShowResult,
}


def decode_search_item(item: Mapping[str, Any], endpoint: str = "search/multi") -> SearchHit | None:
    """Decode one raw search item into its variant, or None if it is not modelled.

    The ``media_type`` tag only selects the variant; it is not kept on the result.
    """
    tag = item.get("media_type")
    if tag is not None and not isinstance(tag, str):
        raise EnvelopeError(
            f"Upstream {endpoint} returned a result with a non-string media_type", endpoint=endpoint
        )
    variant = SEARCH_VARIANTS.get(tag)
    if variant is None:
        return None
    try:
        return variant.model_validate(item)
    except ValidationError as e:
        raise EnvelopeError(
            f"Upstream {endpoint} returned a malformed {tag} result",
            endpoint=endpoint,
        ) from e


def discriminate(items: Iterable[Mapping[str, Any]], endpoint: str = "search/multi") -> list[SearchHit]:
    """Decode raw multi-search items, dropping the ones that are neither movies nor TV shows.

    Upstream order is preserved.
    """
    hits = []
    dropped = 0
    for item in items:
        hit = decode_search_item(item, endpoint)
        if hit is None:
            dropped += 1
            continue
        hits.append(hit)
    if dropped:
        logger.debug("Filtered %d search results that are not movies or TV shows", dropped)
    return hits
