"""Tests for multi-search result discrimination."""

import pytest

from movie_gateway.schemas.external import TMDBMovieResult, TMDBTvShowResult
from movie_gateway.services.base import EnvelopeError
from movie_gateway.services.search import MediaType, decode_search_item, discriminate

MOVIE = {"id": 1, "media_type": "movie", "title": "Dune", "release_date": "2021-09-15"}
TV = {"id": 2, "media_type": "tv", "name": "Dune: Prophecy", "first_air_date": "2024-11-17"}
PERSON = {"id": 3, "media_type": "person", "name": "Denis Villeneuve"}


class TestDecodeSearchItem:
    def test_movie(self) -> None:
        hit = decode_search_item(MOVIE)
        assert isinstance(hit, TMDBMovieResult)
        assert hit.title == "Dune"

    def test_tv(self) -> None:
        hit = decode_search_item(TV)
        assert isinstance(hit, TMDBTvShowResult)
        assert hit.first_air_date == "2024-11-17"

    @pytest.mark.parametrize("tag", [MediaType.PERSON, "collection", "", None])
    def test_unmodelled_tags_are_dropped(self, tag: str | None) -> None:
        assert decode_search_item({**PERSON, "media_type": tag}) is None

    def test_missing_tag_is_dropped(self) -> None:
        assert decode_search_item({"id": 4, "title": "No tag"}) is None

    def test_tag_is_not_kept(self) -> None:
        hit = decode_search_item(MOVIE)
        assert "media_type" not in hit.model_dump()

    def test_malformed_movie(self) -> None:
        with pytest.raises(EnvelopeError, match="malformed movie"):
            decode_search_item({"media_type": "movie", "title": "No id"})

    @pytest.mark.parametrize("tag", [["movie"], {"type": "tv"}, 7])
    def test_non_string_tag(self, tag: object) -> None:
        with pytest.raises(EnvelopeError, match="non-string media_type") as exc_info:
            decode_search_item({**MOVIE, "media_type": tag})

        assert exc_info.value.endpoint == "search/multi"


class TestDiscriminate:
    def test_keeps_order_and_drops_people(self) -> None:
        items = [TV, PERSON, MOVIE, PERSON]

        hits = discriminate(items)

        assert len(hits) == len(items) - 2
        assert [type(h) for h in hits] == [TMDBTvShowResult, TMDBMovieResult]
        assert [h.id for h in hits] == [2, 1]

    def test_empty(self) -> None:
        assert discriminate([]) == []

    def test_only_people(self) -> None:
        assert discriminate([PERSON, PERSON]) == []
