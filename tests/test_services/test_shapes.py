"""Tests for declarative response shapes."""

import pytest

from movie_gateway.schemas.external import TMDBCastMember, TMDBMovieDetails, TMDBMovieResult
from movie_gateway.services.base import EnvelopeError
from movie_gateway.services.shapes import Endpoint, Entity, Paged, Unwrapped


class TestEntity:
    def test_returns_object_as_is(self) -> None:
        details = Entity(TMDBMovieDetails).decode({"id": 5, "title": "X", "runtime": 90}, "movie/5")
        assert details == TMDBMovieDetails(id=5, title="X", runtime=90)

    def test_envelope_is_not_unwrapped(self) -> None:
        with pytest.raises(EnvelopeError):
            Entity(TMDBMovieDetails).decode({"results": [{"id": 5}]}, "movie/5")


class TestUnwrapped:
    def test_returns_inner_sequence(self) -> None:
        shape = Unwrapped("cast", TMDBCastMember)
        cast = shape.decode({"id": 1, "cast": [{"id": 2, "name": "A"}]}, "movie/1/credits")
        assert cast == [TMDBCastMember(id=2, name="A")]

    def test_empty_sequence(self) -> None:
        assert Unwrapped("results", TMDBMovieResult).decode({"results": []}, "movie/popular") == []

    @pytest.mark.parametrize("body", [{}, {"cast": []}, [], None])
    def test_missing_key(self, body: object) -> None:
        with pytest.raises(EnvelopeError, match="no 'results' field") as exc_info:
            Unwrapped("results", TMDBMovieResult).decode(body, "movie/popular")
        assert exc_info.value.endpoint == "movie/popular"

    def test_results_not_a_list(self) -> None:
        with pytest.raises(EnvelopeError, match="malformed"):
            Unwrapped("results", TMDBMovieResult).decode({"results": "nope"}, "movie/popular")


class TestPaged:
    def test_keeps_page_and_total(self) -> None:
        page = Paged(TMDBMovieResult).decode(
            {"page": 7, "total_results": 123, "total_pages": 7, "results": [{"id": 1}]},
            "discover/movie",
        )
        assert page.page == 7
        assert page.total_results == 123
        assert page.results == [TMDBMovieResult(id=1)]

    def test_missing_total(self) -> None:
        with pytest.raises(EnvelopeError):
            Paged(TMDBMovieResult).decode({"page": 1, "results": []}, "discover/movie")


def test_endpoint_format() -> None:
    endpoint = Endpoint("tv/{id}/videos", Unwrapped("results", dict))
    assert endpoint.format(id=42) == "tv/42/videos"
    assert endpoint.params == {}
