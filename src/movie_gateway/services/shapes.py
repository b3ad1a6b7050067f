"""Declarative response shapes for upstream endpoints.

Every endpoint states up front what its body looks like, so callers never
guess whether to unwrap an envelope:

- ``Entity``: the body is the object itself and is returned as-is.
- ``Unwrapped``: the body is an envelope; the named key holds the sequence
  that is returned.
- ``Paged``: the body is a paged listing; page number, total count and
  results are returned together.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from movie_gateway.schemas.external import TMDBPage
from movie_gateway.services.base import EnvelopeError

R = TypeVar("R")
M = TypeVar("M", bound=BaseModel)
ItemT = TypeVar("ItemT")


class ResponseShape(ABC, Generic[R]):
    """How to turn a parsed JSON body into the value an endpoint returns."""

    @abstractmethod
    def decode(self, data: Any, endpoint: str) -> R:
        """Decode ``data`` received from ``endpoint``.

        Raises:
            EnvelopeError: If the body does not have the declared shape.
        """


def _malformed(endpoint: str, e: ValidationError) -> EnvelopeError:
    return EnvelopeError(
        f"Upstream {endpoint} returned a malformed body ({e.error_count()} validation errors)",
        endpoint=endpoint,
    )


@dataclass(frozen=True)
class Entity(ResponseShape[M]):
    """A bare entity; never unwrapped."""

    model: type[M]

    def decode(self, data: Any, endpoint: str) -> M:
        try:
            return self.model.model_validate(data)
        except ValidationError as e:
            raise _malformed(endpoint, e) from e


@dataclass(frozen=True)
class Unwrapped(ResponseShape[list[ItemT]]):
    """A sequence nested under ``key`` in an envelope object."""

    key: str
    item: type[ItemT]

    @cached_property
    def _adapter(self) -> TypeAdapter[list[ItemT]]:
        return TypeAdapter(list[self.item])  # type: ignore[name-defined]

    def decode(self, data: Any, endpoint: str) -> list[ItemT]:
        if not isinstance(data, dict) or self.key not in data:
            raise EnvelopeError(
                f"Upstream {endpoint} response has no '{self.key}' field",
                endpoint=endpoint,
            )
        try:
            return self._adapter.validate_python(data[self.key])
        except ValidationError as e:
            raise _malformed(endpoint, e) from e


@dataclass(frozen=True)
class Paged(ResponseShape[TMDBPage[M]]):
    """A paged listing envelope: ``page``, ``total_results`` and ``results``."""

    item: type[M]

    def decode(self, data: Any, endpoint: str) -> TMDBPage[M]:
        try:
            return TMDBPage[self.item].model_validate(data)  # type: ignore[name-defined]
        except ValidationError as e:
            raise _malformed(endpoint, e) from e


@dataclass(frozen=True)
class Endpoint(Generic[R]):
    """An upstream endpoint: path template, fixed query params and response shape."""

    path: str
    shape: ResponseShape[R]
    params: dict[str, Any] = field(default_factory=dict)

    def format(self, **path_args: Any) -> str:
        return self.path.format(**path_args)
