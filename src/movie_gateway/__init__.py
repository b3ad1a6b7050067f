"""Movie Gateway - GraphQL gateway over the TMDB REST API."""

__version__ = "0.1.0"
