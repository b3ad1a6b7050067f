"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # App settings
    app_name: str = "Movie Gateway"
    debug: bool = False
    host: str = "127.0.0.1"
    port: int = 8000

    # TMDB API
    tmdb_api_key: str  # Required, no default
    tmdb_base_url: str = "https://api.themoviedb.org/3"
    tmdb_timeout: float = Field(default=10.0, gt=0)
    tmdb_language: str = "en-US"

    # GraphQL
    graphql_ide: Literal["graphiql", "apollo-sandbox", "pathfinder", ""] = "graphiql"

    @field_validator("tmdb_api_key", "tmdb_base_url")
    @classmethod
    def validate_not_blank(cls, v: str, info) -> str:
        """Reject blank values for settings the upstream client cannot run without."""
        v = v.strip()
        if not v:
            raise ValueError(f"{info.field_name.upper()} is required")
        return v

    def validate_runtime_config(self) -> list[str]:
        """Validate runtime configuration and return warnings."""
        warnings = []

        if not self.tmdb_base_url.startswith("https://"):
            warnings.append("TMDB_BASE_URL is not HTTPS - the API key is sent in the query string")

        if self.debug:
            warnings.append("DEBUG mode is enabled - should be disabled in production")

        return warnings


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
