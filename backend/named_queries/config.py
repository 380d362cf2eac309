"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # MongoDB
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_db_name: str = "named-queries"

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 4000
    cors_origins: list[str] = ["*"]

    # Logging
    log_level: str = "INFO"

    # When enabled, validation failures map to 400 and duplicate names to 409
    # instead of the generic 500.
    distinct_error_statuses: bool = False

    model_config = {
        "env_file": ".env",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
