"""Centralized application configuration using Pydantic settings."""
from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven configuration for the booking API."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_name: str = Field(default="Hotel Booking API", description="Title reported by the OpenAPI schema")
    database_url: str = Field(
        default="sqlite:///./hotel.db",
        description="SQLAlchemy database URL. Defaults to local SQLite for development.",
    )
    run_db_migrations: bool = Field(
        default=True,
        description="Whether tables should be created on startup.",
    )
    seed_rooms: bool = Field(default=True, description="Insert the starter rooms when the catalog is empty")
    jwt_secret: str = Field(default="dev-secret", description="JWT signing secret")
    jwt_algorithm: str = Field(default="HS256", description="JWT signing algorithm")
    access_token_expire_minutes: int = Field(default=7 * 24 * 60, description="Token lifetime in minutes")
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:5173"], description="Allowed CORS origins"
    )
    default_rate_limit: str = Field(default="60/minute", description="Global rate limiting rule")
    rate_limiting_enabled: bool = Field(default=True, description="Toggle to disable SlowAPI limits (useful in tests)")
    room_cache_ttl: int = Field(default=300, description="TTL (s) for the cached room catalog")
    log_dir: str = Field(default="logs", description="Directory receiving the HTTP audit logs")
    metrics_enabled: bool = Field(default=True, description="Expose Prometheus metrics at /metrics")


@lru_cache
def get_settings() -> Settings:
    """Return a cached instance of the Settings object."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the cached Settings instance (useful for tests)."""

    get_settings.cache_clear()
