"""Configuration management for the application."""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, ValidationError, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

PLACEHOLDER_SECRET = "change-me-in-production"  # noqa: S105


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Required
    database_url: str = Field(..., min_length=1)
    jwt_secret: str = Field(..., min_length=1)
    port: int = Field(..., ge=1, le=65535)
    environment: Literal["development", "production", "test"]

    # Redis (Celery broker)
    redis_url: str = Field(default="redis://localhost:6379/0")

    # JWT
    jwt_algorithm: str = Field(default="HS256")
    jwt_expiration_minutes: int = Field(default=10080)  # 7 days

    # API
    cors_origins: list[str] = Field(default=["http://localhost:3000"])
    auth_rate_limit: str = Field(default="10/minute")
    log_level: str = Field(default="INFO")

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production has secure settings."""
        if self.environment == "production":
            if self.jwt_secret == PLACEHOLDER_SECRET:
                raise ValueError("JWT_SECRET must be changed in production")
            if "localhost" in self.database_url:
                raise ValueError("DATABASE_URL should not use localhost in production")
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Exits the process when required variables are missing or invalid.
    """
    try:
        return Settings()
    except ValidationError as e:
        fields = ", ".join(".".join(str(loc) for loc in err["loc"]) or "settings" for err in e.errors())
        logger.critical(f"Invalid environment configuration ({fields}): {e}")
        raise SystemExit(1) from e
