"""
Configuration module for the facegen service.

Uses pydantic-settings for environment-based configuration with sensible defaults.
"""

import logging

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables.
    Example: MAX_SIZE=2000
    """

    model_config = SettingsConfigDict(env_prefix="", extra="ignore")

    # Server
    HOST: str = Field(
        default="0.0.0.0",
        description="Bind address used by facegen-serve"
    )
    PORT: int = Field(
        default=3000,
        description="Bind port used by facegen-serve"
    )
    LOG_LEVEL: str = Field(
        default="info",
        description="Root log level: debug|info|warning|error|critical"
    )
    ENVIRONMENT: str = Field(
        default="development",
        description="Deployment label reported by /health"
    )

    # Routing
    API_PREFIX: str = Field(
        default="/api",
        description="Prefix the avatar routes are mounted under"
    )

    # Size bounds enforced before the generator is called
    DEFAULT_SIZE: int = Field(
        default=200,
        description="Avatar size used when the request omits ?size"
    )
    MIN_SIZE: int = Field(
        default=50,
        ge=1,
        description="Smallest accepted avatar size (inclusive)"
    )
    MAX_SIZE: int = Field(
        default=1000,
        description="Largest accepted avatar size (inclusive)"
    )

    # Output is a pure function of (identifier, size)
    CACHE_CONTROL: str = Field(
        default="public, max-age=31536000, immutable",
        description="Cache-Control header sent with rendered avatars"
    )

    # Service metadata
    SERVICE_NAME: str = Field(
        default="facegen",
        description="Service name for logging and health checks"
    )
    SERVICE_VERSION: str = Field(
        default="1.0.0",
        description="Service version"
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v!r}")
        return level

    @model_validator(mode="after")
    def _size_bounds(self) -> "Settings":
        if not self.MIN_SIZE <= self.DEFAULT_SIZE <= self.MAX_SIZE:
            raise ValueError(
                f"DEFAULT_SIZE must lie within [MIN_SIZE, MAX_SIZE], "
                f"got {self.DEFAULT_SIZE} not in [{self.MIN_SIZE}, {self.MAX_SIZE}]"
            )
        return self


# Singleton settings instance
settings = Settings()
