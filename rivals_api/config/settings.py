"""Application settings and configuration management.

This file implements a centralized configuration system using Pydantic Settings.
It handles environment variables, default values, and configuration validation
for the hero statistics service.

Configuration Sources (in priority order):
1. Environment variables (highest priority)
2. .env file values
3. Default values defined here (lowest priority)

Example:
    MARVEL_RIVALS_KEY=abc123 rivals-api serve --port 3001
"""

from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service settings with environment variable support.

    Usage:
    - In code: `settings.marvel_rivals_key`
    - Environment variable: `MARVEL_RIVALS_KEY=...`
    - .env file: `marvel_rivals_key=...`
    """

    model_config = SettingsConfigDict(
        env_file=".env",  # Load from .env file in project root
        env_file_encoding="utf-8",
        case_sensitive=False,  # Allow MARVEL_RIVALS_KEY or marvel_rivals_key
        extra="ignore",  # Unrelated variables in .env are not an error
    )

    # API Configuration - FastAPI web server settings
    api_host: str = "127.0.0.1"  # Host to bind server
    api_port: int = 3001  # Port number for API server
    api_reload: bool = False  # Auto-reload on code changes (True for development)
    cors_origins: list[str] = ["*"]  # Allowed CORS origins

    # Upstream Configuration - Marvel Rivals statistics API
    marvel_rivals_key: str | None = None  # Sent as the x-api-key header
    marvel_rivals_base_url: str = "https://marvelrivalsapi.com/api/v1"
    request_timeout: float = 30.0  # Seconds per upstream request

    # Logging Configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_file: Path | None = None  # Optional log file in addition to stdout

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        # Accept "debug" as well as "DEBUG" from the environment
        return value.upper() if isinstance(value, str) else value

    @field_validator("request_timeout")
    @classmethod
    def _positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("request_timeout must be positive")
        return value

    @property
    def upstream_configured(self) -> bool:
        """Whether an API key for the statistics provider is present."""
        return bool(self.marvel_rivals_key)


# Global settings instance used by the CLI entry points.
# The application factory accepts its own Settings so tests can inject theirs.
settings = Settings()
