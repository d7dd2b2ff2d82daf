"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here — no scattered magic strings.
"""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        api_prefix: Path prefix every resource router is mounted under.
        host: Interface the development server binds to.
        port: Port the development server listens on.
        tours_data_file: JSON file backing the tour collection.
        static_dir: Directory served as static files at the site root.
        rate_limit_enabled: Toggle for the per-client rate limiter.
        rate_limit_default: Default rate limit for all endpoints.
        max_request_size_bytes: Maximum allowed request body size.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Natours"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/api/v1"
    host: str = "127.0.0.1"
    port: int = 3000

    tours_data_file: Path = Path("dev-data/data/tours-simple.json")
    static_dir: Optional[Path] = None

    rate_limit_enabled: bool = True
    rate_limit_default: str = "100/hour"
    max_request_size_bytes: int = 10_240  # 10 kB


settings = Settings()
