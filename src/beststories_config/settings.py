"""Application settings loaded from environment variables.

Configuration file discovery (in priority order):
1. OS environment variables (always highest priority)
2. BESTSTORIES_ENV_FILE environment variable (path to .env file)
3. config/.env.dev - local development
4. config/.env - production/Docker

Uses pydantic-settings for automatic type coercion and validation.
"""

from __future__ import annotations

import os
import socket
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_project_root() -> Path:
    """Find the project root directory."""
    current = Path(__file__).resolve().parent

    for parent in [current, *current.parents]:
        if (parent / "config").is_dir():
            return parent
        if (parent / ".git").is_dir():
            return parent
        if parent == Path("/app"):
            return parent

    return Path(__file__).resolve().parents[2]


def get_config_dir() -> Path:
    """Get the config directory path."""
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. BESTSTORIES_ENV_FILE env var (full path)
    2. config/.env.dev (local development)
    3. config/.env (production)
    """
    env_file_path = os.environ.get("BESTSTORIES_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    config_dir = get_config_dir()

    dev_env = config_dir / ".env.dev"
    if dev_env.exists():
        return dev_env

    prod_env = config_dir / ".env"
    if prod_env.exists():
        return prod_env

    return None


class Settings(BaseSettings):
    """Service configuration loaded from environment variables.

    Every field can be overridden with a ``BESTSTORIES_`` prefixed variable,
    e.g. ``BESTSTORIES_FETCH_CONCURRENCY=20``.
    """

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        env_prefix="BESTSTORIES_",
        extra="ignore",
    )

    app_name: str = "Best Stories"

    # Hacker News API (transport policy lives in the client)
    hn_base_url: str = "https://hacker-news.firebaseio.com/"
    hn_timeout: float = Field(default=30.0, gt=0)
    hn_attempt_timeout: float = Field(default=10.0, gt=0)
    hn_max_retries: int = Field(default=3, ge=0, le=10)
    hn_retry_delay: float = Field(default=0.5, ge=0)

    # Aggregation
    fetch_concurrency: int = Field(default=10, ge=1)
    cache_ttl_seconds: float = Field(default=600.0, gt=0)
    cache_key: str = "best_stories"
    default_count: int = Field(default=10, ge=0)

    # Origin tag stamped on every enriched story
    instance_name: str = Field(default_factory=socket.gethostname)

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # Logging
    log_level: str = "INFO"

    @field_validator("hn_base_url")
    @classmethod
    def _ensure_trailing_slash(cls, v: str) -> str:
        """Relative endpoint paths are resolved against the base URL."""
        return v if v.endswith("/") else f"{v}/"


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
