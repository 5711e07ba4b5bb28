"""Process settings loaded from environment variables.

Uses Pydantic Settings v2 for validated, type-safe configuration.  Every
variable is prefixed with ``WAYBACK_MCP_`` (e.g. ``WAYBACK_MCP_LOG_LEVEL``).
The archive endpoints themselves are fixed constants in
:mod:`wayback_mcp.archive.config` and are deliberately not configurable.

Usage::

    from wayback_mcp.config.settings import get_settings

    settings = get_settings()
    timeout = settings.http_timeout
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from wayback_mcp import __version__


class Settings(BaseSettings):
    """Server configuration backed by environment variables and an optional .env file."""

    model_config = SettingsConfigDict(
        env_prefix="WAYBACK_MCP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------

    log_level: str = "INFO"
    """Logging verbosity.  One of: DEBUG, INFO, WARNING, ERROR, CRITICAL."""

    # ------------------------------------------------------------------
    # HTTP transport
    # ------------------------------------------------------------------

    http_timeout: float | None = 30.0
    """Transport timeout in seconds for every archive request.

    Set to an empty value to disable the timeout entirely; a hung upstream
    request then blocks its invocation indefinitely.
    """

    user_agent: str = f"wayback-mcp/{__version__} (+https://archive.org/developers/)"
    """User-Agent header sent with every archive request."""

    @field_validator("log_level")
    @classmethod
    def _normalise_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unsupported log level '{value}'")
        return level

    @field_validator("http_timeout", mode="before")
    @classmethod
    def _empty_timeout_is_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings singleton.

    In tests, call ``get_settings.cache_clear()`` after patching environment
    variables.
    """
    return Settings()
