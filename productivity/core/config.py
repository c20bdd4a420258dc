"""
Application configuration utilities.

This module defines the ``Settings`` class used by the dashboard services
for environment variables.  Values are read once per process and cached by
:func:`get_settings`; tests call ``get_settings.cache_clear()`` after
patching the environment.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration loaded from environment variables or a .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Backend metrics API
    api_url: str = "http://localhost:3001"
    request_timeout_seconds: float = 30.0

    # Generative completion endpoint used in demo mode
    llm_api_url: str = "https://api.anthropic.com/v1/messages"
    llm_api_key: str | None = None
    llm_api_version: str = "2023-06-01"
    llm_model: str = "claude-sonnet-4-20250514"
    llm_max_tokens: int = 1000
    llm_timeout_seconds: float = 60.0

    log_level: str = "INFO"


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    """Return a cached instance of ``Settings``.

    Using a cache ensures that environment variables are only read once.
    """
    return Settings()
