"""Centralized, typed configuration using pydantic-settings.

Provides a single ``Settings`` class backed by ``.env`` file and environment
variables, and a cached ``get_settings()`` accessor.

IMPORTANT: This module has ZERO imports from the ``ratecard`` package to
prevent circular imports.  Only stdlib, pydantic, pydantic_settings, and
structlog are used.
"""

from __future__ import annotations

import sys
from functools import lru_cache

import structlog
from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = structlog.get_logger()


class Settings(BaseSettings):
    """Service settings loaded from environment variables and ``.env`` file.

    The pricing engine itself is configuration-free; these settings only
    shape the HTTP service and CLI around it.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # -- General ---------------------------------------------------------------
    production: bool = False
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # -- Quotes ----------------------------------------------------------------
    # Applied to profiles that do not name a currency
    default_currency: str = "USD"
    # Service-wide switch that prices every brief as "Standard Period"
    disable_seasonal_pricing: bool = False

    @field_validator("default_currency")
    @classmethod
    def currency_must_be_code(cls, v: str) -> str:
        """Normalise the currency to an upper-case three-letter code."""
        code = v.strip().upper()
        if len(code) != 3 or not code.isalpha():
            raise ValueError(f"default_currency must be a 3-letter code, got {v!r}")
        return code


@lru_cache
def get_settings() -> Settings:
    """Return a cached ``Settings`` instance.

    The ``@lru_cache`` decorator ensures environment variables are parsed
    exactly once.  Call ``get_settings.cache_clear()`` in tests to reset.

    Returns:
        The application ``Settings``.
    """
    try:
        return Settings()
    except ValidationError as exc:
        logger.error("settings_validation_failed", errors=exc.errors())
        sys.exit(1)
