"""
Application configuration loaded from environment variables.

All configuration is validated when first loaded to fail fast on
misconfiguration.
"""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


class Settings(BaseSettings):
    """
    Catalog settings with validation.

    Each setting is read from the environment variable of the same name
    with a BOOKSTORE_ prefix. Use .env file for local development.
    """

    model_config = SettingsConfigDict(
        env_prefix="BOOKSTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Catalog defaults
    default_currency: str = Field(
        default="USD",
        min_length=3,
        max_length=3,
        description="Currency assigned to new catalog items when none is given",
    )

    # Identifier lookup services
    isni_base_url: str = Field(
        default="https://isni.org/isni/",
        description="Prefix of ISNI lookup URIs; the raw ISNI is appended",
    )
    isbn_search_base_url: str = Field(
        default="https://isbnsearch.org/search?s=",
        description="Prefix of ISBN search URIs; the raw ISBN is appended",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Root log level used by configure_logging",
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached catalog settings.

    Settings are loaded once and cached for subsequent calls.
    Call get_settings.cache_clear() to reload after changing the environment.
    """
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Configure root logging with the catalog log format."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format=LOG_FORMAT,
    )
