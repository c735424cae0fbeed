"""Application configuration."""

import logging
from functools import lru_cache

from pydantic_settings import BaseSettings

from research_scrolls.constants import (
    BIORXIV_DEFAULT_INTERVAL,
    CACHE_MAX_ENTRIES,
    CACHE_TTL,
    DEFAULT_LIMIT,
    DEFAULT_MAX_RETRIES,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    LOCAL_CORPUS_SIZE,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Upstream requests
    request_timeout_seconds: float = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES
    user_agent: str = DEFAULT_USER_AGENT
    biorxiv_interval: str = BIORXIV_DEFAULT_INTERVAL

    # Response cache
    cache_ttl_seconds: int = CACHE_TTL
    cache_max_entries: int = CACHE_MAX_ENTRIES

    # Search
    default_limit: int = DEFAULT_LIMIT
    local_corpus_size: int = LOCAL_CORPUS_SIZE

    # App Settings
    debug: bool = False
    log_level: str = "INFO"

    class Config:
        env_prefix = "RESEARCH_SCROLLS_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        frozen = True


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for the CLI and API entry points."""
    settings = get_settings()
    level_name = (level or ("DEBUG" if settings.debug else settings.log_level)).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
