"""
Configuration management for teseo.
Uses pydantic-settings for environment-based configuration.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables (TESEO_ prefix)."""

    model_config = SettingsConfigDict(
        env_prefix="TESEO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    LOG_LEVEL: str = "INFO"

    # Length of the random part of JSON-LD element identifiers
    UNIQUE_KEY_LENGTH: int = 16

    # Priority written for every <url> entry of an exported sitemap
    SITEMAP_PRIORITY: str = "0.5"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached library settings.
    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
