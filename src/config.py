"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Largest attack pool the CLI accepts; tables grow quickly with blast
    max_dice: int = Field(default=100, ge=1)

    # Display
    percent_decimals: int = Field(default=2, ge=0, le=10)
    show_fractions: bool = False

    # Debug
    debug: bool = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
