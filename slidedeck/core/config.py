"""
Core configuration module for slidedeck.

This module defines all library settings using Pydantic BaseSettings,
enabling configuration through environment variables with type validation.
Settings are loaded from .env files and environment variables.
"""

from functools import lru_cache
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Settings loaded from environment variables.

    Every field has a default so the library works without any
    environment configuration.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="allow",
    )

    # Slide Settings
    SLIDES_DIR: str = Field(
        default="_slides", description="Default directory containing slide documents"
    )
    SLIDE_EXTENSION: str = Field(default=".md", description="Slide document extension")
    SLIDE_ENCODING: str = Field(default="utf-8", description="Slide file text encoding")
    SLIDE_LAYOUT: str = Field(
        default="slide", description="Layout written into new slide templates"
    )

    # Logging Settings
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log message format",
    )
    LOG_FILE: str | None = Field(default=None, description="Log file path (None for no file)")
    LOG_TO_STDOUT: bool = Field(
        default=False, description="Also write slidedeck log records to stdout"
    )

    @field_validator("SLIDE_EXTENSION", mode="before")
    @classmethod
    def normalize_extension(cls, v: Any) -> str:
        """Ensure the extension starts with a dot."""
        if isinstance(v, str):
            v = v.strip()
            if v and not v.startswith("."):
                return f".{v}"
        return v


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Cached settings instance
    """
    return Settings()


# Global settings instance
settings = get_settings()
