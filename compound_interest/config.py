"""Runtime settings for the interactive calculator via pydantic-settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """Read from COMPOUND_INTEREST_* environment variables or a local .env file."""

    model_config = SettingsConfigDict(
        env_prefix="COMPOUND_INTEREST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="WARNING", description="Root log level for the CLI")
    currency_symbol: str = Field(default="$", description="Symbol printed before amounts")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        upper = v.upper()
        if upper not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {sorted(VALID_LOG_LEVELS)}")
        return upper


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
