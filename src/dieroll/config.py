"""Lightweight configuration for dieroll."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings, read from ``DIEROLL_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DIEROLL_", env_file=".env", env_file_encoding="utf-8"
    )

    history_enabled: bool = Field(
        default=False,
        description="Build dice that record every rolled value",
    )
    default_sides: int = Field(
        default=6,
        description="Side count used when a builder is never given one",
        ge=2,
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
