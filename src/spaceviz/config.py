"""Application configuration utilities."""
from __future__ import annotations

from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from spaceviz.processing.race import DEFAULT_ROSTER


class Settings(BaseSettings):
    """Centralized configuration loaded from environment or .env file."""

    model_config = SettingsConfigDict(
        env_prefix="SPACEVIZ_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    data_source: str = Field(default="data/Space_Processed.csv", description="CSV path or http(s) URL")
    race_roster: List[str] = Field(default_factory=lambda: list(DEFAULT_ROSTER))
    timeline_start: int = 1957
    timeline_end: int = 2024
    timeline_top_n: int = Field(default=7, ge=0)
    location_top_n: Optional[int] = Field(default=10, ge=0)
    request_timeout: int = Field(default=30, ge=1)
    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
