"""Tooling configuration loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from clientgen.spec.output import ClientKind


class Settings(BaseSettings):
    """Settings for the clientgen CLI."""

    model_config = SettingsConfigDict(
        env_prefix="CLIENTGEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="WARNING")
    templates_dir: Path | None = Field(default=None)
    default_client: ClientKind = Field(default="axios-functions")


@lru_cache
def get_settings() -> Settings:
    """Return a cached instance of the tooling settings."""

    return Settings()
