"""Lightweight configuration for the hexpath service."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, read from ``HEXPATH_*`` variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="HEXPATH_", env_file=".env", env_file_encoding="utf-8"
    )

    data_dir: Path = Field(default=Path("maps"), description="Where map documents live")
    max_iterations: int = Field(
        default=10_000,
        description="Expansion cap applied to every search loop",
        gt=0,
    )
    shuffle_seed: str | None = Field(
        default=None,
        description="Seed for path reconstruction tie-breaks; entropy-seeded when unset",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"],
        description="Origins allowed to call the HTTP API",
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    settings = Settings()
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    return settings
