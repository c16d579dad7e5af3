"""Application configuration via pydantic-settings."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from sha256_digest.engine import EngineFactory, get_engine


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SHA256_DIGEST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Hash engine used when the caller doesn't pick one
    engine: Literal["hashlib", "cryptography"] = "hashlib"

    # Streaming read buffer size (bytes)
    chunk_size: int = Field(default=1024, gt=0)

    # Files hashed at once by `sha256-digest file --async`
    max_concurrent: int = Field(default=8, gt=0)


def get_settings(**overrides: object) -> Settings:
    """Create a Settings instance, allowing overrides for testing."""
    return Settings(**overrides)  # type: ignore[arg-type]


def engine_from_settings(settings: Settings) -> EngineFactory:
    """Resolve the configured engine name to its class."""
    return get_engine(settings.engine)
