# src/catalog/core/config.py
from enum import StrEnum
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class IdPolicy(StrEnum):
    # Strictly increasing, ids are never handed out twice
    MONOTONIC = "monotonic"
    # Record count + 1, ids of deleted records come back
    LENGTH = "length"


class Settings(BaseSettings):
    # App
    app_name: str = "Product Catalog Service"
    app_version: str = "0.1.0"
    version_header: str = "0.2"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3002

    # CORS
    cors_origins: list[str] = Field(default=["*"])

    # Store
    id_policy: IdPolicy = IdPolicy.MONOTONIC
    seed_catalog: bool = True

    # Request bodies larger than this are rejected while streaming (256 KiB)
    max_payload_bytes: int = Field(default=262_144, gt=0)

    # Rate Limiting
    rate_limit_enabled: bool = True
    rate_limit: str = "100/minute"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
