"""Application configuration using Pydantic v2.

Environment variables use the prefix SANKANIME__ with nested delimiters:
    SANKANIME__API__BASE_URL=https://example.org/anime
    SANKANIME__CACHE__DURATION_HOURS=12
    SANKANIME__LOG_LEVEL=DEBUG
"""

import os
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_data_path() -> Path:
    """OS-specific data directory for sankanime."""
    if os.name == "nt":
        return Path(os.environ.get("LOCALAPPDATA", Path.home())) / "sankanime"
    return Path.home() / ".local" / "state" / "sankanime"


class ApiSettings(BaseModel):
    """Upstream catalog API."""

    base_url: str = Field(
        "https://www.sankavollerei.com/anime",
        description="Base address every endpoint path is joined to",
    )
    timeout: float = Field(15, gt=0, description="Per-request timeout in seconds")
    user_agent: str = Field("sankanime-client/0.1")


class CacheSettings(BaseModel):
    """Home aggregate cache."""

    version: str = Field("1.0", min_length=1, description="Bump to orphan older records")
    duration_hours: float = Field(24, gt=0, description="Cache validity duration in hours")
    storage_file: Path = Field(
        default_factory=lambda: get_data_path() / "storage.json",
        description="Key-value document holding the cache record",
    )


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_prefix="SANKANIME__",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api: ApiSettings = Field(default_factory=ApiSettings)
    cache: CacheSettings = Field(default_factory=CacheSettings)
    log_level: str = "INFO"


settings = AppSettings()
