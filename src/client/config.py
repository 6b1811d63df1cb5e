"""Client configuration using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Client settings loaded from ``DEVLINK_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DEVLINK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = Field(default="http://localhost:5000")
    token_file: Path = Field(
        default=Path.home() / ".devlink" / "token",
        description="Where the bearer token is kept between runs",
    )
    timeout: float = Field(default=10.0)


@lru_cache
def get_client_settings() -> ClientSettings:
    """Get cached client settings instance."""
    return ClientSettings()
