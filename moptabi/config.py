"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    app_timezone: str = Field(
        default="Asia/Tokyo",
        description="Timezone used to compute calendar boundaries for statistics",
    )
    cors_origins: str = Field(
        default="http://localhost:3000",
        description="Comma separated list of origins allowed to call the API",
    )
    sql_echo: bool = Field(default=False, description="Log every SQL statement")
    log_level: str = Field(default="INFO", description="Root logging level")
    image_dir: str = Field(
        default="static",
        description="Directory where uploaded trip images are stored and served from",
        min_length=1,
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"

    def cors_origin_list(self) -> list[str]:
        """Return the configured CORS origins as a list."""

        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
