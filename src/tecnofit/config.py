"""Application configuration using Pydantic settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database
    database_url: str = Field(
        default="sqlite:///./tecnofit.db",
        description="Database connection URL",
    )
    database_echo: bool = Field(default=False, description="Log emitted SQL statements")

    # Repositories
    default_per_page: int = Field(
        default=15, gt=0, description="Page size used by find_by when per_page is not given"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Root log level for the CLI")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
