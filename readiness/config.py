"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Analyzer settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="READINESS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    env: Literal["development", "production", "test"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Extraction limits
    max_content_chars: int = Field(default=100_000, gt=0)  # Flattened text cap
    max_html_chars: int | None = Field(default=None, gt=0)  # Raw HTML cap, off by default
    product_scan_chars: int = Field(default=50_000, gt=0)

    # Scoring
    dynamic_scoring_enabled: bool = True

    @property
    def is_production(self) -> bool:
        return self.env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
