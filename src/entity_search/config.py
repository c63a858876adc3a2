"""Configuration management for Entity Search."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, loaded from environment and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ENTITY_SEARCH_",
    )

    # Paths
    content_dir: Path = Field(default=Path("data/content/entities"))
    build_dir: Path = Field(default=Path("build"))
    index_filename: str = Field(default="search-index.json")

    # Resolution
    max_hops: int = Field(default=2, ge=1, description="Relationship hops followed for related names")

    # Search defaults
    fuzzy: float = Field(default=0.2, ge=0.0, le=1.0, description="Max edit distance as a fraction of term length")
    prefix: bool = Field(default=True)
    boost: dict[str, float] = Field(
        default_factory=lambda: {"name": 3.0, "aliases": 2.0, "description": 1.5}
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="WARNING")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @property
    def index_path(self) -> Path:
        return self.build_dir / self.index_filename


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
