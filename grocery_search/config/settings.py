"""Application settings and configuration management."""

from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Application
    app_name: str = Field(default="Grocery Search")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    workers: int = Field(default=1)

    # Search Configuration
    max_results: int = Field(default=10)
    max_query_length: int = Field(default=100)
    merge_policy: str = Field(default="cumulative")  # or "hierarchical"

    # Fuzzy Matching
    fuzzy_threshold: float = Field(default=0.4)
    fuzzy_name_weight: float = Field(default=0.8)
    fuzzy_category_weight: float = Field(default=0.3)
    fuzzy_min_match_char_length: int = Field(default=2)
    fuzzy_max_pattern_length: int = Field(default=32)
    fuzzy_distance: int = Field(default=100)
    fuzzy_location: int = Field(default=0)

    # Catalog
    catalog_path: Optional[str] = Field(default=None)

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")

    # CORS
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173", "http://localhost:8000"]
    )

    model_config = SettingsConfigDict(
        env_prefix="GROCERY_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
