"""Configuration management using pydantic-settings."""

from pathlib import Path
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CURATOR_",
        extra="ignore",
    )

    # Showcase settings
    carousel_limit: int = Field(default=5, description="Maximum items in the showcase")
    carousel_interval_seconds: float = Field(
        default=5.0, description="Seconds between showcase auto-advance ticks"
    )

    # Column and list sizes
    column_size: int = Field(default=5, description="Posts shown per category column")
    latest_limit: int = Field(default=5, description="Posts shown in the Latest list")

    # Related content settings
    related_limit: int = Field(default=6, description="Maximum related posts")
    related_fallback_limit: int = Field(
        default=3, description="Posts shown when no same-category post exists"
    )

    log_level: str = Field(default="INFO", description="Console log level")

    # Paths
    data_dir: Path = Field(default=Path("./data"), description="Data directory path")

    @property
    def posts_file(self) -> Path:
        """Path to the posts JSON file."""
        return self.data_dir / "posts.json"

    def validate_limits(self) -> None:
        """Validate that every list size is positive. Raises ValueError if not."""
        limits = {
            "CURATOR_CAROUSEL_LIMIT": self.carousel_limit,
            "CURATOR_COLUMN_SIZE": self.column_size,
            "CURATOR_LATEST_LIMIT": self.latest_limit,
            "CURATOR_RELATED_LIMIT": self.related_limit,
            "CURATOR_RELATED_FALLBACK_LIMIT": self.related_fallback_limit,
        }
        invalid = [name for name, value in limits.items() if value <= 0]

        if invalid:
            raise ValueError(
                f"Invalid configuration: {', '.join(invalid)} must be positive. "
                "Please fix these in your .env file or environment variables."
            )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
