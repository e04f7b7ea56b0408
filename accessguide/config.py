"""
Configuration settings for the access guidance engine.

Uses Pydantic Settings for environment variable management with .env file support.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ACCESSGUIDE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Content
    # ========================================
    content_dir: Path | None = Field(
        default=None,
        description="Directory of guidance JSON files (None uses the bundled content)",
    )
    strict_content: bool = Field(
        default=False,
        description="Abort loading on malformed entries instead of skipping them",
    )

    # ========================================
    # Session Timing
    # ========================================
    exit_hold_delay_ms: int = Field(
        default=300,
        ge=0,
        description="How long closed content stays readable for exit transitions",
    )
    navigation_delay_ms: int = Field(
        default=150,
        ge=0,
        description="Pause between closing and reopening when following a related link",
    )

    # ========================================
    # Presentation
    # ========================================
    default_audience: str = Field(
        default="",
        description="Comma-separated audience tags (e.g., 'retail,accommodation')",
    )
    log_level: str = Field(
        default="WARNING",
        description="Minimum level for CLI log output",
    )

    def get_audience_tags(self) -> frozenset[str]:
        """Parse default_audience into a set of tags."""
        return frozenset(
            tag.strip().lower() for tag in self.default_audience.split(",") if tag.strip()
        )

    def get_session_config(self) -> dict[str, float]:
        """Get session timing as seconds."""
        return {
            "exit_hold_delay": self.exit_hold_delay_ms / 1000,
            "navigation_delay": self.navigation_delay_ms / 1000,
        }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
