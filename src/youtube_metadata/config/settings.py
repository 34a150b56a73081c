"""
Application settings and configuration management.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from youtube_metadata import __version__


class Settings(BaseSettings):
    """Client settings loaded from ``YOUTUBE_METADATA_*`` environment variables."""

    base_url: str = Field(default="https://www.youtube.com")
    request_timeout: float = Field(default=30.0, gt=0)
    user_agent: str = Field(default=f"youtube-metadata/{__version__}")
    accept_language: str = Field(default="en-US,en;q=0.9")

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize base URL so paths can be appended."""
        return v.rstrip("/")

    @property
    def search_url(self) -> str:
        """Get the search results page URL."""
        return f"{self.base_url}/results"

    def watch_url(self, video_id: str) -> str:
        """Get the watch page URL for a video ID."""
        return f"{self.base_url}/watch?v={video_id}"

    model_config = SettingsConfigDict(
        env_prefix="YOUTUBE_METADATA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
