"""
Channel model.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .youtube_types import ChannelId


class Channel(BaseModel):
    """Uploader identity; only ever built with both fields present."""

    model_config = ConfigDict(frozen=True)

    id: ChannelId = Field(..., description="Channel ID (/channel/ID form)")
    name: str = Field(..., description="Channel display name")

    @property
    def url(self) -> str:
        """Channel page URL."""
        return self.id.url
