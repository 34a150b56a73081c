"""
Video models.

Defines the fully populated ``Video`` produced from watch pages and search
results, the uploader-less ``PartialPlaylistVideo`` found inside playlist
listings, and the looser ``VideoInformation`` read from page meta tags.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .channel import Channel
from .youtube_types import VideoId


class PartialPlaylistVideo(BaseModel):
    """A video inside a playlist listing, which carries no uploader."""

    model_config = ConfigDict(frozen=True)

    id: VideoId = Field(..., description="Video ID")
    length: timedelta = Field(..., description="Video duration")
    title: str = Field(..., description="Video title")


class Video(BaseModel):
    """
    Information about a video.

    Every field is mandatory: parsers either produce a complete ``Video`` or
    raise a ``ParseError``.
    """

    model_config = ConfigDict(frozen=True)

    id: VideoId = Field(..., description="Video ID")
    length: timedelta = Field(..., description="Video duration")
    title: str = Field(..., description="Video title")
    uploader: Channel = Field(..., description="Uploading channel")

    @property
    def url(self) -> str:
        """Short video URL."""
        return self.id.url

    def to_partial(self) -> PartialPlaylistVideo:
        """Drop the uploader, as playlist listings do."""
        return PartialPlaylistVideo(id=self.id, length=self.length, title=self.title)


class VideoInformation(BaseModel):
    """
    Video details read from the page's ``<meta>``/``<link>`` markup.

    Attributes
    ----------
    id : VideoId | None
        Video ID from ``meta[itemprop="videoId"]``.
    url : str
        Canonical watch URL from ``link[rel="canonical"]``.
    title : str
        Open Graph title.
    uploader : str | None
        Channel display name from ``link[itemprop="name"]``.
    thumbnail : str | None
        Open Graph image URL, absent on some pages.
    """

    model_config = ConfigDict(frozen=True)

    id: Optional[VideoId] = Field(default=None)
    url: str
    title: str
    uploader: Optional[str] = Field(default=None)
    thumbnail: Optional[str] = Field(default=None)
