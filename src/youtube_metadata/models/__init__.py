"""
Domain models for youtube-metadata.

All models are frozen Pydantic models: value types with no back-references,
built bottom-up by the parsers and never mutated afterwards.
"""

from __future__ import annotations

from .channel import Channel
from .playlist import MAX_PARTIAL_TRACKS, PartialPlaylist, Playlist
from .search import SearchItem, SearchResult
from .thumbnail import ImageFormat, Resolution
from .video import PartialPlaylistVideo, Video, VideoInformation
from .youtube_types import ChannelId, PlaylistId, VideoId, YouTubeId, validate_id_token

__all__ = [
    # Identifiers
    "ChannelId",
    "PlaylistId",
    "VideoId",
    "YouTubeId",
    "validate_id_token",
    # Thumbnails
    "ImageFormat",
    "Resolution",
    # Entities
    "Channel",
    "Video",
    "PartialPlaylistVideo",
    "VideoInformation",
    "Playlist",
    "PartialPlaylist",
    "MAX_PARTIAL_TRACKS",
    "SearchItem",
    "SearchResult",
]
