"""
Playlist models.

Search results only expose a summary of each playlist: its first two
tracks and the total track count. Listing every track needs a follow-up
request to the playlist page, which this library does not make.
"""

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .channel import Channel
from .video import PartialPlaylistVideo, Video
from .youtube_types import PlaylistId

MAX_PARTIAL_TRACKS = 2
"""Number of tracks a search listing shows per playlist."""


class PartialPlaylist(BaseModel):
    """Playlist summary as returned in search results."""

    model_config = ConfigDict(frozen=True)

    id: PlaylistId = Field(..., description="Playlist ID")
    tracks: Tuple[PartialPlaylistVideo, ...] = Field(
        default=(), description="Up to the first two tracks"
    )
    tracks_total: int = Field(..., ge=0, description="Total number of tracks")
    title: str = Field(..., description="Playlist title")
    uploader: Channel = Field(..., description="Playlist owner")

    @model_validator(mode="after")
    def validate_tracks(self) -> "PartialPlaylist":
        """Validate the listed tracks against the two-track limit and the total."""
        if len(self.tracks) > MAX_PARTIAL_TRACKS:
            raise ValueError(
                f"PartialPlaylist holds at most {MAX_PARTIAL_TRACKS} tracks, "
                f"got {len(self.tracks)}"
            )
        if len(self.tracks) > self.tracks_total:
            raise ValueError(
                f"tracks_total ({self.tracks_total}) is smaller than the "
                f"number of listed tracks ({len(self.tracks)})"
            )
        return self

    @property
    def url(self) -> str:
        """Playlist page URL."""
        return self.id.url


class Playlist(BaseModel):
    """
    A complete playlist.

    No parser produces this model yet; it exists so full listings fetched
    elsewhere can be reduced to the summary form with ``to_partial``.
    """

    model_config = ConfigDict(frozen=True)

    id: PlaylistId
    tracks: Tuple[Video, ...] = ()
    title: str
    uploader: Channel

    def to_partial(self) -> PartialPlaylist:
        """Truncate to the first two tracks, keeping the real total."""
        return PartialPlaylist(
            id=self.id,
            tracks=tuple(
                track.to_partial() for track in self.tracks[:MAX_PARTIAL_TRACKS]
            ),
            tracks_total=len(self.tracks),
            title=self.title,
            uploader=self.uploader,
        )
