"""
Search result models.
"""

from __future__ import annotations

from typing import Iterator, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, RootModel

from .channel import Channel
from .playlist import PartialPlaylist
from .video import Video


class SearchItem(RootModel[Union[Video, PartialPlaylist]]):
    """
    One entry of a search result: a video or a playlist summary.

    Playlists found in search results are ``PartialPlaylist`` objects: they
    list at most their first two tracks, without uploaders.
    """

    model_config = ConfigDict(frozen=True)

    root: Union[Video, PartialPlaylist]

    @property
    def title(self) -> str:
        """Title of the inner video or playlist."""
        return self.root.title

    @property
    def uploader(self) -> Channel:
        """Uploader of the inner video or playlist."""
        return self.root.uploader

    @property
    def is_video(self) -> bool:
        return isinstance(self.root, Video)

    @property
    def is_playlist(self) -> bool:
        return isinstance(self.root, PartialPlaylist)

    @property
    def video(self) -> Optional[Video]:
        """The inner video, or None for a playlist item."""
        return self.root if isinstance(self.root, Video) else None

    @property
    def playlist(self) -> Optional[PartialPlaylist]:
        """The inner playlist, or None for a video item."""
        return self.root if isinstance(self.root, PartialPlaylist) else None


class SearchResult(BaseModel):
    """Search result entries in page order."""

    model_config = ConfigDict(frozen=True)

    items: Tuple[SearchItem, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def videos(self) -> Iterator[Video]:
        """Iterate over the video entries, in page order."""
        return (item.root for item in self.items if isinstance(item.root, Video))

    def playlists(self) -> Iterator[PartialPlaylist]:
        """Iterate over the playlist entries, in page order."""
        return (
            item.root for item in self.items if isinstance(item.root, PartialPlaylist)
        )
