"""
Identifier types for YouTube resources.

Provides opaque, immutable wrappers around the ID tokens extracted from a
page. Each identifier compares, hashes and orders by its token and derives
the canonical URL of the resource it names.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import ConfigDict, RootModel, field_validator

from .thumbnail import THUMBNAIL_BASE_URL, ImageFormat, Resolution

_ID_TOKEN_RE = re.compile(r"^[A-Za-z0-9_-]+$")


def validate_id_token(v: Any, kind: str = "Id") -> str:
    """Validate a YouTube ID token (non-empty, URL-safe characters)."""
    if not isinstance(v, str):
        raise TypeError(f"{kind} must be a string")

    if not v:
        raise ValueError(f"{kind} cannot be empty")

    # IDs are used verbatim in URLs
    if not _ID_TOKEN_RE.match(v):
        raise ValueError(f"{kind} contains invalid characters: {v}")

    return v


class YouTubeId(RootModel[str]):
    """Shared behaviour of the identifier wrappers."""

    model_config = ConfigDict(frozen=True)

    root: str

    @field_validator("root", mode="before")
    @classmethod
    def validate_root(cls, v: Any) -> str:
        """Validate the wrapped token."""
        return validate_id_token(v, cls.__name__)

    def __str__(self) -> str:
        return self.root

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.root!r})"

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.root < other.root  # type: ignore[attr-defined]

    def __le__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.root <= other.root  # type: ignore[attr-defined]

    def __gt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.root > other.root  # type: ignore[attr-defined]

    def __ge__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.root >= other.root  # type: ignore[attr-defined]

    def as_str(self) -> str:
        """Return the underlying token."""
        return self.root


class ChannelId(YouTubeId):
    """
    Channel identifier.

    This is the ``/channel/ID`` form, not the legacy ``/user/NAME`` form;
    both resolve to the same page.
    """

    @property
    def url(self) -> str:
        """Channel page URL."""
        return f"https://www.youtube.com/channel/{self.root}"


class PlaylistId(YouTubeId):
    """
    Playlist identifier.

    Playlists have no thumbnail of their own; they use their first video's.
    """

    @property
    def url(self) -> str:
        """Playlist page URL."""
        return f"https://www.youtube.com/playlist?list={self.root}"


class VideoId(YouTubeId):
    """Video identifier."""

    @property
    def url(self) -> str:
        """Short video URL."""
        return f"https://youtu.be/{self.root}"

    def thumbnail(
        self,
        image_format: ImageFormat = ImageFormat.JPEG,
        resolution: Resolution = Resolution.DEFAULT,
    ) -> str:
        """
        Build the thumbnail URL of this video.

        Parameters
        ----------
        image_format : ImageFormat, optional
            Image encoding (default: JPEG).
        resolution : Resolution, optional
            Thumbnail size (default: 120x90).

        Returns
        -------
        str
            URL such as ``https://i.ytimg.com/vi/{id}/hqdefault.jpg``.
        """
        return (
            f"{THUMBNAIL_BASE_URL}/{image_format.path_prefix}/{self.root}/"
            f"{resolution.file_stem}.{image_format.value}"
        )
