"""
Thumbnail configuration types.

Invalid thumbnails resolve to a grey placeholder image rather than an HTTP
error, so a URL built from these types is always fetchable. See
https://developers.google.com/youtube/v3/docs/thumbnails for the sizes.
"""

from __future__ import annotations

from enum import Enum

THUMBNAIL_BASE_URL = "https://i.ytimg.com"
"""Base URL of the thumbnail image host."""


class ImageFormat(str, Enum):
    """Image formats served by the thumbnail host."""

    JPEG = "jpg"
    WEBP = "webp"  # same or better quality at a smaller size

    @property
    def path_prefix(self) -> str:
        """Path segment the format is served under."""
        return "vi" if self is ImageFormat.JPEG else "vi_webp"


class Resolution(str, Enum):
    """
    Thumbnail resolutions.

    ``MAXRES`` and ``STANDARD`` are not generated for every video.
    """

    DEFAULT = ""
    HIGH = "hq"
    MAXRES = "maxres"
    MEDIUM = "mq"
    STANDARD = "sd"

    @property
    def file_stem(self) -> str:
        """File name without extension, e.g. ``hqdefault``."""
        return f"{self.value}default"

    @property
    def size(self) -> tuple[int, int]:
        """Nominal (width, height) in pixels."""
        return _RESOLUTION_SIZES[self]


_RESOLUTION_SIZES: dict[Resolution, tuple[int, int]] = {
    Resolution.DEFAULT: (120, 90),
    Resolution.HIGH: (480, 360),
    Resolution.MAXRES: (1280, 720),
    Resolution.MEDIUM: (320, 180),
    Resolution.STANDARD: (640, 480),
}
