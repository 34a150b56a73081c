"""
youtube-metadata - Typed metadata extraction from YouTube page HTML.

Parses the ``ytInitialData`` / ``ytInitialPlayerResponse`` JSON blobs and the
Open Graph / itemprop markup of YouTube pages into validated Pydantic models.
The parsing functions never perform I/O; ``youtube_metadata.services`` holds
the small httpx client that fetches pages for them.
"""

from __future__ import annotations

__version__ = "0.3.0"
__author__ = "youtube-metadata"
__license__ = "MIT"

from youtube_metadata.exceptions import (
    ExtractionError,
    MissingAttributeError,
    MissingElementError,
    NumericFormatError,
    ParseError,
    ParseErrorKind,
    TransportError,
    YoutubeMetadataError,
)
from youtube_metadata.models import (
    Channel,
    ChannelId,
    ImageFormat,
    PartialPlaylist,
    PartialPlaylistVideo,
    Playlist,
    PlaylistId,
    Resolution,
    SearchItem,
    SearchResult,
    Video,
    VideoId,
    VideoInformation,
)
from youtube_metadata.parsing import (
    parse_search,
    parse_video,
    parse_video_information,
)

__all__ = [
    "__version__",
    "__author__",
    "__license__",
    # Errors
    "YoutubeMetadataError",
    "ParseError",
    "ParseErrorKind",
    "MissingElementError",
    "MissingAttributeError",
    "ExtractionError",
    "NumericFormatError",
    "TransportError",
    # Models
    "Channel",
    "ChannelId",
    "ImageFormat",
    "PartialPlaylist",
    "PartialPlaylistVideo",
    "Playlist",
    "PlaylistId",
    "Resolution",
    "SearchItem",
    "SearchResult",
    "Video",
    "VideoId",
    "VideoInformation",
    # Parsers
    "parse_search",
    "parse_video",
    "parse_video_information",
]
