"""
Page parsers.

Every function here is a pure function of the page source: no I/O, no
retries and no shared mutable state, so calls may run concurrently.
Failures raise a ``ParseError`` subclass.
"""

from __future__ import annotations

from youtube_metadata.parsing.duration import colon_to_duration, ms_to_duration
from youtube_metadata.parsing.search import parse_search
from youtube_metadata.parsing.video import parse_video
from youtube_metadata.parsing.video_information import parse_video_information

__all__ = [
    "colon_to_duration",
    "ms_to_duration",
    "parse_search",
    "parse_video",
    "parse_video_information",
]
