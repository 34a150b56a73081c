"""
Page fetching services.

Modules
-------
page_client
    httpx client that fetches watch and search pages and parses them.
"""

from youtube_metadata.services.page_client import (
    PageClient,
    get_video,
    get_video_information,
    search,
)

__all__ = [
    "PageClient",
    "get_video",
    "get_video_information",
    "search",
]
