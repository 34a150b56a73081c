"""
HTTP client that fetches YouTube pages and hands them to the parsers.

The parsers never perform I/O; this module is the thin layer that does.
Transport failures are ``httpx.HTTPError`` instances (``TransportError``)
raised unmodified, and structural failures are the parsers' ``ParseError``,
so callers can retry the former and report the latter.

Classes
-------
PageClient
    Reusable client keeping one ``httpx.AsyncClient`` (keep-alive
    connections) for every request.

Functions
---------
get_video, get_video_information, search
    One-shot helpers that open and close a client per call.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Optional, Type

import httpx

from youtube_metadata.config.settings import Settings, get_settings
from youtube_metadata.models import SearchResult, Video, VideoInformation
from youtube_metadata.models.youtube_types import validate_id_token
from youtube_metadata.parsing import (
    parse_search,
    parse_video,
    parse_video_information,
)

logger = logging.getLogger(__name__)


class PageClient:
    """
    Fetches YouTube pages and parses them.

    Parameters
    ----------
    settings : Settings | None, optional
        Client settings (default: loaded from the environment).
    client : httpx.AsyncClient | None, optional
        Client to reuse. When omitted, one is created and closed with this
        ``PageClient``; a client passed in is left open for its owner.

    Examples
    --------
    >>> async with PageClient() as client:
    ...     video = await client.video("dQw4w9WgXcQ")
    ...     results = await client.search("never gonna give you up")
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            follow_redirects=True,
            timeout=self._settings.request_timeout,
            headers=self._default_headers(),
        )

    def _default_headers(self) -> dict[str, str]:
        return {
            "User-Agent": self._settings.user_agent,
            "Accept-Language": self._settings.accept_language,
        }

    async def __aenter__(self) -> "PageClient":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def fetch(self, url: str, params: Optional[dict[str, str]] = None) -> str:
        """
        GET a page and return its body.

        Raises
        ------
        httpx.HTTPError
            On connection failures, timeouts and non-2xx responses.
        """
        logger.debug("Fetching %s", url)
        response = await self._client.get(
            url,
            params=params,
            headers=self._default_headers(),
            timeout=self._settings.request_timeout,
        )
        response.raise_for_status()
        return response.text

    def _watch_url(self, video: str) -> str:
        # Accept both full URLs and bare video IDs.
        if video.startswith(("http://", "https://")):
            return video
        return self._settings.watch_url(validate_id_token(video, "VideoId"))

    async def video(self, video: str) -> Video:
        """Fetch a watch page (URL or video ID) and parse it into a ``Video``."""
        return parse_video(await self.fetch(self._watch_url(video)))

    async def video_information(
        self, video: str, *, require_identity: bool = True
    ) -> VideoInformation:
        """Fetch a watch page (URL or video ID) and parse its meta tags."""
        html = await self.fetch(self._watch_url(video))
        return parse_video_information(html, require_identity=require_identity)

    async def search(self, query: str) -> SearchResult:
        """Fetch the results page for ``query`` and parse it."""
        html = await self.fetch(
            self._settings.search_url, params={"search_query": query}
        )
        return parse_search(html)


async def get_video(video: str, settings: Optional[Settings] = None) -> Video:
    """Fetch and parse a single watch page with a throwaway client."""
    async with PageClient(settings) as client:
        return await client.video(video)


async def get_video_information(
    video: str, settings: Optional[Settings] = None
) -> VideoInformation:
    """Fetch and parse a single watch page's meta tags with a throwaway client."""
    async with PageClient(settings) as client:
        return await client.video_information(video)


async def search(query: str, settings: Optional[Settings] = None) -> SearchResult:
    """Run a single search with a throwaway client."""
    async with PageClient(settings) as client:
        return await client.search(query)
