"""
Pytest configuration and fixtures for youtube-metadata tests.

Pages are synthesized from Python dicts with ``json.dumps`` so that each
test can drop or alter exactly the field it is about. The shapes mirror the
renderers YouTube serves on watch and search pages.
"""

from __future__ import annotations

import json
from typing import Any, Callable, Optional

import pytest

from youtube_metadata.config.settings import Settings

RICK_ROLL_ID = "dQw4w9WgXcQ"
RICK_ROLL_TITLE = "Rick Astley - Never Gonna Give You Up (Video)"
RICK_ASTLEY_CHANNEL_ID = "UCuAXFkgsw1L7xaCfnd5JJOw"
RICK_ASTLEY_CHANNEL_NAME = "RickAstleyVEVO"
RICK_ROLL_DURATION_MS = "212091"

_UNSET: Any = object()


def _run(text: str, channel_id: str) -> dict[str, Any]:
    return {
        "text": text,
        "navigationEndpoint": {"browseEndpoint": {"browseId": channel_id}},
    }


def render_page(
    initial_data: Optional[Any] = None,
    player_response: Optional[Any] = None,
    head: str = "",
    body: str = "",
) -> str:
    """Assemble page source embedding the given blobs as script variables."""
    scripts = []
    if player_response is not None:
        scripts.append(
            f'<script nonce="abc">var ytInitialPlayerResponse = '
            f"{json.dumps(player_response)};</script>"
        )
    if initial_data is not None:
        scripts.append(
            f'<script nonce="abc">var ytInitialData = '
            f"{json.dumps(initial_data)};</script>"
        )
    return (
        f"<!DOCTYPE html><html><head>{head}</head><body>{body}"
        f"{''.join(scripts)}</body></html>"
    )


def watch_initial_data(
    video_id: str = RICK_ROLL_ID,
    title: str = RICK_ROLL_TITLE,
    channel_id: str = RICK_ASTLEY_CHANNEL_ID,
    channel_name: str = RICK_ASTLEY_CHANNEL_NAME,
) -> dict[str, Any]:
    """Build a watch page ``ytInitialData`` blob."""
    return {
        "responseContext": {"serviceTrackingParams": []},
        "currentVideoEndpoint": {
            "clickTrackingParams": "CAAQ",
            "watchEndpoint": {"videoId": video_id},
        },
        "contents": {
            "twoColumnWatchNextResults": {
                "results": {
                    "results": {
                        "contents": [
                            {
                                "videoPrimaryInfoRenderer": {
                                    "title": {"runs": [{"text": title}]},
                                    "viewCount": {},
                                }
                            },
                            {
                                "videoSecondaryInfoRenderer": {
                                    "owner": {
                                        "videoOwnerRenderer": {
                                            "title": {
                                                "runs": [
                                                    _run(channel_name, channel_id)
                                                ]
                                            },
                                            "subscriberCountText": {
                                                "simpleText": "4.1M subscribers"
                                            },
                                        }
                                    }
                                }
                            },
                        ]
                    }
                }
            }
        },
    }


def watch_player_response(
    duration_ms: str = RICK_ROLL_DURATION_MS,
) -> dict[str, Any]:
    """Build a watch page ``ytInitialPlayerResponse`` blob."""
    return {
        "playabilityStatus": {"status": "OK"},
        "streamingData": {
            "expiresInSeconds": "21540",
            "formats": [
                {"itag": 18, "mimeType": "video/mp4", "approxDurationMs": duration_ms},
                {"itag": 22, "mimeType": "video/mp4", "approxDurationMs": duration_ms},
            ],
        },
    }


def watch_meta_tags(
    video_id: Optional[str] = RICK_ROLL_ID,
    title: Optional[str] = RICK_ROLL_TITLE,
    uploader: Optional[str] = RICK_ASTLEY_CHANNEL_NAME,
    url: Optional[str] = _UNSET,
    thumbnail: Optional[str] = _UNSET,
) -> tuple[str, str]:
    """
    Build the ``<head>`` and ``<body>`` markup of a watch page.

    Passing None for a field omits its tag.
    """
    if url is _UNSET:
        url = f"https://www.youtube.com/watch?v={video_id}"
    if thumbnail is _UNSET:
        thumbnail = f"https://i.ytimg.com/vi/{video_id}/maxresdefault.jpg"

    head = []
    if url is not None:
        head.append(f'<link rel="canonical" href="{url}">')
    if title is not None:
        head.append(f'<meta property="og:title" content="{title}">')
    if thumbnail is not None:
        head.append(f'<meta property="og:image" content="{thumbnail}">')

    body = ['<div id="watch7-content">']
    if video_id is not None:
        body.append(f'<meta itemprop="videoId" content="{video_id}">')
    if uploader is not None:
        body.append(
            '<span itemprop="author" itemscope itemtype="http://schema.org/Person">'
            f'<link itemprop="name" content="{uploader}"></span>'
        )
    body.append("</div>")
    return "".join(head), "".join(body)


def search_video_entry(
    video_id: str = RICK_ROLL_ID,
    title: str = RICK_ROLL_TITLE,
    length: Optional[str] = "3:33",
    channel_id: str = RICK_ASTLEY_CHANNEL_ID,
    channel_name: str = RICK_ASTLEY_CHANNEL_NAME,
    live: bool = False,
) -> dict[str, Any]:
    """Build a ``videoRenderer`` search entry."""
    renderer: dict[str, Any] = {
        "videoId": video_id,
        "title": {"runs": [{"text": title}]},
        "ownerText": {"runs": [_run(channel_name, channel_id)]},
        "viewCountText": {"simpleText": "1,234,567 views"},
    }
    if length is not None:
        renderer["lengthText"] = {
            "accessibility": {"accessibilityData": {"label": "length"}},
            "simpleText": length,
        }
    if live:
        renderer["badges"] = [
            {
                "metadataBadgeRenderer": {
                    "style": "BADGE_STYLE_TYPE_LIVE_NOW",
                    "label": "LIVE",
                }
            }
        ]
    return {"videoRenderer": renderer}


def search_playlist_track(
    video_id: str, title: str, length: str = "4:13"
) -> dict[str, Any]:
    """Build a ``childVideoRenderer`` playlist track."""
    return {
        "childVideoRenderer": {
            "videoId": video_id,
            "title": {"simpleText": title},
            "lengthText": {"simpleText": length},
        }
    }


def search_playlist_entry(
    playlist_id: str = "PLFgquLnL59alCl_2TQvOiD5Vgm1hCaGSI",
    title: str = "Rick Astley - Greatest Hits",
    video_count: str = "25",
    tracks: Optional[list[dict[str, Any]]] = None,
    channel_id: str = RICK_ASTLEY_CHANNEL_ID,
    channel_name: str = RICK_ASTLEY_CHANNEL_NAME,
) -> dict[str, Any]:
    """Build a ``playlistRenderer`` search entry."""
    if tracks is None:
        tracks = [
            search_playlist_track(RICK_ROLL_ID, "Never Gonna Give You Up", "3:33"),
            search_playlist_track("yPYZpwSpKmA", "Together Forever", "3:25"),
        ]
    return {
        "playlistRenderer": {
            "playlistId": playlist_id,
            "title": {"simpleText": title},
            "videoCountText": {"runs": [{"text": video_count}, {"text": " videos"}]},
            "videos": tracks,
            "shortBylineText": {"runs": [_run(channel_name, channel_id)]},
        }
    }


def search_shelf_entry(title: str = "Latest from Rick Astley") -> dict[str, Any]:
    """Build a ``shelfRenderer`` search entry."""
    return {
        "shelfRenderer": {
            "title": {"simpleText": title},
            "content": {
                "verticalListRenderer": {
                    "items": [search_video_entry(video_id="AC3Ejf7vPEY")]
                }
            },
        }
    }


def search_initial_data(entries: list[Any]) -> dict[str, Any]:
    """Wrap search entries in a results page ``ytInitialData`` blob."""
    return {
        "estimatedResults": "1234567",
        "contents": {
            "twoColumnSearchResultsRenderer": {
                "primaryContents": {
                    "sectionListRenderer": {
                        "contents": [
                            {"itemSectionRenderer": {"contents": entries}},
                            {"continuationItemRenderer": {"trigger": "next"}},
                        ]
                    }
                }
            }
        },
    }


# ============================================================================
# Settings
# ============================================================================


@pytest.fixture
def test_settings() -> Settings:
    """Settings pointing at a fake host with a short timeout."""
    return Settings(
        base_url="https://yt.test",
        request_timeout=5.0,
        user_agent="youtube-metadata-tests/1.0",
    )


# ============================================================================
# Watch pages
# ============================================================================


@pytest.fixture
def watch_page_factory() -> Callable[..., str]:
    """
    Factory fixture building watch pages.

    Examples
    --------
    >>> def test_page(watch_page_factory):
    ...     html = watch_page_factory(duration_ms="1000")
    """

    def _factory(
        video_id: str = RICK_ROLL_ID,
        title: str = RICK_ROLL_TITLE,
        channel_id: str = RICK_ASTLEY_CHANNEL_ID,
        channel_name: str = RICK_ASTLEY_CHANNEL_NAME,
        duration_ms: str = RICK_ROLL_DURATION_MS,
        initial_data: Optional[Any] = _UNSET,
        player_response: Optional[Any] = _UNSET,
    ) -> str:
        if initial_data is _UNSET:
            initial_data = watch_initial_data(
                video_id, title, channel_id, channel_name
            )
        if player_response is _UNSET:
            player_response = watch_player_response(duration_ms)
        head, body = watch_meta_tags(video_id, title, channel_name)
        return render_page(initial_data, player_response, head, body)

    return _factory


@pytest.fixture
def rick_roll_page(watch_page_factory: Callable[..., str]) -> str:
    """Watch page of a known, long-lived video."""
    return watch_page_factory()


@pytest.fixture
def invalid_video_page() -> str:
    """Page served for a video ID that does not exist."""
    initial_data = {
        "responseContext": {},
        "contents": {
            "twoColumnWatchNextResults": {
                "results": {
                    "results": {
                        "contents": [
                            {"itemSectionRenderer": {"contents": []}},
                        ]
                    }
                }
            }
        },
    }
    player_response = {
        "playabilityStatus": {"status": "ERROR", "reason": "Video unavailable"},
    }
    return render_page(
        initial_data,
        player_response,
        head="<title>YouTube</title>",
    )


@pytest.fixture
def meta_page_factory() -> Callable[..., str]:
    """Factory fixture building markup-only watch pages (no blobs)."""

    def _factory(**fields: Any) -> str:
        head, body = watch_meta_tags(**fields)
        return render_page(head=head, body=body)

    return _factory


# ============================================================================
# Search pages
# ============================================================================


@pytest.fixture
def search_page_factory() -> Callable[[list[Any]], str]:
    """Factory fixture building search results pages from raw entries."""

    def _factory(entries: list[Any]) -> str:
        return render_page(search_initial_data(entries))

    return _factory


@pytest.fixture
def mixed_search_page(search_page_factory: Callable[[list[Any]], str]) -> str:
    """
    Results page with, in order: a video, a live stream, a playlist, a shelf
    and a second video.
    """
    return search_page_factory(
        [
            search_video_entry(),
            search_video_entry(
                video_id="jfKfPfyJRdk",
                title="lofi hip hop radio - beats to relax/study to",
                channel_id="UCSJ4gkVC6NrvII8umztf0Ow",
                channel_name="Lofi Girl",
                live=True,
            ),
            search_playlist_entry(),
            search_shelf_entry(),
            search_video_entry(
                video_id="yPYZpwSpKmA",
                title="Rick Astley - Together Forever (Official Video)",
                length="1:03:25",
            ),
        ]
    )


@pytest.fixture
def video_entry_factory() -> Callable[..., dict[str, Any]]:
    """Factory fixture building ``videoRenderer`` entries."""
    return search_video_entry


@pytest.fixture
def playlist_entry_factory() -> Callable[..., dict[str, Any]]:
    """Factory fixture building ``playlistRenderer`` entries."""
    return search_playlist_entry


@pytest.fixture
def playlist_track_factory() -> Callable[..., dict[str, Any]]:
    """Factory fixture building ``childVideoRenderer`` tracks."""
    return search_playlist_track


@pytest.fixture
def shelf_entry_factory() -> Callable[..., dict[str, Any]]:
    """Factory fixture building ``shelfRenderer`` entries."""
    return search_shelf_entry


@pytest.fixture
def watch_initial_data_factory() -> Callable[..., dict[str, Any]]:
    """Factory fixture building watch page ``ytInitialData`` blobs."""
    return watch_initial_data


@pytest.fixture
def watch_player_response_factory() -> Callable[..., dict[str, Any]]:
    """Factory fixture building ``ytInitialPlayerResponse`` blobs."""
    return watch_player_response


@pytest.fixture
def page_renderer() -> Callable[..., str]:
    """The page assembly helper, for tests that need raw control."""
    return render_page
