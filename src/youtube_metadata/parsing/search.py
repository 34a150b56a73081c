"""
Search results page parsing.

The results list mixes several renderer kinds. Videos and playlists are
normalized into ``SearchItem`` entries; shelves (themed rows of videos) and
any other kinds are ignored.

Videos that are live streams are skipped: they have no fixed length. The
"LIVE NOW" badge is not always present, so a video without a length text is
treated as live too. Every other missing field on a video or playlist entry
fails the whole parse, since it means the page format changed.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from pydantic import ValidationError

from youtube_metadata.exceptions import NumericFormatError
from youtube_metadata.models import (
    MAX_PARTIAL_TRACKS,
    PartialPlaylist,
    PartialPlaylistVideo,
    PlaylistId,
    SearchItem,
    SearchResult,
    Video,
    VideoId,
)
from youtube_metadata.parsing.blobs import initial_data
from youtube_metadata.parsing.duration import colon_to_duration
from youtube_metadata.parsing.navigator import (
    get_array,
    get_object,
    get_str,
    lookup,
    qualify,
)
from youtube_metadata.parsing.patterns import INITIAL_DATA_VAR
from youtube_metadata.parsing.renderers import is_live, read_channel, read_id

logger = logging.getLogger(__name__)

RESULTS_PATH = (
    "/contents/twoColumnSearchResultsRenderer/primaryContents/sectionListRenderer"
    "/contents/0/itemSectionRenderer/contents"
)

VIDEO_RENDERER = "videoRenderer"
PLAYLIST_RENDERER = "playlistRenderer"
SHELF_RENDERER = "shelfRenderer"


def parse_search(html: str) -> SearchResult:
    """
    Parse a search results page.

    Parameters
    ----------
    html : str
        Raw search results page source.

    Returns
    -------
    SearchResult
        Video and playlist entries in page order.

    Raises
    ------
    ExtractionError
        If ``ytInitialData`` is missing or malformed.
    MissingElementError
        If the results list, or a mandatory field of a video or playlist
        entry, cannot be found.
    NumericFormatError
        If a length or track count is not numeric.
    """
    data = initial_data(html)
    entries = get_array(data, RESULTS_PATH, context=INITIAL_DATA_VAR)

    items: list[SearchItem] = []
    for index, entry in enumerate(entries):
        context = qualify(f"{RESULTS_PATH}/{index}", INITIAL_DATA_VAR)
        if not isinstance(entry, dict):
            logger.debug("Ignoring non-object search entry at %s", context)
            continue

        if VIDEO_RENDERER in entry:
            video = _parse_video(
                get_object(entry, f"/{VIDEO_RENDERER}", context=context),
                f"{context}/{VIDEO_RENDERER}",
            )
            if video is not None:
                items.append(SearchItem(video))
        elif PLAYLIST_RENDERER in entry:
            playlist = _parse_playlist(
                get_object(entry, f"/{PLAYLIST_RENDERER}", context=context),
                f"{context}/{PLAYLIST_RENDERER}",
            )
            items.append(SearchItem(playlist))
        elif SHELF_RENDERER in entry:
            logger.debug("Ignoring shelf at %s", context)
        else:
            # radioRenderer, channelRenderer, ads...
            logger.debug("Ignoring search entry kinds %s", sorted(entry))

    return SearchResult(items=tuple(items))


def _parse_video(renderer: dict[str, Any], context: str) -> Optional[Video]:
    video_id = read_id(VideoId, renderer, "/videoId", context=context)

    if is_live(renderer):
        logger.debug("Skipping live stream %s", video_id)
        return None

    length_text = lookup(renderer, "/lengthText/simpleText")
    if not isinstance(length_text, str):
        logger.debug("Skipping video %s without length (live stream?)", video_id)
        return None

    return Video(
        id=video_id,
        length=colon_to_duration(length_text),
        title=get_str(renderer, "/title/runs/0/text", context=context),
        uploader=read_channel(renderer, "/ownerText/runs/0", context=context),
    )


def _parse_track(track: Any, context: str) -> PartialPlaylistVideo:
    video = get_object(track, "/childVideoRenderer", context=context)
    context = f"{context}/childVideoRenderer"
    return PartialPlaylistVideo(
        id=read_id(VideoId, video, "/videoId", context=context),
        length=colon_to_duration(
            get_str(video, "/lengthText/simpleText", context=context)
        ),
        title=get_str(video, "/title/simpleText", context=context),
    )


def _parse_track_count(text: str) -> int:
    # Thousands separators vary by locale: "1,234", "1.234", "1 234".
    digits = "".join(text.split()).replace(",", "").replace(".", "")
    if not digits.isascii() or not digits.isdigit():
        raise NumericFormatError(text, f"Invalid playlist track count {text!r}")
    try:
        return int(digits)
    except ValueError as e:
        # More digits than int() accepts from a string.
        raise NumericFormatError(
            text, f"Playlist track count {text!r} is too long"
        ) from e


def _parse_playlist(renderer: dict[str, Any], context: str) -> PartialPlaylist:
    playlist_id = read_id(PlaylistId, renderer, "/playlistId", context=context)

    # Every listed track must parse, even those past the two that are kept.
    tracks = [
        _parse_track(track, f"{context}/videos/{index}")
        for index, track in enumerate(get_array(renderer, "/videos", context=context))
    ]

    count_text = get_str(renderer, "/videoCountText/runs/0/text", context=context)
    tracks_total = _parse_track_count(count_text)
    title = get_str(renderer, "/title/simpleText", context=context)
    uploader = read_channel(renderer, "/shortBylineText/runs/0", context=context)

    try:
        return PartialPlaylist(
            id=playlist_id,
            tracks=tuple(tracks[:MAX_PARTIAL_TRACKS]),
            tracks_total=tracks_total,
            title=title,
            uploader=uploader,
        )
    except ValidationError as e:
        # Only the track total can disagree with the rest of the entry.
        raise NumericFormatError(
            count_text,
            f"Playlist {playlist_id} lists {min(len(tracks), MAX_PARTIAL_TRACKS)} tracks "
            f"but claims {tracks_total}",
        ) from e
