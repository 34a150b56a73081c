"""
Watch page parsing from the embedded JSON blobs.
"""

from __future__ import annotations

import logging

from youtube_metadata.models import Video, VideoId
from youtube_metadata.parsing.blobs import initial_data, initial_player_response
from youtube_metadata.parsing.duration import ms_to_duration
from youtube_metadata.parsing.navigator import get_str
from youtube_metadata.parsing.patterns import (
    INITIAL_DATA_VAR,
    INITIAL_PLAYER_RESPONSE_VAR,
)
from youtube_metadata.parsing.renderers import read_channel, read_id

logger = logging.getLogger(__name__)

VIDEO_ID_PATH = "/currentVideoEndpoint/watchEndpoint/videoId"
DURATION_MS_PATH = "/streamingData/formats/0/approxDurationMs"
_WATCH_CONTENTS = "/contents/twoColumnWatchNextResults/results/results/contents"
TITLE_PATH = f"{_WATCH_CONTENTS}/0/videoPrimaryInfoRenderer/title/runs/0/text"
OWNER_RUN_PATH = (
    f"{_WATCH_CONTENTS}/1/videoSecondaryInfoRenderer/owner/videoOwnerRenderer/title/runs/0"
)


def parse_video(html: str) -> Video:
    """
    Parse a watch page into a ``Video``.

    Reads the video ID, title and uploader from ``ytInitialData`` and the
    approximate length of the first streaming format from
    ``ytInitialPlayerResponse``.

    Parameters
    ----------
    html : str
        Raw watch page source.

    Returns
    -------
    Video
        Fully populated video.

    Raises
    ------
    ExtractionError
        If either blob is missing or malformed.
    MissingElementError
        At the first field that cannot be found.
    NumericFormatError
        If the duration is not a number of milliseconds.
    """
    data = initial_data(html)
    player = initial_player_response(html)

    video_id = read_id(VideoId, data, VIDEO_ID_PATH, context=INITIAL_DATA_VAR)
    length = ms_to_duration(
        get_str(player, DURATION_MS_PATH, context=INITIAL_PLAYER_RESPONSE_VAR)
    )
    title = get_str(data, TITLE_PATH, context=INITIAL_DATA_VAR)
    uploader = read_channel(data, OWNER_RUN_PATH, context=INITIAL_DATA_VAR)

    logger.debug("Parsed video %s (%s)", video_id, uploader.id)
    return Video(id=video_id, length=length, title=title, uploader=uploader)
