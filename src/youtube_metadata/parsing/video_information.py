"""
Watch page parsing from ``<meta>``/``<link>`` markup.
"""

from __future__ import annotations

from pydantic import ValidationError

from youtube_metadata.exceptions import MissingElementError
from youtube_metadata.models import VideoId, VideoInformation
from youtube_metadata.parsing.meta_tags import (
    parse_document,
    select_attribute,
    select_optional_attribute,
)
from youtube_metadata.parsing.patterns import (
    CANONICAL_URL_SELECTOR,
    THUMBNAIL_SELECTOR,
    TITLE_SELECTOR,
    UPLOADER_SELECTOR,
    VIDEO_ID_SELECTOR,
)


def parse_video_information(
    html: str, *, require_identity: bool = True
) -> VideoInformation:
    """
    Parse a watch page's meta tags into ``VideoInformation``.

    The canonical URL and the Open Graph title are always required. The
    thumbnail is optional. The video ID and uploader name are required
    unless ``require_identity`` is False, in which case pages that lack
    the itemprop markup yield None for them.

    Parameters
    ----------
    html : str
        Raw watch page source.
    require_identity : bool, optional
        Whether the video ID and uploader must be present (default: True).

    Raises
    ------
    MissingElementError
        If a required element is absent (names the selector).
    MissingAttributeError
        If a required element lacks its attribute.
    """
    document = parse_document(html)

    url = select_attribute(document, CANONICAL_URL_SELECTOR, "href")
    title = select_attribute(document, TITLE_SELECTOR, "content")

    if require_identity:
        uploader = select_attribute(document, UPLOADER_SELECTOR, "content")
        raw_id = select_attribute(document, VIDEO_ID_SELECTOR, "content")
    else:
        uploader = select_optional_attribute(document, UPLOADER_SELECTOR, "content")
        raw_id = select_optional_attribute(document, VIDEO_ID_SELECTOR, "content")

    video_id = None
    if raw_id is not None:
        try:
            video_id = VideoId(raw_id)
        except ValidationError as e:
            if require_identity:
                raise MissingElementError(
                    VIDEO_ID_SELECTOR.pattern,
                    f"Missing element: {VIDEO_ID_SELECTOR.pattern} "
                    f"(invalid id {raw_id!r})",
                ) from e

    thumbnail = select_optional_attribute(document, THUMBNAIL_SELECTOR, "content")

    return VideoInformation(
        id=video_id,
        url=url,
        title=title,
        uploader=uploader,
        thumbnail=thumbnail,
    )
