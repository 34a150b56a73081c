"""
Readers for renderer fragments shared by the watch and search parsers.
"""

from __future__ import annotations

from typing import Any, Optional, TypeVar

from pydantic import ValidationError

from youtube_metadata.exceptions import MissingElementError
from youtube_metadata.models import Channel, ChannelId, YouTubeId
from youtube_metadata.parsing.navigator import get_object, get_str, lookup, qualify

IdT = TypeVar("IdT", bound=YouTubeId)

LIVE_NOW_BADGE_STYLE = "BADGE_STYLE_TYPE_LIVE_NOW"


def read_id(
    id_type: type[IdT], tree: Any, path: str, *, context: Optional[str] = None
) -> IdT:
    """
    Read an identifier token at ``path``.

    An empty or malformed token is reported like an absent one: either way
    the page no longer carries a usable ID there.
    """
    token = get_str(tree, path, context=context)
    try:
        return id_type(token)
    except ValidationError as e:
        qualified = qualify(path, context)
        raise MissingElementError(
            qualified, f"Missing element: {qualified} (invalid id {token!r})"
        ) from e


def read_channel(
    tree: Any, path: str, *, context: Optional[str] = None
) -> Channel:
    """
    Read an uploader from the text run at ``path``.

    A run looks like ``{"text": NAME, "navigationEndpoint":
    {"browseEndpoint": {"browseId": CHANNEL_ID}}}``.
    """
    run = get_object(tree, path, context=context)
    run_context = qualify(path, context)
    return Channel(
        id=read_id(
            ChannelId,
            run,
            "/navigationEndpoint/browseEndpoint/browseId",
            context=run_context,
        ),
        name=get_str(run, "/text", context=run_context),
    )


def is_live(video_renderer: dict[str, Any]) -> bool:
    """Whether a ``videoRenderer`` carries a "LIVE NOW" badge."""
    badges = lookup(video_renderer, "/badges")
    if not isinstance(badges, list):
        return False
    return any(
        lookup(badge, "/metadataBadgeRenderer/style") == LIVE_NOW_BADGE_STYLE
        for badge in badges
    )
