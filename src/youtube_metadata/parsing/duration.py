"""
Conversions from YouTube's textual durations to ``timedelta``.

Search listings print lengths in colon notation (``"3:33"``) while the
player response carries ``approxDurationMs`` as a decimal string.
"""

from __future__ import annotations

from datetime import timedelta

from youtube_metadata.exceptions import NumericFormatError
from youtube_metadata.parsing.patterns import DURATION_SEGMENT_RE

# Seconds, minutes, hours. Colon notation never encodes days.
_MAX_COLON_FIELDS = 3


def colon_to_duration(text: str) -> timedelta:
    """
    Convert colon notation (``H:MM:SS``, ``M:SS`` or ``SS``) to a duration.

    Parameters
    ----------
    text : str
        Duration text, most significant unit first.

    Returns
    -------
    timedelta
        The summed duration.

    Raises
    ------
    NumericFormatError
        If a segment is not a non-negative integer or more than three
        segments are present, or the total is out of range.

    Examples
    --------
    >>> colon_to_duration("3:33")
    datetime.timedelta(seconds=213)
    """
    segments = text.strip().split(":")
    if len(segments) > _MAX_COLON_FIELDS:
        raise NumericFormatError(
            text, f"Duration {text!r} has more than {_MAX_COLON_FIELDS} fields"
        )

    seconds = 0
    for position, segment in enumerate(reversed(segments)):
        if not DURATION_SEGMENT_RE.match(segment):
            raise NumericFormatError(text, f"Invalid duration segment in {text!r}")
        try:
            seconds += int(segment) * 60**position
        except ValueError as e:
            # More digits than int() accepts from a string.
            raise NumericFormatError(text, f"Duration {text!r} is too long") from e

    try:
        return timedelta(seconds=seconds)
    except OverflowError as e:
        raise NumericFormatError(text, f"Duration {text!r} is out of range") from e


def ms_to_duration(text: str) -> timedelta:
    """
    Convert a decimal string of milliseconds to a duration.

    Raises
    ------
    NumericFormatError
        If ``text`` is not a non-negative integer, or is too large for a
        ``timedelta``.
    """
    stripped = text.strip()
    if not DURATION_SEGMENT_RE.match(stripped):
        raise NumericFormatError(text, f"Invalid millisecond duration {text!r}")
    try:
        return timedelta(milliseconds=int(stripped))
    except (ValueError, OverflowError) as e:
        raise NumericFormatError(
            text, f"Millisecond duration {text!r} is out of range"
        ) from e
