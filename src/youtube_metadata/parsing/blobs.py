"""
Extraction of the JSON blobs YouTube embeds in its pages.

Watch and search pages assign two large objects to script variables:
``ytInitialData`` (page contents: results, renderers, owner) and
``ytInitialPlayerResponse`` (player state: streaming formats, durations).
"""

from __future__ import annotations

import json
import re
from typing import Any

from youtube_metadata.exceptions import ExtractionError
from youtube_metadata.parsing.patterns import (
    INITIAL_DATA_RE,
    INITIAL_DATA_VAR,
    INITIAL_PLAYER_RESPONSE_RE,
    INITIAL_PLAYER_RESPONSE_VAR,
)


def extract_blob(html: str, pattern: re.Pattern[str], name: str) -> dict[str, Any]:
    """
    Extract and parse the first blob matched by ``pattern``.

    Parameters
    ----------
    html : str
        Raw page source.
    pattern : re.Pattern[str]
        Compiled marker pattern whose first group captures the JSON text.
    name : str
        Blob variable name, used in error reporting.

    Returns
    -------
    dict[str, Any]
        The parsed JSON object.

    Raises
    ------
    ExtractionError
        If the marker is absent, or the captured text is not a JSON object.
    """
    match = pattern.search(html)
    if not match:
        raise ExtractionError(name, ExtractionError.MARKER_NOT_FOUND)

    try:
        data = json.loads(match.group(1))
    except (ValueError, RecursionError) as e:
        # RecursionError: nesting deeper than the decoder can follow.
        raise ExtractionError(
            name,
            ExtractionError.INVALID_JSON,
            f"Malformed {name} JSON: {e}",
        ) from e

    if not isinstance(data, dict):
        raise ExtractionError(
            name,
            ExtractionError.INVALID_JSON,
            f"{name} is a JSON {type(data).__name__}, expected an object",
        )
    return data


def initial_data(html: str) -> dict[str, Any]:
    """Extract the ``ytInitialData`` blob."""
    return extract_blob(html, INITIAL_DATA_RE, INITIAL_DATA_VAR)


def initial_player_response(html: str) -> dict[str, Any]:
    """Extract the ``ytInitialPlayerResponse`` blob."""
    return extract_blob(html, INITIAL_PLAYER_RESPONSE_RE, INITIAL_PLAYER_RESPONSE_VAR)
