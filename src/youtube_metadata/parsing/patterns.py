"""
Compiled patterns shared by the page parsers.

Every regex and CSS selector is compiled once, when this module is first
imported, and only read afterwards. A malformed literal fails the import,
never a parse call.
"""

from __future__ import annotations

import re

import soupsieve

# Blob markers. The body is everything up to the first closing script tag,
# so a blob containing ";</script>" as data is cut short.
INITIAL_DATA_VAR = "ytInitialData"
INITIAL_PLAYER_RESPONSE_VAR = "ytInitialPlayerResponse"

INITIAL_DATA_RE = re.compile(r"var ytInitialData = (.*?);</script>", re.DOTALL)
INITIAL_PLAYER_RESPONSE_RE = re.compile(
    r"var ytInitialPlayerResponse = (.*?);</script>", re.DOTALL
)

# Meta tag selectors
CANONICAL_URL_SELECTOR = soupsieve.compile('link[rel="canonical"]')
TITLE_SELECTOR = soupsieve.compile('meta[property="og:title"]')
THUMBNAIL_SELECTOR = soupsieve.compile('meta[property="og:image"]')
UPLOADER_SELECTOR = soupsieve.compile('link[itemprop="name"]')
VIDEO_ID_SELECTOR = soupsieve.compile('meta[itemprop="videoId"]')

# Colon notation durations: "SS", "M:SS", "H:MM:SS"
DURATION_SEGMENT_RE = re.compile(r"^[0-9]+$")
