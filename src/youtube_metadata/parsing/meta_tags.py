"""
Selector-based reads of ``<meta>``/``<link>`` markup.

The markup path does not depend on the JSON blobs and works on lightweight
pages (and older captures) that only carry Open Graph and itemprop tags.
"""

from __future__ import annotations

from typing import Optional

from bs4 import BeautifulSoup, Tag
from soupsieve import SoupSieve

from youtube_metadata.exceptions import MissingAttributeError, MissingElementError


def parse_document(html: str) -> BeautifulSoup:
    """Parse page source into a markup tree."""
    return BeautifulSoup(html, "html.parser")


def select_one(document: Tag, selector: SoupSieve) -> Tag:
    """
    Select the first element matching ``selector``.

    Raises
    ------
    MissingElementError
        Naming the selector, if no element matches.
    """
    element = selector.select_one(document)
    if element is None:
        raise MissingElementError(selector.pattern)
    return element


def select_attribute(document: Tag, selector: SoupSieve, attribute: str) -> str:
    """
    Read ``attribute`` off the first element matching ``selector``.

    Raises
    ------
    MissingElementError
        If no element matches.
    MissingAttributeError
        If the element lacks ``attribute``.
    """
    element = select_one(document, selector)
    value = element.get(attribute)
    if value is None:
        raise MissingAttributeError(attribute)
    # Multi-valued attributes (rel, class) come back as lists.
    if isinstance(value, list):
        return " ".join(value)
    return value


def select_optional_attribute(
    document: Tag, selector: SoupSieve, attribute: str
) -> Optional[str]:
    """Like ``select_attribute`` but returns None when either lookup fails."""
    try:
        return select_attribute(document, selector, attribute)
    except (MissingElementError, MissingAttributeError):
        return None
