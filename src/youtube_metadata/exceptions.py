"""
Custom exceptions for the youtube-metadata library.

Every structural failure raised while reading a page is a ``ParseError``
subclass, so callers can tell an incompatible page format apart from a
network failure (``TransportError``) and remediate differently: report the
former, retry the latter.
"""

from __future__ import annotations

from enum import Enum

import httpx

# Transport failures come from the fetch collaborator and are never wrapped.
TransportError = httpx.HTTPError


class ParseErrorKind(str, Enum):
    """Classification of parse failures."""

    MISSING_ELEMENT = "missing_element"
    MISSING_ATTRIBUTE = "missing_attribute"
    EXTRACTION = "extraction"
    NUMERIC_FORMAT = "numeric_format"


class YoutubeMetadataError(Exception):
    """Base exception for all youtube-metadata errors."""

    def __init__(self, message: str) -> None:
        """
        Initialize YoutubeMetadataError.

        Parameters
        ----------
        message : str
            Human-readable error message.
        """
        self.message = message
        super().__init__(message)


class ParseError(YoutubeMetadataError):
    """
    Base exception for failures to read the expected data from a page.

    A parse failure is definitive for the given input: the page shape did
    not match what the parser relies on. Parsers never return partially
    populated models; they raise a subclass of this exception instead.

    Attributes
    ----------
    message : str
        Human-readable error message.
    kind : ParseErrorKind
        Classification of the failure.
    """

    kind: ParseErrorKind


class MissingElementError(ParseError):
    """
    Exception raised when a JSON path or markup selector matches nothing.

    Attributes
    ----------
    message : str
        Human-readable error message.
    path : str
        The full JSON path or CSS selector that was attempted.

    Examples
    --------
    >>> try:
    ...     parse_video(html)
    ... except MissingElementError as e:
    ...     print(f"Upstream field moved: {e.path}")
    """

    kind = ParseErrorKind.MISSING_ELEMENT

    def __init__(self, path: str, message: str | None = None) -> None:
        """
        Initialize MissingElementError.

        Parameters
        ----------
        path : str
            The JSON path or selector that could not be resolved.
        message : str | None, optional
            Human-readable error message (default: derived from ``path``).
        """
        self.path = path
        super().__init__(message or f"Missing element: {path}")


class MissingAttributeError(ParseError):
    """
    Exception raised when a selected markup element lacks an attribute.

    Attributes
    ----------
    message : str
        Human-readable error message.
    attribute : str
        Name of the missing attribute.
    """

    kind = ParseErrorKind.MISSING_ATTRIBUTE

    def __init__(self, attribute: str, message: str | None = None) -> None:
        """
        Initialize MissingAttributeError.

        Parameters
        ----------
        attribute : str
            Name of the attribute that was absent.
        message : str | None, optional
            Human-readable error message (default: derived from ``attribute``).
        """
        self.attribute = attribute
        super().__init__(message or f"Missing attribute '{attribute}'")


class ExtractionError(ParseError):
    """
    Exception raised when an embedded JSON blob cannot be extracted.

    Covers both a marker that is absent from the page and a blob that is
    present but does not parse as a JSON object. Both mean the page shape
    changed, so they share one kind and differ only in ``reason``.

    Attributes
    ----------
    message : str
        Human-readable error message.
    blob : str
        Name of the blob variable (e.g., ``"ytInitialData"``).
    reason : str
        ``"marker_not_found"`` or ``"invalid_json"``.
    """

    kind = ParseErrorKind.EXTRACTION

    MARKER_NOT_FOUND = "marker_not_found"
    INVALID_JSON = "invalid_json"

    def __init__(self, blob: str, reason: str, message: str | None = None) -> None:
        """
        Initialize ExtractionError.

        Parameters
        ----------
        blob : str
            Name of the blob variable that was looked for.
        reason : str
            Why extraction failed (``MARKER_NOT_FOUND`` or ``INVALID_JSON``).
        message : str | None, optional
            Human-readable error message (default: derived from the fields).
        """
        self.blob = blob
        self.reason = reason
        super().__init__(
            message or f"Fetching {blob} json failed ({reason.replace('_', ' ')})"
        )


class NumericFormatError(ParseError):
    """
    Exception raised when free text fails numeric parsing.

    Raised for durations (``"3:33"``, ``"212091"``) and counts (``"25"``)
    that do not hold the expected numbers.

    Attributes
    ----------
    message : str
        Human-readable error message.
    text : str
        The offending text.
    """

    kind = ParseErrorKind.NUMERIC_FORMAT

    def __init__(self, text: str, message: str | None = None) -> None:
        """
        Initialize NumericFormatError.

        Parameters
        ----------
        text : str
            The text that could not be parsed.
        message : str | None, optional
            Human-readable error message (default: derived from ``text``).
        """
        self.text = text
        super().__init__(message or f"Invalid numeric text: {text!r}")
