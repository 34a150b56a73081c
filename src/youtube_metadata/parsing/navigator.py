"""
Path navigation over parsed JSON trees.

The blobs YouTube embeds have no published schema and their renderers move
between page versions. All parsers read them through the functions below so
that a field that moved is reported with the exact path that was attempted,
instead of surfacing as a ``KeyError`` or ``TypeError`` deep in a parser.

Paths use JSON Pointer syntax: ``/contents/0/videoRenderer`` walks the
``contents`` key, index ``0`` of that array, then the ``videoRenderer`` key.
"""

from __future__ import annotations

from typing import Any, Optional

from youtube_metadata.exceptions import MissingElementError

_MISSING = object()


def _segments(path: str) -> list[str]:
    if not path:
        return []
    if not path.startswith("/"):
        # Relative paths are accepted for readability at call sites.
        path = "/" + path
    return [
        segment.replace("~1", "/").replace("~0", "~")
        for segment in path.split("/")[1:]
    ]


def _step(node: Any, segment: str) -> Any:
    if isinstance(node, dict):
        return node.get(segment, _MISSING)
    if isinstance(node, list):
        if not (segment.isascii() and segment.isdigit()) or (
            len(segment) > 1 and segment[0] == "0"
        ):
            return _MISSING
        index = int(segment)
        return node[index] if index < len(node) else _MISSING
    return _MISSING


def lookup(tree: Any, path: str) -> Optional[Any]:
    """
    Resolve ``path`` against ``tree``.

    Stops at the first missing key, out-of-range index or segment applied
    to a scalar. Never raises.

    Returns
    -------
    Any | None
        The value at ``path``, or None if it cannot be reached.
    """
    node = tree
    for segment in _segments(path):
        node = _step(node, segment)
        if node is _MISSING:
            return None
    return node


def qualify(path: str, context: Optional[str] = None) -> str:
    """
    Prefix ``path`` with the location it is relative to.

    ``context`` is either a blob label (``"ytInitialData"``) or an already
    qualified path such as ``"ytInitialData:/contents/0"``.
    """
    if not context:
        return path
    if ":" in context:
        return f"{context}{path}"
    return f"{context}:{path}"


def get_value(tree: Any, path: str, *, context: Optional[str] = None) -> Any:
    """
    Resolve ``path`` to a non-null value.

    Parameters
    ----------
    tree : Any
        Parsed JSON (dicts, lists, scalars).
    path : str
        JSON Pointer into ``tree``.
    context : str | None, optional
        Label prefixed to the path in errors, e.g. ``"ytInitialData"``.

    Raises
    ------
    MissingElementError
        With the full qualified path, if nothing non-null is found there.
    """
    value = lookup(tree, path)
    if value is None:
        raise MissingElementError(qualify(path, context))
    return value


def _get_typed(
    tree: Any, path: str, expected: type, context: Optional[str]
) -> Any:
    value = get_value(tree, path, context=context)
    if not isinstance(value, expected):
        raise MissingElementError(
            qualify(path, context),
            f"Missing element: {qualify(path, context)} "
            f"(expected {expected.__name__}, found {type(value).__name__})",
        )
    return value


def get_str(tree: Any, path: str, *, context: Optional[str] = None) -> str:
    """Resolve ``path`` to a string leaf."""
    return _get_typed(tree, path, str, context)


def get_object(
    tree: Any, path: str, *, context: Optional[str] = None
) -> dict[str, Any]:
    """Resolve ``path`` to a JSON object."""
    return _get_typed(tree, path, dict, context)


def get_array(tree: Any, path: str, *, context: Optional[str] = None) -> list[Any]:
    """Resolve ``path`` to a JSON array."""
    return _get_typed(tree, path, list, context)
