"""Request URI parsing and content-type classification.

Both functions are pure: no I/O, no shared state.

The explorer is mounted at a prefix chosen by the embedding application,
so it never knows its own mount point up front. Instead every request URI
is split into the directory part (the prefix) and the final segment (the
file the browser asked for)::

    >>> resolve_path("/api/docs/index.html?x=1")
    ResolvedPath(prefix='/api/docs/', relative='index.html')
"""

import posixpath
import re
from typing import NamedTuple

# prefix: everything up to the last "/" before the query/fragment
# relative: the final segment, stopping at "?" or "#"
_URI_PATTERN = re.compile(r"(?P<prefix>(?:[^?#]*/)?)(?P<relative>[^/?#]*)")

CONTENT_TYPES: dict[str, str] = {
    ".html": "text/html; charset=utf-8",
    ".css": "text/css; charset=utf-8",
    ".js": "application/javascript",
    ".png": "image/png",
    ".json": "application/json; charset=utf-8",
}


class ResolvedPath(NamedTuple):
    prefix: str
    relative: str


def resolve_path(uri: str) -> ResolvedPath:
    """Split a raw request URI into ``(prefix, relative)``.

    The query string starts at the first ``?`` (or ``#``); anything after it,
    including more ``?`` or ``/`` characters, is ignored. A URI that is
    exactly the prefix yields an empty ``relative``.
    """
    match = _URI_PATTERN.match(uri)
    # The pattern can match the empty string, so match() never fails.
    assert match is not None
    return ResolvedPath(match["prefix"], match["relative"])


def content_type_for(relative: str) -> str | None:
    """Content-Type for a file name, keyed on its (case-sensitive) extension.

    Returns ``None`` for extensions outside the fixed table, leaving the
    header to whoever produces the body.
    """
    _, ext = posixpath.splitext(relative)
    return CONTENT_TYPES.get(ext)
