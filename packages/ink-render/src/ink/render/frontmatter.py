"""Front matter stripping for ``---`` delimited metadata headers."""

from __future__ import annotations

import logging
from typing import AnyStr

logger = logging.getLogger(__name__)


def strip_front_matter(source: AnyStr) -> AnyStr:
    """Return *source* without a leading ``---`` front matter block.

    CRLF line endings are normalised to LF when a block is found, and blank
    lines after the closing delimiter are dropped.  Without a closing
    delimiter the input is not front matter and comes back unchanged.
    Works on ``str`` and ``bytes`` alike.
    """
    if isinstance(source, bytes):
        delimiter, newline, crlf = b"---", b"\n", b"\r\n"
    else:
        delimiter, newline, crlf = "---", "\n", "\r\n"

    if not source.startswith(delimiter):
        return source

    normalized = source.replace(crlf, newline)
    end = normalized.find(newline + delimiter, len(delimiter))
    if end < 0:
        logger.debug("Front matter has no closing delimiter; rendering it as content")
        return source

    rest = normalized[end + len(newline) + len(delimiter) :]
    return rest.lstrip(newline)
