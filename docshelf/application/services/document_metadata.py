"""Response metadata for served documentation files.

Cache policy:
    Generated static assets (``.js``, ``.png``, ``.css``, ``.html``) are
    cached for 7 days. Search indexes (any path containing
    ``search-index``) change with every rebuild and, like everything else,
    get the 10 minute default.

Media type:
    Longest matching suffix from ``MEDIA_TYPES`` wins; other names fall
    back to the platform MIME registry, then to ``application/octet-stream``.
"""

import mimetypes
import re
from datetime import timedelta
from enum import Enum

STATIC_ASSET_PATTERN = re.compile(r"^(?!.*search-index).*\.(js|png|css|html)$")

MEDIA_TYPES: dict[str, str] = {
    ".css": "text/css",
    ".html": "text/html",
    ".js": "application/javascript",
    ".png": "image/png",
    ".zip": "application/zip",
}

DEFAULT_MEDIA_TYPE = "application/octet-stream"


class CachePolicy(str, Enum):
    """Cache-Control header values."""

    STATIC = f"max-age={int(timedelta(days=7).total_seconds())}"
    DEFAULT = f"max-age={int(timedelta(minutes=10).total_seconds())}"
    NO_CACHE = "no-cache"


def cache_policy_for(path: str) -> CachePolicy:
    """Select the cache policy for an in-archive path."""
    if STATIC_ASSET_PATTERN.search(path):
        return CachePolicy.STATIC
    return CachePolicy.DEFAULT


def media_type_for(path: str) -> str:
    """Select the Content-Type for an in-archive path.

    Args:
        path: In-archive path; only the file name is considered.

    Returns:
        str: Media type.
    """
    name = path.rsplit("/", 1)[-1]
    matches = [suffix for suffix in MEDIA_TYPES if name.endswith(suffix)]
    if matches:
        return MEDIA_TYPES[max(matches, key=len)]
    guessed, _ = mimetypes.guess_type(name, strict=False)
    return guessed or DEFAULT_MEDIA_TYPE
