# ABOUTME: Cover URL selection and normalization for catalog image links.
# ABOUTME: Forces https and asks for a larger rendering; safe to apply more than once.

import re
from collections.abc import Mapping, Sequence
from typing import Any

_COVERS_BASE_URL = "https://covers.openlibrary.org/b/isbn"

_ZOOM_ONE_RE = re.compile(r"([?&])zoom=1(?=&|#|$)")


def normalize_cover_url(url: str | None) -> str | None:
    """Rewrite a cover URL to use https and the larger zoom level.

    Idempotent: normalizing an already-normalized URL returns it unchanged.
    """
    if not url:
        return url
    if url.startswith("http://"):
        url = "https://" + url[len("http://") :]
    return _ZOOM_ONE_RE.sub(r"\1zoom=0", url)


def select_cover_variant(links: Mapping[str, Any] | None, preference: Sequence[str]) -> str | None:
    """Return the first non-empty link in preference order, or None."""
    if not links:
        return None
    for size in preference:
        url = links.get(size)
        if isinstance(url, str) and url:
            return url
    return None


def build_cover_url(isbn: str, size: str = "L") -> str:
    """Build an Open Library cover image URL for a given ISBN.

    Args:
        isbn: The ISBN to look up cover art for.
        size: Image size: "S" (small), "M" (medium), or "L" (large).
    """
    return f"{_COVERS_BASE_URL}/{isbn}-{size}.jpg"
