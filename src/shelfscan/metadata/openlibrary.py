# ABOUTME: Open Library metadata provider, the secondary catalog of the resolution chain.
# ABOUTME: Looks up books by ISBN via the Books API and probes the covers endpoint directly.

import logging
from typing import Any

from shelfscan.metadata.covers import build_cover_url
from shelfscan.metadata.http import HttpClient, MetadataFetchError
from shelfscan.metadata.openlibrary_parser import bibkey, parse_books_response
from shelfscan.metadata.types import CanonicalMetadata

logger = logging.getLogger(__name__)

_OL_BASE = "https://openlibrary.org"

_SHAPE_ERRORS = (AttributeError, LookupError, TypeError, ValueError)


class OpenLibraryProvider:
    """Metadata provider backed by the Open Library Books API.

    Identifier lookup only; Open Library has no free-text step in the chain.
    Also acts as the cover probe for the cover-only partial result.
    """

    def __init__(self, http_client: HttpClient) -> None:
        self._http = http_client

    @property
    def name(self) -> str:
        return "openlibrary"

    def lookup_by_isbn(self, identifier: str) -> CanonicalMetadata | None:
        """Look up a book by ISBN. Returns None on any failure or a miss."""
        params = {"bibkeys": bibkey(identifier), "format": "json", "jscmd": "data"}
        try:
            data: Any = self._http.get(f"{_OL_BASE}/api/books", params=params)
        except MetadataFetchError as exc:
            logger.warning("Open Library lookup failed for %s: %s", identifier, exc)
            return None

        try:
            return parse_books_response(data, identifier)
        except _SHAPE_ERRORS as exc:
            logger.warning("Unexpected Open Library response for %s: %s", identifier, exc)
            return None

    def probe_cover(self, identifier: str) -> CanonicalMetadata | None:
        """Check whether Open Library serves a cover image for the identifier.

        On success returns a record with only isbn and cover_image_url set;
        all text fields stay empty.
        """
        url = build_cover_url(identifier, size="L")
        try:
            resource = self._http.fetch(url)
        except MetadataFetchError as exc:
            logger.warning("Cover probe failed for %s: %s", identifier, exc)
            return None

        if not resource.is_image:
            logger.debug(
                "Cover probe for %s returned %r, not an image", identifier, resource.content_type
            )
            return None
        return CanonicalMetadata(isbn=identifier, cover_image_url=url)
