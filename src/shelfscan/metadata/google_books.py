# ABOUTME: Google Books metadata provider, the primary catalog of the resolution chain.
# ABOUTME: Looks up volumes by ISBN, title/author, or raw query and maps the first hit.

import logging
from typing import Any

from shelfscan.metadata.google_books_parser import first_volume_info, parse_volume_info
from shelfscan.metadata.http import HttpClient, MetadataFetchError
from shelfscan.metadata.types import CanonicalMetadata

logger = logging.getLogger(__name__)

_VOLUMES_URL = "https://www.googleapis.com/books/v1/volumes"

# Errors raised by the parser when a response does not have the expected shape.
_SHAPE_ERRORS = (AttributeError, LookupError, TypeError, ValueError)


class GoogleBooksProvider:
    """Metadata provider backed by the Google Books volumes API.

    Supports ISBN lookup and free-text search. Uses dependency-injected
    HttpClient for testability. Every failure is logged and reported as None.
    """

    def __init__(self, http_client: HttpClient, api_key: str | None = None) -> None:
        self._http = http_client
        self._api_key = api_key

    @property
    def name(self) -> str:
        return "googlebooks"

    def lookup_by_isbn(self, identifier: str) -> CanonicalMetadata | None:
        """Look up a volume by ISBN; the record's isbn falls back to the identifier."""
        return self._search(f"isbn:{identifier}", fallback_isbn=identifier)

    def lookup_by_text(
        self, title: str, author: str | None = None
    ) -> CanonicalMetadata | None:
        """Search by title and optional author, taking the single best result."""
        query = f"intitle:{title}"
        if author:
            query += f" inauthor:{author}"
        return self._search(query, fallback_isbn="", max_results=1)

    def lookup_by_query(
        self, query: str, fallback_isbn: str = ""
    ) -> CanonicalMetadata | None:
        """Run an unstructured query, e.g. a barcode no identifier lookup matched."""
        return self._search(query, fallback_isbn=fallback_isbn)

    def _search(
        self, query: str, *, fallback_isbn: str, max_results: int | None = None
    ) -> CanonicalMetadata | None:
        params: dict[str, str] = {"q": query}
        if max_results is not None:
            params["maxResults"] = str(max_results)
        if self._api_key:
            params["key"] = self._api_key

        try:
            data: Any = self._http.get(_VOLUMES_URL, params=params)
        except MetadataFetchError as exc:
            logger.warning("Google Books query failed for %r: %s", query, exc)
            return None

        try:
            info = first_volume_info(data)
            if info is None:
                logger.debug("Google Books returned no items for %r", query)
                return None
            return parse_volume_info(info, fallback_isbn=fallback_isbn)
        except _SHAPE_ERRORS as exc:
            logger.warning("Unexpected Google Books response for %r: %s", query, exc)
            return None
