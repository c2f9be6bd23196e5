# ABOUTME: Asset fetcher that downloads a resolved cover image and persists it to storage.
# ABOUTME: Failures are logged and reported as None; a missing cover never blocks a book.

import logging

from shelfscan.metadata.http import HttpClient, MetadataFetchError
from shelfscan.storage.base import CoverStorage, StorageError

logger = logging.getLogger(__name__)


class CoverFetcher:
    """Download cover images and hand them to a CoverStorage.

    The upload is all-or-nothing: a reference is only returned once the
    storage collaborator has accepted the bytes.
    """

    def __init__(self, http_client: HttpClient, storage: CoverStorage) -> None:
        self._http = http_client
        self._storage = storage

    def fetch_and_persist(self, url: str) -> str | None:
        """Download url and persist it, returning the storage reference or None."""
        try:
            resource = self._http.fetch(url)
        except MetadataFetchError as exc:
            logger.warning("Cover download failed for %s: %s", url, exc)
            return None

        if not resource.is_image:
            logger.warning(
                "Cover URL %s returned %r, not an image", url, resource.content_type or "no type"
            )
            return None

        try:
            target = self._storage.generate_upload_target()
            reference = self._storage.upload(target, resource.content, resource.content_type)
        except (StorageError, MetadataFetchError) as exc:
            logger.warning("Failed to persist cover from %s: %s", url, exc)
            return None

        logger.info("Stored cover from %s as %s", url, reference)
        return reference
