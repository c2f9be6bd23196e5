# ABOUTME: CoverStorage that uploads to a remote object store via pre-signed upload URLs.
# ABOUTME: Asks an endpoint for an upload URL, then POSTs the image bytes to it.

from typing import Any

from shelfscan.metadata.http import HttpClient, MetadataFetchError
from shelfscan.storage.base import StorageError


class HttpUploadStorage:
    """Object store reached over HTTP with a generate-then-upload protocol.

    The upload-URL endpoint answers {"uploadUrl": ...}; posting the bytes to
    that URL answers {"storageId": ...}, the opaque reference.
    """

    def __init__(self, http_client: HttpClient, upload_url_endpoint: str) -> None:
        self._http = http_client
        self._endpoint = upload_url_endpoint

    def generate_upload_target(self) -> str:
        try:
            data: Any = self._http.get(self._endpoint)
        except MetadataFetchError as exc:
            raise StorageError(f"Could not obtain upload URL: {exc}") from exc
        return _require_str(data, "uploadUrl")

    def upload(self, target: str, content: bytes, content_type: str) -> str:
        try:
            data: Any = self._http.post(target, content, content_type)
        except MetadataFetchError as exc:
            raise StorageError(f"Upload failed: {exc}") from exc
        return _require_str(data, "storageId")


def _require_str(data: Any, key: str) -> str:
    value = data.get(key) if isinstance(data, dict) else None
    if not isinstance(value, str) or not value:
        raise StorageError(f"Storage response is missing {key!r}")
    return value
