# ABOUTME: Storage package: where fetched cover images are persisted.
# ABOUTME: Exports the CoverStorage protocol and its local and HTTP implementations.

from shelfscan.storage.base import CoverStorage, StorageError
from shelfscan.storage.http_upload import HttpUploadStorage
from shelfscan.storage.local import LocalCoverStorage

__all__ = [
    "CoverStorage",
    "HttpUploadStorage",
    "LocalCoverStorage",
    "StorageError",
]
