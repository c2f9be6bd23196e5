# ABOUTME: CoverStorage protocol for the external image store covers are persisted into.
# ABOUTME: Two-phase contract: obtain an upload target, then transfer bytes for a reference.

from typing import Protocol, runtime_checkable


class StorageError(Exception):
    """Raised when the storage collaborator cannot accept an upload."""


@runtime_checkable
class CoverStorage(Protocol):
    """Protocol for object stores that accept cover image uploads.

    A target from generate_upload_target is single-use. If upload fails the
    target is abandoned and nothing is considered persisted.
    """

    def generate_upload_target(self) -> str: ...

    def upload(self, target: str, content: bytes, content_type: str) -> str: ...
