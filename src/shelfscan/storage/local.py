# ABOUTME: Filesystem-backed CoverStorage that writes uploaded covers into a directory.
# ABOUTME: Used by the CLI's --save-cover option; references are file names.

import mimetypes
import uuid
from pathlib import Path

from shelfscan.storage.base import StorageError

# mimetypes maps image/jpeg to ".jpe" on some platforms.
_PREFERRED_EXTENSIONS = {
    "image/jpeg": ".jpg",
    "image/jpg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/webp": ".webp",
}


def extension_for(content_type: str) -> str:
    """Pick a file extension for an image media type, ignoring parameters."""
    media_type = content_type.split(";", 1)[0].strip().lower()
    return _PREFERRED_EXTENSIONS.get(media_type) or mimetypes.guess_extension(media_type) or ".img"


class LocalCoverStorage:
    """Store covers as files under a directory.

    Upload targets are fresh, extensionless paths inside the directory; the
    final file gets an extension from the declared content type.
    """

    def __init__(self, directory: Path) -> None:
        self._directory = directory

    @property
    def directory(self) -> Path:
        return self._directory

    def generate_upload_target(self) -> str:
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(f"Cannot create cover directory {self._directory}: {exc}") from exc
        return str(self._directory / uuid.uuid4().hex)

    def upload(self, target: str, content: bytes, content_type: str) -> str:
        path = Path(target).with_suffix(extension_for(content_type))
        if path.parent != self._directory:
            raise StorageError(f"Upload target {target} is outside {self._directory}")
        try:
            path.write_bytes(content)
        except OSError as exc:
            raise StorageError(f"Failed to write cover to {path}: {exc}") from exc
        return path.name
