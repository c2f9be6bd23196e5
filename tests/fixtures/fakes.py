# ABOUTME: Hand-written test doubles for the HTTP client, catalog providers, and storage.
# ABOUTME: Each fake records its calls so tests can assert on ordering and short-circuiting.

from typing import Any
from urllib.parse import urlencode

from shelfscan.metadata.http import FetchedResource
from shelfscan.metadata.types import CanonicalMetadata
from shelfscan.storage.base import StorageError


class FakeHttpClient:
    """Fake HTTP client that returns canned responses based on URL patterns.

    GET patterns are matched against the URL with its encoded query string,
    so a pattern like "isbn%3A978" selects a single Google Books query.
    A canned Exception is raised instead of returned.
    """

    def __init__(
        self,
        responses: dict[str, Any] | None = None,
        resources: dict[str, Any] | None = None,
        posts: dict[str, Any] | None = None,
    ) -> None:
        self._responses = responses or {}
        self._resources = resources or {}
        self._posts = posts or {}
        self.request_log: list[str] = []
        self.fetch_log: list[str] = []
        self.post_log: list[tuple[str, bytes, str]] = []

    def get(self, url: str, params: dict[str, str] | None = None) -> Any:
        full = f"{url}?{urlencode(params)}" if params else url
        self.request_log.append(full)
        return _match(self._responses, full, default={})

    def fetch(self, url: str) -> FetchedResource:
        self.fetch_log.append(url)
        return _match(
            self._resources,
            url,
            default=FetchedResource(url=url, content=b"", content_type="text/html"),
        )

    def post(self, url: str, content: bytes, content_type: str) -> Any:
        self.post_log.append((url, content, content_type))
        return _match(self._posts, url, default={})


def _match(table: dict[str, Any], key: str, default: Any) -> Any:
    for pattern, response in table.items():
        if pattern in key:
            if isinstance(response, Exception):
                raise response
            return response
    return default


class FakeProvider:
    """Identifier provider that answers from a dict and logs every lookup."""

    def __init__(self, name: str, records: dict[str, CanonicalMetadata] | None = None) -> None:
        self._name = name
        self._records = records or {}
        self.calls: list[str] = []

    @property
    def name(self) -> str:
        return self._name

    def lookup_by_isbn(self, identifier: str) -> CanonicalMetadata | None:
        self.calls.append(identifier)
        return self._records.get(identifier)


class FakeTextProvider(FakeProvider):
    """Primary-style provider that also answers free-text and raw queries."""

    def __init__(
        self,
        name: str = "primary",
        records: dict[str, CanonicalMetadata] | None = None,
        text_records: dict[str, CanonicalMetadata] | None = None,
    ) -> None:
        super().__init__(name, records)
        self._text_records = text_records or {}
        self.text_calls: list[tuple[str, str | None]] = []
        self.query_calls: list[tuple[str, str]] = []

    def lookup_by_text(
        self, title: str, author: str | None = None
    ) -> CanonicalMetadata | None:
        self.text_calls.append((title, author))
        return self._text_records.get(title)

    def lookup_by_query(
        self, query: str, fallback_isbn: str = ""
    ) -> CanonicalMetadata | None:
        self.query_calls.append((query, fallback_isbn))
        return self._text_records.get(query)


class FakeCoverProbe:
    def __init__(self, covers: dict[str, str] | None = None) -> None:
        self._covers = covers or {}
        self.calls: list[str] = []

    def probe_cover(self, identifier: str) -> CanonicalMetadata | None:
        self.calls.append(identifier)
        url = self._covers.get(identifier)
        if url is None:
            return None
        return CanonicalMetadata(isbn=identifier, cover_image_url=url)


class FakeStorage:
    """In-memory CoverStorage that can be told to fail at either phase."""

    def __init__(self, fail_on: str | None = None) -> None:
        self._fail_on = fail_on
        self.targets: list[str] = []
        self.uploads: list[tuple[str, bytes, str]] = []

    def generate_upload_target(self) -> str:
        if self._fail_on == "generate":
            raise StorageError("no upload targets available")
        target = f"upload://{len(self.targets)}"
        self.targets.append(target)
        return target

    def upload(self, target: str, content: bytes, content_type: str) -> str:
        if self._fail_on == "upload":
            raise StorageError("transfer rejected")
        self.uploads.append((target, content, content_type))
        return f"storage-{len(self.uploads)}"
