# ABOUTME: Protocols defining the contracts for catalog providers used by the resolver.
# ABOUTME: Any external catalog (Google Books, Open Library, etc.) implements one or more.

from typing import Protocol, runtime_checkable

from shelfscan.metadata.types import CanonicalMetadata


@runtime_checkable
class MetadataProvider(Protocol):
    """Protocol for identifier-based catalog lookups.

    Implementations must never raise for network or response problems;
    a miss of any kind is reported as None.
    """

    @property
    def name(self) -> str: ...

    def lookup_by_isbn(self, identifier: str) -> CanonicalMetadata | None: ...


@runtime_checkable
class TextSearchProvider(Protocol):
    """Protocol for catalogs that support free-text search."""

    def lookup_by_text(
        self, title: str, author: str | None = None
    ) -> CanonicalMetadata | None: ...

    def lookup_by_query(
        self, query: str, fallback_isbn: str = ""
    ) -> CanonicalMetadata | None: ...


@runtime_checkable
class CoverProbe(Protocol):
    """Protocol for catalogs that serve cover art directly by identifier."""

    def probe_cover(self, identifier: str) -> CanonicalMetadata | None: ...
