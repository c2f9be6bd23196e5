# ABOUTME: Resolution orchestrator: runs the ordered fallback chain across catalog providers.
# ABOUTME: Tries identifier lookups, barcode reinterpretations, then free text; first hit wins.

import logging
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass

from shelfscan.config import ResolverConfig
from shelfscan.metadata.google_books import GoogleBooksProvider
from shelfscan.metadata.http import CatalogHttpClient, HttpClient
from shelfscan.metadata.identifiers import (
    ISBN10_COMPATIBLE_PREFIX,
    classify,
    convert_ean13_to_isbn10,
    is_bookland_ean,
    upc_to_ean13,
)
from shelfscan.metadata.openlibrary import OpenLibraryProvider
from shelfscan.metadata.provider import CoverProbe, MetadataProvider, TextSearchProvider
from shelfscan.metadata.types import CanonicalMetadata, IdentifierKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolutionStep:
    """One strategy in a fallback chain. run returns a record or None on a miss."""

    name: str
    run: Callable[[], CanonicalMetadata | None]


def run_chain(steps: Iterable[ResolutionStep]) -> CanonicalMetadata | None:
    """Run steps in order and return the first non-None result.

    Steps are pulled lazily, so a generator can decide whether a later step
    applies only after every earlier step missed.
    """
    for step in steps:
        logger.debug("Trying %s", step.name)
        result = step.run()
        if result is not None:
            logger.info("Resolved via %s", step.name)
            return result
    return None


class BookResolver:
    """Resolve canonical metadata from an ISBN, a scanned barcode, or title/author.

    Identifier providers are tried in the order given, most reliable first.
    Calls are strictly sequential and stop at the first hit.
    """

    def __init__(
        self,
        identifier_providers: Sequence[MetadataProvider],
        text_provider: TextSearchProvider,
        cover_probe: CoverProbe | None = None,
    ) -> None:
        self._identifier_providers = list(identifier_providers)
        self._text_provider = text_provider
        self._cover_probe = cover_probe

    def resolve_by_code(self, raw: str) -> CanonicalMetadata | None:
        """Look up an identifier verbatim in each catalog, then probe for a cover."""
        return run_chain(self._code_steps(raw))

    def resolve_by_barcode(self, raw: str) -> CanonicalMetadata | None:
        """Resolve a scanned barcode, reinterpreting its format before falling back to text."""
        result = run_chain(self._barcode_steps(raw))
        if result is None:
            logger.info("No catalog match for barcode %r", raw)
        return result

    def resolve_by_text(
        self, title: str, author: str | None = None
    ) -> CanonicalMetadata | None:
        """Single free-text search against the primary catalog. No fallback."""
        return self._text_provider.lookup_by_text(title, author)

    def resolve(self, raw: str) -> CanonicalMetadata | None:
        """Dispatch on the kind of input: free text searches by title, anything numeric
        goes through the barcode chain."""
        if classify(raw) is IdentifierKind.TEXT:
            return self.resolve_by_text(raw.strip())
        return self.resolve_by_barcode(raw)

    def _code_steps(self, code: str) -> Iterator[ResolutionStep]:
        for provider in self._identifier_providers:
            yield ResolutionStep(
                f"{provider.name} lookup of {code}",
                lambda provider=provider: provider.lookup_by_isbn(code),
            )
        if self._cover_probe is not None:
            probe = self._cover_probe
            yield ResolutionStep(f"cover probe of {code}", lambda: probe.probe_cover(code))

    def _barcode_steps(self, raw: str) -> Iterator[ResolutionStep]:
        yield ResolutionStep(f"code {raw}", lambda: self.resolve_by_code(raw))

        digits = "".join(ch for ch in raw if ch.isdigit())

        if is_bookland_ean(digits):
            yield ResolutionStep(f"EAN-13 {digits}", lambda: self.resolve_by_code(digits))

        if len(digits) == 13 and digits.startswith(ISBN10_COMPATIBLE_PREFIX):
            isbn10 = convert_ean13_to_isbn10(digits)
            if isbn10 is not None:
                yield ResolutionStep(
                    f"ISBN-10 {isbn10}", lambda: self.resolve_by_code(isbn10)
                )

        if len(digits) == 12:
            ean13 = upc_to_ean13(digits)
            yield ResolutionStep(f"UPC-A as EAN-13 {ean13}", lambda: self.resolve_by_code(ean13))

        yield ResolutionStep(
            f"free-text query {raw!r}",
            lambda: self._text_provider.lookup_by_query(raw, fallback_isbn=raw),
        )


def create_resolver(
    config: ResolverConfig | None = None, http_client: HttpClient | None = None
) -> BookResolver:
    """Build a BookResolver wired to Google Books (primary) and Open Library (secondary)."""
    config = config or ResolverConfig()
    if http_client is None:
        http_client = CatalogHttpClient(
            min_request_interval=config.min_request_interval,
            max_retries=config.max_retries,
            retry_delay=config.retry_delay,
            timeout=config.timeout,
        )
    google = GoogleBooksProvider(http_client, api_key=config.google_api_key)
    openlibrary = OpenLibraryProvider(http_client)
    return BookResolver(
        identifier_providers=[google, openlibrary],
        text_provider=google,
        cover_probe=openlibrary,
    )
