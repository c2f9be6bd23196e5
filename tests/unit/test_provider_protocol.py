# ABOUTME: Unit tests for the provider protocols.
# ABOUTME: Validates the protocol contracts and runtime_checkable behavior.

from shelfscan.metadata import CanonicalMetadata, CoverProbe, MetadataProvider, TextSearchProvider
from shelfscan.metadata.google_books import GoogleBooksProvider
from shelfscan.metadata.openlibrary import OpenLibraryProvider
from tests.fixtures.fakes import FakeCoverProbe, FakeHttpClient, FakeProvider, FakeTextProvider


class NotAProvider:
    """Missing required methods, so it does not satisfy the protocol."""

    @property
    def name(self) -> str:
        return "broken"


class TestMetadataProvider:
    """Tests for MetadataProvider protocol."""

    def test_fake_is_instance(self) -> None:
        assert isinstance(FakeProvider("fake"), MetadataProvider)

    def test_invalid_implementation_is_not_instance(self) -> None:
        """A class missing required methods does not satisfy the protocol."""
        assert not isinstance(NotAProvider(), MetadataProvider)

    def test_lookup_returns_record_or_none(self) -> None:
        provider = FakeProvider("fake", {"0306406152": CanonicalMetadata(title="Found")})
        result = provider.lookup_by_isbn("0306406152")
        assert result is not None
        assert result.title == "Found"
        assert provider.lookup_by_isbn("nothing") is None


class TestConcreteProviders:
    """The real catalog clients satisfy the protocols the resolver depends on."""

    def test_google_books_capabilities(self) -> None:
        provider = GoogleBooksProvider(http_client=FakeHttpClient())
        assert isinstance(provider, MetadataProvider)
        assert isinstance(provider, TextSearchProvider)
        assert not isinstance(provider, CoverProbe)

    def test_openlibrary_capabilities(self) -> None:
        provider = OpenLibraryProvider(http_client=FakeHttpClient())
        assert isinstance(provider, MetadataProvider)
        assert isinstance(provider, CoverProbe)
        assert not isinstance(provider, TextSearchProvider)

    def test_fakes_match_their_roles(self) -> None:
        assert isinstance(FakeTextProvider(), TextSearchProvider)
        assert isinstance(FakeCoverProbe(), CoverProbe)
