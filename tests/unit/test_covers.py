# ABOUTME: Unit tests for cover URL normalization and variant selection.
# ABOUTME: Verifies https forcing, zoom rewriting, idempotence, and size preference.

import pytest

from shelfscan.metadata.covers import (
    build_cover_url,
    normalize_cover_url,
    select_cover_variant,
)


class TestNormalizeCoverUrl:
    """Tests for normalize_cover_url."""

    def test_forces_https_and_zoom(self) -> None:
        assert normalize_cover_url("http://example.com/x?zoom=1") == "https://example.com/x?zoom=0"

    def test_zoom_in_middle_of_query(self) -> None:
        url = "http://books.google.com/books/content?id=abc&printsec=frontcover&img=1&zoom=1&source=gbs_api"
        assert normalize_cover_url(url) == (
            "https://books.google.com/books/content?id=abc&printsec=frontcover&img=1&zoom=0&source=gbs_api"
        )

    def test_other_zoom_levels_untouched(self) -> None:
        """Only zoom=1 is rewritten; zoom=10 or zoom=5 are left alone."""
        assert normalize_cover_url("https://x.com/c?zoom=10") == "https://x.com/c?zoom=10"
        assert normalize_cover_url("https://x.com/c?zoom=5") == "https://x.com/c?zoom=5"

    def test_https_url_unchanged(self) -> None:
        url = "https://covers.openlibrary.org/b/id/1-L.jpg"
        assert normalize_cover_url(url) == url

    @pytest.mark.parametrize(
        "url",
        [
            "http://example.com/x?zoom=1",
            "http://books.google.com/books/content?id=abc&zoom=1&edge=curl",
            "https://example.com/plain.jpg",
        ],
    )
    def test_idempotent(self, url: str) -> None:
        once = normalize_cover_url(url)
        assert normalize_cover_url(once) == once

    def test_none_passes_through(self) -> None:
        assert normalize_cover_url(None) is None


class TestSelectCoverVariant:
    """Tests for select_cover_variant."""

    def test_prefers_first_available(self) -> None:
        links = {"small": "s", "medium": "m", "large": "l"}
        assert select_cover_variant(links, ("large", "medium", "small")) == "l"

    def test_skips_missing_and_empty(self) -> None:
        links = {"large": "", "small": "s"}
        assert select_cover_variant(links, ("large", "medium", "small")) == "s"

    def test_no_links(self) -> None:
        assert select_cover_variant(None, ("large",)) is None
        assert select_cover_variant({}, ("large",)) is None
        assert select_cover_variant({"tiny": "t"}, ("large",)) is None


class TestBuildCoverUrl:
    def test_default_size_is_large(self) -> None:
        assert build_cover_url("9780306406157") == (
            "https://covers.openlibrary.org/b/isbn/9780306406157-L.jpg"
        )

    def test_explicit_size(self) -> None:
        assert build_cover_url("0306406152", size="M").endswith("/0306406152-M.jpg")
