# ABOUTME: Parsing functions for Open Library Books API (jscmd=data) responses.
# ABOUTME: Converts the per-ISBN keyed bundle into a CanonicalMetadata instance.

from typing import Any

from shelfscan.metadata.covers import select_cover_variant
from shelfscan.metadata.fields import parse_page_count, parse_text, parse_year
from shelfscan.metadata.types import CanonicalMetadata

COVER_PREFERENCE = ("large", "medium", "small")


def bibkey(isbn: str) -> str:
    """The key Open Library uses for an ISBN in bibkeys requests and responses."""
    return f"ISBN:{isbn}"


def _first_name(entries: list[dict[str, Any]] | None) -> str:
    if not entries:
        return ""
    return parse_text(entries[0].get("name"))


def parse_books_response(data: dict[str, Any], isbn: str) -> CanonicalMetadata | None:
    """Parse an Open Library Books API response for a single ISBN.

    Returns None when the response has no bundle for the ISBN. Cover URLs
    are kept exactly as Open Library serves them.
    """
    book = data.get(bibkey(isbn))
    if not book:
        return None

    authors = book.get("authors") or []
    excerpts = book.get("excerpts") or []

    return CanonicalMetadata(
        title=parse_text(book.get("title")),
        author=", ".join(parse_text(a.get("name")) for a in authors),
        summary=parse_text(excerpts[0].get("text")) if excerpts else "",
        published_year=parse_year(book.get("publish_date")),
        publisher=_first_name(book.get("publishers")),
        page_count=parse_page_count(book.get("number_of_pages")),
        language="",
        genre=_first_name(book.get("subjects")),
        isbn=isbn,
        cover_image_url=select_cover_variant(book.get("cover"), COVER_PREFERENCE),
    )
