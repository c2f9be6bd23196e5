# ABOUTME: Parsing functions for Google Books volumes API JSON responses.
# ABOUTME: Converts volumeInfo objects into CanonicalMetadata instances.

from typing import Any

from shelfscan.metadata.covers import normalize_cover_url, select_cover_variant
from shelfscan.metadata.fields import parse_page_count, parse_text, parse_year
from shelfscan.metadata.types import CanonicalMetadata

# Largest first; Google declares only the sizes it actually has.
COVER_PREFERENCE = ("extraLarge", "large", "medium", "thumbnail", "smallThumbnail")

# Two-letter codes shown to users by display name. Others pass through as-is.
LANGUAGE_NAMES: dict[str, str] = {
    "pt": "Português",
}


def expand_language(code: Any) -> str:
    code = parse_text(code)
    return LANGUAGE_NAMES.get(code, code)


def select_isbn(identifiers: list[dict[str, Any]] | None) -> str | None:
    """Pick the ISBN-13 from industryIdentifiers, falling back to ISBN-10."""
    by_type = {
        entry.get("type"): entry.get("identifier")
        for entry in identifiers or []
        if entry.get("identifier")
    }
    return by_type.get("ISBN_13") or by_type.get("ISBN_10")


def first_volume_info(data: dict[str, Any]) -> dict[str, Any] | None:
    """Return the volumeInfo of the first result item, or None on an empty result."""
    items = data.get("items") or []
    if not items:
        return None
    return items[0].get("volumeInfo")


def parse_volume_info(info: dict[str, Any], fallback_isbn: str = "") -> CanonicalMetadata:
    """Parse a Google Books volumeInfo object into CanonicalMetadata.

    Args:
        info: The volumeInfo object of a result item.
        fallback_isbn: Identifier to use when the volume lists no ISBN.
    """
    authors = info.get("authors") or []
    categories = info.get("categories") or []
    cover = select_cover_variant(info.get("imageLinks"), COVER_PREFERENCE)

    return CanonicalMetadata(
        title=parse_text(info.get("title")),
        author=", ".join(parse_text(name) for name in authors),
        summary=parse_text(info.get("description")),
        published_year=parse_year(info.get("publishedDate")),
        publisher=parse_text(info.get("publisher")),
        page_count=parse_page_count(info.get("pageCount")),
        language=expand_language(info.get("language")),
        genre=parse_text(categories[0]) if categories else "",
        isbn=select_isbn(info.get("industryIdentifiers")) or fallback_isbn,
        cover_image_url=normalize_cover_url(cover),
    )
