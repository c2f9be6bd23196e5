# ABOUTME: Core data structures for resolved book metadata and identifier classification.
# ABOUTME: CanonicalMetadata is the single shape every catalog provider normalizes into.

from dataclasses import dataclass
from enum import Enum
from typing import Any


class IdentifierKind(Enum):
    """Classification of a raw identifier string."""

    ISBN_10 = "isbn10"
    ISBN_13 = "isbn13"  # also covers EAN-13
    BARCODE = "barcode"
    TEXT = "text"


@dataclass
class CanonicalMetadata:
    """Canonical book metadata as resolved from an external catalog.

    Every field is always present. Unknown text fields are empty strings,
    never None, so callers can render a record without null checks. A record
    with only isbn and cover_image_url set is the cover-only partial result.
    """

    title: str = ""
    author: str = ""
    summary: str = ""
    published_year: int | None = None
    publisher: str = ""
    page_count: int | None = None
    language: str = ""
    genre: str = ""
    isbn: str = ""
    cover_image_url: str | None = None

    @property
    def has_text(self) -> bool:
        """Whether any bibliographic text field is populated."""
        return any(
            (self.title, self.author, self.summary, self.publisher, self.language, self.genre)
        )

    def as_dict(self) -> dict[str, Any]:
        """Return the record keyed the way book records store it."""
        return {
            "title": self.title,
            "author": self.author,
            "summary": self.summary,
            "publishedYear": self.published_year,
            "publisher": self.publisher,
            "pageCount": self.page_count,
            "language": self.language,
            "genre": self.genre,
            "isbn": self.isbn,
            "coverImageUrl": self.cover_image_url,
        }
