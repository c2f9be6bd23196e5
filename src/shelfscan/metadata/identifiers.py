# ABOUTME: Pure helpers for cleaning, classifying, and converting book identifiers.
# ABOUTME: Handles ISBN-10 / EAN-13 / UPC-A conversions used by the barcode fallback chain.

import re

from shelfscan.metadata.types import IdentifierKind

_NON_DIGIT_RE = re.compile(r"\D")
# Separators that may appear inside a printed or scanned identifier.
_SEPARATOR_RE = re.compile(r"[\s.-]")
_NUMERIC_RE = re.compile(r"\d+[Xx]?")

# EAN-13 prefixes reserved for books ("Bookland").
BOOKLAND_PREFIXES = ("978", "979")
# Only 978-prefixed EANs have an ISBN-10 equivalent.
ISBN10_COMPATIBLE_PREFIX = "978"


def clean_identifier(raw: str) -> str:
    """Strip everything but digits, keeping a trailing ISBN-10 check character.

    A trailing 'x' is uppercased. Already-clean identifiers are returned
    unchanged.
    """
    stripped = raw.strip()
    digits = _NON_DIGIT_RE.sub("", stripped)
    if stripped[-1:] in ("x", "X"):
        return digits + "X"
    return digits


def classify(raw: str) -> IdentifierKind:
    """Classify a raw string as an ISBN-10, ISBN-13/EAN-13, barcode, or free text.

    Numeric strings (digits with an optional trailing X, ignoring spaces,
    dots and hyphens) classify by length. Anything else is free text.
    """
    compact = _SEPARATOR_RE.sub("", raw)
    if not _NUMERIC_RE.fullmatch(compact):
        return IdentifierKind.TEXT

    cleaned = clean_identifier(compact)
    if len(cleaned) == 10:
        return IdentifierKind.ISBN_10
    if cleaned.endswith("X"):
        # A check character only makes sense on a 10-character ISBN
        return IdentifierKind.TEXT
    if len(cleaned) == 13:
        return IdentifierKind.ISBN_13
    return IdentifierKind.BARCODE


def isbn10_check_character(nine_digits: str) -> str:
    """Compute the ISBN-10 check character for the first nine digits."""
    total = sum(int(digit) * (10 - i) for i, digit in enumerate(nine_digits))
    check = (11 - total % 11) % 11
    return "X" if check == 10 else str(check)


def convert_ean13_to_isbn10(ean13: str) -> str | None:
    """Convert a 978-prefixed EAN-13 into its ISBN-10 equivalent.

    Returns None when the input is not exactly 13 digits starting with 978.
    None means the conversion does not apply, not that something failed.
    """
    if len(ean13) != 13 or not ean13.isdigit():
        return None
    if not ean13.startswith(ISBN10_COMPATIBLE_PREFIX):
        return None

    body = ean13[3:12]
    return body + isbn10_check_character(body)


def upc_to_ean13(upc12: str) -> str:
    """Turn a 12-digit UPC-A into an EAN-13 by prepending a zero. Best effort only."""
    return "0" + upc12


def is_bookland_ean(code: str) -> bool:
    """Whether a cleaned code is a 13-digit EAN in the book number range."""
    return len(code) == 13 and code.isdigit() and code.startswith(BOOKLAND_PREFIXES)
