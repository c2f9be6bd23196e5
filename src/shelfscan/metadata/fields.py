# ABOUTME: Field coercion helpers shared by the catalog response parsers.
# ABOUTME: Turns loosely-typed provider values into CanonicalMetadata field values.

import re
from typing import Any

_YEAR_RE = re.compile(r"(?<!\d)(\d{4})(?!\d)")


def parse_year(date: Any) -> int | None:
    """Extract the first 4-digit year from a publication date string.

    Handles "2004-05-01", "May 2004", "c1999" and bare years alike.
    """
    if not isinstance(date, str):
        return None
    match = _YEAR_RE.search(date)
    return int(match.group(1)) if match else None


def parse_page_count(value: Any) -> int | None:
    """Return the page count only when it is a positive integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value > 0 else None


def parse_text(value: Any) -> str:
    """Return the value when it is a string, otherwise an empty string."""
    return value if isinstance(value, str) else ""
