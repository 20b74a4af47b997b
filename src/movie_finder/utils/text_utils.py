"""Text processing utilities."""

import re
from typing import Optional

NO_POSTER = "N/A"

_LEADING_YEAR = re.compile(r"^(\d{4})")
_PAGE_NUMBER = re.compile(r"[0-9]+")


def parse_year(year: Optional[str]) -> int:
    """Extract the release year from an upstream year string.

    OMDb years are free-form ("1999", "2005–2008", "2019–"). Only a
    leading four digit run counts.

    Args:
        year: Raw year string.

    Returns:
        Parsed year, or 0 if the string does not start with four digits.
    """
    if not year:
        return 0

    match = _LEADING_YEAR.match(year)
    return int(match.group(1)) if match else 0


def normalize_imdb_id(imdb_id: str) -> str:
    """Normalize IMDb ID for comparison.

    Args:
        imdb_id: Original IMDb ID.

    Returns:
        Case-folded, stripped ID.
    """
    return imdb_id.strip().lower()


def same_imdb_id(first: str, second: str) -> bool:
    """Check whether two IMDb IDs refer to the same movie."""
    return normalize_imdb_id(first) == normalize_imdb_id(second)


def has_poster(poster: Optional[str]) -> bool:
    """Check whether a poster value points at an actual image.

    Args:
        poster: Poster URL as stored or returned by OMDb.

    Returns:
        False for missing, blank or "N/A" posters.
    """
    return bool(poster and poster.strip() and poster != NO_POSTER)


def parse_page(page: Optional[str], default: int = 1) -> Optional[int]:
    """Parse a page number from a query string value.

    Args:
        page: Raw value, or None when the parameter was omitted.
        default: Page used when the parameter was omitted.

    Returns:
        Page number, or None if the value is not a positive integer.
    """
    if page is None:
        return default

    value = page.strip()
    if not _PAGE_NUMBER.fullmatch(value):
        return None

    number = int(value)
    return number if number >= 1 else None
