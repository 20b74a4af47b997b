"""Page arithmetic for the frontend."""

import math
from typing import Callable, Tuple

from ..core.models import FavoritesPage


def search_total_pages(total_results: str, page_size: int = 10) -> int:
    """Number of search pages for an upstream total.

    Args:
        total_results: Total as reported by the API (a numeric string).
        page_size: Results per page.

    Returns:
        Page count, 0 when there are no results or the total is not a number.
    """
    try:
        total = int(total_results)
    except (TypeError, ValueError):
        return 0
    return math.ceil(total / page_size) if total > 0 else 0


def page_after_removal(current_page: int, items_on_page: int) -> int:
    """Page to show after removing one favorite from the current page.

    Removing the only item of a page other than the first steps back one page.
    """
    if items_on_page <= 1 and current_page > 1:
        return current_page - 1
    return current_page


def clamp_page(page: int, total_pages: int) -> int:
    """Keep a requested page within ``1..total_pages``."""
    return max(1, min(page, max(total_pages, 1)))


def fetch_favorites_in_range(
    page: int, fetch: Callable[[int], FavoritesPage]
) -> Tuple[FavoritesPage, int]:
    """Fetch a favorites page, falling back to the last page when past the end.

    Favorites removed from another session can leave the current page beyond
    ``total_pages``.

    Args:
        page: Requested page.
        fetch: Loads one page of favorites.

    Returns:
        The fetched page and the page number actually shown.
    """
    favorites = fetch(page)
    shown_page = clamp_page(page, favorites.total_pages)
    if shown_page != page:
        favorites = fetch(shown_page)
    return favorites, shown_page
