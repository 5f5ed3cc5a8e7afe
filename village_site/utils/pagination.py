"""
Pagination arithmetic for the village site listing pages.

This module provides pure pagination functions shared by the news listing,
the population registry and the photo gallery. It holds no state, performs
no I/O and never raises for integer input: out-of-range values are either
defaulted, clamped or carried through arithmetically, as documented per
function.

For running a paginated database query, see
village_site.repositories.pagination.
"""

from typing import Optional, TypedDict

from village_site.constants.pagination import (
    FALLBACK_ITEMS_PER_PAGE,
    PAGE_QUERY_PARAM,
)


class PaginationResult(TypedDict):
    """
    Position of the requested page within a listing.

    Attributes:
        page: Effective page number (1 when the request was empty)
        position: Zero-based offset of the first item on the page
        items_per_page: Page size the position was computed with
    """

    page: int
    position: int
    items_per_page: int


class NavigationState(TypedDict):
    """
    Previous/next navigation for a rendered page.

    previous_page and next_page are always computed; templates must gate
    their display on can_show_previous / can_show_next.
    """

    current_page: int
    total_pages: int
    can_show_previous: bool
    can_show_next: bool
    previous_page: int
    next_page: int


def compute_pagination(
    requested_page: Optional[int],
    items_per_page: int,
    *,
    fallback_per_page: int = FALLBACK_ITEMS_PER_PAGE,
    clamp_negative: bool = False,
) -> PaginationResult:
    """
    Turn a requested page into a page number and a query offset.

    Args:
        requested_page: Page from the request, or None when the parameter
            was missing or empty
        items_per_page: Configured page size; values <= 0 are replaced by
            fallback_per_page
        fallback_per_page: Page size used when items_per_page is not positive
        clamp_negative: When True, negative pages are treated like an empty
            request. Defaults to False, which keeps the historical behavior
            of using a negative page verbatim.

    Returns:
        PaginationResult with position == (page - 1) * items_per_page

    Example:
        >>> compute_pagination(3, 8)
        {'page': 3, 'position': 16, 'items_per_page': 8}
        >>> compute_pagination(None, 8)
        {'page': 1, 'position': 0, 'items_per_page': 8}
        >>> compute_pagination(-1, 8)
        {'page': -1, 'position': -16, 'items_per_page': 8}
    """
    if items_per_page <= 0:
        items_per_page = fallback_per_page

    if not requested_page or (clamp_negative and requested_page < 0):
        return {"page": 1, "position": 0, "items_per_page": items_per_page}

    return {
        "page": requested_page,
        "position": (requested_page - 1) * items_per_page,
        "items_per_page": items_per_page,
    }


def calculate_total_pages(total_items: int, items_per_page: int) -> int:
    """
    Number of pages needed for total_items.

    Returns 0 for an empty listing and 1 when items_per_page is not
    positive. Otherwise partial pages count as a full page.
    """
    assert total_items >= 0, "total_items must not be negative"

    if total_items == 0:
        return 0
    if items_per_page <= 0:
        return 1
    return (total_items + items_per_page - 1) // items_per_page


def is_first_page(page: int) -> bool:
    """True for page 1 and anything below it."""
    return page <= 1


def has_next_page(page: int, total_pages: int) -> bool:
    return page < total_pages


def is_valid_page(page: int, total_pages: int) -> bool:
    """True when page points at an existing page of the listing."""
    return 1 <= page <= total_pages


def build_pagination_url(page_number: int) -> str:
    """Query-string fragment for a page link; pages below 1 link to page 1."""
    if page_number < 1:
        page_number = 1
    return f"?{PAGE_QUERY_PARAM}={page_number}"


def build_navigation_state(current_page: int, total_pages: int) -> NavigationState:
    return {
        "current_page": current_page,
        "total_pages": total_pages,
        "can_show_previous": current_page > 1,
        "can_show_next": current_page < total_pages,
        "previous_page": current_page - 1,
        "next_page": current_page + 1,
    }


def page_numbers(total_pages: int) -> range:
    """Every page number of the listing, for rendering the numbered links."""
    return range(1, total_pages + 1)
