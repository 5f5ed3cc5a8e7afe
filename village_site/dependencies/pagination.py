"""
FastAPI dependencies that read the page parameter of listing pages.

The listings link to their pages with "?id=<n>". The raw value is parsed
leniently: anything that is not an integer counts as an empty request, so
a malformed link falls back to the first page instead of an error page.
"""

import logging
import re
from typing import Optional

from fastapi import Depends, Query

from village_site.config import settings
from village_site.constants.pagination import PAGE_QUERY_PARAM
from village_site.schemas.pagination import PageRequest
from village_site.utils.pagination import PaginationResult, compute_pagination

logger = logging.getLogger(__name__)

_PAGE_PARAM_RE = re.compile(r"[+-]?\d+", re.ASCII)


def parse_page_param(raw: Optional[str]) -> Optional[int]:
    """
    Converts the raw page parameter to an int.

    Returns:
        The page number (sign preserved), or None when raw is missing,
        blank or not a plain ASCII integer (underscores and non-ASCII digits are rejected)
    """
    if raw is None or not raw.strip():
        return None

    value = raw.strip()
    if not _PAGE_PARAM_RE.fullmatch(value):
        logger.warning(f"Ignoring malformed page parameter: '{raw}'")
        return None
    return int(value)


def get_page_request(
    page: Optional[str] = Query(None, alias=PAGE_QUERY_PARAM),
) -> PageRequest:
    return PageRequest(requested_page=parse_page_param(page))


class ListingPagination:
    """
    Dependency computing the pagination of one listing.

    Usage:
        news_pagination = ListingPagination("news")

        @router.get("/berita")
        async def news(pagination: PaginationResult = Depends(news_pagination)):
            ...
    """

    def __init__(self, listing: str):
        # Raises ValueError for unknown listings while routes are wired
        self.items_per_page = settings.per_page_for(listing)
        self.listing = listing

    def __call__(
        self, page_request: PageRequest = Depends(get_page_request)
    ) -> PaginationResult:
        return compute_pagination(
            page_request.requested_page,
            self.items_per_page,
            fallback_per_page=settings.DEFAULT_ITEMS_PER_PAGE,
            clamp_negative=settings.CLAMP_NEGATIVE_PAGES,
        )
