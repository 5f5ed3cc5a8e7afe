"""
Paginated listing queries.

Runs a SQLAlchemy ORM query for one page of a listing (news articles,
population registry rows, gallery photos) using the offset/limit pair from
village_site.utils.pagination.

Responsibilities:
- Counting the full result set
- Fetching the rows of the requested page
- Bundling rows, totals and navigation state for templates
"""

import logging
from typing import Any, Dict, Tuple

from sqlalchemy.orm import Query

from village_site.utils.pagination import (
    PaginationResult,
    build_navigation_state,
    calculate_total_pages,
)

logger = logging.getLogger(__name__)

# Largest OFFSET a 64-bit database integer can hold
MAX_QUERY_OFFSET = 2**63 - 1


def paginate_query(query: Query, pagination: PaginationResult) -> Tuple[list, int]:
    """
    Fetch one page of rows from an ordered query.

    Args:
        query: SQLAlchemy query, already filtered and ordered
        pagination: Result of compute_pagination for the request

    Returns:
        Tuple of (rows on the page, total row count)

    Note:
        A negative position (page below 1 with negative clamping disabled)
        is floored at 0 for the database only; the pagination dict is left
        untouched. A position beyond MAX_QUERY_OFFSET cannot hold any row
        and returns an empty page without querying.
    """
    total = query.order_by(None).count()

    offset = pagination["position"]
    if offset < 0:
        logger.warning(
            f"Negative offset {offset} for page {pagination['page']}, querying from 0"
        )
        offset = 0
    elif offset > MAX_QUERY_OFFSET:
        logger.warning(
            f"Offset {offset} for page {pagination['page']} exceeds {MAX_QUERY_OFFSET}, "
            "returning no rows"
        )
        return [], total

    rows = query.offset(offset).limit(pagination["items_per_page"]).all()
    return rows, total


def build_listing_page(query: Query, pagination: PaginationResult) -> Dict[str, Any]:
    """
    Everything a listing template needs for one page.

    Example:
        >>> page = build_listing_page(db.query(News).order_by(News.date.desc()), pagination)
        >>> page["nav"]["can_show_next"]
        True
    """
    items, total = paginate_query(query, pagination)
    total_pages = calculate_total_pages(total, pagination["items_per_page"])

    return {
        "items": items,
        "total": total,
        "total_pages": total_pages,
        "pagination": pagination,
        "nav": build_navigation_state(pagination["page"], total_pages),
    }
