"""
Pagination constants shared by the listing pages.
"""

# Page size used when a caller passes zero or a negative value
FALLBACK_ITEMS_PER_PAGE = 8

# Query-string parameter carrying the requested page (e.g. "?id=3")
PAGE_QUERY_PARAM = "id"
