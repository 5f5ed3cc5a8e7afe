"""
Jinja2 template filters shared by the village site pages.
"""

from village_site.config import settings
from village_site.utils.date_utils import extract_day, extract_month, format_display_date
from village_site.utils.pagination import build_pagination_url, page_numbers
from village_site.utils.text_utils import (
    comment_count_label,
    generate_slug,
    truncate_text,
)


def display_date_filter(value, format_string=None):
    """Formats a date for display using the configured format"""
    return format_display_date(value, format_string or settings.DISPLAY_DATE_FORMAT)


def truncate_filter(value, length=None):
    """Plain-text preview of an article body"""
    if value is None:
        return ""
    return truncate_text(str(value), length or settings.TRUNCATE_LENGTH)


def slug_filter(value):
    if value is None:
        return ""
    return generate_slug(str(value))


def register_filters(templates):
    """
    Registers the site's custom Jinja2 filters on a Jinja2Templates instance.

    Usage:
        from village_site.utils.template_filters import register_filters
        templates = Jinja2Templates(directory="templates")
        register_filters(templates)
    """
    templates.env.filters["slug"] = slug_filter
    templates.env.filters["display_date"] = display_date_filter
    templates.env.filters["day"] = extract_day
    templates.env.filters["month"] = extract_month
    templates.env.filters["truncate_text"] = truncate_filter
    templates.env.filters["comment_count"] = comment_count_label
    templates.env.filters["pagination_url"] = build_pagination_url
    templates.env.filters["page_numbers"] = page_numbers
