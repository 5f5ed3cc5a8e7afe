"""
Text helpers for article links and previews.
"""

from markupsafe import Markup

DEFAULT_TRUNCATE_LENGTH = 250


def generate_slug(title: str) -> str:
    """
    Build the URL slug used in news and village data links.

    Only lowercases and replaces spaces with dashes, so slugs of
    existing articles keep matching their stored links.

    Example:
        >>> generate_slug("Berita Terbaru Desa")
        'berita-terbaru-desa'
    """
    return title.replace(" ", "-").lower()


def truncate_text(text: str, length: int = DEFAULT_TRUNCATE_LENGTH) -> str:
    """
    Plain-text preview of an article body.

    HTML tags are stripped first (entities are unescaped and runs of
    whitespace collapse to one space). Text longer than length characters
    is cut at length and gets "..." appended.
    """
    stripped = Markup(text).striptags()
    if len(stripped) > length:
        return stripped[:length] + "..."
    return stripped


def comment_count_label(count: int) -> str:
    """Label shown on the comment badge of an article card."""
    return str(count)
