"""
Jinja2 setup for the village site pages.

The Jinja environment is built here rather than through Jinja2Templates'
keyword options, which current Starlette releases no longer forward to
Jinja. Filters are registered once on the shared instance.
"""

from pathlib import Path

from fastapi.templating import Jinja2Templates
from jinja2 import Environment, FileSystemLoader, select_autoescape

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"


def build_environment(auto_reload: bool = True) -> Environment:
    """Jinja environment over the package templates, HTML autoescaped."""
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(default_for_string=True, default=True),
        auto_reload=auto_reload,
    )


def get_templates() -> Jinja2Templates:
    from village_site.config import settings
    from village_site.utils.template_filters import register_filters

    templates = Jinja2Templates(env=build_environment(auto_reload=settings.DEBUG))
    register_filters(templates)
    return templates


templates = get_templates()
