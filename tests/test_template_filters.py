"""Tests for the Jinja2 filters and the pagination partial."""

import pytest

from village_site.utils.pagination import build_navigation_state
from village_site.utils.template_config import build_environment, templates


@pytest.fixture
def env():
    return templates.env


def render(env, source, **context):
    return env.from_string(source).render(**context)


class TestRegisteredFilters:
    def test_slug(self, env):
        assert render(env, "{{ 'Data Desa' | slug }}") == "data-desa"

    def test_slug_none(self, env):
        assert render(env, "{{ none | slug }}") == ""

    def test_display_date(self, env):
        assert render(env, "{{ '2025-11-14' | display_date }}") == "14 November 2025"

    def test_day_and_month(self, env):
        out = render(env, "{{ d | day }} {{ d | month }}", d="2025-07-22")
        assert out == "22 July"

    def test_truncate_uses_configured_length(self, env):
        out = render(env, "{{ body | truncate_text }}", body="x" * 260)
        assert out == "x" * 250 + "..."

    def test_truncate_explicit_length(self, env):
        out = render(env, "{{ body | truncate_text(5) }}", body="<b>Pengumuman</b>")
        assert out == "Pengu..."

    def test_comment_count(self, env):
        assert render(env, "{{ 3 | comment_count }}") == "3"

    def test_pagination_url(self, env):
        assert render(env, "{{ 0 | pagination_url }}") == "?id=1"
        assert render(env, "{{ 4 | pagination_url }}") == "?id=4"


class TestPaginationPartial:
    def test_middle_page_links(self, env):
        html = env.get_template("partials/pagination.html").render(
            nav=build_navigation_state(2, 3)
        )
        assert 'href="?id=1" rel="prev"' in html
        assert 'href="?id=3" rel="next"' in html
        assert '<li class="active"><span>2</span></li>' in html

    def test_first_page_hides_previous(self, env):
        html = env.get_template("partials/pagination.html").render(
            nav=build_navigation_state(1, 3)
        )
        assert 'rel="prev"' not in html
        assert 'rel="next"' in html

    def test_last_page_hides_next(self, env):
        html = env.get_template("partials/pagination.html").render(
            nav=build_navigation_state(3, 3)
        )
        assert 'rel="next"' not in html

    def test_empty_listing_renders_nothing(self, env):
        html = env.get_template("partials/pagination.html").render(
            nav=build_navigation_state(1, 0)
        )
        assert "<nav" not in html


class TestTemplateConfig:
    def test_environment_loads_package_templates(self):
        assert "partials/pagination.html" in templates.env.list_templates()

    def test_autoescape_enabled(self, env):
        assert render(env, "{{ v }}", v="<b>") == "&lt;b&gt;"

    def test_auto_reload_follows_option(self):
        assert build_environment(auto_reload=True).auto_reload is True
        assert build_environment(auto_reload=False).auto_reload is False
