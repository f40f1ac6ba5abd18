"""
Unit tests for template resolution and composition.
"""

import os
from pathlib import Path

import jinja2
import pytest

from qaapp.api.templating import PageRenderer, TemplateResolver, template_name_for


class TestTemplateNameFor:
    """Tests for the path -> template name mapping."""

    @pytest.mark.parametrize("path, expected", [
        ("/about.html", "about.html"),
        ("/questions/42/detail.html", "detail.html"),
        ("/about.html/", "about.html"),
        ("/profile", "profile"),
        ("/a/b/c", "c"),
    ])
    def test_last_segment(self, path, expected):
        assert template_name_for(path) == expected

    @pytest.mark.parametrize("path", ["/", "//", "///"])
    def test_root_uses_default(self, path):
        assert template_name_for(path) == "index.html"
        assert template_name_for(path, default="home.html") == "home.html"

    def test_empty_path(self):
        assert template_name_for("") == "."

    def test_traversal_segments_survive_basename(self):
        assert template_name_for("/static/..") == ".."


class TestTemplateResolver:
    """Tests for TemplateResolver."""

    def test_resolve_joins_directory(self):
        resolver = TemplateResolver("templates")
        template_set = resolver.resolve("/about.html")

        assert template_set.page == "about.html"
        assert template_set.header == "header.html"
        assert template_set.footer == "footer.html"
        assert template_set.page_path == os.path.join("templates", "about.html")

    def test_resolve_root_with_custom_names(self):
        resolver = TemplateResolver("site", default_name="home.html",
                                    header_name="top.html", footer_name="bottom.html")
        template_set = resolver.resolve("/")

        assert template_set.page == "home.html"
        assert template_set.header == "top.html"
        assert template_set.footer == "bottom.html"


class TestPageRenderer:
    """Tests for PageRenderer.compose."""

    def test_compose_returns_page(self, template_dir: Path):
        renderer = PageRenderer(str(template_dir))
        template_set = TemplateResolver(str(template_dir)).resolve("/about.html")

        page = renderer.compose(template_set)

        html = page.render(logged=False, user=None)
        assert "HEADER-MARK" in html
        assert "About page" in html
        assert "FOOTER-MARK" in html

    def test_missing_page(self, template_dir: Path):
        renderer = PageRenderer(str(template_dir))
        template_set = TemplateResolver(str(template_dir)).resolve("/nope.html")

        with pytest.raises(jinja2.TemplateNotFound):
            renderer.compose(template_set)

    def test_missing_footer_fails_every_page(self, template_dir: Path):
        (template_dir / "footer.html").unlink()
        renderer = PageRenderer(str(template_dir))
        template_set = TemplateResolver(str(template_dir)).resolve("/undefined.html")

        with pytest.raises(jinja2.TemplateNotFound):
            renderer.compose(template_set)

    def test_malformed_header_fails_every_page(self, template_dir: Path):
        (template_dir / "header.html").write_text("{% for %}")
        renderer = PageRenderer(str(template_dir))
        template_set = TemplateResolver(str(template_dir)).resolve("/undefined.html")

        with pytest.raises(jinja2.TemplateSyntaxError):
            renderer.compose(template_set)

    def test_without_cache_edits_are_seen_immediately(self, template_dir: Path):
        renderer = PageRenderer(str(template_dir))
        template_set = TemplateResolver(str(template_dir)).resolve("/about.html")

        renderer.compose(template_set)
        (template_dir / "about.html").write_text("edited")

        assert renderer.compose(template_set).render() == "edited"

    def test_cache_reloads_on_mtime_change(self, template_dir: Path):
        renderer = PageRenderer(str(template_dir), cache=True)
        template_set = TemplateResolver(str(template_dir)).resolve("/about.html")
        page_file = template_dir / "about.html"

        first = renderer.compose(template_set)
        assert renderer.compose(template_set) is first

        page_file.write_text("edited")
        mtime = page_file.stat().st_mtime + 10
        os.utime(page_file, (mtime, mtime))

        assert renderer.compose(template_set).render() == "edited"

    def test_autoescape(self, template_dir: Path):
        (template_dir / "echo.html").write_text("{{ value }}")
        renderer = PageRenderer(str(template_dir))
        template_set = TemplateResolver(str(template_dir)).resolve("/echo.html")

        html = renderer.compose(template_set).render(value="<script>")

        assert html == "&lt;script&gt;"
