"""Tests for sitemap rendering."""

import xml.etree.ElementTree as ET
from datetime import date
from pathlib import Path

from src.site.sitemap import SitemapRenderer, render_sitemap, write_sitemap

NS = {"sm": "http://www.sitemaps.org/schemas/sitemap/0.9"}


def _locs(xml: str) -> list[str]:
    root = ET.fromstring(xml)
    return [loc.text for loc in root.findall("sm:url/sm:loc", NS)]


class TestRenderSitemap:
    def test_static_pages_then_posts(self, make_post):
        posts = [make_post(slug="greeks"), make_post(slug="nifty-options")]
        locs = _locs(render_sitemap("https://niveshmarg.in/", posts))
        assert locs == [
            "https://niveshmarg.in/",
            "https://niveshmarg.in/about",
            "https://niveshmarg.in/categories",
            "https://niveshmarg.in/tags",
            "https://niveshmarg.in/contact",
            "https://niveshmarg.in/posts/greeks/",
            "https://niveshmarg.in/posts/nifty-options/",
        ]

    def test_site_url_without_trailing_slash(self, make_post):
        locs = _locs(render_sitemap("https://niveshmarg.in", [make_post(slug="a")], static_pages=[""]))
        assert locs == ["https://niveshmarg.in/", "https://niveshmarg.in/posts/a/"]

    def test_declaration_and_namespace(self):
        xml = render_sitemap("https://x.in/", [])
        assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>')
        assert 'xmlns="http://www.sitemaps.org/schemas/sitemap/0.9"' in xml

    def test_locations_escaped(self, make_post):
        xml = render_sitemap("https://x.in/?a=1&b=2", [make_post(slug="q-and-a")], static_pages=[])
        assert "&amp;b=2" in xml
        assert _locs(xml) == ["https://x.in/?a=1&b=2/posts/q-and-a/"]

    def test_lastmod(self, make_post):
        xml = render_sitemap(
            "https://x.in/", [make_post(slug="a", day=date(2024, 4, 2))],
            static_pages=[], include_lastmod=True,
        )
        root = ET.fromstring(xml)
        assert root.find("sm:url/sm:lastmod", NS).text == "2024-04-02"

    def test_no_lastmod_by_default(self, make_post):
        xml = render_sitemap("https://x.in/", [make_post(slug="a")])
        assert "lastmod" not in xml


class TestSitemapRenderer:
    def test_build_urls(self, make_post):
        urls = SitemapRenderer().build_urls("https://x.in/", [make_post(slug="a")], static_pages=["about"])
        assert [u.loc for u in urls] == ["https://x.in/about", "https://x.in/posts/a/"]

    def test_write(self, make_post, tmp_path: Path):
        path = write_sitemap("https://x.in/", [make_post(slug="a")], tmp_path / "dist" / "sitemap.xml")
        assert path.exists()
        assert "https://x.in/posts/a/" in path.read_text(encoding="utf-8")
