"""
sitemap.xml rendering.
Static pages come first, then one entry per post.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Sequence

from jinja2 import Environment, FileSystemLoader, select_autoescape

from src.common.models import BlogPost

logger = logging.getLogger(__name__)

DEFAULT_STATIC_PAGES = ("", "about", "categories", "tags", "contact")


@dataclass
class SitemapUrl:
    loc: str
    lastmod: Optional[str] = None  # YYYY-MM-DD


class SitemapRenderer:
    """
    Renders sitemap.xml from the posts collection.

    Usage:
        renderer = SitemapRenderer()
        xml = renderer.render("https://niveshmarg.in/", posts)
    """

    def __init__(self, templates_dir: Optional[Path] = None):
        if templates_dir is None:
            templates_dir = Path(__file__).parent / "templates"

        self.templates_dir = templates_dir
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html", "xml", "xml.jinja2"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def build_urls(
        self,
        site_url: str,
        posts: Iterable[BlogPost],
        static_pages: Sequence[str] = DEFAULT_STATIC_PAGES,
        include_lastmod: bool = False,
    ) -> list[SitemapUrl]:
        """
        Absolute URLs for the sitemap.

        Args:
            site_url: Site origin, with or without trailing slash
            posts: Posts to list after the static pages
            static_pages: Page paths relative to the site root ("" is the home page)
            include_lastmod: Add each post's date as <lastmod>

        Returns:
            Static page URLs followed by post URLs
        """
        base = site_url.rstrip("/")
        urls = [SitemapUrl(loc=f"{base}/{page}") for page in static_pages]
        for post in posts:
            urls.append(SitemapUrl(
                loc=f"{base}/posts/{post.slug}/",
                lastmod=post.data.date.isoformat() if include_lastmod else None,
            ))
        return urls

    def render(
        self,
        site_url: str,
        posts: Iterable[BlogPost],
        static_pages: Sequence[str] = DEFAULT_STATIC_PAGES,
        include_lastmod: bool = False,
    ) -> str:
        template = self.env.get_template("sitemap.xml.jinja2")
        urls = self.build_urls(site_url, posts, static_pages, include_lastmod)
        return template.render(urls=urls)


def render_sitemap(
    site_url: str,
    posts: Iterable[BlogPost],
    static_pages: Sequence[str] = DEFAULT_STATIC_PAGES,
    include_lastmod: bool = False,
) -> str:
    return SitemapRenderer().render(site_url, posts, static_pages, include_lastmod)


def write_sitemap(
    site_url: str,
    posts: Iterable[BlogPost],
    output_path: Path,
    static_pages: Sequence[str] = DEFAULT_STATIC_PAGES,
    include_lastmod: bool = False,
) -> Path:
    """Render and write sitemap.xml."""
    xml = render_sitemap(site_url, posts, static_pages, include_lastmod)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(xml)
    logger.info("Sitemap written: %s", output_path)
    return output_path
