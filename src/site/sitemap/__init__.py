# Sitemap: sitemap.xml from static pages and the posts collection

from .sitemap import (
    DEFAULT_STATIC_PAGES,
    SitemapRenderer,
    SitemapUrl,
    render_sitemap,
    write_sitemap,
)

__all__ = [
    "DEFAULT_STATIC_PAGES",
    "SitemapRenderer",
    "SitemapUrl",
    "render_sitemap",
    "write_sitemap",
]
