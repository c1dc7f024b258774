"""SEO helpers: canonical URLs, titles, descriptions, structured data.

All URLs are built from site.url, which brand configs store with a
trailing slash ("https://niveshmarg.in/").
"""

from __future__ import annotations

import re
from typing import Any, Optional
from urllib.parse import quote

from src.common.blog_config import SiteInfo
from src.common.models import BlogPost
from src.common.slugify import path_segment

OG_PLACEHOLDER_URL = "https://placehold.co/1200x630"
META_DESCRIPTION_LENGTH = 160

STOP_WORDS = frozenset({
    "the", "and", "for", "are", "but", "not", "you", "all", "can", "had",
    "her", "was", "one", "our", "out", "day", "get", "has", "him", "how",
    "man", "new", "now", "old", "see", "two", "way", "who", "boy", "did",
    "its", "let", "put", "say", "she", "too", "use",
})

_WHITESPACE_RE = re.compile(r"\s+")


# --- URLs ---

def generate_og_image_url(site: SiteInfo, title: str, image: Optional[str] = None) -> str:
    """Absolute Open Graph image URL.

    Absolute images are kept, root-relative ones are joined to the site URL,
    and without an image a 1200x630 placeholder carrying the title is used.
    """
    if image:
        if image.startswith("http://") or image.startswith("https://"):
            return image
        if image.startswith("/"):
            return site.url.rstrip("/") + image

    text = quote(_WHITESPACE_RE.sub("+", title), safe="-_.!~*'()")
    return f"{OG_PLACEHOLDER_URL}?text={text}"


def generate_post_url(site: SiteInfo, slug: str) -> str:
    return f"{site.url}posts/{slug}/"


def generate_category_url(site: SiteInfo, category: str) -> str:
    return f"{site.url}categories/{path_segment(category)}/"


def generate_tag_url(site: SiteInfo, tag: str) -> str:
    return f"{site.url}tags/{path_segment(tag)}/"


# --- Page metadata ---

def generate_meta_description(excerpt: str, max_length: int = META_DESCRIPTION_LENGTH) -> str:
    """Excerpt cut at the last word boundary within max_length, plus "..."."""
    if len(excerpt) <= max_length:
        return excerpt

    truncated = excerpt[:max_length]
    last_space = truncated.rfind(" ")
    if last_space > 0:
        truncated = truncated[:last_space]
    return truncated + "..."


def generate_page_title(site: SiteInfo, title: str, include_site_name: bool = True) -> str:
    if not include_site_name:
        return title
    return f"{title} | {site.name}"


def extract_keywords(post: BlogPost) -> list[str]:
    """Tags, then category, then significant title words; first occurrence wins."""
    keywords: dict[str, None] = {}
    for tag in post.data.tags:
        keywords[tag] = None
    keywords[post.data.category] = None

    for word in post.data.title.lower().split(" "):
        if len(word) > 3 and word not in STOP_WORDS:
            keywords[word] = None

    return list(keywords)


def _iso_timestamp(post: BlogPost) -> str:
    # Frontmatter dates carry no time; published at midnight UTC
    return post.data.date.strftime("%Y-%m-%dT00:00:00.000Z")


def generate_post_structured_data(site: SiteInfo, post: BlogPost, url: str) -> dict[str, Any]:
    """schema.org BlogPosting JSON-LD for a post page."""
    data = post.data
    timestamp = _iso_timestamp(post)
    return {
        "@context": "https://schema.org",
        "@type": "BlogPosting",
        "headline": data.title,
        "description": data.excerpt,
        "image": data.hero_image or generate_og_image_url(site, data.title),
        "author": {
            "@type": "Person",
            "name": data.author,
        },
        "publisher": {
            "@type": "Organization",
            "name": site.name,
            "logo": {
                "@type": "ImageObject",
                "url": f"{site.url}logo.png",
            },
        },
        "datePublished": timestamp,
        "dateModified": timestamp,
        "mainEntityOfPage": {
            "@type": "WebPage",
            "@id": url,
        },
        "keywords": ", ".join(data.tags),
        "articleSection": data.category,
    }
