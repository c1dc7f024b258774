"""Slug helpers shared by queries, SEO URLs and the related-posts scorer."""

from __future__ import annotations

import re

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")
_WHITESPACE_RE = re.compile(r"\s+")


def slugify_tag(value: str) -> str:
    """Create a URL-safe slug from any string.

    Examples:
        "Technical Analysis" → "technical-analysis"
        "F&O / Derivatives" → "f-o-derivatives"
    """
    return _NON_ALNUM_RE.sub("-", value.lower()).strip("-")


def path_segment(value: str) -> str:
    """Lowercase and hyphenate whitespace, as category and tag routes do."""
    return _WHITESPACE_RE.sub("-", value.lower())


def slug_keywords(slug: str, min_length: int = 3) -> list[str]:
    """Keywords of a slug: lowercase '-' parts of at least min_length chars."""
    return [part for part in slug.lower().split("-") if len(part) >= min_length]
