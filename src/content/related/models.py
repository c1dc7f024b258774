"""Data models for the related-posts scorer."""

from __future__ import annotations

from dataclasses import dataclass, field

from src.common.models import BlogPost


@dataclass(frozen=True)
class RelatedWeights:
    """Points awarded per kind of overlap with the target post."""
    category: int = 50  # Same category (once)
    tag: int = 10  # Per shared tag
    slug_keyword: int = 5  # Per shared slug keyword
    min_keyword_length: int = 3  # Slug parts shorter than this are ignored


@dataclass
class RelatedMatch:
    """Score breakdown of one candidate against the target."""
    post: BlogPost
    category_match: bool = False
    shared_tags: list[str] = field(default_factory=list)
    shared_keywords: list[str] = field(default_factory=list)
    score: int = 0
