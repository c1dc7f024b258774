"""Data models for search."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from pydantic import BaseModel

from src.common.models import BlogPost


@dataclass
class SearchResult:
    """A post matched by a scored search."""
    post: BlogPost
    score: float
    matches: list[str] = field(default_factory=list)  # "title", "excerpt", "tags", "category"


class SearchIndexEntry(BaseModel):
    """One row of search-index.json, fetched by the client search bar.

    `slug` holds the post location ("/posts/<slug>/"), the key the
    client reads to build result links.
    """
    slug: str
    title: str
    excerpt: str = ""
    tags: list[str] = []
    category: str
    date: date
