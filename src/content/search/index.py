"""Static search index (search-index.json) for client-side search."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable

from src.common.models import BlogPost

from .models import SearchIndexEntry

logger = logging.getLogger(__name__)


def post_location(post: BlogPost) -> str:
    return f"/posts/{post.slug}/"


def build_search_index(posts: Iterable[BlogPost]) -> list[SearchIndexEntry]:
    """One flat entry per post, in collection order."""
    return [
        SearchIndexEntry(
            slug=post_location(post),
            title=post.data.title,
            excerpt=post.data.excerpt or "",
            tags=list(post.data.tags),
            category=post.data.category,
            date=post.data.date,
        )
        for post in posts
    ]


def search_index_json(entries: list[SearchIndexEntry]) -> str:
    """Serialize entries to the compact JSON array the client fetches."""
    return json.dumps(
        [e.model_dump(mode="json") for e in entries],
        ensure_ascii=False,
        separators=(",", ":"),
    )


def write_search_index(posts: Iterable[BlogPost], output_path: Path) -> Path:
    """Build and write search-index.json."""
    entries = build_search_index(posts)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(search_index_json(entries))
    logger.info("Search index written: %s (%d entries)", output_path, len(entries))
    return output_path
