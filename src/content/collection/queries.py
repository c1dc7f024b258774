"""Queries over the posts collection.

Usage:
    collection = PostCollection.from_directory(Path("content/posts"))
    latest = collection.latest(limit=3, exclude_ids=[p.id for p in collection.featured(3)])
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

from src.common.models import BlogPost
from src.common.slugify import path_segment

from .loader import DEFAULT_EXTENSIONS, load_posts


@dataclass
class CategoryStats:
    """Post count and most recent post of a category."""
    category: str
    count: int
    latest_post: Optional[BlogPost] = None


@dataclass
class TagStats:
    """Posts carrying a tag, newest first."""
    tag: str
    count: int
    posts: list[BlogPost] = field(default_factory=list)


def sort_newest_first(posts: Iterable[BlogPost]) -> list[BlogPost]:
    return sorted(posts, key=lambda p: p.data.date, reverse=True)


class PostCollection:
    """In-memory posts collection, sorted newest first."""

    def __init__(self, posts: Iterable[BlogPost]):
        self._posts = sort_newest_first(posts)

    @classmethod
    def from_directory(
        cls,
        posts_dir: Path,
        extensions: tuple[str, ...] | list[str] = DEFAULT_EXTENSIONS,
    ) -> PostCollection:
        return cls(load_posts(posts_dir, extensions))

    def __len__(self) -> int:
        return len(self._posts)

    def __iter__(self):
        return iter(self._posts)

    def all(self) -> list[BlogPost]:
        """All posts, newest first."""
        return list(self._posts)

    def get(self, slug: str) -> Optional[BlogPost]:
        return next((p for p in self._posts if p.slug == slug), None)

    def featured(self, limit: int = 3) -> list[BlogPost]:
        """Posts explicitly marked featured, newest first."""
        return [p for p in self._posts if p.data.featured is True][:max(limit, 0)]

    def latest(self, limit: int = 3, exclude_ids: Iterable[str] = ()) -> list[BlogPost]:
        """Newest posts, skipping the given ids (e.g. already featured)."""
        excluded = set(exclude_ids)
        return [p for p in self._posts if p.id not in excluded][:max(limit, 0)]

    def by_category(self, category: str) -> list[BlogPost]:
        """Posts whose category route segment equals the given slug."""
        wanted = category.lower()
        return [p for p in self._posts if path_segment(p.data.category) == wanted]

    def by_tag(self, tag: str) -> list[BlogPost]:
        """Posts carrying a tag whose route segment equals the given slug."""
        wanted = tag.lower()
        return [
            p for p in self._posts
            if any(path_segment(t) == wanted for t in p.data.tags)
        ]

    def by_year(self) -> dict[str, list[BlogPost]]:
        """Posts grouped by publication year, newest year first."""
        grouped: dict[str, list[BlogPost]] = {}
        for post in self._posts:
            grouped.setdefault(str(post.data.date.year), []).append(post)
        return grouped

    def category_stats(self) -> list[CategoryStats]:
        """One entry per category, in order of first appearance."""
        stats: dict[str, CategoryStats] = {}
        for post in self._posts:
            entry = stats.get(post.data.category)
            if entry is None:
                stats[post.data.category] = CategoryStats(
                    category=post.data.category, count=1, latest_post=post,
                )
                continue
            entry.count += 1
            if post.data.date > entry.latest_post.data.date:
                entry.latest_post = post
        return list(stats.values())

    def tag_stats(self) -> list[TagStats]:
        """One entry per tag with its posts newest first."""
        stats: dict[str, TagStats] = {}
        for post in self._posts:
            for tag in post.data.tags:
                entry = stats.setdefault(tag, TagStats(tag=tag, count=0))
                entry.posts.append(post)
                entry.count += 1
        for entry in stats.values():
            entry.posts = sort_newest_first(entry.posts)
        return list(stats.values())
