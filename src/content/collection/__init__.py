# Content collection: load posts and query them

from .loader import load_posts, parse_post, split_frontmatter
from .queries import CategoryStats, PostCollection, TagStats, sort_newest_first

__all__ = [
    "load_posts",
    "parse_post",
    "split_frontmatter",
    "CategoryStats",
    "PostCollection",
    "TagStats",
    "sort_newest_first",
]
