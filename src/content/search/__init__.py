# Search: query matching, suggestions and the static index

from .index import build_search_index, post_location, search_index_json, write_search_index
from .models import SearchIndexEntry, SearchResult
from .search import get_search_suggestions, search_posts, search_posts_with_score

__all__ = [
    "build_search_index",
    "post_location",
    "search_index_json",
    "write_search_index",
    "SearchIndexEntry",
    "SearchResult",
    "get_search_suggestions",
    "search_posts",
    "search_posts_with_score",
]
