"""Text search over posts.

Three flavours:
- search_posts: every query term must appear somewhere in the post
- search_posts_with_score: weighted by where terms match
  (title 3, excerpt 2, tags 1.5, category 1 per matching term)
- get_search_suggestions: tag, category and title-word completions
"""

from __future__ import annotations

from typing import Iterable

from src.common.models import BlogPost

from .models import SearchResult

TITLE_WEIGHT = 3.0
EXCERPT_WEIGHT = 2.0
TAG_WEIGHT = 1.5
CATEGORY_WEIGHT = 1.0


def _terms(query: str) -> list[str]:
    return [t for t in query.lower().split() if t]


def search_posts(posts: Iterable[BlogPost], query: str) -> list[BlogPost]:
    """Posts containing all query terms, in input order."""
    terms = _terms(query)
    if not terms:
        return []

    results = []
    for post in posts:
        d = post.data
        text = " ".join([d.title, d.excerpt, *d.tags, d.category, d.author]).lower()
        if all(term in text for term in terms):
            results.append(post)
    return results


def search_posts_with_score(posts: Iterable[BlogPost], query: str) -> list[SearchResult]:
    """Posts matching any term, best score first, newer first on ties."""
    terms = _terms(query)
    if not terms:
        return []

    results: list[SearchResult] = []
    for post in posts:
        d = post.data
        title = d.title.lower()
        excerpt = d.excerpt.lower()
        tags = [t.lower() for t in d.tags]
        category = d.category.lower()

        score = 0.0
        matches: list[str] = []
        fields = (
            ("title", TITLE_WEIGHT, lambda term: term in title),
            ("excerpt", EXCERPT_WEIGHT, lambda term: term in excerpt),
            ("tags", TAG_WEIGHT, lambda term: any(term in t for t in tags)),
            ("category", CATEGORY_WEIGHT, lambda term: term in category),
        )
        for name, weight, matcher in fields:
            hits = sum(1 for term in terms if matcher(term))
            if hits:
                score += hits * weight
                matches.append(name)

        if score > 0:
            results.append(SearchResult(post=post, score=score, matches=matches))

    results.sort(key=lambda r: (-r.score, -r.post.data.date.toordinal()))
    return results


def get_search_suggestions(
    posts: Iterable[BlogPost], query: str, limit: int = 5
) -> list[str]:
    """Completions for a partial query (at least 2 characters).

    Title words are only suggested for queries of 3+ characters and words
    longer than 3 characters.
    """
    if len(query) < 2:
        return []

    q = query.lower()
    suggestions: dict[str, None] = {}  # Ordered set

    for post in posts:
        for tag in post.data.tags:
            if q in tag.lower():
                suggestions.setdefault(tag)
        if q in post.data.category.lower():
            suggestions.setdefault(post.data.category)
        if len(query) >= 3:
            for word in post.data.title.lower().split(" "):
                if q in word and len(word) > 3:
                    suggestions.setdefault(word)

    return list(suggestions)[:max(limit, 0)]
