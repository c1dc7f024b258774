"""Related posts: weighted overlap of category, tags and slug keywords.

Each candidate gets:
- category match (case-insensitive): +50
- each tag it shares with the target: +10
- each slug keyword (part longer than 2 chars) it shares: +5

Candidates without any overlap are dropped. The rest are ordered by score,
newer posts first on ties, and cut to the requested limit.
"""

from __future__ import annotations

import logging
from typing import Iterable

from src.common.models import BlogPost
from src.common.slugify import slug_keywords

from .models import RelatedMatch, RelatedWeights

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 3


class RelatedPostsScorer:
    """Scores candidate posts against a target post.

    Usage:
        scorer = RelatedPostsScorer()
        related = scorer.find_related(post, collection.all(), limit=3)
    """

    def __init__(self, weights: RelatedWeights | None = None):
        self.weights = weights or RelatedWeights()

    def score(self, target: BlogPost, candidate: BlogPost) -> RelatedMatch:
        """Score one candidate against the target."""
        w = self.weights
        match = RelatedMatch(post=candidate)

        if candidate.data.category.lower() == target.data.category.lower():
            match.category_match = True
            match.score += w.category

        target_tags = {t.lower() for t in target.data.tags}
        match.shared_tags = [t for t in candidate.data.tags if t.lower() in target_tags]
        match.score += len(match.shared_tags) * w.tag

        target_keywords = set(slug_keywords(target.slug, w.min_keyword_length))
        match.shared_keywords = [
            k for k in slug_keywords(candidate.slug, w.min_keyword_length)
            if k in target_keywords
        ]
        match.score += len(match.shared_keywords) * w.slug_keyword

        return match

    def rank(
        self, target: BlogPost, candidates: Iterable[BlogPost]
    ) -> list[RelatedMatch]:
        """All candidates with a positive score, best first.

        Ties on score are broken by date (newest first); remaining ties keep
        the candidates' input order.
        """
        matches = [
            self.score(target, c) for c in candidates if c.id != target.id
        ]
        matches = [m for m in matches if m.score > 0]
        matches.sort(key=lambda m: (-m.score, -m.post.data.date.toordinal()))
        return matches

    def find_related(
        self,
        target: BlogPost,
        candidates: Iterable[BlogPost],
        limit: int = DEFAULT_LIMIT,
    ) -> list[BlogPost]:
        """Up to `limit` related posts for the target."""
        if limit <= 0:
            return []
        ranked = self.rank(target, candidates)
        logger.debug(
            "Related for %s: %d candidates scored, returning %d",
            target.slug, len(ranked), min(limit, len(ranked)),
        )
        return [m.post for m in ranked[:limit]]


def get_related_posts(
    target: BlogPost,
    candidates: Iterable[BlogPost],
    limit: int = DEFAULT_LIMIT,
) -> list[BlogPost]:
    """Convenience function with the default weights."""
    return RelatedPostsScorer().find_related(target, candidates, limit)
