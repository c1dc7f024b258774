# Related posts: category / tag / slug keyword overlap scoring

from .models import RelatedMatch, RelatedWeights
from .scorer import RelatedPostsScorer, get_related_posts

__all__ = [
    "RelatedMatch",
    "RelatedWeights",
    "RelatedPostsScorer",
    "get_related_posts",
]
