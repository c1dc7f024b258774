"""Tests for the related-posts scorer."""

from datetime import date

from src.content.related import RelatedPostsScorer, RelatedWeights, get_related_posts


class TestScore:
    def test_category_match_case_insensitive(self, make_post):
        target = make_post(slug="a", category="Technical Analysis")
        candidate = make_post(slug="b", category="technical analysis")
        match = RelatedPostsScorer().score(target, candidate)
        assert match.category_match
        assert match.score == 50

    def test_shared_tags(self, make_post):
        target = make_post(slug="a", category="X", tags=["options", "nifty", "greeks"])
        candidate = make_post(slug="b", category="Y", tags=["nifty", "options", "banks"])
        match = RelatedPostsScorer().score(target, candidate)
        assert sorted(match.shared_tags) == ["nifty", "options"]
        assert match.score == 20

    def test_slug_keywords_ignore_short_parts(self, make_post):
        target = make_post(slug="how-to-read-nifty-charts", category="X")
        candidate = make_post(slug="how-to-trade-nifty", category="Y")
        match = RelatedPostsScorer().score(target, candidate)
        # "how" counts (3 chars), "to" does not
        assert sorted(match.shared_keywords) == ["how", "nifty"]
        assert match.score == 10

    def test_combined(self, make_post):
        target = make_post(slug="nifty-options-basics", category="TA", tags=["options", "nifty"])
        candidate = make_post(slug="nifty-options-greeks", category="ta", tags=["options"])
        assert RelatedPostsScorer().score(target, candidate).score == 50 + 10 + 10

    def test_custom_weights(self, make_post):
        scorer = RelatedPostsScorer(RelatedWeights(category=1, tag=0, slug_keyword=0))
        target = make_post(slug="a", category="TA", tags=["x"])
        candidate = make_post(slug="b", category="TA", tags=["x"])
        assert scorer.score(target, candidate).score == 1


class TestFindRelated:
    def test_orders_by_score_then_date(self, make_post):
        target = make_post(slug="target", category="TA", tags=["nifty", "options"])
        older_tie = make_post(slug="older", category="TA", day=date(2024, 1, 1))
        newer_tie = make_post(slug="newer", category="TA", day=date(2024, 2, 1))
        best = make_post(slug="best", category="TA", tags=["nifty"], day=date(2023, 1, 1))

        related = get_related_posts(target, [older_tie, newer_tie, best], limit=3)
        assert [p.slug for p in related] == ["best", "newer", "older"]

    def test_zero_overlap_excluded(self, make_post):
        target = make_post(slug="target", category="TA", tags=["nifty"])
        unrelated = make_post(slug="unrelated", category="Macro", tags=["gdp"])
        assert get_related_posts(target, [unrelated]) == []

    def test_target_excluded(self, make_post):
        target = make_post(slug="target", category="TA")
        assert get_related_posts(target, [target]) == []

    def test_limit(self, make_post):
        target = make_post(slug="target", category="TA")
        candidates = [make_post(slug=f"p{i}", category="TA") for i in range(6)]
        assert len(get_related_posts(target, candidates)) == 3
        assert len(get_related_posts(target, candidates, limit=5)) == 5
        assert get_related_posts(target, candidates, limit=0) == []

    def test_deterministic(self, make_post):
        target = make_post(slug="target", category="TA", tags=["a", "b"])
        candidates = [
            make_post(slug=f"p{i}", category="TA" if i % 2 else "Other",
                      tags=["a"] if i % 3 else ["b", "a"], day=date(2024, 1, 1 + i))
            for i in range(8)
        ]
        first = [p.slug for p in get_related_posts(target, candidates, limit=5)]
        second = [p.slug for p in get_related_posts(target, list(reversed(candidates)), limit=5)]
        assert first == second

    def test_never_more_than_candidates(self, make_post):
        target = make_post(slug="target", category="TA")
        candidates = [make_post(slug="one", category="TA")]
        assert len(get_related_posts(target, candidates, limit=10)) == 1

    def test_sample_collection(self, sample_posts_dir):
        from src.content.collection import load_posts

        posts = load_posts(sample_posts_dir)
        target = next(p for p in posts if p.slug == "nifty-options-basics")
        related = get_related_posts(target, posts)
        assert [p.slug for p in related] == ["nifty-options-greeks", "market-wrap-week-12"]
