"""Tests for SEO helpers."""

from datetime import date

import pytest

from src.common.blog_config import SiteInfo
from src.site.seo import (
    extract_keywords,
    generate_category_url,
    generate_meta_description,
    generate_og_image_url,
    generate_page_title,
    generate_post_structured_data,
    generate_post_url,
    generate_tag_url,
)


@pytest.fixture
def site() -> SiteInfo:
    return SiteInfo(name="Nivesh Marg", url="https://niveshmarg.in/")


class TestUrls:
    def test_og_image_absolute(self, site):
        assert generate_og_image_url(site, "T", "https://cdn.in/a.png") == "https://cdn.in/a.png"

    def test_og_image_relative(self, site):
        assert (
            generate_og_image_url(site, "T", "/images/uploads/a.png")
            == "https://niveshmarg.in/images/uploads/a.png"
        )

    def test_og_image_placeholder(self, site):
        assert (
            generate_og_image_url(site, "Nifty Options")
            == "https://placehold.co/1200x630?text=Nifty%2BOptions"
        )

    def test_post_url(self, site):
        assert generate_post_url(site, "nifty-options") == "https://niveshmarg.in/posts/nifty-options/"

    def test_category_and_tag_urls(self, site):
        assert (
            generate_category_url(site, "Technical Analysis")
            == "https://niveshmarg.in/categories/technical-analysis/"
        )
        assert generate_tag_url(site, "Option Greeks") == "https://niveshmarg.in/tags/option-greeks/"


class TestMetaDescription:
    def test_short_excerpt_unchanged(self):
        assert generate_meta_description("Short excerpt.") == "Short excerpt."

    def test_truncated_at_word_boundary(self):
        excerpt = "word " * 50
        result = generate_meta_description(excerpt)
        assert result.endswith("word...")
        assert len(result) <= 163

    def test_custom_length(self):
        assert generate_meta_description("alpha beta gamma", 12) == "alpha beta..."

    def test_no_space_hard_cut(self):
        assert generate_meta_description("a" * 20, 10) == "a" * 10 + "..."


class TestTitlesAndKeywords:
    def test_page_title(self, site):
        assert generate_page_title(site, "About") == "About | Nivesh Marg"
        assert generate_page_title(site, "About", include_site_name=False) == "About"

    def test_keywords(self, make_post):
        post = make_post(
            title="How the Nifty Options Market Works",
            category="Technical Analysis",
            tags=["options", "nifty"],
        )
        assert extract_keywords(post) == [
            "options", "nifty", "Technical Analysis", "market", "works",
        ]


class TestStructuredData:
    def test_blog_posting(self, site, make_post):
        post = make_post(
            slug="greeks", title="Option Greeks", category="Technical Analysis",
            tags=["options", "greeks"], day=date(2024, 4, 2),
        )
        url = generate_post_url(site, post.slug)
        data = generate_post_structured_data(site, post, url)

        assert data["@type"] == "BlogPosting"
        assert data["headline"] == "Option Greeks"
        assert data["image"] == "/images/uploads/greeks/hero.jpg"
        assert data["author"] == {"@type": "Person", "name": "Praveen Yadav"}
        assert data["publisher"]["logo"]["url"] == "https://niveshmarg.in/logo.png"
        assert data["datePublished"] == "2024-04-02T00:00:00.000Z"
        assert data["dateModified"] == data["datePublished"]
        assert data["mainEntityOfPage"]["@id"] == "https://niveshmarg.in/posts/greeks/"
        assert data["keywords"] == "options, greeks"
        assert data["articleSection"] == "Technical Analysis"
