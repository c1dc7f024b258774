"""Shared test fixtures for the blog site engine."""

import sys
from datetime import date
from pathlib import Path

import pytest

# Ensure src is importable
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.common.blog_config import BlogConfig, load_blog_config
from src.common.models import BlogPost, PostData


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the shared fixtures directory."""
    return PROJECT_ROOT / "fixtures"


@pytest.fixture
def sample_posts_dir(fixtures_dir: Path) -> Path:
    """Posts collection with four valid posts and one invalid file."""
    return fixtures_dir / "sample_posts"


@pytest.fixture
def make_post():
    """Factory for BlogPost records with sensible defaults."""

    def _make(
        slug: str = "sample-post",
        title: str = "Sample Post",
        day: date = date(2024, 1, 15),
        category: str = "Technical Analysis",
        tags: list[str] | None = None,
        excerpt: str = "A sample excerpt.",
        author: str = "Praveen Yadav",
        featured: bool | None = None,
        body: str = "",
    ) -> BlogPost:
        return BlogPost(
            id=f"{slug}.mdx",
            slug=slug,
            data=PostData(
                title=title,
                date=day,
                excerpt=excerpt,
                tags=tags if tags is not None else [],
                category=category,
                author=author,
                hero_image=f"/images/uploads/{slug}/hero.jpg",
                featured=featured,
            ),
            body=body,
        )

    return _make


@pytest.fixture
def blog_config() -> BlogConfig:
    """Nivesh Marg brand configuration (PWA enabled)."""
    return load_blog_config("nivesh-marg")


@pytest.fixture
def minimal_config_data() -> dict:
    """Smallest valid brand configuration as raw data."""
    return {
        "site": {
            "name": "Test Blog",
            "url": "https://example.com/",
            "description": "A blog used in tests.",
        },
    }
