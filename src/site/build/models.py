"""Data models for the site build."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from src.site.images.models import OptimizationReport

SEARCH_INDEX_FILE = "search-index.json"
SITEMAP_FILE = "sitemap.xml"
RELATED_POSTS_FILE = "related-posts.json"
MANIFEST_FILE = "manifest.json"


@dataclass
class BuildResult:
    """Outcome of one build run."""

    brand: str
    site_url: str
    posts_loaded: int = 0
    artifacts: dict[str, Path] = field(default_factory=dict)  # File name → written path
    prebuild_created: list[Path] = field(default_factory=list)
    image_report: Optional[OptimizationReport] = None  # None when images were skipped
    manifest_status: int = 404
    manifest_problems: list[str] = field(default_factory=list)

    @property
    def image_failures(self) -> int:
        return len(self.image_report.failures) if self.image_report else 0

    def summary(self) -> dict:
        return {
            "brand": self.brand,
            "site_url": self.site_url,
            "posts_loaded": self.posts_loaded,
            "artifacts": {name: str(path) for name, path in self.artifacts.items()},
            "images_generated": self.image_report.generated_count if self.image_report else 0,
            "image_failures": self.image_failures,
            "manifest_status": self.manifest_status,
        }
