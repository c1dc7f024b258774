"""Project configuration and paths.

Loads settings from config/settings.yaml and environment variables.
Brand-specific site configuration lives in config/brands/ (see blog_config).
"""

from __future__ import annotations

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

# === Paths ===
PROJECT_ROOT = Path(__file__).parent.parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"
BRANDS_DIR = CONFIG_DIR / "brands"
CONTENT_DIR = PROJECT_ROOT / "content"
POSTS_DIR = CONTENT_DIR / "posts"
PUBLIC_DIR = PROJECT_ROOT / "public"
UPLOADS_DIR = PUBLIC_DIR / "images" / "uploads"
OPTIMIZED_DIR = PUBLIC_DIR / "images" / "optimized"
DIST_DIR = PROJECT_ROOT / "dist"

# Load .env from project root
load_dotenv(PROJECT_ROOT / ".env")


class ContentSettings(BaseModel):
    """Where the content collection is read from."""
    posts_dir: str = str(POSTS_DIR)
    extensions: list[str] = Field(default_factory=lambda: [".md", ".mdx"])


class ImageSettings(BaseModel):
    """Image optimization locations and fallbacks."""
    source_dir: str = str(UPLOADS_DIR)
    output_dir: str = str(OPTIMIZED_DIR)
    default_quality: int = Field(default=80, ge=1, le=100)


class BuildSettings(BaseModel):
    """Static build output settings."""
    public_dir: str = str(PUBLIC_DIR)
    output_dir: str = str(DIST_DIR)
    site_url: str = ""  # Overrides the brand's site.url when set
    static_pages: list[str] = Field(
        default_factory=lambda: ["", "about", "categories", "tags", "contact"]
    )


class Settings(BaseModel):
    """Top-level application settings."""
    brand: str = "nivesh-marg"
    content: ContentSettings = Field(default_factory=ContentSettings)
    images: ImageSettings = Field(default_factory=ImageSettings)
    build: BuildSettings = Field(default_factory=BuildSettings)

    @classmethod
    def load(cls, settings_path: Path | None = None) -> Settings:
        """Load settings from config/settings.yaml, falling back to defaults.

        BLOG_BRAND and SITE_URL in the environment override the file.
        """
        settings_path = settings_path or CONFIG_DIR / "settings.yaml"
        data: dict = {}
        if settings_path.exists():
            with open(settings_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        settings = cls(**data)

        if brand := os.getenv("BLOG_BRAND"):
            settings.brand = brand
        if site_url := os.getenv("SITE_URL"):
            settings.build.site_url = site_url
        return settings


def resolve_path(path: str | Path) -> Path:
    """Resolve a settings path relative to the project root."""
    path = Path(path)
    return path if path.is_absolute() else PROJECT_ROOT / path


# Singleton settings instance
settings = Settings.load()
