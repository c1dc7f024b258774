"""Per-brand blog configuration.

Each brand (site variant) is described by one YAML file in config/brands/.
The schema mirrors what the site build reads: identity, branding, theme,
layout counts, navigation, image resolutions, legal copy and the optional
PWA block. Anything not listed here is ignored so brand files may carry
page copy for the front end.

Usage:
    from src.common.blog_config import load_blog_config

    config = load_blog_config("nivesh-marg")
    config.layout.related_posts_count  # -> 3
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, model_validator

from .config import BRANDS_DIR, settings
from .themes import ColorScale, get_preset

logger = logging.getLogger(__name__)


# === Site identity & branding ===

class SiteInfo(BaseModel):
    """Site identity."""
    name: str
    url: str
    tagline: str = ""
    description: str = ""
    author: str = ""
    email: str = ""
    language: str = "en"
    locale: str = "en-US"


class Logo(BaseModel):
    light: str
    dark: Optional[str] = None
    alt: str = ""
    width: Optional[int] = None
    height: Optional[int] = None


class Branding(BaseModel):
    """Visual identity assets."""
    logo: Optional[Logo] = None
    favicon: str = "/favicon.svg"
    og_image: str = ""
    apple_touch_icon: Optional[str] = None
    placeholder_image_service: str = "https://placehold.co"


# === Theme ===

class ThemeColors(BaseModel):
    primary: ColorScale
    secondary: ColorScale


class ThemeConfig(BaseModel):
    """Theme colours, either a named preset or explicit scales."""
    preset: str = "blue"
    colors: Optional[ThemeColors] = None
    dark_mode: bool = True

    model_config = {"extra": "ignore"}

    @model_validator(mode="after")
    def _fill_colors_from_preset(self) -> ThemeConfig:
        if self.colors is None:
            self.colors = ThemeColors(**get_preset(self.preset))
        return self


# === Layout & navigation ===

class LayoutConfig(BaseModel):
    """Listing sizes used across the site."""
    post_per_page: int = Field(default=10, ge=1)
    featured_posts_count: int = Field(default=3, ge=0)
    related_posts_count: int = Field(default=3, ge=0)
    latest_posts_on_homepage: int = Field(default=3, ge=0)
    breadcrumb_separator: str = "›"

    model_config = {"extra": "ignore"}


class NavigationItem(BaseModel):
    label: str
    href: str
    external: bool = False
    children: list[NavigationItem] = []


class FooterLink(BaseModel):
    label: str
    href: str
    external: bool = False


class FooterSection(BaseModel):
    title: str
    links: list[FooterLink] = []


class NavigationConfig(BaseModel):
    header: list[NavigationItem] = []
    footer: list[FooterSection] = []


class SocialLink(BaseModel):
    platform: str
    label: str
    url: str = ""  # Some brands list a platform before the account exists


class SEOConfig(BaseModel):
    default_title: str = ""
    title_template: str = "%s"
    robots_directives: list[str] = ["index,follow"]
    twitter_handle: Optional[str] = None


# === Images ===

ImageFormat = Literal["webp", "jpg", "jpeg", "png", "original"]


class ImageQuality(BaseModel):
    """Encoder quality per output format (1-100)."""
    webp: int = Field(default=75, ge=1, le=100)
    jpg: int = Field(default=80, ge=1, le=100)
    jpeg: int = Field(default=80, ge=1, le=100)
    png: int = Field(default=80, ge=1, le=100)

    def for_format(self, fmt: str, default: int = 80) -> int:
        return getattr(self, fmt.lower(), default)


class ImageResolutions(BaseModel):
    """Standard image widths and formats used by the optimizer."""
    card: int = Field(default=320, gt=0)
    content: int = Field(default=640, gt=0)
    zoom: int = Field(default=960, gt=0)
    additional: list[int] = []
    formats: list[ImageFormat] = Field(default_factory=lambda: ["webp", "original"])
    quality: ImageQuality = Field(default_factory=ImageQuality)

    def widths(self) -> list[int]:
        """All configured widths, ascending and de-duplicated."""
        return sorted({self.card, self.content, self.zoom, *self.additional})


# === Legal pages ===

class LegalSection(BaseModel):
    title: str
    content: str


class LegalPage(BaseModel):
    title: str
    last_updated: str = ""
    sections: list[LegalSection] = []


class LegalPages(BaseModel):
    privacy: Optional[LegalPage] = None
    terms: Optional[LegalPage] = None
    disclaimer: Optional[LegalPage] = None


class AuthorData(BaseModel):
    bio: str = ""
    avatar: str = ""
    twitter: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None
    website: Optional[str] = None


# === PWA ===

class PWAIcon(BaseModel):
    src: str
    sizes: str
    type: str = "image/png"
    purpose: Optional[Literal["any", "maskable", "monochrome"]] = None


class PWAShortcut(BaseModel):
    name: str
    url: str
    description: Optional[str] = None
    icon: Optional[str] = None


class PWAScreenshot(BaseModel):
    src: str
    sizes: str
    type: str = "image/png"
    label: Optional[str] = None


class PWAConfig(BaseModel):
    """Installable web-app settings. Empty values fall back to site config."""
    enabled: bool = False
    name: str = ""
    short_name: str = ""
    description: str = ""
    theme_color: Optional[str] = None
    background_color: Optional[str] = None
    display: Literal["minimal-ui", "standalone", "fullscreen", "browser"] = "minimal-ui"
    orientation: Literal["any", "natural", "landscape", "portrait"] = "any"
    scope: str = "/"
    start_url: str = "/"
    icons: list[PWAIcon] | Literal["auto"] = "auto"
    categories: list[str] = []
    shortcuts: list[PWAShortcut] | Literal["auto"] | None = None
    screenshots: list[PWAScreenshot] = []


# === Top level ===

class BlogConfig(BaseModel):
    """Complete configuration of one brand."""
    site: SiteInfo
    branding: Branding = Field(default_factory=Branding)
    theme: ThemeConfig = Field(default_factory=ThemeConfig)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    navigation: NavigationConfig = Field(default_factory=NavigationConfig)
    social: list[SocialLink] = []
    seo: Optional[SEOConfig] = None
    image_resolutions: ImageResolutions = Field(default_factory=ImageResolutions)
    legal_pages: LegalPages = Field(default_factory=LegalPages)
    authors: dict[str, AuthorData] = {}
    pwa: Optional[PWAConfig] = None

    model_config = {"extra": "ignore"}

    def theme_colors(self) -> dict[str, ColorScale]:
        """Primary and secondary scales, as handed to the CSS build."""
        return {
            "primary": dict(self.theme.colors.primary),
            "secondary": dict(self.theme.colors.secondary),
        }


def list_brands(brands_dir: Path | None = None) -> list[str]:
    """Names of all brand configurations available."""
    brands_dir = brands_dir or BRANDS_DIR
    if not brands_dir.exists():
        return []
    return sorted(p.stem for p in brands_dir.glob("*.yaml"))


def load_blog_config(
    brand: str | None = None,
    brands_dir: Path | None = None,
) -> BlogConfig:
    """Load and validate a brand configuration.

    Args:
        brand: Brand name (file stem in config/brands). Defaults to
               BLOG_BRAND from the environment, then settings.brand.
        brands_dir: Directory holding brand YAML files.

    Returns:
        Validated BlogConfig.

    Raises:
        FileNotFoundError: No configuration file for the brand.
    """
    brands_dir = brands_dir or BRANDS_DIR
    brand = brand or os.getenv("BLOG_BRAND") or settings.brand
    config_path = brands_dir / f"{brand}.yaml"

    if not config_path.exists():
        available = ", ".join(list_brands(brands_dir)) or "none"
        raise FileNotFoundError(
            f"No configuration for brand '{brand}' at {config_path} (available: {available})"
        )

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    config = BlogConfig(**data)
    logger.debug("Loaded brand config '%s' from %s", brand, config_path)
    return config
