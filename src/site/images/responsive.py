"""Helpers for responsive <img> attributes and placeholder images."""

from __future__ import annotations

import math
import re
from typing import Literal, Optional, Sequence
from urllib.parse import quote

DEFAULT_PLACEHOLDER_SERVICE = "https://placehold.co"
DEFAULT_SRCSET_SIZES = (320, 640, 960, 1280)

PLACEHOLDER_HOSTS = ("placehold.co", "via.placeholder.com", "picsum.photos")

_DIMENSIONS_RE = re.compile(r"(\d+)x(\d+)")

ImageContext = Literal["hero", "thumbnail", "content"]


def generate_placeholder_image(
    title: str,
    width: int = 1200,
    height: int = 600,
    service: Optional[str] = None,
) -> str:
    """Placeholder URL with the title as its text."""
    text = quote(re.sub(r"\s+", "+", title), safe="-_.!~*'()")
    return f"{service or DEFAULT_PLACEHOLDER_SERVICE}/{width}x{height}?text={text}"


def get_responsive_image_sizes(max_width: Optional[int] = None) -> str:
    """Value for the sizes attribute."""
    if max_width:
        return f"(max-width: 640px) 100vw, (max-width: 1024px) 75vw, {max_width}px"
    return "(max-width: 640px) 100vw, (max-width: 1024px) 75vw, 50vw"


def extract_image_dimensions(url: str) -> Optional[tuple[int, int]]:
    """(width, height) from the first "WxH" in a URL, or None."""
    match = _DIMENSIONS_RE.search(url)
    if not match:
        return None
    return int(match.group(1)), int(match.group(2))


def is_placeholder_image(url: str) -> bool:
    return any(host in url for host in PLACEHOLDER_HOSTS)


def generate_image_srcset(url: str, sizes: Sequence[int] = DEFAULT_SRCSET_SIZES) -> str:
    """srcset for an image.

    Placeholder URLs are re-requested at each width with the aspect ratio
    kept. Any other URL is listed unchanged for every width.
    """
    if is_placeholder_image(url):
        dimensions = extract_image_dimensions(url)
        if dimensions:
            aspect_ratio = dimensions[0] / dimensions[1]
            entries = []
            for size in sizes:
                height = math.floor(size / aspect_ratio + 0.5)
                resized = _DIMENSIONS_RE.sub(f"{size}x{height}", url, count=1)
                entries.append(f"{resized} {size}w")
            return ", ".join(entries)

    return ", ".join(f"{url} {size}w" for size in sizes)


def get_image_loading_strategy(
    is_above_fold: bool = False,
    is_hero_image: bool = False,
) -> Literal["eager", "lazy"]:
    return "eager" if (is_above_fold or is_hero_image) else "lazy"


def generate_image_alt(title: str, context: ImageContext = "content") -> str:
    if context == "hero":
        return f"Hero image for: {title}"
    if context == "thumbnail":
        return f"Thumbnail for: {title}"
    return title
