"""Public URL resolution for post images.

Content references uploads in several historical forms; the site serves
them from /images/uploads/ and their variants from /images/optimized/.
"""

from __future__ import annotations

import re

UPLOADS_URL = "/images/uploads"
OPTIMIZED_URL = "/images/optimized"

_EXTENSION_RE = re.compile(r"\.[^.]+$")


def resolve_content_image_path(path: str) -> str:
    """Map a content image reference to its public URL path.

    Examples:
        content/uploads/a/b.jpg → /images/uploads/a/b.jpg
        uploads/a/b.jpg         → /images/uploads/a/b.jpg
        /images/authors/x.webp  → unchanged
        https://cdn/x.png       → unchanged
        b.jpg                   → /images/uploads/b.jpg
    """
    if path.startswith("content/uploads/"):
        return UPLOADS_URL + path[len("content/uploads"):]
    if path.startswith("uploads/"):
        return UPLOADS_URL + path[len("uploads"):]
    if path.startswith("/images/") or path.startswith("http"):
        return path
    return f"{UPLOADS_URL}/{path}"


def get_optimized_image_path(src: str, width: int) -> str:
    """URL of the webp variant of src at the given width.

    Paths that already point into /images/optimized/ are returned as is.
    """
    if f"{OPTIMIZED_URL}/" in src:
        return src

    clean = src[1:] if src.startswith("/") else src
    if clean.startswith("images/"):
        clean = clean[len("images/"):]

    return f"{OPTIMIZED_URL}/{_EXTENSION_RE.sub('', clean)}-{width}.webp"
