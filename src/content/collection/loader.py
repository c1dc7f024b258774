"""Content collection loader.

Reads Markdown/MDX posts from the content repository checkout. Each file
starts with a YAML frontmatter block delimited by '---' lines, followed by
the body:

    ---
    title: Nifty Options Basics
    date: 2025-03-14
    ...
    ---
    Body in MDX.

Files that fail validation are logged and skipped so one bad post does not
block a build.
"""

from __future__ import annotations

import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from src.common.logging import setup_logging
from src.common.models import BlogPost, PostData

logger = setup_logging(module_name="content.collection")

DEFAULT_EXTENSIONS = (".md", ".mdx")

_FRONTMATTER_RE = re.compile(
    r"\A---[ \t]*\r?\n(?P<meta>.*?)\r?\n---[ \t]*(?:\r?\n|\Z)(?P<body>.*)\Z",
    re.DOTALL,
)


def split_frontmatter(text: str) -> tuple[dict, str]:
    """Split a document into its frontmatter mapping and body.

    Raises:
        ValueError: No frontmatter block, or it is not a YAML mapping with
            string keys.
    """
    text = text.lstrip("\ufeff")
    match = _FRONTMATTER_RE.match(text)
    if not match:
        raise ValueError("missing frontmatter block")

    meta = yaml.safe_load(match.group("meta")) or {}
    if not isinstance(meta, dict):
        raise ValueError("frontmatter is not a mapping")
    if not all(isinstance(key, str) for key in meta):
        raise ValueError("frontmatter keys must be strings")
    return meta, match.group("body").lstrip("\r\n")


def parse_post(path: Path, collection_dir: Path | None = None) -> BlogPost:
    """Parse and validate a single post file.

    The slug defaults to the file stem; a 'slug' key in the frontmatter
    overrides it.

    Raises:
        ValueError: Malformed frontmatter.
        pydantic.ValidationError: Frontmatter does not match the schema.
    """
    meta, body = split_frontmatter(path.read_text(encoding="utf-8"))
    slug = str(meta.pop("slug", "") or path.stem)
    post_id = path.relative_to(collection_dir).as_posix() if collection_dir else path.name
    return BlogPost(id=post_id, slug=slug, data=PostData.model_validate(meta), body=body)


def load_posts(
    posts_dir: Path,
    extensions: tuple[str, ...] | list[str] = DEFAULT_EXTENSIONS,
) -> list[BlogPost]:
    """Load every post below posts_dir.

    Args:
        posts_dir: Collection directory.
        extensions: File suffixes treated as posts.

    Returns:
        Valid posts in file-name order. Invalid files are skipped.
    """
    posts_dir = Path(posts_dir)
    if not posts_dir.is_dir():
        logger.warning("Posts directory not found: %s", posts_dir)
        return []

    suffixes = {ext.lower() for ext in extensions}
    posts: list[BlogPost] = []
    skipped = 0

    for path in sorted(posts_dir.rglob("*")):
        if not path.is_file() or path.suffix.lower() not in suffixes:
            continue
        try:
            posts.append(parse_post(path, posts_dir))
        except (ValueError, TypeError, ValidationError, yaml.YAMLError) as e:
            skipped += 1
            logger.error("Skipping invalid post %s: %s", path.name, e)

    logger.info("Loaded %d posts from %s (%d skipped)", len(posts), posts_dir, skipped)
    return posts
