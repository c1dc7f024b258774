"""Prebuild tasks run before the static site build.

Creates the public directories the build and the image optimizer write
into, plus an empty .nojekyll so GitHub Pages serves the output as is.
Existing directories and files are left untouched.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

NOJEKYLL = ".nojekyll"


def _ensure_directory(path: Path, created: list[Path]) -> None:
    if not path.exists():
        logger.info("Creating directory: %s", path)
        path.mkdir(parents=True, exist_ok=True)
        created.append(path)


def run_prebuild(public_dir: Path) -> list[Path]:
    """Prepare public_dir for the build.

    Returns:
        Paths created by this run (empty when everything existed).
    """
    public_dir = Path(public_dir)
    created: list[Path] = []

    logger.info("Running prebuild tasks...")
    _ensure_directory(public_dir, created)
    _ensure_directory(public_dir / "images", created)

    nojekyll = public_dir / NOJEKYLL
    if not nojekyll.exists():
        logger.info("Creating %s file for GitHub Pages", NOJEKYLL)
        nojekyll.write_text("", encoding="utf-8")
        created.append(nojekyll)

    _ensure_directory(public_dir / "images" / "optimized", created)
    logger.info("Prebuild tasks completed")
    return created
