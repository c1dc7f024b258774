# Build: prebuild tasks and the end-to-end artifact pipeline
"""
Site build module.

Turns the posts collection and a brand configuration into the files the
static site serves: search-index.json, sitemap.xml, related-posts.json and
manifest.json, after preparing public/ and optimizing uploaded images.
"""

from .models import BuildResult
from .pipeline import SiteBuildPipeline
from .prebuild import run_prebuild

__all__ = [
    "BuildResult",
    "SiteBuildPipeline",
    "run_prebuild",
]
