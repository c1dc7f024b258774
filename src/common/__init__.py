# Common utilities and shared modules
"""
Shared components used by the content and site packages:
- Data models (Pydantic schemas)
- Brand configuration
- Logging configuration
- Project configuration
"""

from .blog_config import BlogConfig, list_brands, load_blog_config
from .config import settings, PROJECT_ROOT, resolve_path
from .logging import setup_logging

__all__ = [
    "BlogConfig",
    "list_brands",
    "load_blog_config",
    "settings",
    "PROJECT_ROOT",
    "resolve_path",
    "setup_logging",
]
