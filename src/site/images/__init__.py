# Images: variant generation for uploads, public path resolution, responsive helpers
"""
Image module for post uploads.

The optimizer writes width/format variants of every upload; the path and
responsive helpers compute the URLs and attributes pages use to reference them.
"""

from .models import ImageOptimizerConfig, ImageVariant, OptimizationReport, VariantFailure
from .optimizer import ImageOptimizer
from .paths import get_optimized_image_path, resolve_content_image_path
from .responsive import (
    extract_image_dimensions,
    generate_image_alt,
    generate_image_srcset,
    generate_placeholder_image,
    get_image_loading_strategy,
    get_responsive_image_sizes,
    is_placeholder_image,
)

__all__ = [
    "ImageOptimizer",
    "ImageOptimizerConfig",
    "ImageVariant",
    "OptimizationReport",
    "VariantFailure",
    "get_optimized_image_path",
    "resolve_content_image_path",
    "extract_image_dimensions",
    "generate_image_alt",
    "generate_image_srcset",
    "generate_placeholder_image",
    "get_image_loading_strategy",
    "get_responsive_image_sizes",
    "is_placeholder_image",
]
