"""CLI entry point for the image optimizer.

Usage:
    python -m src.site.images.main
    python -m src.site.images.main --brand technology
    python -m src.site.images.main --source public/images/uploads --output public/images/optimized
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from src.common.blog_config import load_blog_config
from src.common.config import resolve_path, settings

from .models import ImageOptimizerConfig
from .optimizer import ImageOptimizer

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
)
logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="Responsive image variant generator")
    parser.add_argument(
        "--brand",
        type=str,
        help="Brand whose image_resolutions to use (default: BLOG_BRAND or settings.yaml)",
    )
    parser.add_argument(
        "--source",
        type=Path,
        help="Directory of source images (default: settings.yaml images.source_dir)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Directory for generated variants (default: settings.yaml images.output_dir)",
    )

    args = parser.parse_args()
    source = args.source or resolve_path(settings.images.source_dir)
    output = args.output or resolve_path(settings.images.output_dir)

    try:
        blog_config = load_blog_config(args.brand)
    except FileNotFoundError as e:
        parser.error(str(e))

    config = ImageOptimizerConfig.from_blog_config(
        blog_config, default_quality=settings.images.default_quality
    )
    logger.info(
        "Optimizing %s → %s (widths=%s, formats=%s)",
        source, output, config.widths, config.formats,
    )

    report = ImageOptimizer(config).optimize_directory(source, output)

    logger.info(
        "Done: %d images seen, %d variants written, %d up to date, %d failed",
        report.images_seen,
        report.generated_count,
        len(report.skipped),
        len(report.failures),
    )
    if report.failures:
        sys.exit(1)


if __name__ == "__main__":
    main()
