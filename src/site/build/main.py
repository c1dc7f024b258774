"""CLI entry point for the site build.

Usage:
    python -m src.site.build.main
    python -m src.site.build.main --brand technology --output-dir dist/technology
    python -m src.site.build.main --skip-images
    python -m src.site.build.main --list-brands
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from src.common.blog_config import list_brands, load_blog_config
from src.common.config import settings

from .pipeline import SiteBuildPipeline

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
)
logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="Blog site build")
    parser.add_argument(
        "--brand",
        type=str,
        help="Brand configuration to build (default: BLOG_BRAND or settings.yaml)",
    )
    parser.add_argument(
        "--content-dir",
        type=Path,
        help="Posts collection directory (default: content/posts)",
    )
    parser.add_argument(
        "--public-dir",
        type=Path,
        help="Public assets directory (default: public)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        help="Directory for generated artifacts (default: dist)",
    )
    parser.add_argument(
        "--skip-images",
        action="store_true",
        help="Do not generate image variants",
    )
    parser.add_argument(
        "--list-brands",
        action="store_true",
        help="List available brand configurations and exit",
    )

    args = parser.parse_args()

    if args.list_brands:
        for name in list_brands():
            print(name)
        return

    brand = args.brand or settings.brand
    try:
        config = load_blog_config(brand)
    except FileNotFoundError as e:
        parser.error(str(e))

    logger.info("Building %s (%s)", config.site.name, brand)
    pipeline = SiteBuildPipeline(
        config,
        brand=brand,
        content_dir=args.content_dir,
        public_dir=args.public_dir,
        output_dir=args.output_dir,
    )
    result = pipeline.run(optimize_images=not args.skip_images)

    print(json.dumps(result.summary(), ensure_ascii=False, indent=2))
    if result.image_failures:
        sys.exit(1)


if __name__ == "__main__":
    main()
