"""Full site build: content collection to deployable artifacts.

Orchestrates the complete flow:
prebuild → load posts → optimize images → search index → sitemap
→ related posts → manifest

Usage:
    pipeline = SiteBuildPipeline(load_blog_config("nivesh-marg"))
    result = pipeline.run()
    # result.artifacts["sitemap.xml"] → Path("dist/sitemap.xml")
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from src.common.blog_config import BlogConfig
from src.common.config import resolve_path, settings
from src.common.logging import setup_logging
from src.common.models import BlogPost
from src.content.collection import PostCollection
from src.content.related import RelatedPostsScorer
from src.content.search import write_search_index
from src.site.images import ImageOptimizer, ImageOptimizerConfig
from src.site.pwa import render_manifest_response, validate_pwa_config
from src.site.sitemap import write_sitemap

from .models import (
    MANIFEST_FILE,
    RELATED_POSTS_FILE,
    SEARCH_INDEX_FILE,
    SITEMAP_FILE,
    BuildResult,
)
from .prebuild import run_prebuild

logger = setup_logging(module_name="build.pipeline")


class SiteBuildPipeline:
    """End-to-end build of the site's generated files.

    Steps:
    1. Prebuild: public directories and .nojekyll
    2. Load and validate the posts collection
    3. Generate image variants for uploads (optional)
    4. Write search-index.json
    5. Write sitemap.xml
    6. Write related-posts.json (slug → related slugs)
    7. Write manifest.json when the brand serves one
    """

    def __init__(
        self,
        config: BlogConfig,
        brand: str = "",
        content_dir: Path | None = None,
        public_dir: Path | None = None,
        output_dir: Path | None = None,
        images_source_dir: Path | None = None,
        images_output_dir: Path | None = None,
        optimizer: ImageOptimizer | None = None,
        scorer: RelatedPostsScorer | None = None,
    ):
        self.config = config
        self.brand = brand or settings.brand
        self.content_dir = Path(content_dir) if content_dir else resolve_path(settings.content.posts_dir)
        self.public_dir = Path(public_dir) if public_dir else resolve_path(settings.build.public_dir)
        self.output_dir = Path(output_dir) if output_dir else resolve_path(settings.build.output_dir)
        if public_dir:
            # An explicit public dir carries its own uploads/optimized pair
            default_source = self.public_dir / "images" / "uploads"
            default_output = self.public_dir / "images" / "optimized"
        else:
            default_source = resolve_path(settings.images.source_dir)
            default_output = resolve_path(settings.images.output_dir)
        self.images_source_dir = Path(images_source_dir) if images_source_dir else default_source
        self.images_output_dir = Path(images_output_dir) if images_output_dir else default_output
        self.optimizer = optimizer or ImageOptimizer(
            ImageOptimizerConfig.from_blog_config(
                config, default_quality=settings.images.default_quality
            )
        )
        self.scorer = scorer or RelatedPostsScorer()

    @property
    def site_url(self) -> str:
        """SITE_URL / settings override, else the brand's site.url."""
        return settings.build.site_url or self.config.site.url

    def run(self, optimize_images: bool = True) -> BuildResult:
        """Execute the full build.

        Args:
            optimize_images: Generate image variants for images_source_dir

        Returns:
            BuildResult with written artifacts and the image report
        """
        result = BuildResult(brand=self.brand, site_url=self.site_url)

        # Step 1: Prebuild
        logger.info("Step 1: Prebuild tasks...")
        result.prebuild_created = run_prebuild(self.public_dir)

        # Step 2: Content
        logger.info("Step 2: Loading posts from %s...", self.content_dir)
        collection = PostCollection.from_directory(
            self.content_dir, tuple(settings.content.extensions)
        )
        posts = collection.all()
        result.posts_loaded = len(posts)
        logger.info("  %d posts loaded", len(posts))

        # Step 3: Images
        if optimize_images:
            logger.info("Step 3: Optimizing images...")
            result.image_report = self.optimizer.optimize_directory(
                self.images_source_dir, self.images_output_dir
            )
        else:
            logger.info("Step 3: Skipping image optimization")

        self.output_dir.mkdir(parents=True, exist_ok=True)

        # Step 4: Search index
        logger.info("Step 4: Writing search index...")
        result.artifacts[SEARCH_INDEX_FILE] = write_search_index(
            posts, self.output_dir / SEARCH_INDEX_FILE
        )

        # Step 5: Sitemap
        logger.info("Step 5: Writing sitemap...")
        result.artifacts[SITEMAP_FILE] = write_sitemap(
            self.site_url,
            posts,
            self.output_dir / SITEMAP_FILE,
            static_pages=settings.build.static_pages,
        )

        # Step 6: Related posts
        logger.info("Step 6: Computing related posts...")
        result.artifacts[RELATED_POSTS_FILE] = self._write_related(
            posts, self.output_dir / RELATED_POSTS_FILE
        )

        # Step 7: Manifest
        logger.info("Step 7: Web-app manifest...")
        manifest_path = self._write_manifest(result)
        if manifest_path:
            result.artifacts[MANIFEST_FILE] = manifest_path

        logger.info(
            "Build complete: %d posts, %d artifacts in %s",
            result.posts_loaded, len(result.artifacts), self.output_dir,
        )
        return result

    # --- Artifacts ---

    def related_map(self, posts: list[BlogPost]) -> dict[str, list[str]]:
        """Slug → slugs of its related posts, best first."""
        limit = self.config.layout.related_posts_count
        return {
            post.slug: [p.slug for p in self.scorer.find_related(post, posts, limit)]
            for post in posts
        }

    def _write_related(self, posts: list[BlogPost], output_path: Path) -> Path:
        related = self.related_map(posts)
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(related, f, ensure_ascii=False, indent=2)
        logger.info("Related posts written: %s (%d posts)", output_path, len(related))
        return output_path

    def _write_manifest(self, result: BuildResult) -> Optional[Path]:
        response = render_manifest_response(self.config)
        result.manifest_status = response.status

        if not response.ok:
            result.manifest_problems = validate_pwa_config(self.config)
            if response.status == 500:
                logger.error("Manifest generation failed: %s", response.body.get("details"))
            else:
                logger.info("  No manifest: %s", "; ".join(result.manifest_problems))
            return None

        output_path = self.output_dir / MANIFEST_FILE
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(response.to_json())
        logger.info("Manifest written: %s", output_path)
        return output_path
