"""Image variant generator for uploaded post images.

Walks the uploads tree and writes resized/re-encoded variants into a
mirrored tree:

    uploads/blog/chart.png → optimized/blog/chart-320.webp
                              optimized/blog/chart-640.webp
                              optimized/blog/chart-320.png   ("original")
                              ...

Rules:
    1. Widths larger than the source are dropped (never upscale); if no
       configured width fits, the source width itself is used.
    2. A variant is regenerated only when missing or older than its source
       (mtime comparison, no content hashing).
    3. EXIF orientation is applied; EXIF metadata is not written out.
    4. A failing variant is logged and recorded; the run continues.

Usage:
    from src.site.images.optimizer import ImageOptimizer

    optimizer = ImageOptimizer(ImageOptimizerConfig(widths=[320, 640], formats=["webp"]))
    report = optimizer.optimize_directory(Path("public/images/uploads"),
                                          Path("public/images/optimized"))
    # report.generated_count → number of files written
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from PIL import Image, ImageOps

from src.common.logging import setup_logging

from .models import ImageOptimizerConfig, ImageVariant, OptimizationReport, VariantFailure

logger = setup_logging(module_name="images.optimizer")

SUPPORTED_EXTENSIONS = (".jpg", ".jpeg", ".png", ".webp")

# Output extension → Pillow encoder
PIL_FORMATS = {
    "webp": "WEBP",
    "jpg": "JPEG",
    "jpeg": "JPEG",
    "png": "PNG",
}

_EXIF_ORIENTATION = 0x0112
_ROTATED_ORIENTATIONS = {5, 6, 7, 8}  # Width and height swap after transpose


class ImageOptimizer:
    """Generates responsive variants of source images."""

    def __init__(self, config: Optional[ImageOptimizerConfig] = None):
        self.config = config or ImageOptimizerConfig()

    # --- Public API ---

    def optimize_directory(self, source_dir: Path, output_dir: Path) -> OptimizationReport:
        """Process every supported image below source_dir.

        The directory structure is mirrored under output_dir. If output_dir
        lives inside source_dir it is not scanned.
        """
        source_dir = Path(source_dir)
        output_dir = Path(output_dir)
        report = OptimizationReport()

        if not source_dir.is_dir():
            logger.warning("Image source directory not found: %s", source_dir)
            return report

        output_dir.mkdir(parents=True, exist_ok=True)
        resolved_output = output_dir.resolve()

        for path in sorted(source_dir.rglob("*")):
            if not path.is_file() or path.suffix.lower() not in SUPPORTED_EXTENSIONS:
                continue
            if resolved_output in path.resolve().parents:
                continue

            target_dir = output_dir / path.parent.relative_to(source_dir)
            report.merge(self.optimize_image(path, target_dir))

        if report.generated_count:
            logger.info(
                "Processed %d new or modified images (%d variants written, %d up to date)",
                report.images_processed, report.generated_count, len(report.skipped),
            )
        else:
            logger.info("No new or modified images to process.")
        if report.failures:
            logger.warning("%d image variants failed", len(report.failures))
        return report

    def optimize_image(self, source: Path, target_dir: Path) -> OptimizationReport:
        """Write all stale variants of one source image into target_dir."""
        report = OptimizationReport(images_seen=1)

        try:
            with Image.open(source) as probe:
                width, _ = self._oriented_size(probe)
            planned = self.plan_variants(source, width, target_dir)
        except (OSError, ValueError, Image.DecompressionBombError) as e:
            logger.error("Cannot read image %s: %s", source, e)
            report.failures.append(VariantFailure(source=source, error=str(e)))
            return report

        stale = []
        for fmt, w, out_path in planned:
            if self.needs_regeneration(source, out_path):
                stale.append((fmt, w, out_path))
            else:
                report.skipped.append(out_path)

        if not stale:
            logger.debug("Skipping already optimized image: %s", source)
            return report

        try:
            img = self._load(source)
        except (OSError, Image.DecompressionBombError) as e:
            logger.error("Cannot decode image %s: %s", source, e)
            report.failures.append(VariantFailure(source=source, error=str(e)))
            return report

        target_dir.mkdir(parents=True, exist_ok=True)
        source_size = source.stat().st_size

        for fmt, w, out_path in stale:
            try:
                variant = self._write_variant(img, source, source_size, fmt, w, out_path)
            except (OSError, ValueError) as e:
                out_path.unlink(missing_ok=True)  # No partial file may look up to date
                logger.error("Failed %s at %dpx (%s): %s", source.name, w, fmt, e)
                report.failures.append(
                    VariantFailure(source=source, error=str(e), path=out_path, width=w, format=fmt)
                )
                continue
            report.generated.append(variant)

        return report

    # --- Planning ---

    def target_widths(self, source_width: int) -> list[int]:
        """Configured widths that do not exceed the source width."""
        widths = [w for w in self.config.widths if w <= source_width]
        return widths or [source_width]

    def output_extension(self, fmt: str, source: Path) -> str:
        """File extension for a configured format ("original" keeps the source's)."""
        ext = source.suffix.lower().lstrip(".") if fmt == "original" else fmt
        if ext not in PIL_FORMATS:
            raise ValueError(f"Unsupported output format: {ext}")
        return ext

    def plan_variants(
        self, source: Path, source_width: int, target_dir: Path
    ) -> list[tuple[str, int, Path]]:
        """(extension, width, output path) for every variant of a source."""
        planned: list[tuple[str, int, Path]] = []
        seen: set[Path] = set()
        for fmt in self.config.formats:
            ext = self.output_extension(fmt, source)
            for w in self.target_widths(source_width):
                out_path = target_dir / f"{source.stem}-{w}.{ext}"
                if out_path in seen:
                    continue  # "original" of a .webp source equals "webp"
                seen.add(out_path)
                planned.append((ext, w, out_path))
        return planned

    @staticmethod
    def needs_regeneration(source: Path, output: Path) -> bool:
        """True when the output is missing or older than the source."""
        if not output.exists():
            return True
        return source.stat().st_mtime_ns > output.stat().st_mtime_ns

    # --- Pipeline stages ---

    @staticmethod
    def _oriented_size(img: Image.Image) -> tuple[int, int]:
        """Size as displayed, i.e. after EXIF orientation is applied."""
        orientation = img.getexif().get(_EXIF_ORIENTATION)
        if orientation in _ROTATED_ORIENTATIONS:
            return img.height, img.width
        return img.width, img.height

    @staticmethod
    def _load(source: Path) -> Image.Image:
        """Decode the source with orientation applied and EXIF dropped."""
        with Image.open(source) as opened:
            img = ImageOps.exif_transpose(opened)
            img.load()
        img.info.pop("exif", None)
        return img

    def _resize(self, img: Image.Image, width: int) -> Image.Image:
        """Scale to the target width, preserving aspect ratio."""
        if width == img.width:
            return img.copy()
        height = max(1, round(img.height * width / img.width))
        return img.resize((width, height), Image.LANCZOS)

    @staticmethod
    def _prepare_mode(img: Image.Image, pil_format: str) -> Image.Image:
        """Convert to a mode the encoder accepts."""
        has_alpha = img.mode in ("RGBA", "LA", "PA") or "transparency" in img.info
        if pil_format == "JPEG":
            return img if img.mode in ("RGB", "L") else img.convert("RGB")
        if pil_format == "WEBP":
            if img.mode in ("RGB", "RGBA"):
                return img
            return img.convert("RGBA" if has_alpha else "RGB")
        if img.mode == "CMYK":
            return img.convert("RGB")
        return img

    def _write_variant(
        self,
        img: Image.Image,
        source: Path,
        source_size: int,
        fmt: str,
        width: int,
        out_path: Path,
    ) -> ImageVariant:
        pil_format = PIL_FORMATS[fmt]
        resized = self._prepare_mode(self._resize(img, width), pil_format)

        save_kwargs: dict = {"format": pil_format}
        if pil_format == "PNG":
            save_kwargs["optimize"] = True
        else:
            save_kwargs["quality"] = self.config.quality_for(fmt)
        resized.save(out_path, **save_kwargs)

        size = out_path.stat().st_size
        ratio = round(source_size / size, 2) if size else 0.0
        logger.info("Optimized: %s (%d bytes, %.2fx smaller)", out_path, size, ratio)

        return ImageVariant(
            source=source,
            path=out_path,
            width=resized.width,
            height=resized.height,
            format=fmt,
            size_bytes=size,
            compression_ratio=ratio,
        )
