"""Data models for the image optimizer."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from src.common.blog_config import BlogConfig

DEFAULT_WIDTHS = [320, 640, 960, 1280, 1920]
OUTPUT_FORMATS = ("webp", "jpg", "jpeg", "png", "original")


@dataclass
class ImageOptimizerConfig:
    """Which variants to produce for every source image."""

    widths: list[int] = field(default_factory=lambda: list(DEFAULT_WIDTHS))
    formats: list[str] = field(default_factory=lambda: ["webp", "original"])
    quality: dict[str, int] = field(
        default_factory=lambda: {"jpeg": 80, "jpg": 80, "png": 80, "webp": 75}
    )
    default_quality: int = 80

    def __post_init__(self) -> None:
        if any(w <= 0 for w in self.widths):
            raise ValueError(f"Widths must be positive: {self.widths}")
        self.widths = sorted(set(self.widths))
        self.formats = [f.lower() for f in self.formats]
        unknown = [f for f in self.formats if f not in OUTPUT_FORMATS]
        if unknown:
            raise ValueError(f"Unsupported output formats: {unknown}")

    def quality_for(self, fmt: str) -> int:
        return self.quality.get(fmt.lower(), self.default_quality)

    @classmethod
    def from_blog_config(cls, config: BlogConfig, default_quality: int = 80) -> ImageOptimizerConfig:
        """Widths, formats and quality from the brand's image_resolutions."""
        res = config.image_resolutions
        return cls(
            widths=res.widths(),
            formats=list(res.formats),
            quality={
                fmt: res.quality.for_format(fmt, default_quality)
                for fmt in ("webp", "jpg", "jpeg", "png")
            },
            default_quality=default_quality,
        )


@dataclass
class ImageVariant:
    """A variant written to disk."""

    source: Path
    path: Path  # e.g. optimized/blog/chart-640.webp
    width: int
    height: int
    format: str  # Output extension: "webp", "jpg", ...
    size_bytes: int
    compression_ratio: float  # Source bytes / variant bytes


@dataclass
class VariantFailure:
    """A variant (or a whole source image) that could not be produced."""

    source: Path
    error: str
    path: Path | None = None  # None when the source itself could not be read
    width: int = 0
    format: str = ""


@dataclass
class OptimizationReport:
    """Outcome of an optimizer run."""

    images_seen: int = 0
    generated: list[ImageVariant] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)  # Up-to-date variants
    failures: list[VariantFailure] = field(default_factory=list)

    @property
    def generated_count(self) -> int:
        return len(self.generated)

    @property
    def images_processed(self) -> int:
        """Source images with at least one regenerated variant."""
        return len({v.source for v in self.generated})

    def merge(self, other: OptimizationReport) -> None:
        self.images_seen += other.images_seen
        self.generated.extend(other.generated)
        self.skipped.extend(other.skipped)
        self.failures.extend(other.failures)
