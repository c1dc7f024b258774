"""Tests for image URL resolution and responsive helpers."""

import pytest

from src.site.images import (
    extract_image_dimensions,
    generate_image_alt,
    generate_image_srcset,
    generate_placeholder_image,
    get_image_loading_strategy,
    get_optimized_image_path,
    get_responsive_image_sizes,
    is_placeholder_image,
    resolve_content_image_path,
)


class TestResolveContentImagePath:
    @pytest.mark.parametrize(
        "path,expected",
        [
            ("content/uploads/nifty/hero.jpg", "/images/uploads/nifty/hero.jpg"),
            ("uploads/nifty/hero.jpg", "/images/uploads/nifty/hero.jpg"),
            ("/images/authors/praveen.png", "/images/authors/praveen.png"),
            ("https://cdn.example.com/a.png", "https://cdn.example.com/a.png"),
            ("hero.jpg", "/images/uploads/hero.jpg"),
        ],
    )
    def test_paths(self, path, expected):
        assert resolve_content_image_path(path) == expected


class TestOptimizedImagePath:
    def test_uploads_path(self):
        assert (
            get_optimized_image_path("/images/uploads/nifty/hero.jpg", 640)
            == "/images/optimized/uploads/nifty/hero-640.webp"
        )

    def test_without_leading_slash(self):
        assert (
            get_optimized_image_path("images/authors/vipin.webp", 320)
            == "/images/optimized/authors/vipin-320.webp"
        )

    def test_already_optimized(self):
        src = "/images/optimized/uploads/hero-640.webp"
        assert get_optimized_image_path(src, 960) == src

    def test_only_last_extension_removed(self):
        assert (
            get_optimized_image_path("/images/uploads/v1.2/chart.final.png", 960)
            == "/images/optimized/uploads/v1.2/chart.final-960.webp"
        )


class TestPlaceholders:
    def test_generate(self):
        assert (
            generate_placeholder_image("Nifty Options Basics")
            == "https://placehold.co/1200x600?text=Nifty%2BOptions%2BBasics"
        )

    def test_custom_service_and_size(self):
        url = generate_placeholder_image("Hi", 400, 300, service="https://via.placeholder.com")
        assert url == "https://via.placeholder.com/400x300?text=Hi"

    def test_is_placeholder(self):
        assert is_placeholder_image("https://placehold.co/600x400")
        assert is_placeholder_image("https://picsum.photos/200")
        assert not is_placeholder_image("/images/uploads/a.jpg")

    def test_extract_dimensions(self):
        assert extract_image_dimensions("https://placehold.co/1200x600?text=x") == (1200, 600)
        assert extract_image_dimensions("/images/uploads/a.jpg") is None


class TestSrcset:
    def test_placeholder_resized_keeping_ratio(self):
        srcset = generate_image_srcset("https://placehold.co/1200x600?text=x", [320, 640])
        assert srcset == (
            "https://placehold.co/320x160?text=x 320w, "
            "https://placehold.co/640x320?text=x 640w"
        )

    def test_regular_image(self):
        srcset = generate_image_srcset("/images/a.jpg", [320, 640])
        assert srcset == "/images/a.jpg 320w, /images/a.jpg 640w"

    def test_default_sizes(self):
        assert generate_image_srcset("/a.jpg").count("w,") == 3


class TestAttributes:
    def test_sizes(self):
        assert get_responsive_image_sizes() == "(max-width: 640px) 100vw, (max-width: 1024px) 75vw, 50vw"
        assert get_responsive_image_sizes(960).endswith(", 960px")

    def test_loading_strategy(self):
        assert get_image_loading_strategy() == "lazy"
        assert get_image_loading_strategy(is_above_fold=True) == "eager"
        assert get_image_loading_strategy(is_hero_image=True) == "eager"

    def test_alt(self):
        assert generate_image_alt("Greeks", "hero") == "Hero image for: Greeks"
        assert generate_image_alt("Greeks", "thumbnail") == "Thumbnail for: Greeks"
        assert generate_image_alt("Greeks") == "Greeks"
