# SEO: canonical URLs, page titles, meta descriptions, keywords, JSON-LD

from .seo import (
    STOP_WORDS,
    extract_keywords,
    generate_category_url,
    generate_meta_description,
    generate_og_image_url,
    generate_page_title,
    generate_post_structured_data,
    generate_post_url,
    generate_tag_url,
)

__all__ = [
    "STOP_WORDS",
    "extract_keywords",
    "generate_category_url",
    "generate_meta_description",
    "generate_og_image_url",
    "generate_page_title",
    "generate_post_structured_data",
    "generate_post_url",
    "generate_tag_url",
]
