# Pagination: page slices, static listing paths, page-number windows

from .models import PageLinks, PagePath, PaginationResult
from .paginator import generate_page_numbers, generate_pagination_paths, paginate

__all__ = [
    "PageLinks",
    "PagePath",
    "PaginationResult",
    "generate_page_numbers",
    "generate_pagination_paths",
    "paginate",
]
