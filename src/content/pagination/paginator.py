"""Pagination helpers for listing pages."""

from __future__ import annotations

import math
from typing import Sequence, TypeVar

from .models import PageLinks, PagePath, PaginationResult

T = TypeVar("T")


def _check_per_page(per_page: int) -> None:
    if per_page < 1:
        raise ValueError(f"per_page must be at least 1, got {per_page}")


def paginate(
    items: Sequence[T],
    current_page: int = 1,
    per_page: int = 10,
) -> PaginationResult[T]:
    """Slice out one page (1-based). Pages past the end are empty."""
    _check_per_page(per_page)
    total_pages = math.ceil(len(items) / per_page)
    start = max(current_page - 1, 0) * per_page

    return PaginationResult(
        data=list(items[start:start + per_page]),
        current_page=current_page,
        total_pages=total_pages,
        has_next=current_page < total_pages,
        has_prev=current_page > 1,
    )


def generate_pagination_paths(
    items: Sequence[T],
    per_page: int = 10,
    base_path: str = "/posts/page",
) -> list[PagePath[T]]:
    """Every listing page with its items and prev/next links."""
    _check_per_page(per_page)
    total_pages = math.ceil(len(items) / per_page)
    base_path = base_path.rstrip("/")

    paths: list[PagePath[T]] = []
    for page in range(1, total_pages + 1):
        start = (page - 1) * per_page
        has_next = page < total_pages
        has_prev = page > 1
        paths.append(
            PagePath(
                page=page,
                items=list(items[start:start + per_page]),
                links=PageLinks(
                    current_page=page,
                    total_pages=total_pages,
                    has_next=has_next,
                    has_prev=has_prev,
                    next_url=f"{base_path}/{page + 1}" if has_next else None,
                    prev_url=f"{base_path}/{page - 1}" if has_prev else None,
                ),
            )
        )
    return paths


def generate_page_numbers(
    current_page: int,
    total_pages: int,
    max_visible: int = 5,
) -> list[int]:
    """Window of page numbers centred on the current page.

    Example:
        generate_page_numbers(1, 10) → [1, 2, 3, 4, 5]
        generate_page_numbers(6, 10) → [4, 5, 6, 7, 8]
        generate_page_numbers(10, 10) → [6, 7, 8, 9, 10]
    """
    if total_pages <= max_visible:
        return list(range(1, total_pages + 1))

    side = max_visible // 2
    start = max(1, current_page - side)
    end = min(total_pages, current_page + side)

    if end - start + 1 < max_visible:
        if start == 1:
            end = min(total_pages, start + max_visible - 1)
        else:
            start = max(1, end - max_visible + 1)

    return list(range(start, end + 1))
