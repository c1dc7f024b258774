"""Data models for pagination."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class PaginationResult(Generic[T]):
    """One page of items."""
    data: list[T]
    current_page: int
    total_pages: int
    has_next: bool
    has_prev: bool


@dataclass
class PageLinks:
    """Navigation state of a generated listing page."""
    current_page: int
    total_pages: int
    has_next: bool
    has_prev: bool
    next_url: Optional[str] = None
    prev_url: Optional[str] = None


@dataclass
class PagePath(Generic[T]):
    """A static listing page to generate: /posts/page/<page>."""
    page: int
    items: list[T] = field(default_factory=list)
    links: Optional[PageLinks] = None
