"""Shared Pydantic data models for the blog site engine.

The post frontmatter schema is the contract between the content repository
and every build step (queries, related posts, search, sitemap, SEO).
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class QuizQuestion(BaseModel):
    """A multiple-choice question attached to a post."""
    q: str
    options: list[str] = Field(min_length=2)
    answer: int = Field(ge=0, description="Index of the correct option")

    @model_validator(mode="after")
    def _answer_in_range(self) -> QuizQuestion:
        if self.answer >= len(self.options):
            raise ValueError(
                f"answer index {self.answer} out of range for {len(self.options)} options"
            )
        return self


class PostData(BaseModel):
    """Validated frontmatter of a post."""
    title: str
    date: date
    excerpt: str
    tags: list[str] = []
    category: str
    author: str
    hero_image: str = Field(alias="heroImage")
    hero_image_alt: Optional[str] = Field(default=None, alias="heroImageAlt")
    featured: Optional[bool] = None
    quiz: Optional[list[QuizQuestion]] = None

    model_config = {"populate_by_name": True}

    @field_validator("date", mode="before")
    @classmethod
    def _datetime_to_date(cls, value):
        if isinstance(value, datetime):
            return value.date()
        return value


class BlogPost(BaseModel):
    """One entry of the posts collection."""
    id: str  # File name inside the collection, e.g. "nifty-options-basics.mdx"
    slug: str
    data: PostData
    body: str = ""
