"""Blog post models."""

from __future__ import annotations

import datetime as dt

from pydantic import Field, field_validator

from portfolio_site.models.catalog_item import CatalogItem, unique_labels
from portfolio_site.utils.text_utils import (
    format_display_date,
    reading_time_minutes as estimate_reading_time,
    strip_html,
)


class BlogPost(CatalogItem):
    """A blog post rendered from markdown.

    ``description`` holds the author-written excerpt from the front matter,
    ``excerpt`` the automatic one cut from the rendered body.
    """

    slug: str = Field(..., description="Unique routing identifier")
    date: dt.date = Field(..., description="Publication date")
    tags: tuple[str, ...] = Field(default=(), description="Post tags (set semantics)")
    body_html: str = Field(default="", description="Pre-rendered HTML body")
    excerpt: str = Field(default="", description="Automatic plain-text excerpt")
    featured_image: str | None = Field(default=None, description="Cover image reference")

    @field_validator("slug")
    @classmethod
    def _slug_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("slug must not be empty")
        return value

    @field_validator("tags", mode="before")
    @classmethod
    def _none_to_no_tags(cls, value):
        return () if value is None else value

    @field_validator("tags")
    @classmethod
    def _dedupe_tags(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return unique_labels(value)

    @property
    def filter_labels(self) -> tuple[str, ...]:
        return self.tags

    @property
    def body_text(self) -> str:
        """Body with markup removed."""
        return strip_html(self.body_html)

    @property
    def search_fields(self) -> tuple[str, ...]:
        return (self.title, self.description, self.excerpt, self.body_text)

    @property
    def display_excerpt(self) -> str:
        """Author excerpt when present, otherwise the automatic one."""
        return self.description or self.excerpt

    @property
    def formatted_date(self) -> str:
        return format_display_date(self.date)

    @property
    def url_path(self) -> str:
        return f"/blog/{self.slug}"

    def reading_time(self, words_per_minute: int = 200) -> int:
        """Estimated reading time in minutes."""
        return estimate_reading_time(self.body_text, words_per_minute)

    @property
    def reading_time_minutes(self) -> int:
        return self.reading_time()
