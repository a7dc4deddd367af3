"""Catalog item models shared by the projects gallery and the blog."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


def unique_labels(labels: tuple[str, ...]) -> tuple[str, ...]:
    seen: set[str] = set()
    out: list[str] = []
    for label in labels:
        if label not in seen:
            seen.add(label)
            out.append(label)
    return tuple(out)


class CatalogItem(BaseModel):
    """A displayable record that can be filtered on a listing page."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Display name")
    description: str = Field(default="", description="Free text description")
    categories: tuple[str, ...] = Field(default=(), description="Category labels (set semantics)")
    technologies: tuple[str, ...] = Field(default=(), description="Technology labels, display order")
    media: tuple[str, ...] = Field(default=(), description="Image asset references")

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("title must not be empty")
        return value

    @field_validator("description", mode="before")
    @classmethod
    def _none_to_empty_text(cls, value):
        return "" if value is None else value

    @field_validator("categories", "technologies", "media", mode="before")
    @classmethod
    def _none_to_empty(cls, value):
        return () if value is None else value

    @field_validator("categories")
    @classmethod
    def _dedupe_categories(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return unique_labels(value)

    @property
    def filter_labels(self) -> tuple[str, ...]:
        """Labels matched by the category filter."""
        return self.categories

    @property
    def search_fields(self) -> tuple[str, ...]:
        """Texts matched by the free-text search."""
        return (self.title, self.description)


class Project(CatalogItem):
    """A project shown in the portfolio gallery."""

    github: str = Field(default="", description="Repository or source link")
    link: str = Field(default="", description="Live demo link")
    purpose: str = Field(default="", description="What the project was built for")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "title": "Weather App",
                "description": "Small weather application built with ReactJS",
                "technologies": ["ReactJS", "Redux", "Material Ui"],
                "categories": ["Self-Learning"],
                "github": "https://github.com/YounesBouchbouk/WeatherAPP-With-ReactJs-MUI-and-API",
            }
        },
    )
