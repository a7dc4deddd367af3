"""Filter state for the projects and blog listing pages."""

from __future__ import annotations

from typing import Annotated, Literal, Union
from urllib.parse import parse_qs, urlencode

from pydantic import BaseModel, ConfigDict, Field

ALL_CATEGORIES = "all"


class NoTechnology(BaseModel):
    """No technology filter is active."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["none"] = "none"


class SelectedTechnology(BaseModel):
    """Items must list this technology."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["selected"] = "selected"
    label: str


TechnologySelection = Annotated[
    Union[NoTechnology, SelectedTechnology], Field(discriminator="kind")
]

NO_TECHNOLOGY = NoTechnology()


class FilterState(BaseModel):
    """Active category, technology and search term."""

    model_config = ConfigDict(frozen=True)

    category: str = Field(default=ALL_CATEGORIES, description='Category label or "all"')
    technology: TechnologySelection = Field(default=NO_TECHNOLOGY)
    search_term: str = Field(default="", description="Free text, stored verbatim")

    @property
    def technology_label(self) -> str | None:
        if isinstance(self.technology, SelectedTechnology):
            return self.technology.label
        return None

    @property
    def normalized_search(self) -> str:
        """Search term as matched: trimmed and lower-cased."""
        return self.search_term.strip().lower()

    @property
    def has_active_filters(self) -> bool:
        return bool(
            self.category != ALL_CATEGORIES
            or self.technology_label is not None
            or self.search_term
        )

    def with_category(self, label: str) -> FilterState:
        return self.model_copy(update={"category": label})

    def with_technology(self, label: str) -> FilterState:
        """Select ``label``, or clear it when it is already selected."""
        if self.technology_label == label:
            return self.model_copy(update={"technology": NO_TECHNOLOGY})
        return self.model_copy(update={"technology": SelectedTechnology(label=label)})

    def without_technology(self) -> FilterState:
        return self.model_copy(update={"technology": NO_TECHNOLOGY})

    def with_search_term(self, text: str) -> FilterState:
        return self.model_copy(update={"search_term": text})

    def to_query(self) -> str:
        """Encode as a listing-page query string (``tag``, ``tech``, ``q``)."""
        params: dict[str, str] = {}
        if self.category != ALL_CATEGORIES:
            params["tag"] = self.category
        if self.technology_label is not None:
            params["tech"] = self.technology_label
        if self.search_term:
            params["q"] = self.search_term
        return urlencode(params)

    @classmethod
    def from_query(cls, query: str, default_category: str = ALL_CATEGORIES) -> FilterState:
        """Decode a query string produced by ``to_query`` or a post page link."""
        params = parse_qs(query.lstrip("?"), keep_blank_values=True)

        def first(key: str) -> str | None:
            values = params.get(key)
            return values[0] if values else None

        # Blank parameters come from unset form selects and mean "no filter"
        tech = first("tech")
        return cls(
            category=first("tag") or default_category,
            technology=SelectedTechnology(label=tech) if tech else NO_TECHNOLOGY,
            search_term=first("q") or "",
        )
