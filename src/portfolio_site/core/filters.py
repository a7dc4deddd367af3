"""Filter controller for the projects and blog listing pages."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TypeVar

from portfolio_site.core.catalog import ContentCatalog
from portfolio_site.models.catalog_item import CatalogItem
from portfolio_site.models.filter_state import ALL_CATEGORIES, FilterState

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=CatalogItem)


def matches_category(item: CatalogItem, category: str) -> bool:
    return category == ALL_CATEGORIES or category in item.filter_labels


def matches_technology(item: CatalogItem, technology: str | None) -> bool:
    return technology is None or technology in item.technologies


def matches_search(item: CatalogItem, term: str) -> bool:
    """``term`` must already be trimmed and lower-cased."""
    return not term or any(term in text.lower() for text in item.search_fields)


def recompute(items: Sequence[T], state: FilterState) -> list[T]:
    """Items passing every active filter, in their original order."""
    technology = state.technology_label
    term = state.normalized_search
    return [
        item
        for item in items
        if matches_category(item, state.category)
        and matches_technology(item, technology)
        and matches_search(item, term)
    ]


def result_summary(count: int, noun: str = "article") -> str:
    """Results line shown above a listing, e.g. "Showing 3 articles"."""
    return f"Showing {count} {noun if count == 1 else noun + 's'}"


class FilterController:
    """Holds the active filters of a listing page and its visible items.

    Every change recomputes the visible subset over the full catalog; an
    optional ``on_change`` listener receives the new subset.
    """

    def __init__(
        self,
        catalog: ContentCatalog,
        *,
        initial_category: str = ALL_CATEGORIES,
        on_change: Callable[[list[CatalogItem]], None] | None = None,
    ):
        self.catalog = catalog
        self.on_change = on_change
        self._initial = FilterState(category=initial_category)
        self.state = self._initial
        self.visible: list[CatalogItem] = []
        self._recompute()

    @classmethod
    def from_query(
        cls,
        catalog: ContentCatalog,
        query: str,
        *,
        initial_category: str = ALL_CATEGORIES,
    ) -> FilterController:
        """Controller opened from a listing URL such as ``/blog?tag=go``."""
        controller = cls(catalog, initial_category=initial_category)
        controller._apply(FilterState.from_query(query, default_category=initial_category))
        return controller

    def _apply(self, state: FilterState) -> None:
        self.state = state
        self._recompute()

    def _recompute(self) -> None:
        self.visible = recompute(self.catalog.all_items(), self.state)
        logger.debug(
            f"Filters category={self.state.category!r} "
            f"technology={self.state.technology_label!r} "
            f"search={self.state.search_term!r} -> {len(self.visible)} items"
        )
        if self.on_change is not None:
            self.on_change(self.visible)

    def set_category(self, label: str) -> None:
        self._apply(self.state.with_category(label))

    def clear_category(self) -> None:
        self._apply(self.state.with_category(ALL_CATEGORIES))

    def set_technology(self, label: str) -> None:
        """Select a technology; selecting the active one clears it."""
        self._apply(self.state.with_technology(label))

    def clear_technology(self) -> None:
        self._apply(self.state.without_technology())

    def set_search_term(self, text: str) -> None:
        self._apply(self.state.with_search_term(text))

    def clear_search_term(self) -> None:
        self._apply(self.state.with_search_term(""))

    def reset(self) -> None:
        self._apply(self._initial)

    @property
    def has_active_filters(self) -> bool:
        return self.state.has_active_filters

    def active_filters(self) -> list[tuple[str, str]]:
        """Chips for the "Active filters" panel."""
        chips: list[tuple[str, str]] = []
        if self.state.category != ALL_CATEGORIES:
            chips.append(("Tag", self.state.category))
        if self.state.technology_label is not None:
            chips.append(("Tech", self.state.technology_label))
        if self.state.search_term:
            chips.append(("Search", self.state.search_term))
        return chips

    def summary(self, noun: str = "article") -> str:
        return result_summary(len(self.visible), noun)
