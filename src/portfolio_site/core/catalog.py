"""Read-only content catalogs and their derived filter facets."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from portfolio_site.models.blog_post import BlogPost
from portfolio_site.models.catalog_item import CatalogItem, Project
from portfolio_site.models.filter_state import ALL_CATEGORIES

logger = logging.getLogger(__name__)


def _sorted_labels(labels: Iterable[str]) -> list[str]:
    # Case-insensitive order, raw label breaks ties so output is deterministic.
    return sorted(set(labels), key=lambda label: (label.casefold(), label))


class ContentCatalog:
    """Immutable snapshot of catalog items in source order."""

    def __init__(self, items: Iterable[CatalogItem] = ()):
        self._items: tuple[CatalogItem, ...] = tuple(items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def all_items(self) -> Sequence[CatalogItem]:
        """All items, in insertion order."""
        return self._items

    def distinct_technologies(self) -> list[str]:
        return _sorted_labels(tech for item in self._items for tech in item.technologies)

    def distinct_categories(self) -> list[str]:
        return _sorted_labels(cat for item in self._items for cat in item.categories)

    def filter_facets(self) -> list[str]:
        """Labels offered by the category filter of this catalog."""
        return _sorted_labels(label for item in self._items for label in item.filter_labels)

    def category_counts(self, labels: Sequence[str] | None = None) -> dict[str, int]:
        """Item count per filter label, led by the "all" total.

        ``labels`` fixes the button order; by default every facet is listed.
        An item label spelled "all" never replaces the total.
        """
        counts = {ALL_CATEGORIES: len(self._items)}
        for label in labels if labels is not None else self.filter_facets():
            if label == ALL_CATEGORIES:
                continue
            counts[label] = sum(1 for item in self._items if label in item.filter_labels)
        return counts


class ProjectCatalog(ContentCatalog):
    """Projects shown in the portfolio gallery."""

    def __init__(self, projects: Iterable[Project] = ()):
        super().__init__(projects)


class BlogCatalog(ContentCatalog):
    """Blog posts keyed by slug, in listing order."""

    def __init__(self, posts: Iterable[BlogPost] = ()):
        posts = tuple(posts)
        by_slug: dict[str, BlogPost] = {}
        for post in posts:
            if post.slug in by_slug:
                raise ValueError(f"Duplicate blog post slug '{post.slug}'")
            by_slug[post.slug] = post
        super().__init__(posts)
        self._by_slug = by_slug
        logger.debug(f"Blog catalog built with {len(posts)} posts")

    def distinct_tags(self) -> list[str]:
        return self.filter_facets()

    def slugs(self) -> list[str]:
        return list(self._by_slug)

    def get_post(self, slug: str) -> BlogPost:
        if slug not in self._by_slug:
            raise KeyError(f"Blog post '{slug}' not found")
        return self._by_slug[slug]
