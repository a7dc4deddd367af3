"""JSON output writer for catalog listings and posts."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any

import aiofiles

from portfolio_site.core.catalog import BlogCatalog, ContentCatalog
from portfolio_site.core.filters import recompute
from portfolio_site.core.toc import extract_table_of_contents
from portfolio_site.models.blog_post import BlogPost
from portfolio_site.models.filter_state import FilterState


class CatalogJSONWriter:
    """Writer for structured JSON consumed by the page layer."""

    def __init__(self, output_dir: Path):
        self.output_dir = output_dir
        self.output_dir.mkdir(parents=True, exist_ok=True)

    async def _write(self, file_path: Path, data: dict[str, Any]) -> Path:
        async with aiofiles.open(file_path, "w", encoding="utf-8") as f:
            await f.write(json.dumps(data, indent=2, default=str, ensure_ascii=False))
        return file_path

    def _build_listing_json(
        self,
        catalog: ContentCatalog,
        state: FilterState,
    ) -> dict[str, Any]:
        """Build the listing structure for a filter state."""
        visible = recompute(catalog.all_items(), state)
        data: dict[str, Any] = {
            "version": "1.0",
            "generated_at": datetime.now().isoformat(),
            "filters": {
                "category": state.category,
                "technology": state.technology_label,
                "search": state.search_term,
                "query": state.to_query(),
            },
            "facets": {
                "categories": catalog.category_counts(),
                "technologies": catalog.distinct_technologies(),
            },
            "total": len(catalog),
            "visible_count": len(visible),
            "items": [self._item_json(item) for item in visible],
        }
        return data

    def _item_json(self, item) -> dict[str, Any]:
        if isinstance(item, BlogPost):
            return {
                "title": item.title,
                "slug": item.slug,
                "url": item.url_path,
                "date": item.date.isoformat(),
                "excerpt": item.display_excerpt,
                "tags": list(item.tags),
                "technologies": list(item.technologies),
                "featured_image": item.featured_image,
            }
        return item.model_dump(mode="json")

    async def write_listing(
        self,
        catalog: ContentCatalog,
        state: FilterState,
        filename: str = "listing.json",
    ) -> Path:
        """Write the visible subset of ``catalog`` plus its facets."""
        return await self._write(self.output_dir / filename, self._build_listing_json(catalog, state))

    def _build_post_json(self, post: BlogPost, words_per_minute: int = 200) -> dict[str, Any]:
        return {
            "version": "1.0",
            "generated_at": datetime.now().isoformat(),
            "metadata": {
                "title": post.title,
                "slug": post.slug,
                "date": post.date.isoformat(),
                "formatted_date": post.formatted_date,
                "excerpt": post.display_excerpt,
                "reading_time_minutes": post.reading_time(words_per_minute),
                "tags": list(post.tags),
                "technologies": list(post.technologies),
                "featured_image": post.featured_image,
            },
            "table_of_contents": [
                entry.model_dump() for entry in extract_table_of_contents(post.body_html)
            ],
            "content": {"html": post.body_html},
        }

    async def write_post(self, post: BlogPost, words_per_minute: int = 200) -> Path:
        """Write one post with its table of contents."""
        return await self._write(
            self.output_dir / f"{post.slug}.json",
            self._build_post_json(post, words_per_minute),
        )

    async def write_blog(self, catalog: BlogCatalog, words_per_minute: int = 200) -> list[Path]:
        """Write the unfiltered listing and every post of ``catalog``."""
        paths = [await self.write_listing(catalog, FilterState(), filename="blog.json")]
        for post in catalog:
            paths.append(await self.write_post(post, words_per_minute))
        return paths


def create_json_writer(output_dir: Path) -> CatalogJSONWriter:
    """Factory function to create JSON writer."""
    return CatalogJSONWriter(output_dir=output_dir)
