"""Build-time content loading from YAML data files and markdown posts."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from portfolio_site.core.catalog import BlogCatalog, ProjectCatalog
from portfolio_site.models.blog_post import BlogPost
from portfolio_site.models.catalog_item import Project
from portfolio_site.models.resume import Resume
from portfolio_site.utils.logging import log_step
from portfolio_site.utils.text_utils import make_excerpt, markdown_to_html, slugify

logger = logging.getLogger(__name__)

FRONT_MATTER_RE = re.compile(r"^---\s*\n(.*?)\n---\s*(?:\n|$)", re.DOTALL)


class ContentError(ValueError):
    """A content file could not be read or does not match its schema."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path


def parse_front_matter(text: str) -> tuple[dict[str, Any], str]:
    """Split YAML front matter from the markdown body."""
    match = FRONT_MATTER_RE.match(text)
    if not match:
        return {}, text
    meta = yaml.safe_load(match.group(1)) or {}
    if not isinstance(meta, dict):
        raise ValueError("front matter must be a mapping")
    return meta, text[match.end():]


def _read_yaml(path: Path) -> Any:
    if not path.exists():
        raise ContentError("file not found", path)
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ContentError(f"invalid YAML ({exc})", path) from exc


def load_blog_post(path: Path, excerpt_length: int = 160) -> BlogPost:
    """Render one markdown post into a ``BlogPost``."""
    try:
        meta, body = parse_front_matter(path.read_text(encoding="utf-8"))
    except (yaml.YAMLError, ValueError) as exc:
        raise ContentError(f"invalid front matter ({exc})", path) from exc

    body_html = markdown_to_html(body)
    try:
        return BlogPost(
            title=meta.get("title", ""),
            description=meta.get("excerpt") or meta.get("description") or "",
            slug=meta.get("slug") or slugify(path.stem),
            date=meta.get("date"),
            tags=meta.get("tags"),
            technologies=meta.get("technologies"),
            media=meta.get("images"),
            featured_image=meta.get("featuredImage") or meta.get("featured_image"),
            body_html=body_html,
            excerpt=make_excerpt(body_html, excerpt_length),
        )
    except ValidationError as exc:
        raise ContentError(f"invalid post ({exc.error_count()} errors): {exc}", path) from exc


def load_blog_posts(blog_dir: Path, excerpt_length: int = 160) -> list[BlogPost]:
    """All posts under ``blog_dir``, newest first."""
    if not blog_dir.exists():
        logger.warning(f"Blog directory {blog_dir} does not exist")
        return []

    with log_step(logger, f"Loading blog posts from {blog_dir}"):
        posts = [
            load_blog_post(path, excerpt_length)
            for path in sorted(blog_dir.glob("**/*.md"))
        ]
    posts.sort(key=lambda post: post.date, reverse=True)
    logger.info(f"Loaded {len(posts)} blog posts")
    return posts


def load_projects(path: Path) -> list[Project]:
    """Projects from a YAML list, in file order."""
    data = _read_yaml(path)
    if data is None:
        return []
    if isinstance(data, dict):
        data = data.get("projects", [])
    if not isinstance(data, list):
        raise ContentError("expected a list of projects", path)

    projects = []
    for index, raw in enumerate(data):
        if not isinstance(raw, dict):
            raise ContentError(f"project #{index} is not a mapping", path)
        record = dict(raw)
        # Older data files use "context" for categories and "images" for media
        if "context" in record and "categories" not in record:
            record["categories"] = record.pop("context")
        if "images" in record and "media" not in record:
            record["media"] = record.pop("images")
        if "whatfor" in record and "purpose" not in record:
            record["purpose"] = record.pop("whatfor")
        try:
            projects.append(Project(**record))
        except ValidationError as exc:
            raise ContentError(f"invalid project #{index}: {exc}", path) from exc
    logger.info(f"Loaded {len(projects)} projects")
    return projects


def load_resume(path: Path) -> Resume:
    """Skills and career timelines from a YAML mapping."""
    data = _read_yaml(path) or {}
    if not isinstance(data, dict):
        raise ContentError("expected a mapping", path)
    try:
        return Resume(**data)
    except ValidationError as exc:
        raise ContentError(f"invalid resume: {exc}", path) from exc


def load_blog_catalog(blog_dir: Path, excerpt_length: int = 160) -> BlogCatalog:
    posts = load_blog_posts(blog_dir, excerpt_length)
    try:
        return BlogCatalog(posts)
    except ValueError as exc:
        raise ContentError(str(exc), blog_dir) from exc


def load_project_catalog(path: Path) -> ProjectCatalog:
    return ProjectCatalog(load_projects(path))
