"""Tests for content loading."""

import datetime as dt
from pathlib import Path

import pytest

from portfolio_site.services.content_loader import (
    ContentError,
    load_blog_catalog,
    load_blog_posts,
    load_project_catalog,
    load_projects,
    load_resume,
    parse_front_matter,
)

CONTENT_DIR = Path(__file__).resolve().parent.parent / "content"


def write_post(directory: Path, name: str, front_matter: str, body: str = "Body text.") -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(f"---\n{front_matter}\n---\n\n{body}\n", encoding="utf-8")
    return path


class TestFrontMatter:
    def test_parse(self):
        meta, body = parse_front_matter("---\ntitle: Hi\ntags: [a, b]\n---\n\n# Body")
        assert meta == {"title": "Hi", "tags": ["a", "b"]}
        assert body.strip() == "# Body"

    def test_no_front_matter(self):
        meta, body = parse_front_matter("# Just markdown")
        assert meta == {}
        assert body == "# Just markdown"


class TestBlogPosts:
    def test_sorted_newest_first(self, tmp_path):
        write_post(tmp_path, "old.md", "title: Old\ndate: 2022-01-01")
        write_post(tmp_path, "new.md", "title: New\ndate: 2024-01-01")
        posts = load_blog_posts(tmp_path)
        assert [p.title for p in posts] == ["New", "Old"]

    def test_slug_defaults_to_file_name(self, tmp_path):
        write_post(tmp_path, "My First Post.md", "title: First\ndate: 2024-01-01")
        assert load_blog_posts(tmp_path)[0].slug == "my-first-post"

    def test_rendered_fields(self, tmp_path):
        write_post(
            tmp_path,
            "post.md",
            "title: Post\ndate: 2024-01-01\nexcerpt: Short\ntechnologies: [Go]",
            body="## Setup\n\nInstall **it**.",
        )
        post = load_blog_posts(tmp_path)[0]
        assert post.description == "Short"
        assert post.tags == ()
        assert post.technologies == ("Go",)
        assert '<h2 id="setup">Setup</h2>' in post.body_html
        assert post.excerpt == "Setup Install it."

    def test_missing_date_is_content_error(self, tmp_path):
        path = write_post(tmp_path, "bad.md", "title: No date")
        with pytest.raises(ContentError) as exc_info:
            load_blog_posts(tmp_path)
        assert exc_info.value.path == path

    def test_missing_directory(self, tmp_path):
        assert load_blog_posts(tmp_path / "nope") == []

    def test_duplicate_slugs(self, tmp_path):
        write_post(tmp_path, "a.md", "title: A\ndate: 2024-01-01\nslug: same")
        write_post(tmp_path, "b.md", "title: B\ndate: 2024-01-02\nslug: same")
        with pytest.raises(ContentError, match="Duplicate"):
            load_blog_catalog(tmp_path)


class TestProjects:
    def test_legacy_keys(self, tmp_path):
        path = tmp_path / "projects.yaml"
        path.write_text(
            "- title: Weather App\n"
            "  context: [Self-Learning]\n"
            "  images: [w1.png]\n"
            "  whatfor: ''\n",
            encoding="utf-8",
        )
        project = load_projects(path)[0]
        assert project.categories == ("Self-Learning",)
        assert project.media == ("w1.png",)

    def test_not_a_list(self, tmp_path):
        path = tmp_path / "projects.yaml"
        path.write_text("just a string\n", encoding="utf-8")
        with pytest.raises(ContentError):
            load_projects(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ContentError, match="not found"):
            load_projects(tmp_path / "missing.yaml")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "projects.yaml"
        path.write_text("", encoding="utf-8")
        assert load_projects(path) == []


class TestBundledContent:
    def test_projects(self):
        catalog = load_project_catalog(CONTENT_DIR / "projects.yaml")
        assert len(catalog) > 0
        assert "top" in catalog.distinct_categories()

    def test_blog(self):
        catalog = load_blog_catalog(CONTENT_DIR / "blog")
        assert catalog.slugs()[0] == "grpc-gateway-in-go"
        assert catalog.get_post("grpc-gateway-in-go").date == dt.date(2024, 3, 5)

    def test_resume(self):
        resume = load_resume(CONTENT_DIR / "resume.yaml")
        assert resume.skills
        assert resume.education[0].year == "2019"
