"""Shared fixtures."""

import datetime as dt

import pytest

from portfolio_site.core.catalog import BlogCatalog, ProjectCatalog
from portfolio_site.models.blog_post import BlogPost
from portfolio_site.models.catalog_item import Project


@pytest.fixture
def scenario_projects():
    """The three-project catalog used throughout the filter tests."""
    return [
        Project(title="A", categories=["top", "Internships"], technologies=["Go"]),
        Project(title="B", categories=["top"], technologies=["React"]),
        Project(title="C", categories=["University"], technologies=["Go"]),
    ]


@pytest.fixture
def project_catalog(scenario_projects):
    return ProjectCatalog(scenario_projects)


@pytest.fixture
def blog_posts():
    return [
        BlogPost(
            title="Serving gRPC from Go",
            description="One binary, two protocols.",
            slug="grpc-in-go",
            date=dt.date(2024, 3, 5),
            tags=["backend", "tutorial"],
            technologies=["Golang", "gRPC"],
            body_html='<h1 id="serving">Serving</h1><p>The gateway plugin reads annotations.</p>',
            excerpt="Serving The gateway plugin reads annotations.",
        ),
        BlogPost(
            title="Building this portfolio",
            slug="building-this-portfolio",
            date=dt.date(2023, 11, 20),
            tags=["frontend"],
            technologies=["GatsbyJS", "ReactJS"],
            body_html="<p>A static site is cheap to host.</p>",
            excerpt="A static site is cheap to host.",
        ),
    ]


@pytest.fixture
def blog_catalog(blog_posts):
    return BlogCatalog(blog_posts)
