"""Pydantic data models."""

from portfolio_site.models.catalog_item import CatalogItem, Project
from portfolio_site.models.blog_post import BlogPost
from portfolio_site.models.resume import Certificate, Education, Experience, Resume, Skill
from portfolio_site.models.filter_state import (
    ALL_CATEGORIES,
    FilterState,
    NoTechnology,
    SelectedTechnology,
)
from portfolio_site.models.page import ContactForm, ContactResult, MailDraft, Theme, TocEntry

__all__ = [
    "ALL_CATEGORIES",
    "CatalogItem",
    "Project",
    "BlogPost",
    "Skill",
    "Education",
    "Certificate",
    "Experience",
    "Resume",
    "FilterState",
    "NoTechnology",
    "SelectedTechnology",
    "TocEntry",
    "ContactForm",
    "MailDraft",
    "ContactResult",
    "Theme",
]
