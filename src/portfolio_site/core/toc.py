"""Table of contents extraction from rendered post HTML."""

from bs4 import BeautifulSoup

from portfolio_site.models.page import TocEntry

HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]
MAX_TOC_LEVEL = 3


def extract_table_of_contents(html: str) -> list[TocEntry]:
    """
    Collect anchored headings for a post's table of contents.

    Only headings with a non-empty ``id`` and a level up to 3 are kept,
    in document order. An empty list means there is nothing to render.
    """
    if not html:
        return []

    soup = BeautifulSoup(html, "html.parser")
    entries = []
    for heading in soup.find_all(HEADING_TAGS):
        anchor = heading.get("id")
        if not anchor:
            continue
        level = int(heading.name[1])
        if level > MAX_TOC_LEVEL:
            continue
        entries.append(TocEntry(id=anchor, text=heading.get_text().strip(), level=level))
    return entries


def toc_indent(level: int) -> int:
    """Indent steps for a heading level (h1 flush, h3 two steps in)."""
    return max(0, min(level, MAX_TOC_LEVEL) - 1)
