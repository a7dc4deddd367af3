"""Tests for table of contents extraction."""

from portfolio_site.core.toc import extract_table_of_contents, toc_indent
from portfolio_site.utils.text_utils import markdown_to_html


def test_only_anchored_headings_up_to_level_three():
    html = '<h1 id="intro">Intro</h1><h4 id="deep">Deep</h4><h2>NoId</h2>'
    entries = extract_table_of_contents(html)
    assert [e.model_dump() for e in entries] == [{"id": "intro", "text": "Intro", "level": 1}]


def test_document_order_and_levels():
    html = (
        '<h2 id="b">Second</h2><p>text</p>'
        '<h3 id="c">Third <code>x</code></h3>'
        '<h1 id="a">First</h1>'
    )
    entries = extract_table_of_contents(html)
    assert [(e.id, e.text, e.level) for e in entries] == [
        ("b", "Second", 2),
        ("c", "Third x", 3),
        ("a", "First", 1),
    ]


def test_no_headings_means_nothing_to_render():
    assert extract_table_of_contents("<p>Just text</p>") == []
    assert extract_table_of_contents("") == []


def test_empty_id_is_skipped():
    assert extract_table_of_contents('<h2 id="">Blank</h2>') == []


def test_rendered_markdown_headings_are_anchored():
    html = markdown_to_html("# Setup\n\n## Install\n\n## Install\n\n#### Too deep")
    entries = extract_table_of_contents(html)
    assert [e.id for e in entries] == ["setup", "install", "install-1"]


def test_toc_indent():
    assert [toc_indent(level) for level in (1, 2, 3)] == [0, 1, 2]
