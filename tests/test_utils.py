"""Tests for utility functions."""

import datetime as dt
import logging

import pytest

from portfolio_site.utils.logging import log_step
from portfolio_site.utils.text_utils import (
    count_words,
    format_display_date,
    make_excerpt,
    markdown_to_html,
    reading_time_minutes,
    slugify,
    strip_html,
    truncate_text,
)


class TestSlugify:
    def test_basic_slugify(self):
        assert slugify("Hello World") == "hello-world"

    def test_special_chars(self):
        assert slugify("Hello, World!") == "hello-world"

    def test_max_length(self):
        result = slugify("This is a very long title that should be truncated", max_length=20)
        assert len(result) <= 20

    def test_unicode(self):
        assert slugify("Café Résumé") == "cafe-resume"


class TestTruncateText:
    def test_no_truncation_needed(self):
        assert truncate_text("Short", 100) == "Short"

    def test_truncate_at_word(self):
        assert truncate_text("Hello wonderful world", 15) == "Hello..."


class TestHtmlText:
    def test_strip_html(self):
        assert strip_html("<h1 id=\"a\">Title</h1>\n<p>One &lt;two&gt;</p>") == "Title One <two>"

    def test_count_words(self):
        assert count_words("Hello world test") == 3
        assert count_words("") == 0

    def test_reading_time_has_floor(self):
        assert reading_time_minutes("") == 1
        assert reading_time_minutes("word " * 201) == 2

    def test_make_excerpt(self):
        excerpt = make_excerpt("<p>" + "lorem ipsum " * 40 + "</p>", max_length=160)
        assert len(excerpt) <= 160
        assert excerpt.endswith("…")


class TestMarkdownToHtml:
    def test_heading_ids(self):
        html = markdown_to_html("# Main Title\n\n## **Bold** Section")
        assert '<h1 id="main-title">Main Title</h1>' in html
        assert '<h2 id="bold-section"><strong>Bold</strong> Section</h2>' in html

    def test_paragraphs_and_lists(self):
        html = markdown_to_html("Hello world.\n\n- one\n- two")
        assert "<p>Hello world.</p>" in html
        assert "<ul>\n<li>one</li>\n<li>two</li>\n</ul>" in html

    def test_code_block_escaped(self):
        html = markdown_to_html("```\n<div>\n```")
        assert "&lt;div&gt;" in html


def test_format_display_date():
    assert format_display_date(dt.date(2024, 1, 9)) == "January 9, 2024"


class TestLogStep:
    def test_logs_start_and_completion(self, caplog):
        caplog.set_level(logging.DEBUG, logger="portfolio_site")
        with log_step(logging.getLogger("portfolio_site.loader"), "Loading posts"):
            pass
        messages = [record.getMessage() for record in caplog.records]
        assert messages[0] == "Loading posts..."
        assert messages[1].startswith("Loading posts done in ")

    def test_failure_is_logged_and_reraised(self, caplog):
        caplog.set_level(logging.DEBUG, logger="portfolio_site")
        with pytest.raises(ValueError):
            with log_step(logging.getLogger("portfolio_site.loader"), "Loading posts"):
                raise ValueError("bad front matter")
        assert caplog.records[-1].levelno == logging.ERROR
        assert "bad front matter" in caplog.records[-1].getMessage()
