"""Text utilities for blog content processing."""

import html
import math
import re
import unicodedata

_NON_SLUG_CHARS = re.compile(r"[^\w\s-]")
_SLUG_SEPARATORS = re.compile(r"[\s_-]+")


def slugify(text: str, max_length: int = 100) -> str:
    """ASCII, lower-case, hyphen-separated form of ``text`` for ids and URLs."""
    ascii_text = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    slug = _SLUG_SEPARATORS.sub("-", _NON_SLUG_CHARS.sub("", ascii_text.lower())).strip("-")
    if len(slug) <= max_length:
        return slug
    # Cut on a hyphen so no word is left half-written
    return slug[:max_length].rsplit("-", 1)[0]


def truncate_text(text: str, max_length: int, suffix: str = "...") -> str:
    """Shorten ``text`` to ``max_length`` characters, suffix included, on a word break."""
    if len(text) <= max_length:
        return text
    limit = max_length - len(suffix)
    cut = text.rfind(" ", 0, limit)
    return text[: cut if cut > 0 else limit] + suffix


def strip_html(markup: str) -> str:
    """Drop tags from rendered HTML and collapse whitespace."""
    # Block-level tags separate words, inline tags do not
    text = re.sub(r'</?(?:p|h[1-6]|li|ul|ol|div|pre|blockquote|br|hr|tr|td|th)\b[^>]*>', ' ', markup)
    text = re.sub(r'<[^>]*>', '', text)
    text = html.unescape(text)
    return ' '.join(text.split())


def count_words(text: str) -> int:
    """Count words in plain text."""
    return len(text.split())


def reading_time_minutes(text: str, words_per_minute: int = 200) -> int:
    """Estimated reading time, never less than one minute."""
    words = count_words(text)
    return max(1, math.ceil(words / words_per_minute))


def make_excerpt(markup: str, max_length: int = 160) -> str:
    """Plain-text excerpt of rendered HTML."""
    return truncate_text(strip_html(markup), max_length, suffix="…")


def markdown_to_html(markdown_text: str) -> str:
    """Convert Markdown content to HTML; headings get anchor ids."""
    lines = markdown_text.splitlines()
    html_lines: list[str] = []
    paragraph_lines: list[str] = []
    used_ids: dict[str, int] = {}
    in_ul = False
    in_ol = False
    in_code = False

    def flush_paragraph() -> None:
        if paragraph_lines:
            text = " ".join(line.strip() for line in paragraph_lines)
            html_lines.append(f"<p>{_inline_markdown_to_html(text)}</p>")
            paragraph_lines.clear()

    def close_lists() -> None:
        nonlocal in_ul, in_ol
        if in_ul:
            html_lines.append("</ul>")
            in_ul = False
        if in_ol:
            html_lines.append("</ol>")
            in_ol = False

    def heading_id(text: str) -> str:
        base = slugify(text) or "section"
        seen = used_ids.get(base, 0)
        used_ids[base] = seen + 1
        return base if seen == 0 else f"{base}-{seen}"

    for line in lines:
        stripped = line.strip()

        if stripped.startswith("```"):
            flush_paragraph()
            close_lists()
            if not in_code:
                in_code = True
                html_lines.append("<pre><code>")
            else:
                in_code = False
                html_lines.append("</code></pre>")
            continue

        if in_code:
            html_lines.append(html.escape(line))
            continue

        heading = re.match(r"^(#{1,6})\s+(.+)$", line)
        if heading:
            flush_paragraph()
            close_lists()
            level = len(heading.group(1))
            raw = heading.group(2).strip()
            text = _inline_markdown_to_html(raw)
            anchor = heading_id(clean_inline_markdown(raw))
            html_lines.append(f'<h{level} id="{anchor}">{text}</h{level}>')
            continue

        ul_match = re.match(r"^[-*+]\s+(.+)$", line)
        if ul_match:
            flush_paragraph()
            if in_ol:
                html_lines.append("</ol>")
                in_ol = False
            if not in_ul:
                html_lines.append("<ul>")
                in_ul = True
            item = _inline_markdown_to_html(ul_match.group(1).strip())
            html_lines.append(f"<li>{item}</li>")
            continue

        ol_match = re.match(r"^\d+\.\s+(.+)$", line)
        if ol_match:
            flush_paragraph()
            if in_ul:
                html_lines.append("</ul>")
                in_ul = False
            if not in_ol:
                html_lines.append("<ol>")
                in_ol = True
            item = _inline_markdown_to_html(ol_match.group(1).strip())
            html_lines.append(f"<li>{item}</li>")
            continue

        if not stripped:
            flush_paragraph()
            close_lists()
            continue

        paragraph_lines.append(stripped)

    flush_paragraph()
    close_lists()
    if in_code:
        html_lines.append("</code></pre>")

    return "\n".join(html_lines)


def clean_inline_markdown(text: str) -> str:
    """Strip inline markdown (links, emphasis, code) leaving plain text."""
    text = re.sub(r"!\[[^\]]*\]\([^)]+\)", "", text)
    text = re.sub(r"\[([^\]]+)\]\([^)]+\)", r"\1", text)
    text = re.sub(r"\*\*([^*]+)\*\*", r"\1", text)
    text = re.sub(r"__([^_]+)__", r"\1", text)
    text = re.sub(r"\*([^*]+)\*", r"\1", text)
    text = re.sub(r"_([^_]+)_", r"\1", text)
    text = re.sub(r"`([^`]+)`", r"\1", text)
    return text.strip()


def _inline_markdown_to_html(text: str) -> str:
    text = re.sub(r"`([^`]+)`", lambda m: f"<code>{html.escape(m.group(1))}</code>", text)
    text = re.sub(r"!\[([^\]]*)\]\(([^)]+)\)", r'<img src="\2" alt="\1" />', text)
    text = re.sub(r"\[([^\]]+)\]\(([^)]+)\)", r'<a href="\2">\1</a>', text)
    text = re.sub(r"\*\*([^*]+)\*\*", r"<strong>\1</strong>", text)
    text = re.sub(r"__([^_]+)__", r"<strong>\1</strong>", text)
    text = re.sub(r"\*([^*]+)\*", r"<em>\1</em>", text)
    text = re.sub(r"_([^_]+)_", r"<em>\1</em>", text)
    return text


def format_display_date(value) -> str:
    """Format a date like "March 5, 2024"."""
    return f"{value.strftime('%B')} {value.day}, {value.year}"
