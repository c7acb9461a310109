"""Render markdown posts to HTML with addressable headings."""

from __future__ import annotations

import re

from markdown_it import MarkdownIt
from mdit_py_plugins.dollarmath import dollarmath_plugin
from mdit_py_plugins.footnote import footnote_plugin
from mdit_py_plugins.tasklists import tasklists_plugin

from md2toc.markdown import (
    calculate_reading_time,
    format_preview_content,
    preprocess_math_content,
)
from md2toc.schemas import RenderedPost
from md2toc.slugs import heading_id
from md2toc.toc import extract_toc

try:
    from bs4 import BeautifulSoup
    from bs4.element import Comment, NavigableString, Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML post-processing (pip install beautifulsoup4)."
    ) from exc


_HEADING_RE = re.compile(r"^h[1-6]$")


def _new_renderer() -> MarkdownIt:
    return (
        MarkdownIt("commonmark", {"html": True})
        .enable(["table", "strikethrough"])
        .use(dollarmath_plugin)
        .use(footnote_plugin)
        .use(tasklists_plugin)
    )


def render_markdown(content: str) -> str:
    """Render markdown to an HTML fragment whose headings carry ids.

    Math is left as ``span.math`` / ``div.math`` elements for client-side
    typesetting.
    """
    html = _new_renderer().render(preprocess_math_content(content))
    return add_heading_ids(html)


def add_heading_ids(html: str) -> str:
    """Set ``id`` on every h1-h6 element from its visible text.

    Math and code inside a heading are ignored, matching what the table of
    contents extracts for the same heading.
    """
    # Fragment parse: raw <style>/<script>/<meta> blocks stay where they are.
    soup = BeautifulSoup(html, "html.parser")

    for heading in soup.find_all(_HEADING_RE):
        text = _heading_text(heading).strip()
        if text:
            heading["id"] = heading_id(text)

    return str(soup)


def _heading_text(heading: Tag) -> str:
    parts: list[str] = []
    for string in heading.find_all(string=True):
        if isinstance(string, Comment):
            continue
        if _is_excluded(string, heading):
            continue
        parts.append(str(string))
    return "".join(parts)


def _is_excluded(string: NavigableString, heading: Tag) -> bool:
    for parent in string.parents:
        if parent is heading:
            return False
        if parent.name == "code" or "math" in parent.get("class", []):
            return True
    return False


def render_post(content: str) -> RenderedPost:
    """Render a post body and collect its navigation data."""
    return RenderedPost(
        html=render_markdown(content),
        toc=extract_toc(content),
        read_time_minutes=calculate_reading_time(content),
        preview=format_preview_content(content),
    )
