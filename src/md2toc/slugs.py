"""Heading identifier generation."""

from __future__ import annotations

import re

# Word characters are ASCII only so ids match the anchors the site already links to.
_DISALLOWED_RE = re.compile(r"[^A-Za-z0-9_\s-]")
_WHITESPACE_RE = re.compile(r"\s+")
_HYPHENS_RE = re.compile(r"-+")


def heading_id(text: str) -> str:
    """Turn heading text into a URL and DOM safe identifier.

    The result is a pure function of ``text``: identical headings share an id.

    >>> heading_id("Hello, World!")
    'hello-world'
    """
    slug = _DISALLOWED_RE.sub("", text.lower())
    slug = _WHITESPACE_RE.sub("-", slug)
    slug = _HYPHENS_RE.sub("-", slug)
    return slug.strip("-")
