"""Markdown preprocessing, reading time and preview helpers."""

from __future__ import annotations

import math
import re

from md2toc.config import MD2TOC_PREVIEW_LENGTH, MD2TOC_READING_WPM

_DISPLAY_MATH_RE = re.compile(r"\$\$\s*([\s\S]*?)\s*\$\$")
_INLINE_MATH_RE = re.compile(r"\$([^$\n]+)\$")

_FENCED_CODE_RE = re.compile(r"```[\s\S]*?```")
_INLINE_CODE_RE = re.compile(r"`[^`]+`")
_DISPLAY_MATH_STRIP_RE = re.compile(r"\$\$[\s\S]*?\$\$")
_INLINE_MATH_STRIP_RE = re.compile(r"\$[^$]+\$")
_LINK_RE = re.compile(r"\[([^\]]+)\]\([^)]+\)")
_IMAGE_RE = re.compile(r"!\[([^\]]*)\]\([^)]+\)")
_HEADING_MARKER_RE = re.compile(r"#+\s")
_NEWLINES_RE = re.compile(r"\n+")
_WHITESPACE_RE = re.compile(r"\s+")


def preprocess_math_content(content: str) -> str:
    """Normalize math delimiters before rendering.

    Display blocks (``$$...$$``) are moved onto their own lines and separated
    from surrounding paragraphs; inline math (``$...$``) has its inner
    whitespace trimmed.
    """
    content = _DISPLAY_MATH_RE.sub(
        lambda match: f"\n\n$$\n{match.group(1).strip()}\n$$\n\n", content
    )
    return _INLINE_MATH_RE.sub(lambda match: f"${match.group(1).strip()}$", content)


def calculate_reading_time(content: str, words_per_minute: int = MD2TOC_READING_WPM) -> int:
    """Estimate reading time in whole minutes (at least 1 for non-blank text)."""
    if not content.strip():
        return 0

    text = _FENCED_CODE_RE.sub("", content)
    text = _INLINE_CODE_RE.sub("", text)
    text = _DISPLAY_MATH_STRIP_RE.sub("", text)
    text = _INLINE_MATH_STRIP_RE.sub("", text)
    # Links are rewritten first, so an image keeps its leading "!" and text.
    text = _LINK_RE.sub(r"\1", text)
    text = _IMAGE_RE.sub("", text)
    text = _HEADING_MARKER_RE.sub("", text)
    text = re.sub(r"[*_~`]", "", text)
    text = _NEWLINES_RE.sub(" ", text).strip()

    word_count = len([word for word in _WHITESPACE_RE.split(text) if word])
    return max(1, math.ceil(word_count / words_per_minute))


def format_preview_content(content: str, max_length: int = MD2TOC_PREVIEW_LENGTH) -> str:
    """Produce plain preview text, truncated at a word boundary."""
    if not content.strip():
        return ""

    text = _FENCED_CODE_RE.sub("[code]", content)
    text = _INLINE_CODE_RE.sub("[code]", text)
    text = _DISPLAY_MATH_STRIP_RE.sub("[formula]", text)
    text = _INLINE_MATH_STRIP_RE.sub("[formula]", text)
    text = _LINK_RE.sub(r"\1", text)
    text = _IMAGE_RE.sub("[image]", text)
    text = _HEADING_MARKER_RE.sub("", text)
    text = re.sub(r"[*_~]", "", text)
    text = _NEWLINES_RE.sub(" ", text)
    text = _WHITESPACE_RE.sub(" ", text).strip()

    if len(text) <= max_length:
        return text

    truncated = text[:max_length]
    last_space = truncated.rfind(" ")
    if last_space > 0:
        return truncated[:last_space] + "..."
    return truncated + "..."
