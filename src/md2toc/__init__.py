"""md2toc: table-of-contents extraction and rendering for markdown posts."""

from md2toc.exceptions import (
    ConfigError,
    FetchError,
    Md2tocError,
    ParseError,
    PostNotFoundError,
)
from md2toc.fetch import fetch_post
from md2toc.heading_filter import DEFAULT_MATH_PATTERNS, HeadingFilter
from md2toc.markdown import (
    calculate_reading_time,
    format_preview_content,
    preprocess_math_content,
)
from md2toc.rendering import add_heading_ids, render_markdown, render_post
from md2toc.schemas import HeadingRecord, PostDetail, RenderedPost, TocNode
from md2toc.slugs import heading_id
from md2toc.toc import build_toc_tree, extract_headings, extract_toc, flatten_toc
from md2toc.visitor import VisitAction, walk

__all__ = [
    "DEFAULT_MATH_PATTERNS",
    "ConfigError",
    "FetchError",
    "HeadingFilter",
    "HeadingRecord",
    "Md2tocError",
    "ParseError",
    "PostDetail",
    "PostNotFoundError",
    "RenderedPost",
    "TocNode",
    "VisitAction",
    "add_heading_ids",
    "build_toc_tree",
    "calculate_reading_time",
    "extract_headings",
    "extract_toc",
    "fetch_post",
    "flatten_toc",
    "format_preview_content",
    "heading_id",
    "preprocess_math_content",
    "render_markdown",
    "render_post",
    "walk",
]
