"""Shared schemas for md2toc."""

from md2toc.schemas.post import PostDetail, PostTag
from md2toc.schemas.rendering import RenderedPost
from md2toc.schemas.toc import HeadingRecord, TocNode

__all__ = ["HeadingRecord", "PostDetail", "PostTag", "RenderedPost", "TocNode"]
