"""Pydantic models for the API."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from md2toc.schemas import TocNode
from server.server_config import MAX_CONTENT_BYTES, MAX_CONTENT_KB


class MarkdownRequest(BaseModel):
    """Request body carrying a markdown document.

    Attributes
    ----------
    content_md : str
        Markdown source of the document.

    """

    content_md: str = Field(..., description="Markdown source")

    @field_validator("content_md")
    @classmethod
    def validate_size(cls, v: str) -> str:
        """Reject documents whose UTF-8 encoding exceeds the size limit."""
        if len(v.encode("utf-8")) > MAX_CONTENT_BYTES:
            err = f"content_md exceeds {MAX_CONTENT_KB} KB"
            raise ValueError(err)
        return v


class TocResponse(BaseModel):
    """Response model for the /api/toc endpoint.

    Attributes
    ----------
    toc : list[TocNode]
        Nested table of contents.
    heading_count : int
        Number of headings in the table of contents.

    """

    toc: list[TocNode] = Field(default_factory=list, description="Nested table of contents")
    heading_count: int = Field(..., description="Total headings in the outline")


class RenderResponse(BaseModel):
    """Response model for the /api/render endpoint."""

    html: str = Field(..., description="Rendered HTML with heading ids")
    toc: list[TocNode] = Field(default_factory=list, description="Nested table of contents")
    read_time_minutes: int = Field(..., description="Estimated reading time")
    preview: str = Field(..., description="Plain text preview")


class PostTocResponse(BaseModel):
    """Response model for the /api/posts/{slug}/toc endpoint.

    Attributes
    ----------
    slug : str
        Slug of the post.
    title : str
        Title of the post.
    toc : list[TocNode]
        Nested table of contents of the post body.
    heading_count : int
        Number of headings in the table of contents.

    """

    slug: str
    title: str
    toc: list[TocNode] = Field(default_factory=list)
    heading_count: int


class ErrorResponse(BaseModel):
    """Error response body.

    Attributes
    ----------
    error : str
        Error message describing what went wrong.

    """

    error: str = Field(..., description="Error message")
