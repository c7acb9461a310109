"""Rendered post model."""

from __future__ import annotations

from pydantic import BaseModel, Field

from md2toc.schemas.toc import TocNode


class RenderedPost(BaseModel):
    """HTML and navigation data produced for one markdown document."""

    html: str
    toc: list[TocNode] = Field(default_factory=list)
    read_time_minutes: int = 0
    preview: str = ""
