"""Heading and table-of-contents models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HeadingRecord(BaseModel):
    """A retained heading, in document order."""

    level: int = Field(..., ge=1, le=6)
    text: str
    id: str


class TocNode(BaseModel):
    """A hierarchical table-of-contents node."""

    id: str
    text: str
    level: int = Field(..., ge=1, le=6)
    children: list["TocNode"] = Field(default_factory=list)
