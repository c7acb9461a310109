"""Models for the blog's post payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PostTag(BaseModel):
    """A tag attached to a post."""

    name: str
    background_color: str | None = None
    text_color: str | None = None


class PostDetail(BaseModel):
    """A published post as returned by ``GET /api/posts/{slug}``.

    Attributes:
        id: Database identifier of the post.
        slug: URL slug of the post.
        title: Post title.
        excerpt: Short summary shown in listings.
        content_md: Markdown body.
        read_time_minutes: Stored reading time estimate.
        cover_image_url: Optional cover image.
        view_count: View counter after the request incremented it.
        author: Author display name.
        created_at: Creation timestamp as sent by the site.
        updated_at: Last update timestamp.
        published_at: Publication timestamp.
        tags: Tags with their display colours.
        comment_count: Number of visible comments.
    """

    model_config = ConfigDict(extra="ignore")

    id: int
    slug: str
    title: str
    excerpt: str | None = None
    content_md: str = ""
    read_time_minutes: int | None = None
    cover_image_url: str | None = None
    view_count: int = 0
    author: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    published_at: str | None = None
    tags: list[PostTag] = Field(default_factory=list)
    comment_count: int = 0
