"""Table-of-contents and rendering endpoints."""

from __future__ import annotations

import asyncio
from typing import Union

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from md2toc.exceptions import FetchError, ParseError, PostNotFoundError
from md2toc.fetch import fetch_post
from md2toc.rendering import render_post
from md2toc.toc import count_headings, extract_toc
from md2toc.utils.logging_config import get_logger
from server.models import (
    ErrorResponse,
    MarkdownRequest,
    PostTocResponse,
    RenderResponse,
    TocResponse,
)

logger = get_logger(__name__)

router = APIRouter()

POST_TOC_RESPONSES = {
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "Post not found"},
    status.HTTP_502_BAD_GATEWAY: {"model": ErrorResponse, "description": "Site unavailable or invalid"},
}


@router.post("/api/toc", response_model=TocResponse)
async def api_toc(toc_request: MarkdownRequest) -> TocResponse:
    """Extract the nested table of contents of a markdown document.

    **Returns**

    - **TocResponse**: the outline and its heading count; an outline-less
      document yields an empty ``toc``

    """
    toc = await asyncio.to_thread(extract_toc, toc_request.content_md)
    return TocResponse(toc=toc, heading_count=count_headings(toc))


@router.post("/api/render", response_model=RenderResponse)
async def api_render(render_request: MarkdownRequest) -> RenderResponse:
    """Render a markdown document to HTML with addressable headings."""
    rendered = await asyncio.to_thread(render_post, render_request.content_md)
    return RenderResponse(
        html=rendered.html,
        toc=rendered.toc,
        read_time_minutes=rendered.read_time_minutes,
        preview=rendered.preview,
    )


@router.get("/api/posts/{slug}/toc", response_model=None, responses=POST_TOC_RESPONSES)
async def api_post_toc(slug: str) -> Union[PostTocResponse, JSONResponse]:  # noqa: FA100 (pydantic)
    """Fetch a published post from the site and return its outline.

    **Path Parameters**
    - **slug** (`str`): slug of the post

    **Raises**

    - **404** when the site has no such post
    - **502** when the site cannot be reached or answers with an invalid payload

    """
    try:
        post = await fetch_post(slug)
    except PostNotFoundError as exc:
        return _error_response(status.HTTP_404_NOT_FOUND, exc, slug)
    except (FetchError, ParseError) as exc:
        return _error_response(status.HTTP_502_BAD_GATEWAY, exc, slug)

    toc = await asyncio.to_thread(extract_toc, post.content_md)
    return PostTocResponse(slug=post.slug, title=post.title, toc=toc, heading_count=count_headings(toc))


def _error_response(status_code: int, exc: Exception, slug: str) -> JSONResponse:
    logger.warning("Post outline request failed", extra={"slug": slug, "status": status_code, "error": str(exc)})
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=str(exc)).model_dump())
