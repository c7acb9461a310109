"""Fetch published posts from the blog API."""

from __future__ import annotations

import json
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from md2toc.config import MD2TOC_SITE_URL
from md2toc.exceptions import FetchError, ParseError, PostNotFoundError
from md2toc.http_utils import get_with_retries
from md2toc.schemas import PostDetail
from md2toc.utils.logging_config import get_logger

logger = get_logger(__name__)


def post_url(slug: str, site_url: str | None = None) -> str:
    """Return the API URL serving the post ``slug``."""
    base = (site_url or MD2TOC_SITE_URL).rstrip("/")
    return f"{base}/api/posts/{quote(slug, safe='')}"


async def fetch_post(
    slug: str,
    *,
    site_url: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> PostDetail:
    """Fetch one published post.

    Args:
        slug: URL slug of the post.
        site_url: Base URL of the site. Defaults to ``MD2TOC_SITE_URL``.
        client: Optional shared httpx client.

    Returns:
        The post with its markdown body.

    Raises:
        PostNotFoundError: If the site has no published post with this slug.
        FetchError: If the request fails or the site reports an error.
        ParseError: If the response is not a valid post payload.
    """
    url = post_url(slug, site_url)
    body = await get_with_retries(
        url,
        client=client,
        on_404=PostNotFoundError,
        on_404_message=f"Post not found: {slug}",
    )

    try:
        payload = json.loads(body)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Response from {url} is not JSON: {exc}") from exc

    if not isinstance(payload, dict):
        raise ParseError(f"Unexpected response shape from {url}")
    if not payload.get("success"):
        raise FetchError(payload.get("error") or f"Site reported a failure for {url}")

    try:
        post = PostDetail.model_validate(payload.get("data"))
    except ValidationError as exc:
        raise ParseError(f"Invalid post payload from {url}: {exc}") from exc

    logger.info("Fetched post", extra={"slug": post.slug, "chars": len(post.content_md)})
    return post
