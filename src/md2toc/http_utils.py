"""HTTP GET with retry logic for the blog API."""

from __future__ import annotations

import asyncio
from typing import Final

import httpx

from md2toc.config import (
    MD2TOC_FETCH_BACKOFF_S,
    MD2TOC_FETCH_MAX_RETRIES,
    MD2TOC_FETCH_TIMEOUT_S,
    MD2TOC_USER_AGENT,
)
from md2toc.exceptions import FetchError
from md2toc.utils.logging_config import get_logger

logger = get_logger(__name__)

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})

_MAX_REDIRECTS: Final[int] = 5


async def get_with_retries(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    on_404: type[Exception] | None = None,
    on_404_message: str | None = None,
) -> str:
    """GET ``url`` and return the response body, retrying transient failures.

    Args:
        url: The URL to fetch.
        client: Optional shared client. A short-lived client is created when
            omitted.
        on_404: Exception class raised on 404. Defaults to FetchError.
        on_404_message: Message for the 404 exception.

    Returns:
        The decoded response text.

    Raises:
        FetchError (or ``on_404``): If the resource is missing or every
            attempt failed.
    """
    not_found_exc_class = on_404 or FetchError

    async def attempt_all(http_client: httpx.AsyncClient) -> str:
        last_exc: Exception | None = None

        for attempt in range(MD2TOC_FETCH_MAX_RETRIES + 1):
            try:
                response = await http_client.get(url)
                if response.status_code == 404:
                    raise not_found_exc_class(on_404_message or f"Resource not found at {url}")
                if response.status_code not in RETRY_STATUS_CODES:
                    response.raise_for_status()
                    return response.text
                last_exc = FetchError(f"HTTP {response.status_code} from {url}")
            except httpx.HTTPStatusError as exc:
                raise FetchError(f"HTTP {exc.response.status_code} from {url}") from exc
            except httpx.RequestError as exc:
                last_exc = exc

            if attempt < MD2TOC_FETCH_MAX_RETRIES:
                backoff = MD2TOC_FETCH_BACKOFF_S * (2**attempt)
                logger.debug(
                    "Retrying request",
                    extra={"url": url, "attempt": attempt + 1, "backoff_s": backoff, "error": str(last_exc)},
                )
                await asyncio.sleep(backoff)

        raise FetchError(f"Failed to fetch {url}: {last_exc}")

    if client is not None:
        return await attempt_all(client)

    async with httpx.AsyncClient(
        timeout=httpx.Timeout(MD2TOC_FETCH_TIMEOUT_S),
        headers={"User-Agent": MD2TOC_USER_AGENT, "Accept": "application/json"},
        follow_redirects=True,
        max_redirects=_MAX_REDIRECTS,
    ) as new_client:
        return await attempt_all(new_client)
