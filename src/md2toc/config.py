"""Local configuration for md2toc."""

from __future__ import annotations

import json
import os

from md2toc.exceptions import ConfigError

DEFAULT_MAX_HEADING_LENGTH = 200
DEFAULT_READING_WPM = 200
DEFAULT_PREVIEW_LENGTH = 300
DEFAULT_SITE_URL = "http://localhost:3000"
DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "md2toc/0.1"
DEFAULT_LOG_LEVEL = "INFO"


def _parse_pattern_list(raw: str | None) -> tuple[str, ...]:
    """Parse a JSON list of regular expressions from an environment value."""
    if not raw or not raw.strip():
        return ()
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"MD2TOC_EXTRA_MATH_PATTERNS is not valid JSON: {exc}") from exc
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError("MD2TOC_EXTRA_MATH_PATTERNS must be a JSON list of strings")
    return tuple(value)


MD2TOC_MAX_HEADING_LENGTH = int(os.getenv("MD2TOC_MAX_HEADING_LENGTH", str(DEFAULT_MAX_HEADING_LENGTH)))
MD2TOC_EXTRA_MATH_PATTERNS = _parse_pattern_list(os.getenv("MD2TOC_EXTRA_MATH_PATTERNS"))
MD2TOC_READING_WPM = int(os.getenv("MD2TOC_READING_WPM", str(DEFAULT_READING_WPM)))
MD2TOC_PREVIEW_LENGTH = int(os.getenv("MD2TOC_PREVIEW_LENGTH", str(DEFAULT_PREVIEW_LENGTH)))

# Base URL of the blog whose /api/posts/{slug} endpoint serves post bodies.
MD2TOC_SITE_URL = os.getenv("MD2TOC_SITE_URL", DEFAULT_SITE_URL)
MD2TOC_FETCH_TIMEOUT_S = float(os.getenv("MD2TOC_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
MD2TOC_FETCH_MAX_RETRIES = int(os.getenv("MD2TOC_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
MD2TOC_FETCH_BACKOFF_S = float(os.getenv("MD2TOC_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
MD2TOC_USER_AGENT = os.getenv("MD2TOC_USER_AGENT", DEFAULT_USER_AGENT)

MD2TOC_LOG_LEVEL = os.getenv("MD2TOC_LOG_LEVEL", DEFAULT_LOG_LEVEL)
MD2TOC_LOG_JSON = os.getenv("MD2TOC_LOG_JSON", "false").lower() == "true"
