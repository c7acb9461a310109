"""Configuration for the server."""

from __future__ import annotations

import os

DEFAULT_MAX_CONTENT_KB = 512

MAX_CONTENT_KB = int(os.getenv("MD2TOC_MAX_CONTENT_KB", str(DEFAULT_MAX_CONTENT_KB)))
MAX_CONTENT_BYTES = MAX_CONTENT_KB * 1024
