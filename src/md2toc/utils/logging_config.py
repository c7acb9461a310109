"""Process-wide logging setup.

Modules obtain loggers through :func:`get_logger` and attach structured context
with ``extra={...}``. :func:`configure_logging` is called once by the CLI and the
server entry point; library code never configures handlers itself.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any

from md2toc.config import MD2TOC_LOG_JSON, MD2TOC_LOG_LEVEL

_RESERVED_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}
_NOISY_LOGGERS = ("httpx", "httpcore")


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {key: value for key, value in vars(record).items() if key not in _RESERVED_ATTRS}


class PlainFormatter(logging.Formatter):
    """Single-line formatter that appends ``extra`` fields as ``key=value``."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s %(levelname)s %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = _extra_fields(record)
        if extras:
            line += " " + " ".join(f"{key}={value!r}" for key, value in extras.items())
        return line


class JsonFormatter(logging.Formatter):
    """JSON lines formatter (each record is one JSON object)."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        payload.update(_extra_fields(record))
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def _coerce_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: str | int | None = None, json_logs: bool | None = None) -> None:
    """Install a single stderr handler on the root logger.

    Args:
        level: Logging level name or number. Defaults to ``MD2TOC_LOG_LEVEL``.
        json_logs: Emit JSON lines instead of plain text. Defaults to
            ``MD2TOC_LOG_JSON``.
    """
    final_level = _coerce_level(level if level is not None else MD2TOC_LOG_LEVEL)
    use_json = MD2TOC_LOG_JSON if json_logs is None else json_logs

    root = logging.getLogger()
    root.setLevel(final_level)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(JsonFormatter() if use_json else PlainFormatter())
    root.addHandler(handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(final_level, logging.WARNING))


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module."""
    return logging.getLogger(name)
