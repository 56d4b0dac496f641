"""Structured JSON logging for clickup-mcp.

One JSON object per line in <log_dir>/clickup-mcp.log (5MB, 3 backups).
stdout carries the MCP stdio transport, so nothing here may write to it.

The server writes four record kinds, built by the helpers below:

    tool_call       INFO     tool, args, duration_ms
    tool_error      WARNING  tool, args, duration_ms, error
    resource_read   INFO     uri, duration_ms
    resource_error  WARNING  uri, duration_ms, error
"""

from __future__ import annotations

import json
import logging
import os
import threading
import time
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

LOG_FILENAME = "clickup-mcp.log"
LOGGER_NAME = "clickup_mcp"
_MAX_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 3
_setup_lock = threading.Lock()

# (LogRecord attribute, JSON key) for the optional ``extra`` fields.
_EXTRA_FIELDS = (
    ("tool", "tool"),
    ("uri", "uri"),
    ("args_data", "args"),
    ("duration_ms", "duration_ms"),
    ("error", "error"),
)


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for attr, key in _EXTRA_FIELDS:
            if hasattr(record, attr):
                entry[key] = getattr(record, attr)
        if record.exc_info and record.exc_info[1]:
            entry["exception"] = str(record.exc_info[1])
        return json.dumps(entry, default=str)


def setup_logging(log_dir: Path, level: int = logging.INFO) -> logging.Logger:
    """Point the ``clickup_mcp`` logger at <log_dir>/clickup-mcp.log.

    Calling again with the same directory is a no-op; a different directory
    replaces the previous file handler.
    """
    logger = logging.getLogger(LOGGER_NAME)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / LOG_FILENAME
    target = os.path.abspath(str(log_path))

    with _setup_lock:
        stale = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
        if any(h.baseFilename == target for h in stale):
            return logger
        for h in stale:
            logger.removeHandler(h)
            h.close()

        handler = RotatingFileHandler(str(log_path), maxBytes=_MAX_BYTES, backupCount=_BACKUP_COUNT)
        handler.setFormatter(_JsonFormatter())
        logger.addHandler(handler)
        logger.setLevel(level)
    return logger


def elapsed_ms(started: float) -> float:
    """Milliseconds since ``started`` (a ``time.monotonic()`` reading), one decimal."""
    return round((time.monotonic() - started) * 1000, 1)


def log_tool_call(
    logger: logging.Logger,
    tool: str,
    arguments: Any,
    duration_ms: float,
    *,
    error: str | None = None,
) -> None:
    extra: dict[str, Any] = {"tool": tool, "args_data": arguments, "duration_ms": duration_ms}
    if error is None:
        logger.info("tool_call", extra=extra)
    else:
        logger.warning("tool_error", extra={**extra, "error": error})


def log_resource_read(logger: logging.Logger, uri: str, duration_ms: float, *, error: str | None = None) -> None:
    extra: dict[str, Any] = {"uri": uri, "duration_ms": duration_ms}
    if error is None:
        logger.info("resource_read", extra=extra)
    else:
        logger.warning("resource_error", extra={**extra, "error": error})
