"""Logging helpers.

The log file holds one JSON object per line. Values passed through
``extra=`` (``event``, ``tick_interval_ms``, ``previous``/``current`` mode
and so on) are collected under ``context``.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FILE_NAME = "bandscope.log"
CONSOLE_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Attributes every LogRecord carries; anything else came in through `extra`.
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}


class JsonLogFormatter(logging.Formatter):
    """One JSON object per record, with `extra` fields under ``context``."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc)
            .isoformat()
            .replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        context = record_context(record)
        if context:
            payload["context"] = context
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True)


def record_context(record: logging.LogRecord) -> dict[str, object]:
    """Return the JSON-safe `extra` fields attached to `record`."""
    return {
        key: _json_safe(value)
        for key, value in record.__dict__.items()
        if key not in _RECORD_ATTRS and not key.startswith("_")
    }


def _json_safe(value: object) -> object:
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    if isinstance(value, (list, tuple)):
        return [_json_safe(item) for item in value]
    if isinstance(value, dict):
        return {str(key): _json_safe(val) for key, val in value.items()}
    return repr(value)


def resolve_level(level: str | int) -> int:
    """Map a level name or number to a logging level, defaulting to INFO."""
    if isinstance(level, int):
        return level
    numeric = logging.getLevelName(level.upper())
    return numeric if isinstance(numeric, int) else logging.INFO


def _file_handler(path: Path, max_bytes: int, backup_count: int) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    handler.setFormatter(JsonLogFormatter())
    return handler


def setup_logging(
    log_dir: Path,
    level: str | int = "INFO",
    max_bytes: int = 1_000_000,
    backup_count: int = 3,
    log_file: Path | None = None,
    console: bool = True,
) -> None:
    """Configure rotating JSON file logging and optional console logging.

    The TUI passes ``console=False`` so stream output cannot tear the
    rendered screen.
    """
    handlers = [
        _file_handler(log_file or log_dir / LOG_FILE_NAME, max_bytes, backup_count)
    ]
    if console:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handlers.append(stream_handler)

    root_logger = logging.getLogger()
    root_logger.setLevel(resolve_level(level))
    root_logger.handlers.clear()
    for handler in handlers:
        root_logger.addHandler(handler)
