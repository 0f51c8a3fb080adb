"""Logging setup for task-shell.

Log records go to stderr so they never interleave with the task
listings the presenter writes to stdout.  Both knobs come from the
environment; ``--log-level`` overrides ``LOG_LEVEL``.
"""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone

DEFAULT_LEVEL: str = "WARNING"
TEXT_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger(__name__)


class JSONFormatter(logging.Formatter):
    """One JSON object per line: timestamp, level, logger, message.

    An ``exception`` field is added when the record carries exc_info.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[0] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def resolve_level(name: str) -> int | None:
    """Return the numeric level registered under *name*, or ``None``.

    Only real level names count; other attributes of :mod:`logging`
    such as ``root`` or ``BASIC_FORMAT`` are rejected.
    """
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else None


def configure_logging(level_override: str | None = None) -> None:
    """Install a single stderr handler on the root logger.

    Args:
        level_override: Level name that wins over ``LOG_LEVEL``.

    Environment variables:
        LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL.  Defaults to
            WARNING so an interactive session stays quiet.  An unknown
            name falls back to WARNING and is reported once.
        LOG_FORMAT: ``json`` for JSON lines, anything else for text.
    """
    requested = level_override or os.getenv("LOG_LEVEL", DEFAULT_LEVEL)
    level = resolve_level(requested)

    handler = logging.StreamHandler()
    if os.getenv("LOG_FORMAT", "text").lower() == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level if level is not None else logging.WARNING)

    # asyncio (driven by questionary) reports its event loop at DEBUG
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    if level is None:
        logger.warning("Unknown log level %r; using %s", requested, DEFAULT_LEVEL)
