from __future__ import annotations

import logging
import os
import sys
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from queue import Queue
from typing import Optional

from .context import ContextFilter
from .formatter import ConsoleFormatter, JSONFormatter
from .levels import register_levels, to_level

_listener: QueueListener | None = None


def bootstrap_logging(
    *,
    service: str = "match-stats",
    level: str | int | None = None,
    log_dir: Optional[Path] = None,
    log_file_name: str = "match-stats.jsonl",
    max_bytes: int = 5_000_000,
    backup_count: int = 3,
) -> None:
    """Configure the root logger for a CLI run.

    Progress output is printed by the commands themselves; the console
    handler only carries warnings and errors unless LOG_CONSOLE_LEVEL says
    otherwise. Everything at ``level`` goes to the JSON-lines file.
    """
    global _listener
    register_levels()
    root = logging.getLogger()
    root.handlers.clear()
    lvl = to_level(level or os.getenv("LOG_LEVEL", "INFO"))
    root.setLevel(lvl)

    if os.getenv("LOG_CONSOLE", "true").strip().lower() == "true":
        console = logging.StreamHandler(sys.stderr)
        console.setLevel(to_level(os.getenv("LOG_CONSOLE_LEVEL", "WARNING")))
        console.setFormatter(ConsoleFormatter(use_color=sys.stderr.isatty()))
        root.addHandler(console)

    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        json_handler = RotatingFileHandler(
            str(log_dir / log_file_name),
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        json_handler.setLevel(lvl)
        json_handler.setFormatter(JSONFormatter())
        q: Queue[logging.LogRecord] = Queue(-1)
        queue_handler = QueueHandler(q)
        queue_handler.addFilter(ContextFilter())
        root.addHandler(queue_handler)
        _listener = QueueListener(q, json_handler, respect_handler_level=True)
        _listener.start()

    logging.getLogger("httpx").setLevel(max(lvl, logging.WARNING))
    logging.getLogger(__name__).debug("logging ready for %s", service)


def shutdown_logging() -> None:
    global _listener
    if _listener:
        _listener.stop()
        _listener = None
