from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator

_sync_context: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar("sync_log_context", default={})


def get_context() -> Dict[str, Any]:
    """Fields attached to records emitted from the current task."""
    return dict(_sync_context.get())


@contextmanager
def bound(**fields: Any) -> Iterator[Dict[str, Any]]:
    """Attach fields (player, region, profile) to every record inside the block.

    None values are skipped; nested blocks extend the outer fields.
    """
    merged = get_context()
    merged.update((k, v) for k, v in fields.items() if v is not None)
    token = _sync_context.set(merged)
    try:
        yield merged
    finally:
        _sync_context.reset(token)


class ContextFilter(logging.Filter):
    """Copies the bound fields onto the record before it leaves the emitting task."""

    def filter(self, record: logging.LogRecord) -> bool:
        ctx = get_context()
        if ctx:
            record.context = {**ctx, **(getattr(record, "context", None) or {})}
        return True
