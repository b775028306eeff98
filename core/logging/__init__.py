"""Structured logging: levels, per-sync context, formatters and bootstrap."""
from .config import bootstrap_logging, shutdown_logging
from .context import bound, get_context
from .levels import LogLevel
from .logger import StructuredLogger, get_logger

__all__ = [
    "bootstrap_logging",
    "shutdown_logging",
    "bound",
    "get_context",
    "LogLevel",
    "StructuredLogger",
    "get_logger",
]
