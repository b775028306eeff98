"""Presentation layer - command line interface and report rendering."""
from .report_renderer import ReportRenderer
from .cli import ReportCommand, SyncCommand

__all__ = [
    "ReportRenderer",
    "ReportCommand",
    "SyncCommand",
]
