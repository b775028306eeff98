"""Presentation CLI exports."""
from .sync_command import SyncCommand
from .report_command import ReportCommand

__all__ = [
    "SyncCommand",
    "ReportCommand",
]
