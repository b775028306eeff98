"""Cooperative cancellation for the fetch loops."""
from __future__ import annotations

from typing import Optional

from domain.errors import SyncInterrupted


class CancellationToken:
    """Set once (usually from a SIGINT handler), checked between loop iterations."""

    def __init__(self) -> None:
        self._cancelled = False
        self._reason: Optional[str] = None

    def cancel(self, reason: str = "interrupted") -> None:
        if not self._cancelled:
            self._cancelled = True
            self._reason = reason

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def reason(self) -> Optional[str]:
        return self._reason

    def raise_if_cancelled(self) -> None:
        if self._cancelled:
            raise SyncInterrupted(f"Sync {self._reason}.")
