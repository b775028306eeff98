"""Errors raised by the Riot API client."""
from __future__ import annotations

from typing import Optional


class RiotAPIError(Exception):
    """Non-2xx response (or transport failure, status_code None)."""

    def __init__(self, status_code: Optional[int], message: str, url: str = "") -> None:
        super().__init__(f"HTTP {status_code}: {message}" if status_code else message)
        self.status_code = status_code
        self.message = message
        self.url = url

    @property
    def is_empty_window(self) -> bool:
        """A windowed history query answers 404 when the window holds no matches."""
        return self.status_code == 404

    @property
    def is_rate_limited(self) -> bool:
        return self.status_code == 429
