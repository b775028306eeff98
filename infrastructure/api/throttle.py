"""Fixed-interval request throttle."""
import asyncio
import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator, Awaitable, Callable, Optional

logger = logging.getLogger(__name__)


class RequestThrottle:
    """
    Cooperative throttle for strictly sequential callers:
      - each request may start only ``interval_ms`` after the previous one
        returned (successfully or not)
      - the first request goes out immediately

    This is not a token bucket. With one request in flight at a time, a
    fixed gap is all the Riot personal-key limits need
    (1500 ms → 80 requests / 2 min, below the 100 / 2 min cap).
    """

    def __init__(
        self,
        interval_ms: int = 1500,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.interval_s = max(0, interval_ms) / 1000.0
        self._clock = clock
        self._sleep = sleep
        self._last_done: Optional[float] = None

    async def wait(self) -> None:
        if self._last_done is None:
            return
        remaining = self.interval_s - (self._clock() - self._last_done)
        if remaining > 0:
            logger.debug(f"Throttle: waiting {remaining:.2f}s")
            await self._sleep(remaining)

    def mark_done(self) -> None:
        self._last_done = self._clock()

    @asynccontextmanager
    async def slot(self) -> AsyncIterator[None]:
        """Wrap exactly one request."""
        await self.wait()
        try:
            yield
        finally:
            self.mark_done()
