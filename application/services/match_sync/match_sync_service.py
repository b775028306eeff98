"""Match history sync: id backfill, incremental windows, detail download."""
from __future__ import annotations

import logging
import time
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from config import settings
from domain.entities import PlayerIdentity
from domain.interfaces import IMatchCache, MatchDetailsMap, MatchId, ProviderProfile
from infrastructure.api import RiotAPIClient, RiotAPIError
from .cancellation import CancellationToken

logger = logging.getLogger(__name__)

DAY_MS = 24 * 60 * 60 * 1000


def _now_ms() -> int:
    return int(time.time() * 1000)


class MatchSyncService:
    """
    Keeps one player's local cache in step with the provider.

    Every operation:
    - issues its requests strictly one after another (the client throttles)
    - checks the cancellation token before each request
    - stops at the first provider error, logs it and keeps what it has
    - writes its collection in a ``finally`` block, so a normal exit, an
      error, a cancelled token (SyncInterrupted) and a cancelled task all
      persist the progress made so far
    """

    def __init__(
        self,
        client: RiotAPIClient,
        cache: IMatchCache,
        profile: ProviderProfile,
        *,
        batch_size: Optional[int] = None,
        window_days: Optional[int] = None,
        progress_callback: Optional[Callable[[int, int], None]] = None,
        status_callback: Optional[Callable[[str], None]] = None,
        clock: Callable[[], int] = _now_ms,
    ):
        self.client = client
        self.cache = cache
        self.profile = profile
        self.batch_size = batch_size or settings.MATCH_BATCH_SIZE
        self.window_days = window_days or settings.WINDOW_DAYS
        self.progress_cb = progress_callback
        self.status_cb = status_callback
        self._clock = clock

    def _status(self, message: str) -> None:
        logger.info(message)
        if self.status_cb:
            self.status_cb(message)

    @staticmethod
    def _token(token: Optional[CancellationToken]) -> CancellationToken:
        return token if token is not None else CancellationToken()

    # ------------------------------------------------------------------ #
    # Match ids
    # ------------------------------------------------------------------ #

    async def fetch_all_match_ids(
        self,
        player: PlayerIdentity,
        token: Optional[CancellationToken] = None,
        existing_ids: Sequence[MatchId] = (),
    ) -> List[MatchId]:
        """Page through the whole history, newest first, until an empty page.

        Ids already stored but no longer returned by the provider are kept at
        the end of the list.
        """
        token = self._token(token)
        match_ids: List[MatchId] = []
        begin_index = 0
        try:
            while True:
                token.raise_if_cancelled()
                try:
                    batch = await self.client.get_match_ids_page(player, begin_index, self.batch_size)
                except RiotAPIError as exc:
                    logger.error(f"Match history page at {begin_index} failed: {exc.message}")
                    break
                if not batch:
                    break
                match_ids.extend(batch)
                self._status(f"Downloaded {len(batch)} match entries.")
                begin_index += self.batch_size
        finally:
            seen = {str(mid) for mid in match_ids}
            match_ids.extend(mid for mid in existing_ids if str(mid) not in seen)
            self.cache.save_match_ids(player, match_ids)

        self._status(f"Match history contains {len(match_ids)} matches in total.")
        return match_ids

    async def fetch_new_match_ids(
        self,
        player: PlayerIdentity,
        existing_ids: Sequence[MatchId],
        since_timestamp: int,
        token: Optional[CancellationToken] = None,
    ) -> List[MatchId]:
        """Walk fixed windows from ``since_timestamp`` (profile time units) to now.

        Each window's ids are kept with the window start and merged newest
        window first, keeping provider order (newest first) inside a window.
        A window still in flight when the loop stops contributes nothing.
        """
        token = self._token(token)
        window = self.window_days * DAY_MS // self.profile.time_unit_ms
        now = self._clock() // self.profile.time_unit_ms
        known = {str(mid) for mid in existing_ids}
        batches: List[Tuple[int, List[MatchId]]] = []

        start = since_timestamp
        try:
            while start < now:
                token.raise_if_cancelled()
                try:
                    window_ids = await self.client.get_match_ids_window(player, start, start + window)
                except RiotAPIError as exc:
                    if not exc.is_empty_window:
                        logger.error(f"Match history window at {start} failed: {exc.message}")
                        break
                    window_ids = []
                fresh = [mid for mid in window_ids if str(mid) not in known]
                if fresh:
                    known.update(str(mid) for mid in fresh)
                    batches.append((start, fresh))
                    self._status(f"Downloaded {len(fresh)} more match entries.")
                start += window
        finally:
            new_ids = self._merge_windows(batches)
            merged = new_ids + list(existing_ids)
            if new_ids:
                self.cache.save_match_ids(player, merged)

        self._status(f"Match history contains {len(merged)} matches.")
        return merged

    @staticmethod
    def _merge_windows(batches: Iterable[Tuple[int, List[MatchId]]]) -> List[MatchId]:
        ordered = sorted(batches, key=lambda batch: batch[0], reverse=True)
        return [mid for _, ids in ordered for mid in ids]

    async def download_match_ids(
        self,
        player: PlayerIdentity,
        existing_ids: Sequence[MatchId],
        since_timestamp: Optional[int],
        token: Optional[CancellationToken] = None,
    ) -> List[MatchId]:
        """Full backfill without a time boundary, incremental sync with one."""
        if since_timestamp is None:
            return await self.fetch_all_match_ids(player, token, existing_ids)
        return await self.fetch_new_match_ids(player, existing_ids, since_timestamp, token)

    # ------------------------------------------------------------------ #
    # Match details
    # ------------------------------------------------------------------ #

    async def fetch_missing_details(
        self,
        player: PlayerIdentity,
        match_ids: Sequence[MatchId],
        existing_details: MatchDetailsMap,
        token: Optional[CancellationToken] = None,
    ) -> MatchDetailsMap:
        """Download details for ids not cached yet, oldest first.

        The provider only keeps match details for a limited time, so the
        oldest games go first. Stops at the first failed request; entries
        still missing afterwards are simply not available yet.
        """
        token = self._token(token)
        details: MatchDetailsMap = dict(existing_details)
        missing = [mid for mid in reversed(match_ids) if str(mid) not in details]
        if not missing:
            return details

        counter = 0
        try:
            for match_id in missing:
                token.raise_if_cancelled()
                try:
                    payload = await self.client.get_match_details(match_id)
                except RiotAPIError as exc:
                    logger.error(f"Details for match {match_id} failed: {exc.message}")
                    break
                details[str(match_id)] = payload
                counter += 1
                if self.progress_cb:
                    self.progress_cb(counter, len(missing))
        finally:
            if counter:
                self.cache.save_match_details(player, details)

        self._status(f"Downloaded data for {counter} / {len(missing)} matches.")
        return details
