from __future__ import annotations

from typing import Optional

from config import settings
from core.logging.logger import get_logger
from domain.entities import PlayerIdentity
from domain.enums import Region
from infrastructure import AssetProvider, MatchCacheRepository, RiotAPIClient, profile_for
from application.services.match_sync import CancellationToken
from application.use_cases import SyncMatchHistoryUseCase, read_player_info, resolve_player


class SyncCommand:
    """Download new match ids and details for the player in the info file."""

    def __init__(self, token: Optional[CancellationToken] = None) -> None:
        self.token = token or CancellationToken()
        self.profile = profile_for(settings.USE_MATCH_V4)
        self._log = get_logger(__name__, service="sync-cli")

    @staticmethod
    def _make_progress_cb(label: str):
        width = 30
        def _progress(current: int, total: int) -> None:
            filled = int(width * current / total) if total else 0
            bar = "█" * filled + "-" * (width - filled)
            end = "\n" if current >= total else ""
            print(f"\r{label} | {bar} | {current}/{total}", end=end, flush=True)
        return _progress

    async def refresh_assets(self) -> None:
        provider = AssetProvider(settings.ASSETS_DIR, progress_callback=print)
        version = await provider.refresh()
        self._log.info(lambda: f"assets version={version}")

    async def run(self) -> PlayerIdentity:
        settings.validate()
        settings.create_directories()
        info = read_player_info(settings.PLAYER_INFO_PATH)
        self._log.info(lambda: f"start profile={self.profile.name} platform={info['platform']}")

        await self.refresh_assets()
        self.token.raise_if_cancelled()

        async with RiotAPIClient(settings.api_key(), Region.from_string(info["platform"]), self.profile) as api:
            player = await resolve_player(api, self.profile, info)
            print(f"Player: {player.display_id} ({player.region.display_name}, {self.profile.name})")

            cache = MatchCacheRepository(settings.DATA_DIR, self.profile)
            use_case = SyncMatchHistoryUseCase(
                api,
                cache,
                self.profile,
                progress_callback=self._make_progress_cb("Match details"),
                status_callback=print,
            )
            match_ids, details = await use_case.execute(player, self.token)

        available = sum(1 for mid in match_ids if str(mid) in details)
        print(f"Cached {len(match_ids)} matches, details for {available}.")
        self._log.success(lambda: f"sync-done ids={len(match_ids)} details={available}")
        return player
