from __future__ import annotations

from typing import List, Optional

from config import settings
from core.logging.logger import get_logger
from domain.entities import PlayerIdentity
from domain.enums import Region
from infrastructure import AssetCatalog, MatchCacheRepository, RiotAPIClient, profile_for
from application.services.stats import validate_sort_keys
from application.use_cases import (
    GenerateReportsUseCase,
    load_matches,
    load_report_configs,
    read_player_info,
    resolve_player,
)
from presentation.report_renderer import ReportRenderer


class ReportCommand:
    """Print the reports from the stats config file over the cached matches."""

    def __init__(self, sort_by: Optional[List[str]] = None, min_games: Optional[int] = None) -> None:
        self.profile = profile_for(settings.USE_MATCH_V4)
        self.sort_by = sort_by or settings.SORT_BY
        self.min_games = settings.MIN_GAMES if min_games is None else min_games
        self._log = get_logger(__name__, service="report-cli")

    async def _resolve_player(self) -> PlayerIdentity:
        info = read_player_info(settings.PLAYER_INFO_PATH)
        region = Region.from_string(info["platform"])
        if info.get("accountId") and (info.get("puuid") or not self.profile.requires_puuid):
            return await resolve_player(None, self.profile, info)
        settings.validate()
        async with RiotAPIClient(settings.api_key(), region, self.profile) as api:
            return await resolve_player(api, self.profile, info)

    async def run(self, player: Optional[PlayerIdentity] = None) -> int:
        # Fail on bad sort criteria before loading anything.
        validate_sort_keys(self.sort_by)
        configs = load_report_configs(settings.STATS_CONFIG_PATH)
        if player is None:
            player = await self._resolve_player()

        cache = MatchCacheRepository(settings.DATA_DIR, self.profile)
        match_ids = cache.load_match_ids(player)
        if not match_ids:
            print(f"No cached matches for {player.display_id} ({self.profile.name}). Run 'sync' first.")
            return 1
        matches = load_matches(self.profile, match_ids, cache.load_match_details(player))
        self._log.info(lambda: f"report-start matches={len(matches)} reports={len(configs)}")

        catalog = AssetCatalog.load(settings.ASSETS_DIR)
        renderer = ReportRenderer(catalog, min_games=self.min_games)
        use_case = GenerateReportsUseCase(player, catalog)
        for report in use_case.execute(matches, configs, self.sort_by):
            renderer.render(report)
        return 0
