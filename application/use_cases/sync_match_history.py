"""Use case for bringing one player's local match cache up to date."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from core.logging import bound
from domain.entities import Match, PlayerIdentity
from domain.enums import Region
from domain.interfaces import IMatchCache, MatchDetailsMap, MatchId, ProviderProfile
from infrastructure.api import RiotAPIClient
from application.services.match_sync import CancellationToken, MatchSyncService

logger = logging.getLogger(__name__)


def read_player_info(path: Path) -> Dict[str, Any]:
    """Parse the player info file: ``{"platform", "name"?, "accountId"?, "puuid"?}``."""
    with open(path, "r", encoding="utf-8") as f:
        info = json.load(f)
    if not isinstance(info, dict) or not info.get("platform"):
        raise ValueError(f"{path} must be a JSON object with a 'platform' entry")
    return info


async def resolve_player(
    api_client: Optional[RiotAPIClient],
    profile: ProviderProfile,
    info: Dict[str, Any],
) -> PlayerIdentity:
    """Use the ids from the info file when they suffice, otherwise look the name up."""
    region = Region.from_string(info["platform"])
    account_id = info.get("accountId")
    puuid = info.get("puuid")
    if account_id and (puuid or not profile.requires_puuid):
        return PlayerIdentity(
            region=region,
            account_id=account_id,
            puuid=puuid,
            summoner_name=info.get("name"),
        )
    name = info.get("name")
    if not name:
        raise ValueError("Either a summoner name or an account id must be provided in the player info file.")
    if api_client is None:
        raise ValueError(f"Looking up {name} needs an API client")
    data = await api_client.get_summoner_by_name(name)
    player = PlayerIdentity.from_summoner_payload(region, data)
    logger.info(f"Resolved {name} on {region.value}")
    return player


def load_matches(
    profile: ProviderProfile,
    match_ids: List[MatchId],
    details: MatchDetailsMap,
) -> List[Match]:
    """Parse cached details in id-list order; ids without details are skipped."""
    matches = []
    for match_id in match_ids:
        payload = details.get(str(match_id))
        if payload is not None:
            matches.append(profile.parse_match(payload))
    return matches


class SyncMatchHistoryUseCase:
    """
    One sync pass:
      1. load the cached ids and details
      2. fetch details still missing (the newest cached end time needs them)
      3. fetch ids newer than that end time (or the whole history)
      4. fetch details for the new ids
    """

    def __init__(
        self,
        api_client: RiotAPIClient,
        cache: IMatchCache,
        profile: ProviderProfile,
        *,
        batch_size: Optional[int] = None,
        progress_callback=None,
        status_callback=None,
        sync_service: Optional[MatchSyncService] = None,
    ):
        self.cache = cache
        self.profile = profile
        self.sync = sync_service or MatchSyncService(
            api_client,
            cache,
            profile,
            batch_size=batch_size,
            progress_callback=progress_callback,
            status_callback=status_callback,
        )

    def since_timestamp(self, match_ids: List[MatchId], details: MatchDetailsMap) -> Optional[int]:
        """One time unit past the end of the newest cached match with details."""
        for match_id in match_ids:
            payload = details.get(str(match_id))
            if payload is not None:
                end_ms = self.profile.match_end_time(payload)
                return self.profile.to_time_units(end_ms) + 1
        return None

    async def execute(
        self,
        player: PlayerIdentity,
        token: Optional[CancellationToken] = None,
    ) -> Tuple[List[MatchId], MatchDetailsMap]:
        with bound(player=player.display_id, region=player.region.value, profile=self.profile.name):
            match_ids = self.cache.load_match_ids(player)
            details = self.cache.load_match_details(player)
            logger.info(f"Cache holds {len(match_ids)} ids and {len(details)} details")

            details = await self.sync.fetch_missing_details(player, match_ids, details, token)
            since = self.since_timestamp(match_ids, details)
            match_ids = await self.sync.download_match_ids(player, match_ids, since, token)
            details = await self.sync.fetch_missing_details(player, match_ids, details, token)
            return match_ids, details
