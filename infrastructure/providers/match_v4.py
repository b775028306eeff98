"""Legacy match v4 profile: account-keyed history on the platform host.

Match v4 was retired by Riot; the profile is kept so caches downloaded back
then can still be extended (where a mirror serves the API) and reported on.
Those caches store ``old-matches.json`` as match-info objects
(``{gameId, season, ...}``) and split details into per-season
``match-details-{season}.json`` files; both are read transparently.
"""
import logging
from typing import Any, Dict, List

from domain.entities import Match, Participant, PlayerIdentity, RuneSelection
from domain.enums import Endpoint, Region
from domain.interfaces import MatchId, ProviderProfile
from .match_v5 import SUMMONER_BY_NAME

logger = logging.getLogger(__name__)

PERK_SLOTS = 6


class LegacyMatchV4Profile(ProviderProfile):
    """Match v4: millisecond windows, season ids in the payload."""

    name = "match-v4"
    requires_puuid = False
    time_unit_ms = 1
    endpoints = {
        Endpoint.SUMMONER: SUMMONER_BY_NAME,
        Endpoint.MATCH_HISTORY: "/lol/match/v4/matchlists/by-account/{accountId}",
        Endpoint.MATCH_DETAILS: "/lol/match/v4/matches/{matchId}",
    }
    match_list_file = "old-matches.json"
    match_details_file = "old-match-details.json"
    season_details_pattern = "match-details-*.json"

    def routing_value(self, endpoint: Endpoint, region: Region) -> str:
        return region.platform_route

    def storage_route(self, region: Region) -> str:
        return region.platform_route

    def history_path_params(self, player: PlayerIdentity) -> Dict[str, str]:
        return {"accountId": player.account_id}

    def page_query(self, begin_index: int, count: int) -> Dict[str, Any]:
        return {"beginIndex": begin_index, "endIndex": begin_index + count}

    def window_query(self, start_time: int, end_time: int) -> Dict[str, Any]:
        return {"beginTime": start_time, "endTime": end_time}

    def normalise_match_ids(self, stored: List[Any]) -> List[MatchId]:
        return [entry["gameId"] if isinstance(entry, dict) else entry for entry in stored]

    def parse_match_ids(self, payload: Any) -> List[MatchId]:
        return [m['gameId'] for m in (payload or {}).get('matches', [])]

    def parse_match(self, payload: Dict[str, Any]) -> Match:
        identities = {
            pi.get('participantId'): pi.get('player', {})
            for pi in payload.get('participantIdentities', [])
        }
        participants = [
            self._parse_participant(p, identities.get(p.get('participantId'), {}))
            for p in payload.get('participants', [])
        ]
        creation = payload.get('gameCreation', 0)
        duration = payload.get('gameDuration', 0)
        return Match(
            match_id=str(payload.get('gameId', '')),
            queue_id=payload.get('queueId', 0),
            season_id=payload.get('seasonId'),
            game_creation=creation,
            game_end_timestamp=creation + duration * 1000,
            game_duration=duration,
            game_version=payload.get('gameVersion', ''),
            participants=participants,
        )

    @staticmethod
    def _parse_runes(stats: dict) -> List[RuneSelection]:
        runes = []
        for slot in range(PERK_SLOTS):
            perk = stats.get(f'perk{slot}')
            if not perk:
                continue
            runes.append(RuneSelection(
                rune_id=perk,
                var1=stats.get(f'perk{slot}Var1', 0),
                var2=stats.get(f'perk{slot}Var2', 0),
                var3=stats.get(f'perk{slot}Var3', 0),
            ))
        return runes

    def _parse_participant(self, p_data: dict, identity: dict) -> Participant:
        stats = p_data.get('stats', {})
        return Participant(
            participant_id=p_data.get('participantId', 0),
            account_id=identity.get('accountId'),
            summoner_name=identity.get('summonerName', ''),
            team_id=p_data.get('teamId', 0),
            champion_id=p_data.get('championId', 0),
            win=bool(stats.get('win', False)),
            kills=stats.get('kills', 0),
            deaths=stats.get('deaths', 0),
            assists=stats.get('assists', 0),
            total_damage_dealt_to_champions=stats.get('totalDamageDealtToChampions', 0),
            runes=self._parse_runes(stats),
        )
