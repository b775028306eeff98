"""Match v5 profile: puuid-keyed history, regional routing, seconds windows."""
import logging
from typing import Any, Dict, List

from domain.entities import Match, Participant, PlayerIdentity, RuneSelection
from domain.enums import Endpoint, Region, season_from_game_version
from domain.interfaces import MatchId, ProviderProfile

logger = logging.getLogger(__name__)

SUMMONER_BY_NAME = "/lol/summoner/v4/summoners/by-name/{summonerName}"

# Upper bound of the ids endpoint; without it a window returns at most 20 ids.
MAX_IDS_PER_REQUEST = 100


class MatchV5Profile(ProviderProfile):
    """Current match API."""

    name = "match-v5"
    time_unit_ms = 1000
    endpoints = {
        Endpoint.SUMMONER: SUMMONER_BY_NAME,
        Endpoint.MATCH_HISTORY: "/lol/match/v5/matches/by-puuid/{puuid}/ids",
        Endpoint.MATCH_DETAILS: "/lol/match/v5/matches/{matchId}",
    }
    match_list_file = "matches.json"
    match_details_file = "match-details.json"

    def routing_value(self, endpoint: Endpoint, region: Region) -> str:
        if endpoint is Endpoint.SUMMONER:
            return region.platform_route
        return region.regional_route

    def storage_route(self, region: Region) -> str:
        return region.regional_route

    def history_path_params(self, player: PlayerIdentity) -> Dict[str, str]:
        if not player.puuid:
            raise ValueError("match v5 needs the player's puuid")
        return {"puuid": player.puuid}

    def page_query(self, begin_index: int, count: int) -> Dict[str, Any]:
        return {"start": begin_index, "count": count}

    def window_query(self, start_time: int, end_time: int) -> Dict[str, Any]:
        return {"startTime": start_time, "endTime": end_time, "count": MAX_IDS_PER_REQUEST}

    def parse_match_ids(self, payload: Any) -> List[MatchId]:
        return list(payload or [])

    def parse_match(self, payload: Dict[str, Any]) -> Match:
        metadata = payload.get('metadata', {})
        info = payload['info']

        creation = info.get('gameCreation', 0)
        duration = info.get('gameDuration', 0)
        end = info.get('gameEndTimestamp') or creation + duration * 1000
        version = info.get('gameVersion', '')
        season_id = info.get('seasonId')
        if season_id is None:
            season_id = season_from_game_version(version)

        match_id = metadata.get('matchId') or f"{info.get('platformId', '')}_{info.get('gameId', 0)}"
        return Match(
            match_id=match_id,
            queue_id=info.get('queueId', 0),
            season_id=season_id,
            game_creation=creation,
            game_end_timestamp=end,
            game_duration=duration,
            game_version=version,
            participants=[self._parse_participant(p) for p in info.get('participants', [])],
        )

    @staticmethod
    def _parse_runes(p_data: dict) -> List[RuneSelection]:
        runes = []
        for style in p_data.get('perks', {}).get('styles', []):
            for sel in style.get('selections', []):
                runes.append(RuneSelection(
                    rune_id=sel.get('perk', 0),
                    var1=sel.get('var1', 0),
                    var2=sel.get('var2', 0),
                    var3=sel.get('var3', 0),
                ))
        return runes

    def _parse_participant(self, p_data: dict) -> Participant:
        return Participant(
            participant_id=p_data.get('participantId', 0),
            puuid=p_data.get('puuid'),
            summoner_name=p_data.get('riotIdGameName') or p_data.get('summonerName', ''),
            team_id=p_data.get('teamId', 0),
            champion_id=p_data.get('championId', 0),
            win=bool(p_data.get('win', False)),
            kills=p_data.get('kills', 0),
            deaths=p_data.get('deaths', 0),
            assists=p_data.get('assists', 0),
            total_damage_dealt_to_champions=p_data.get('totalDamageDealtToChampions', 0),
            runes=self._parse_runes(p_data),
        )
