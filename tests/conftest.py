"""
Pytest fixtures and builders shared by the test suite.

Builders produce raw provider payloads (match v5 / legacy v4) and parsed
Match entities for one tracked player. Import the constants and builder
functions from here instead of redefining them per file.
"""

from typing import Dict, List, Optional

import pytest

from domain.entities import Match, Participant, PlayerIdentity, RuneSelection
from domain.enums import Region
from infrastructure.providers import LegacyMatchV4Profile, MatchV5Profile
from infrastructure.repositories import MatchCacheRepository


# =============================================================================
# CENTRALIZED CONSTANTS
# =============================================================================

PUUID = "puuid-tracked"
ACCOUNT_ID = "account-tracked"
OTHER_PUUID = "puuid-other"
OTHER_ACCOUNT_ID = "account-other"

BASE_CREATION_MS = 1_700_000_000_000
"""2023-11-14, well after the preseason boundary."""

HOUR_MS = 60 * 60 * 1000


def make_player(region: Region = Region.EUW1) -> PlayerIdentity:
    return PlayerIdentity(region=region, account_id=ACCOUNT_ID, puuid=PUUID, summoner_name="Tester")


# =============================================================================
# RAW PAYLOADS
# =============================================================================


def v5_participant(
    puuid: str,
    *,
    participant_id: int = 1,
    champion_id: int = 1,
    win: bool = True,
    damage: int = 20000,
    runes: Optional[List[tuple]] = None,
) -> Dict:
    selections = [
        {"perk": rune_id, "var1": v1, "var2": v2, "var3": v3}
        for rune_id, v1, v2, v3 in (runes or [])
    ]
    return {
        "participantId": participant_id,
        "puuid": puuid,
        "riotIdGameName": "Tester" if puuid == PUUID else "Opponent",
        "teamId": 100 if participant_id <= 5 else 200,
        "championId": champion_id,
        "win": win,
        "kills": 5,
        "deaths": 2,
        "assists": 7,
        "totalDamageDealtToChampions": damage,
        "perks": {"styles": [{"description": "primaryStyle", "selections": selections}]},
    }


def v5_match_payload(
    match_id: str,
    *,
    champion_id: int = 1,
    win: bool = True,
    creation: int = BASE_CREATION_MS,
    duration: int = 1800,
    end: Optional[int] = None,
    queue_id: int = 420,
    damage: int = 20000,
    runes: Optional[List[tuple]] = None,
    game_version: str = "13.22.541.3456",
) -> Dict:
    info = {
        "gameCreation": creation,
        "gameDuration": duration,
        "gameVersion": game_version,
        "queueId": queue_id,
        "platformId": "EUW1",
        "participants": [
            v5_participant(PUUID, champion_id=champion_id, win=win, damage=damage, runes=runes),
            v5_participant(OTHER_PUUID, participant_id=6, champion_id=99, win=not win),
        ],
    }
    if end is not None:
        info["gameEndTimestamp"] = end
    return {"metadata": {"matchId": match_id, "participants": [PUUID, OTHER_PUUID]}, "info": info}


def v4_match_payload(
    game_id: int,
    *,
    champion_id: int = 1,
    win: bool = True,
    creation: int = BASE_CREATION_MS,
    duration: int = 1800,
    queue_id: int = 420,
    season_id: int = 13,
    damage: int = 20000,
) -> Dict:
    return {
        "gameId": game_id,
        "queueId": queue_id,
        "seasonId": season_id,
        "gameCreation": creation,
        "gameDuration": duration,
        "gameVersion": "9.23.299.3089",
        "participantIdentities": [
            {"participantId": 1, "player": {"accountId": ACCOUNT_ID, "summonerName": "Tester"}},
            {"participantId": 2, "player": {"accountId": OTHER_ACCOUNT_ID, "summonerName": "Opponent"}},
        ],
        "participants": [
            {
                "participantId": 1,
                "teamId": 100,
                "championId": champion_id,
                "stats": {
                    "win": win,
                    "kills": 3,
                    "deaths": 4,
                    "assists": 5,
                    "totalDamageDealtToChampions": damage,
                    "perk0": 8112,
                    "perk0Var1": 1200,
                    "perk0Var2": 10,
                    "perk0Var3": 0,
                },
            },
            {"participantId": 2, "teamId": 200, "championId": 55, "stats": {"win": not win}},
        ],
    }


# =============================================================================
# ENTITIES
# =============================================================================


def make_match(
    match_id: str,
    *,
    champion_id: int = 1,
    win: bool = True,
    queue_id: int = 420,
    season_id: Optional[float] = 21,
    creation: int = BASE_CREATION_MS,
    damage: int = 20000,
    runes: Optional[List[RuneSelection]] = None,
    include_player: bool = True,
) -> Match:
    participants = [
        Participant(participant_id=6, puuid=OTHER_PUUID, account_id=OTHER_ACCOUNT_ID, champion_id=99, win=not win),
    ]
    if include_player:
        participants.insert(0, Participant(
            participant_id=1,
            puuid=PUUID,
            account_id=ACCOUNT_ID,
            champion_id=champion_id,
            win=win,
            total_damage_dealt_to_champions=damage,
            runes=list(runes or []),
        ))
    return Match(
        match_id=match_id,
        queue_id=queue_id,
        season_id=season_id,
        game_creation=creation,
        game_end_timestamp=creation + 1800 * 1000,
        game_duration=1800,
        participants=participants,
    )


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def player():
    return make_player()


@pytest.fixture
def v5_profile():
    return MatchV5Profile()


@pytest.fixture
def v4_profile():
    return LegacyMatchV4Profile()


@pytest.fixture
def cache(tmp_path, v5_profile):
    """Match cache for the current match API under a temporary data dir."""
    return MatchCacheRepository(tmp_path / "summoner-data", v5_profile)
