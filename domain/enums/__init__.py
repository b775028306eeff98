"""Domain enumerations."""
from .region import Region
from .queue import Queue
from .match_property import MatchProperty
from .endpoint import Endpoint
from .season import (
    SeasonId,
    LAST_FULL_SEASON_ID,
    PRESEASON_ID,
    PRESEASON_NAME,
    resolve_season,
    season_from_game_version,
    fallback_season_name,
)

__all__ = [
    'Region',
    'Queue',
    'MatchProperty',
    'Endpoint',
    'SeasonId',
    'LAST_FULL_SEASON_ID',
    'PRESEASON_ID',
    'PRESEASON_NAME',
    'resolve_season',
    'season_from_game_version',
    'fallback_season_name',
]
