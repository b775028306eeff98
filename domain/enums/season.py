"""Season ids and the preseason boundary rule."""
from typing import Optional, Union

SeasonId = Union[int, float]

# Matches played between the end of SEASON 2019 and the start of SEASON 2020
# are still tagged with season 13 by the provider.
LAST_FULL_SEASON_ID: int = 13
PRESEASON_ID: float = 13.5
PRESEASON_NAME: str = "PRESEASON 2020"
LAST_FULL_SEASON_END_MS: int = 1_574_208_000_000  # 2019-11-20T00:00:00Z

# Season ids are two per year (preseason, season) from 2014 on; 2020 is 15.
_FIRST_YEAR_SEASON = (2020, 15)


def resolve_season(season_id: Optional[SeasonId], game_creation_ms: int) -> Optional[SeasonId]:
    """Apply the preseason remap to a provider season id."""
    if season_id is None:
        return None
    if season_id == LAST_FULL_SEASON_ID and game_creation_ms > LAST_FULL_SEASON_END_MS:
        return PRESEASON_ID
    return season_id


def season_from_game_version(game_version: str) -> Optional[int]:
    """Derive a season id from a patch string like '13.24.551.5520'.

    Patches 10.x-14.x map to the years 2020-2024, patches numbered after the
    year (25.x and later) map to that year.
    """
    try:
        major = int(game_version.split(".", 1)[0])
    except (ValueError, AttributeError):
        return None
    if 10 <= major <= 14:
        year = 2010 + major
    elif major >= 25:
        year = 2000 + major
    else:
        return None
    base_year, base_id = _FIRST_YEAR_SEASON
    return base_id + 2 * (year - base_year)


def fallback_season_name(season_id: SeasonId) -> str:
    """Name for ids the seasons table does not know."""
    if season_id == PRESEASON_ID:
        return PRESEASON_NAME
    base_year, base_id = _FIRST_YEAR_SEASON
    if isinstance(season_id, int) and season_id >= base_id - 1:
        offset = season_id - base_id
        if offset % 2 == 0:
            return f"SEASON {base_year + offset // 2}"
        return f"PRESEASON {base_year + (offset + 1) // 2}"
    return f"SEASON {season_id}"
