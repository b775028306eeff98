"""Tests for season id handling."""

import pytest

from domain.enums import (
    LAST_FULL_SEASON_ID,
    PRESEASON_ID,
    fallback_season_name,
    resolve_season,
    season_from_game_version,
)

BOUNDARY_MS = 1_574_208_000_000


class TestResolveSeason:

    def test_last_full_season_after_boundary_is_preseason(self):
        assert resolve_season(LAST_FULL_SEASON_ID, BOUNDARY_MS + 1) == PRESEASON_ID

    def test_boundary_itself_is_not_remapped(self):
        assert resolve_season(LAST_FULL_SEASON_ID, BOUNDARY_MS) == LAST_FULL_SEASON_ID

    def test_other_seasons_are_untouched(self):
        assert resolve_season(11, BOUNDARY_MS + 1) == 11
        assert resolve_season(None, BOUNDARY_MS + 1) is None


@pytest.mark.parametrize("version, season_id", [
    ("10.25.348.1797", 15),
    ("13.22.541.3456", 21),
    ("14.1.555.5555", 23),
    ("25.S1.3.657.8744", 25),
    ("9.23.299.3089", None),
    ("", None),
    (None, None),
])
def test_season_from_game_version(version, season_id):
    assert season_from_game_version(version) == season_id


@pytest.mark.parametrize("season_id, name", [
    (15, "SEASON 2020"),
    (16, "PRESEASON 2021"),
    (21, "SEASON 2023"),
    (PRESEASON_ID, "PRESEASON 2020"),
    (9, "SEASON 9"),
])
def test_fallback_season_name(season_id, name):
    assert fallback_season_name(season_id) == name
