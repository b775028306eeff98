"""Tests for the sync use case and player resolution."""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from application.use_cases import SyncMatchHistoryUseCase, load_matches, read_player_info, resolve_player
from domain.enums import Region
from tests.conftest import ACCOUNT_ID, BASE_CREATION_MS, PUUID, v5_match_payload


class TestResolvePlayer:

    @pytest.mark.asyncio
    async def test_ids_from_info_file_skip_the_lookup(self, v5_profile):
        api = MagicMock()
        api.get_summoner_by_name = AsyncMock()
        info = {"platform": "euw1", "accountId": ACCOUNT_ID, "puuid": PUUID}

        player = await resolve_player(api, v5_profile, info)

        assert player.region is Region.EUW1
        assert player.puuid == PUUID
        api.get_summoner_by_name.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_name_is_looked_up(self, v5_profile):
        api = MagicMock()
        api.get_summoner_by_name = AsyncMock(return_value={
            "accountId": ACCOUNT_ID, "puuid": PUUID, "name": "Tester", "summonerLevel": 312,
        })

        player = await resolve_player(api, v5_profile, {"platform": "NA1", "name": "Tester"})

        api.get_summoner_by_name.assert_awaited_once_with("Tester")
        assert player.region is Region.NA1
        assert player.account_id == ACCOUNT_ID
        assert player.summoner_level == 312

    @pytest.mark.asyncio
    async def test_account_id_alone_is_enough_for_legacy_profile(self, v4_profile):
        player = await resolve_player(None, v4_profile, {"platform": "euw1", "accountId": ACCOUNT_ID})

        assert player.account_id == ACCOUNT_ID
        assert player.puuid is None

    @pytest.mark.asyncio
    async def test_neither_name_nor_ids_is_rejected(self, v5_profile):
        with pytest.raises(ValueError):
            await resolve_player(None, v5_profile, {"platform": "euw1"})


def test_read_player_info_requires_platform(tmp_path):
    path = tmp_path / "summoner-info.json"
    path.write_text(json.dumps({"name": "Tester"}), encoding="utf-8")

    with pytest.raises(ValueError):
        read_player_info(path)


def test_load_matches_skips_ids_without_details(v5_profile):
    details = {"B": v5_match_payload("B"), "A": v5_match_payload("A")}

    matches = load_matches(v5_profile, ["C", "B", "A"], details)

    assert [m.match_id for m in matches] == ["B", "A"]


class TestSyncMatchHistoryUseCase:

    def make_use_case(self, cache, profile):
        sync = MagicMock()
        sync.fetch_missing_details = AsyncMock(side_effect=lambda player, ids, details, token: details)
        sync.download_match_ids = AsyncMock(side_effect=lambda player, ids, since, token: ["NEW"] + list(ids))
        return SyncMatchHistoryUseCase(None, cache, profile, sync_service=sync), sync

    def test_since_is_one_unit_past_newest_cached_end(self, cache, v5_profile):
        use_case, _ = self.make_use_case(cache, v5_profile)
        end_ms = BASE_CREATION_MS + 1_800_000 + 999
        details = {
            "B": v5_match_payload("B", end=end_ms),
            "A": v5_match_payload("A", end=BASE_CREATION_MS),
        }

        since = use_case.since_timestamp(["C", "B", "A"], details)

        assert since == end_ms // 1000 + 1

    def test_since_uses_milliseconds_for_legacy_profile(self, cache, v4_profile):
        from tests.conftest import v4_match_payload

        use_case, _ = self.make_use_case(cache, v4_profile)
        details = {"7": v4_match_payload(7, creation=10_000, duration=60)}

        assert use_case.since_timestamp([7], details) == 70_001

    def test_no_details_means_full_backfill(self, cache, v5_profile):
        use_case, _ = self.make_use_case(cache, v5_profile)

        assert use_case.since_timestamp(["A"], {}) is None
        assert use_case.since_timestamp([], {}) is None

    @pytest.mark.asyncio
    async def test_execute_order(self, cache, player, v5_profile):
        payload = v5_match_payload("A", end=BASE_CREATION_MS)
        cache.save_match_ids(player, ["A"])
        cache.save_match_details(player, {"A": payload})
        use_case, sync = self.make_use_case(cache, v5_profile)

        ids, details = await use_case.execute(player)

        assert ids == ["NEW", "A"]
        assert details == {"A": payload}
        first, second = sync.fetch_missing_details.await_args_list
        assert first.args[1] == ["A"]
        assert second.args[1] == ["NEW", "A"]
        download = sync.download_match_ids.await_args
        assert download.args[2] == BASE_CREATION_MS // 1000 + 1
