"""Tests for asset downloads and the id/name catalog."""

import json

import httpx
import pytest

from domain.enums import MatchProperty, PRESEASON_ID, Queue
from domain.errors import UnknownNameError
from infrastructure.assets import AssetCatalog, AssetProvider

SEASONS = [{"id": 12, "season": "PRESEASON 2019"}, {"id": 13, "season": "SEASON 2019"}]
CHAMPIONS = {
    "data": {
        "Annie": {"key": "1", "id": "Annie", "name": "Annie"},
        "MonkeyKing": {"key": "62", "id": "MonkeyKing", "name": "Wukong"},
    }
}
RUNES = [{"id": 8100, "slots": [{"runes": [{"id": 8112, "name": "Electrocute"}]}]}]


def write_assets(directory):
    directory.mkdir(parents=True, exist_ok=True)
    (directory / "seasons.json").write_text(json.dumps(SEASONS), encoding="utf-8")
    (directory / "champion.json").write_text(json.dumps(CHAMPIONS), encoding="utf-8")
    (directory / "runesReforged.json").write_text(json.dumps(RUNES), encoding="utf-8")


class TestAssetCatalog:

    @pytest.fixture
    def catalog(self, tmp_path):
        write_assets(tmp_path)
        return AssetCatalog.load(tmp_path)

    def test_names_from_files(self, catalog):
        assert catalog.season_name(13) == "SEASON 2019"
        assert catalog.champion_name(62) == "Wukong"
        assert catalog.rune_name(8112) == "Electrocute"

    def test_unknown_ids_fall_back_to_the_id(self, catalog):
        assert catalog.champion_name(9999) == "9999"
        assert catalog.rune_name(1) == "1"

    def test_seasons_missing_from_the_table_get_names(self, catalog):
        assert catalog.season_name(PRESEASON_ID) == "PRESEASON 2020"
        assert catalog.season_name(21) == "SEASON 2023"
        assert catalog.season_id("season 2023") == 21
        assert catalog.season_id("PRESEASON 2020") == PRESEASON_ID

    def test_generated_seasons_do_not_reuse_the_preseason_name(self, catalog):
        assert 14 not in catalog.season_names
        assert len(set(catalog.season_names.values())) == len(catalog.season_names)

    def test_champion_lookup_by_name_key_or_id(self, catalog):
        assert catalog.champion_id("wukong") == 62
        assert catalog.champion_id("MonkeyKing") == 62
        assert catalog.champion_id("266") == 266
        with pytest.raises(UnknownNameError):
            catalog.champion_id("Nobody")

    def test_queue_lookup(self, catalog):
        assert catalog.queue("summoners rift") is Queue.SUMMONERS_RIFT
        with pytest.raises(UnknownNameError):
            catalog.queue("Dominion Deluxe")

    def test_display_name(self, catalog):
        assert catalog.display_name(MatchProperty.CHAMPION, 1) == "Annie"
        assert catalog.display_name(MatchProperty.QUEUE, Queue.ARENA) == "Arena"
        assert catalog.display_name(MatchProperty.SEASON, 13) == "SEASON 2019"

    def test_missing_files_leave_lookups_empty(self, tmp_path):
        catalog = AssetCatalog.load(tmp_path / "nothing-here")

        assert catalog.champion_names == {}
        assert catalog.champion_name(1) == "1"
        assert catalog.season_name(15) == "SEASON 2020"


class FakeAssetServer:
    """Answers the asset URLs and records which paths were requested."""

    def __init__(self, version="14.1.1", seasons_status=200):
        self.version = version
        self.seasons_status = seasons_status
        self.paths = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.paths.append(path)
        if path.endswith("/seasons.json"):
            return httpx.Response(self.seasons_status, json=SEASONS)
        if path == "/api/versions.json":
            return httpx.Response(200, json=[self.version, "13.24.1"])
        if path.endswith("/champion.json"):
            return httpx.Response(200, json=CHAMPIONS)
        if path.endswith("/runesReforged.json"):
            return httpx.Response(200, json=RUNES)
        return httpx.Response(404, json={})


def make_provider(tmp_path, server, messages=None):
    return AssetProvider(
        tmp_path / "assets",
        transport=httpx.MockTransport(server),
        progress_callback=messages.append if messages is not None else None,
    )


class TestAssetProvider:

    @pytest.mark.asyncio
    async def test_first_refresh_downloads_everything(self, tmp_path):
        server = FakeAssetServer()
        provider = make_provider(tmp_path, server)

        version = await provider.refresh()

        assert version == "14.1.1"
        assert provider.local_version() == "14.1.1"
        assert "/cdn/14.1.1/data/en_US/champion.json" in server.paths
        catalog = AssetCatalog.load(tmp_path / "assets")
        assert catalog.champion_name(1) == "Annie"

    @pytest.mark.asyncio
    async def test_same_version_skips_data_dragon_downloads(self, tmp_path):
        server = FakeAssetServer()
        messages = []
        provider = make_provider(tmp_path, server, messages)
        await provider.refresh()
        server.paths.clear()

        await provider.refresh()

        assert not any(p.endswith("/champion.json") for p in server.paths)
        assert "up to date" in messages[-1]

    @pytest.mark.asyncio
    async def test_new_version_is_downloaded(self, tmp_path):
        server = FakeAssetServer()
        provider = make_provider(tmp_path, server)
        await provider.refresh()

        server.version = "14.2.1"
        assert await provider.refresh() == "14.2.1"
        assert "/cdn/14.2.1/data/en_US/runesReforged.json" in server.paths

    @pytest.mark.asyncio
    async def test_seasons_failure_is_not_fatal(self, tmp_path):
        server = FakeAssetServer(seasons_status=503)
        provider = make_provider(tmp_path, server)

        assert await provider.refresh() == "14.1.1"
        assert not (tmp_path / "assets" / "seasons.json").exists()

    @pytest.mark.asyncio
    async def test_network_failure_keeps_local_version(self, tmp_path):
        server = FakeAssetServer()
        provider = make_provider(tmp_path, server)
        await provider.refresh()

        def _offline(request):
            raise httpx.ConnectError("offline", request=request)

        offline = make_provider(tmp_path, _offline)
        assert await offline.refresh() == "14.1.1"
