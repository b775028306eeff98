"""Static reference data: seasons table and Data Dragon champion/rune tables."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)

SEASONS_URL = "http://static.developer.riotgames.com/docs/lol/seasons.json"
DDRAGON_URL = "https://ddragon.leagueoflegends.com"

SEASONS_FILE = "seasons.json"
CHAMPIONS_FILE = "champion.json"
RUNES_FILE = "runesReforged.json"
MANIFEST_FILE = "manifest.json"


class AssetProvider:
    """Downloads the asset files into ``assets_dir``.

    Data Dragon files are only fetched again when the latest published
    version differs from the one recorded in the local manifest.
    """

    def __init__(
        self,
        assets_dir: Path,
        *,
        language: str = "en_US",
        timeout: float = 60,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        progress_callback=None,
    ):
        self.assets_dir = Path(assets_dir)
        self.language = language
        self.timeout = timeout
        self._transport = transport
        self._progress_cb = progress_callback

    def _report(self, message: str) -> None:
        if self._progress_cb:
            self._progress_cb(message)

    def local_version(self) -> Optional[str]:
        path = self.assets_dir / MANIFEST_FILE
        if not path.exists():
            return None
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f).get("version")

    async def refresh(self) -> Optional[str]:
        """Bring the asset files up to date; returns the Data Dragon version on disk.

        Network failures leave the existing files in place. Reports then show
        raw ids where a name is missing.
        """
        self.assets_dir.mkdir(parents=True, exist_ok=True)
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                await self._download_seasons(client)
            except (httpx.HTTPError, ValueError) as exc:
                logger.warning(f"Could not download seasons table: {exc}")
            try:
                return await self._download_data_dragon(client)
            except (httpx.HTTPError, ValueError) as exc:
                logger.warning(f"Could not update Data Dragon: {exc}")
                return self.local_version()

    async def _get_json(self, client: httpx.AsyncClient, url: str) -> Any:
        response = await client.get(url)
        response.raise_for_status()
        return response.json()

    async def _download_seasons(self, client: httpx.AsyncClient) -> None:
        data = await self._get_json(client, SEASONS_URL)
        self._write(SEASONS_FILE, data)

    async def _download_data_dragon(self, client: httpx.AsyncClient) -> Optional[str]:
        versions = await self._get_json(client, f"{DDRAGON_URL}/api/versions.json")
        if not versions:
            return self.local_version()
        latest = versions[0]
        local = self.local_version()
        if local == latest:
            self._report(f"Data Dragon is up to date (version {latest}).")
            return latest

        self._report(f"Downloading latest Data Dragon ({local} -> {latest})...")
        base = f"{DDRAGON_URL}/cdn/{latest}/data/{self.language}"
        for name in (CHAMPIONS_FILE, RUNES_FILE):
            self._write(name, await self._get_json(client, f"{base}/{name}"))
        # Manifest last: an interrupted download is retried on the next run.
        self._write(MANIFEST_FILE, {"version": latest})
        self._report("Finished downloading Data Dragon.")
        logger.info(f"Data Dragon updated to {latest}")
        return latest

    def _write(self, name: str, data: Any) -> None:
        path = self.assets_dir / name
        tmp_path = path.with_name(path.name + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=4)
        os.replace(tmp_path, path)
