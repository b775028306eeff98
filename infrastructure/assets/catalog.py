"""Id/name lookups built from the downloaded asset files."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

from domain.enums import (
    PRESEASON_ID,
    PRESEASON_NAME,
    MatchProperty,
    Queue,
    SeasonId,
    fallback_season_name,
)
from domain.errors import UnknownNameError
from .asset_provider import CHAMPIONS_FILE, RUNES_FILE, SEASONS_FILE


def _read(path: Path, default: Any) -> Any:
    if not path.exists():
        return default
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


@dataclass
class AssetCatalog:
    """Translates season, champion, rune and queue ids to names and back."""

    season_names: Dict[SeasonId, str] = field(default_factory=dict)
    season_ids: Dict[str, SeasonId] = field(default_factory=dict)
    champion_names: Dict[int, str] = field(default_factory=dict)
    champion_ids: Dict[str, int] = field(default_factory=dict)
    rune_names: Dict[int, str] = field(default_factory=dict)
    rune_ids: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def load(cls, assets_dir: Path) -> 'AssetCatalog':
        """Build the lookups; a missing file leaves its lookups empty."""
        assets_dir = Path(assets_dir)
        catalog = cls()

        for entry in _read(assets_dir / SEASONS_FILE, []):
            catalog.add_season(entry["id"], entry["season"])
        # Seasons after the last one in the table, as derived from game versions.
        last_id = 15 + 2 * (datetime.now(timezone.utc).year - 2020)
        for season_id in range(15, last_id + 1):
            if season_id not in catalog.season_names:
                catalog.add_season(season_id, fallback_season_name(season_id))
        catalog.add_season(PRESEASON_ID, PRESEASON_NAME)

        champions = _read(assets_dir / CHAMPIONS_FILE, {}).get("data", {})
        for champ in champions.values():
            champion_id = int(champ["key"])
            catalog.champion_names[champion_id] = champ["name"]
            catalog.champion_ids[champ["name"].lower()] = champion_id
            catalog.champion_ids[champ["id"].lower()] = champion_id

        for style in _read(assets_dir / RUNES_FILE, []):
            for slot in style.get("slots", []):
                for rune in slot.get("runes", []):
                    catalog.rune_names[rune["id"]] = rune["name"]
                    catalog.rune_ids[rune["name"].lower()] = rune["id"]
        return catalog

    def add_season(self, season_id: SeasonId, name: str) -> None:
        self.season_names[season_id] = name
        self.season_ids[name.upper()] = season_id

    # ── id → name ──────────────────────────────────────────────────────

    def season_name(self, season_id: SeasonId) -> str:
        return self.season_names.get(season_id) or fallback_season_name(season_id)

    def champion_name(self, champion_id: int) -> str:
        return self.champion_names.get(champion_id, str(champion_id))

    def rune_name(self, rune_id: int) -> str:
        return self.rune_names.get(rune_id, str(rune_id))

    def display_name(self, prop: MatchProperty, value: Any) -> str:
        """Name of a grouping key value as shown in reports."""
        if prop is MatchProperty.CHAMPION:
            return self.champion_name(value)
        if prop is MatchProperty.SEASON:
            return self.season_name(value)
        if prop is MatchProperty.QUEUE:
            return value.queue_name if isinstance(value, Queue) else str(value)
        raise ValueError(f"Unknown match property '{prop}'")

    # ── name → id ──────────────────────────────────────────────────────

    def season_id(self, name: str) -> SeasonId:
        try:
            return self.season_ids[name.strip().upper()]
        except KeyError:
            raise UnknownNameError("season", name) from None

    def champion_id(self, name: str) -> int:
        key = name.strip().lower()
        if key in self.champion_ids:
            return self.champion_ids[key]
        if key.isdigit():
            return int(key)
        raise UnknownNameError("champion", name)

    @staticmethod
    def queue(name: str) -> Queue:
        queue = Queue.from_name(name)
        if queue is None:
            raise UnknownNameError("queue", name)
        return queue
