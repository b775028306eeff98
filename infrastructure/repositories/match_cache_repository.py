"""JSON file cache for match ids and match details."""
import json
import logging
import os
from pathlib import Path
from typing import Any, List

from domain.entities import PlayerIdentity
from domain.interfaces import IMatchCache, MatchDetailsMap, MatchId, ProviderProfile

logger = logging.getLogger(__name__)


class MatchCacheRepository(IMatchCache):
    """Stores one id list and one detail map per (player, region) as JSON files.

    Layout: ``{data_dir}/{route}/{account_id}/{file}``, where route and file
    names come from the provider profile so that caches of different API
    versions live side by side. Every save rewrites the whole document via a
    temporary sibling file; there is no partial write and no file locking
    (single writer).
    """

    def __init__(self, data_dir: Path, profile: ProviderProfile):
        """
        Initialize the cache repository.

        Args:
            data_dir: Root directory of all cached player data
            profile: Provider profile deciding routes and file names
        """
        self.data_dir = Path(data_dir)
        self.profile = profile

    # ── Paths ──────────────────────────────────────────────────────────

    def player_dir(self, player: PlayerIdentity) -> Path:
        return self.data_dir / self.profile.storage_route(player.region) / player.account_id

    def match_list_path(self, player: PlayerIdentity) -> Path:
        return self.player_dir(player) / self.profile.match_list_file

    def match_details_path(self, player: PlayerIdentity) -> Path:
        return self.player_dir(player) / self.profile.match_details_file

    # ── Match ids ──────────────────────────────────────────────────────

    def load_match_ids(self, player: PlayerIdentity) -> List[MatchId]:
        return self.profile.normalise_match_ids(self._read_json(self.match_list_path(player), []))

    def save_match_ids(self, player: PlayerIdentity, match_ids: List[MatchId]) -> None:
        self._write_json(self.match_list_path(player), list(match_ids), indent=4)
        logger.info(f"Wrote {len(match_ids)} match ids to disk")

    # ── Match details ──────────────────────────────────────────────────

    def load_match_details(self, player: PlayerIdentity) -> MatchDetailsMap:
        """Detail map, with any per-season legacy files merged underneath."""
        details: MatchDetailsMap = {}
        pattern = self.profile.season_details_pattern
        if pattern and self.player_dir(player).is_dir():
            for path in sorted(self.player_dir(player).glob(pattern)):
                details.update(self._read_json(path, {}))
        details.update(self._read_json(self.match_details_path(player), {}))
        return details

    def save_match_details(self, player: PlayerIdentity, details: MatchDetailsMap) -> None:
        self._write_json(self.match_details_path(player), details, indent=None)
        logger.info(f"Wrote {len(details)} match details to disk")

    # ── Helpers ────────────────────────────────────────────────────────

    @staticmethod
    def _read_json(path: Path, default: Any) -> Any:
        """Absent file means empty collection; anything else propagates."""
        if not path.exists():
            return default
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)

    @staticmethod
    def _write_json(path: Path, data: Any, *, indent: Any) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_name(path.name + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=indent)
        os.replace(tmp_path, path)
