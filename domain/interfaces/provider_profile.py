"""Provider profile interface.

The Riot API has shipped two incompatible match APIs (legacy match v4,
keyed by account id, and match v5, keyed by puuid). The sync engine is
written once against this interface; each API version supplies a profile.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Union

from ..entities import Match, PlayerIdentity
from ..enums import Endpoint, Region

MatchId = Union[str, int]


class ProviderProfile(ABC):
    """Capability set of one match API version."""

    #: Short label used in logs.
    name: str = ""

    #: Whether the history endpoint is keyed by puuid (else by account id).
    requires_puuid: bool = True

    #: Length of one unit of the windowed-query timestamps, in milliseconds.
    time_unit_ms: int = 1000

    #: URL path templates with ``{param}`` placeholders.
    endpoints: Dict[Endpoint, str] = {}

    #: File names of the two cache documents.
    match_list_file: str = "matches.json"
    match_details_file: str = "match-details.json"

    #: Glob of extra per-season detail files merged in on load, if any.
    season_details_pattern: Optional[str] = None

    def url_template(self, endpoint: Endpoint) -> str:
        return self.endpoints[endpoint]

    def normalise_match_ids(self, stored: List[Any]) -> List[MatchId]:
        """Ids as read from the match-list file."""
        return list(stored)

    @abstractmethod
    def routing_value(self, endpoint: Endpoint, region: Region) -> str:
        """Host prefix (platform or regional route) serving ``endpoint``."""

    @abstractmethod
    def storage_route(self, region: Region) -> str:
        """Directory name the cache for ``region`` lives under."""

    @abstractmethod
    def history_path_params(self, player: PlayerIdentity) -> Dict[str, str]:
        """Path parameters identifying the player on the match-history endpoint."""

    @abstractmethod
    def page_query(self, begin_index: int, count: int) -> Dict[str, Any]:
        """Query parameters for an offset page."""

    @abstractmethod
    def window_query(self, start_time: int, end_time: int) -> Dict[str, Any]:
        """Query parameters for a time window, in profile time units."""

    @abstractmethod
    def parse_match_ids(self, payload: Any) -> List[MatchId]:
        """Extract the ordered id list from a match-history response."""

    @abstractmethod
    def parse_match(self, payload: Dict[str, Any]) -> Match:
        """Convert a raw match detail document into a Match entity."""

    def match_end_time(self, payload: Dict[str, Any]) -> int:
        """End of the match in Unix milliseconds."""
        return self.parse_match(payload).game_end_timestamp

    def to_time_units(self, timestamp_ms: int) -> int:
        return timestamp_ms // self.time_unit_ms
