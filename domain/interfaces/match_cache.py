"""Local match cache interface."""
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from ..entities import PlayerIdentity
from .provider_profile import MatchId

MatchDetailsMap = Dict[str, Dict[str, Any]]


class IMatchCache(ABC):
    """Whole-document storage for one player's id list and detail map."""

    @abstractmethod
    def load_match_ids(self, player: PlayerIdentity) -> List[MatchId]:
        """Stored ids, most recent first; empty when nothing is stored."""
        pass

    @abstractmethod
    def save_match_ids(self, player: PlayerIdentity, match_ids: List[MatchId]) -> None:
        """Replace the stored id list."""
        pass

    @abstractmethod
    def load_match_details(self, player: PlayerIdentity) -> MatchDetailsMap:
        """Stored details keyed by ``str(match_id)``; empty when nothing is stored."""
        pass

    @abstractmethod
    def save_match_details(self, player: PlayerIdentity, details: MatchDetailsMap) -> None:
        """Replace the stored detail map."""
        pass
