"""Participant entity representing a player in a match."""
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class RuneSelection:
    """One selected rune and its three recorded sub-values."""

    rune_id: int
    var1: float = 0
    var2: float = 0
    var3: float = 0

    @property
    def values(self) -> tuple[float, float, float]:
        return (self.var1, self.var2, self.var3)


@dataclass
class Participant:
    """Represents a player participant in a match."""

    # Identity (either may be missing depending on the API version)
    participant_id: int
    puuid: Optional[str] = None
    account_id: Optional[str] = None
    summoner_name: str = ""

    # Match context
    team_id: int = 0
    champion_id: int = 0

    # Match outcome
    win: bool = False
    kills: int = 0
    deaths: int = 0
    assists: int = 0

    # Damage
    total_damage_dealt_to_champions: int = 0

    # Runes (keystone first)
    runes: list[RuneSelection] = field(default_factory=list)

    @property
    def kda(self) -> float:
        """Calculate KDA ratio."""
        if self.deaths == 0:
            return float(self.kills + self.assists)
        return (self.kills + self.assists) / self.deaths

    def is_player(self, puuid: Optional[str], account_id: Optional[str]) -> bool:
        """True when this entry belongs to the given identity."""
        if puuid and self.puuid == puuid:
            return True
        if account_id and self.account_id == account_id:
            return True
        return False

    def to_dict(self) -> dict:
        """Convert participant to dictionary."""
        return {
            'participant_id': self.participant_id,
            'puuid': self.puuid,
            'account_id': self.account_id,
            'summoner_name': self.summoner_name,
            'team_id': self.team_id,
            'champion_id': self.champion_id,
            'win': self.win,
            'kills': self.kills,
            'deaths': self.deaths,
            'assists': self.assists,
            'kda': self.kda,
            'total_damage_dealt_to_champions': self.total_damage_dealt_to_champions,
            'runes': [
                {'rune_id': r.rune_id, 'var1': r.var1, 'var2': r.var2, 'var3': r.var3}
                for r in self.runes
            ],
        }
