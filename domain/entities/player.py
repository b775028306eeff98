"""Player identity entity."""
from dataclasses import dataclass
from typing import Optional

from ..enums import Region


@dataclass(frozen=True)
class PlayerIdentity:
    """The tracked player: provider-issued ids plus the server they play on.

    Resolved once at startup and never changed afterwards.
    """

    region: Region
    account_id: str
    puuid: Optional[str] = None
    summoner_name: Optional[str] = None
    summoner_level: Optional[int] = None

    @property
    def display_id(self) -> str:
        return self.summoner_name or self.puuid or self.account_id

    @classmethod
    def from_summoner_payload(cls, region: Region, data: dict) -> 'PlayerIdentity':
        """Build from a summoner-v4 response."""
        return cls(
            region=region,
            account_id=data['accountId'],
            puuid=data.get('puuid'),
            summoner_name=data.get('name'),
            summoner_level=data.get('summonerLevel'),
        )

    def to_dict(self) -> dict:
        return {
            'platform': self.region.value,
            'accountId': self.account_id,
            'puuid': self.puuid,
            'name': self.summoner_name,
            'summonerLevel': self.summoner_level,
        }
