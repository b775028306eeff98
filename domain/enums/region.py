"""Region enumeration for League of Legends servers."""
from enum import Enum


class Region(Enum):
    """League of Legends platform servers.

    Provides:
    - platform_route: platform host (e.g., euw1), used by summoner and
      legacy match endpoints
    - regional_route: routing host for match v5 (e.g., europe)
    - display_name: human-readable server name for report headers
    """

    # Europe
    EUW1 = "euw1"  # Europe West
    EUN1 = "eun1"  # Europe Nordic & East

    # Americas
    NA1 = "na1"    # North America
    BR1 = "br1"    # Brazil
    LA1 = "la1"    # Latin America North
    LA2 = "la2"    # Latin America South

    # Asia
    KR = "kr"      # Korea
    JP1 = "jp1"    # Japan

    # Oceania
    OC1 = "oc1"    # Oceania

    # Other
    TR1 = "tr1"    # Turkey
    RU = "ru"      # Russia

    @property
    def platform_route(self) -> str:
        """Get platform routing value for API calls."""
        return self.value

    @property
    def regional_route(self) -> str:
        """Get regional routing for match v5 calls."""
        regional_mapping = {
            "na1": "americas",
            "br1": "americas",
            "la1": "americas",
            "la2": "americas",
            "euw1": "europe",
            "eun1": "europe",
            "tr1": "europe",
            "ru": "europe",
            "kr": "asia",
            "jp1": "asia",
            "oc1": "sea",
        }
        return regional_mapping[self.value]

    @property
    def display_name(self) -> str:
        names = {
            "br1": "Brazil",
            "eun1": "EU Northeast",
            "euw1": "EU West",
            "jp1": "Japan",
            "kr": "Korea",
            "la1": "Latin America 1",
            "la2": "Latin America 2",
            "na1": "North America",
            "oc1": "Oceania",
            "tr1": "Turkey",
            "ru": "Russia",
        }
        return names[self.value]

    @classmethod
    def from_string(cls, value: str) -> 'Region':
        """Accept 'EUW1', 'euw1' or the member name."""
        key = value.strip()
        try:
            return cls(key.lower())
        except ValueError:
            try:
                return cls[key.upper()]
            except KeyError:
                raise ValueError(f"Unknown platform '{value}'") from None
