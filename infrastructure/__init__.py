"""Infrastructure layer - API client, provider profiles, local cache and assets."""
from .api import RiotAPIClient, RiotAPIError, RequestThrottle
from .providers import LegacyMatchV4Profile, MatchV5Profile, profile_for
from .repositories import MatchCacheRepository
from .assets import AssetCatalog, AssetProvider

__all__ = [
    'RiotAPIClient',
    'RiotAPIError',
    'RequestThrottle',
    'LegacyMatchV4Profile',
    'MatchV5Profile',
    'profile_for',
    'MatchCacheRepository',
    'AssetCatalog',
    'AssetProvider',
]
