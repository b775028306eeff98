"""Domain interfaces."""
from .provider_profile import MatchId, ProviderProfile
from .match_cache import IMatchCache, MatchDetailsMap

__all__ = [
    'MatchId',
    'ProviderProfile',
    'IMatchCache',
    'MatchDetailsMap',
]
