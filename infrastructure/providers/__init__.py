"""Provider profiles, one per match API version."""
from domain.interfaces import ProviderProfile

from .match_v4 import LegacyMatchV4Profile
from .match_v5 import MatchV5Profile


def profile_for(use_match_v4: bool) -> ProviderProfile:
    return LegacyMatchV4Profile() if use_match_v4 else MatchV5Profile()


__all__ = [
    'LegacyMatchV4Profile',
    'MatchV5Profile',
    'profile_for',
]
