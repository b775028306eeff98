"""Domain layer - Business entities, enums, errors and interfaces."""
from .entities import Match, Participant, RuneSelection, PlayerIdentity
from .enums import Region, Queue, MatchProperty, Endpoint
from .errors import (
    MatchStatsError,
    ParticipantNotFoundError,
    SyncInterrupted,
    UnknownNameError,
    InvalidReportConfigError,
)
from .interfaces import MatchId, ProviderProfile, IMatchCache, MatchDetailsMap

__all__ = [
    # Entities
    'Match',
    'Participant',
    'RuneSelection',
    'PlayerIdentity',
    # Enums
    'Region',
    'Queue',
    'MatchProperty',
    'Endpoint',
    # Errors
    'MatchStatsError',
    'ParticipantNotFoundError',
    'SyncInterrupted',
    'UnknownNameError',
    'InvalidReportConfigError',
    # Interfaces
    'MatchId',
    'ProviderProfile',
    'IMatchCache',
    'MatchDetailsMap',
]
