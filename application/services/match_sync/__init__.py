"""Match history synchronisation."""
from .cancellation import CancellationToken
from .match_sync_service import MatchSyncService

__all__ = [
    'CancellationToken',
    'MatchSyncService',
]
