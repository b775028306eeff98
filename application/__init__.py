"""Application layer - Services and use cases."""
from .services import MatchSyncService, StatsService
from .use_cases import GenerateReportsUseCase, SyncMatchHistoryUseCase

__all__ = [
    'MatchSyncService',
    'StatsService',
    'GenerateReportsUseCase',
    'SyncMatchHistoryUseCase',
]
