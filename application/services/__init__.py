"""Application services root exports."""
from .match_sync import CancellationToken, MatchSyncService
from .stats import MatchFilters, StatsService, StatValue, PlotStatValue

__all__ = [
    "CancellationToken",
    "MatchSyncService",
    "MatchFilters",
    "StatsService",
    "StatValue",
    "PlotStatValue",
]
