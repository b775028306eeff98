"""Match statistics: filters, grouping, leaf stats, sorting and time series."""
from .filters import MatchFilters
from .stats_service import PROPERTY_EXTRACTORS, StatsService, sort_group_keys
from .values import (
    SORTABLE_STATS,
    PlotStatValue,
    RuneStats,
    Statistics,
    StatValue,
    StatValues,
    validate_sort_keys,
)

__all__ = [
    'MatchFilters',
    'PROPERTY_EXTRACTORS',
    'StatsService',
    'sort_group_keys',
    'SORTABLE_STATS',
    'PlotStatValue',
    'RuneStats',
    'Statistics',
    'StatValue',
    'StatValues',
    'validate_sort_keys',
]
