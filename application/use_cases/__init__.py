"""Application use cases."""
from .sync_match_history import (
    SyncMatchHistoryUseCase,
    load_matches,
    read_player_info,
    resolve_player,
)
from .generate_reports import (
    GenerateReportsUseCase,
    Report,
    ReportConfig,
    load_report_configs,
)

__all__ = [
    'SyncMatchHistoryUseCase',
    'load_matches',
    'read_player_info',
    'resolve_player',
    'GenerateReportsUseCase',
    'Report',
    'ReportConfig',
    'load_report_configs',
]
