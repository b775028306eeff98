"""Use case for computing the reports listed in the stats config file."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from domain.entities import Match, PlayerIdentity
from domain.enums import MatchProperty
from domain.errors import InvalidReportConfigError
from infrastructure.assets import AssetCatalog
from application.services.stats import (
    MatchFilters,
    PlotStatValue,
    Statistics,
    StatsService,
    StatValue,
    validate_sort_keys,
)

logger = logging.getLogger(__name__)

_FILTER_LABELS = (("seasons", "seasons"), ("queues", "modes"), ("champions", "champions"))


@dataclass
class ReportConfig:
    """One entry of the stats config file."""

    group_keys: List[MatchProperty] = field(default_factory=list)
    stat_keys: List[StatValue] = field(default_factory=lambda: [StatValue.WIN_RATE])
    sort_keys: Optional[List[StatValue]] = None
    plot_key: Optional[PlotStatValue] = None
    filters: Dict[str, List[str]] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ReportConfig':
        if not isinstance(data, dict):
            raise InvalidReportConfigError(f"Report entries must be objects, got {data!r}")
        try:
            config = cls(
                group_keys=[MatchProperty.from_string(k) for k in data.get("groupKeys", [])],
                stat_keys=[StatValue.from_string(k) for k in data.get("statKeys", [StatValue.WIN_RATE])],
                sort_keys=validate_sort_keys(data["sortKeys"]) if "sortKeys" in data else None,
                plot_key=PlotStatValue.from_string(data["plotKey"]) if data.get("plotKey") else None,
                filters={k: list(v) for k, v in (data.get("filters") or {}).items()},
            )
        except ValueError as exc:
            raise InvalidReportConfigError(str(exc)) from exc
        unknown = set(config.filters) - {name for name, _ in _FILTER_LABELS}
        if unknown:
            raise InvalidReportConfigError(f"Unknown filter dimension(s): {', '.join(sorted(unknown))}")
        return config

    def describe_filters(self) -> str:
        parts = [
            f"{label}: {', '.join(self.filters[name])}"
            for name, label in _FILTER_LABELS
            if self.filters.get(name) is not None
        ]
        return "(" + " | ".join(parts) + ")" if parts else ""


def load_report_configs(path: Path) -> List[ReportConfig]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise InvalidReportConfigError(f"{path} must contain a JSON list of reports")
    return [ReportConfig.from_dict(entry) for entry in data]


@dataclass
class Report:
    """Computed output of one ReportConfig."""

    config: ReportConfig
    sort_keys: List[StatValue]
    num_matches: int
    statistics: Optional[Statistics] = None
    plot_values: Optional[List[int]] = None


class GenerateReportsUseCase:
    """Filter, group and plot the cached matches once per report entry."""

    def __init__(self, player: PlayerIdentity, catalog: AssetCatalog):
        self.catalog = catalog
        self.stats = StatsService(player)

    def resolve_filters(self, config: ReportConfig) -> MatchFilters:
        """Translate filter names into ids; unknown names raise UnknownNameError."""
        names = config.filters
        return MatchFilters(
            champions=frozenset(self.catalog.champion_id(n) for n in names.get("champions", [])),
            seasons=frozenset(self.catalog.season_id(n) for n in names.get("seasons", [])),
            queues=frozenset(self.catalog.queue(n) for n in names.get("queues", [])),
        )

    def run_report(
        self,
        matches: Sequence[Match],
        config: ReportConfig,
        default_sort_keys: Sequence[StatValue],
    ) -> Report:
        filtered = self.stats.filter_matches(matches, self.resolve_filters(config))
        report = Report(
            config=config,
            sort_keys=list(config.sort_keys or default_sort_keys),
            num_matches=len(filtered),
        )
        if config.group_keys:
            report.statistics = self.stats.group_matches(filtered, config.group_keys)
        if config.plot_key is not None:
            report.plot_values = self.stats.plot_values(filtered, config.plot_key)
        return report

    def execute(
        self,
        matches: Sequence[Match],
        configs: Sequence[ReportConfig],
        sort_by: Sequence[str],
    ) -> List[Report]:
        # Reject bad sort criteria before computing anything.
        default_sort_keys = validate_sort_keys(sort_by)
        logger.info(f"Generating {len(configs)} report(s) over {len(matches)} matches")
        return [self.run_report(matches, config, default_sort_keys) for config in configs]
