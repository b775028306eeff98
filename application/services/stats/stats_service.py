"""Filtering, recursive grouping and statistics over cached matches."""
from __future__ import annotations

import logging
import math
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

from domain.entities import Match, Participant, PlayerIdentity
from domain.enums import MatchProperty
from .filters import MatchFilters
from .values import PlotStatValue, RuneStats, StatValue, Statistics, StatValues

logger = logging.getLogger(__name__)

PropertyExtractor = Callable[[Match, Participant], Any]

PROPERTY_EXTRACTORS: Dict[MatchProperty, PropertyExtractor] = {
    MatchProperty.SEASON: lambda match, participant: match.resolved_season_id,
    MatchProperty.QUEUE: lambda match, participant: match.queue,
    MatchProperty.CHAMPION: lambda match, participant: participant.champion_id,
}


def _ratio(numerator: float, denominator: float) -> float:
    """IEEE division: x/0 is +-inf, 0/0 is nan."""
    if denominator:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator)


def _as_property(value: Union[str, MatchProperty]) -> MatchProperty:
    if isinstance(value, MatchProperty):
        return value
    return MatchProperty.from_string(value)


class StatsService:
    """Pure computations over the matches of one player."""

    def __init__(self, player: PlayerIdentity):
        self.player = player

    def property_value(self, prop: MatchProperty, match: Match) -> Any:
        """Value of ``prop`` for ``match``; None when it can't be resolved."""
        return PROPERTY_EXTRACTORS[prop](match, match.participant_for(self.player))

    # ── Filter ─────────────────────────────────────────────────────────

    def matches_filters(self, match: Match, filters: MatchFilters) -> bool:
        participant = match.participant_for(self.player)
        checks = (
            (filters.champions, MatchProperty.CHAMPION),
            (filters.queues, MatchProperty.QUEUE),
            (filters.seasons, MatchProperty.SEASON),
        )
        for allowed, prop in checks:
            if allowed and PROPERTY_EXTRACTORS[prop](match, participant) not in allowed:
                return False
        return True

    def filter_matches(self, matches: Sequence[Match], filters: Optional[MatchFilters]) -> List[Match]:
        if filters is None or filters.is_empty:
            return list(matches)
        return [m for m in matches if self.matches_filters(m, filters)]

    # ── Group ──────────────────────────────────────────────────────────

    def group_matches(
        self,
        matches: Sequence[Match],
        properties: Sequence[Union[str, MatchProperty]],
    ) -> Union[Statistics, StatValues]:
        """Nest one mapping level per property, in order; leaves are StatValues.

        Matches whose value for a level can't be resolved are left out.
        """
        if not properties:
            return self.compute_stats(matches)
        prop = _as_property(properties[0])
        remaining = properties[1:]

        groups: Dict[Any, List[Match]] = {}
        for match in matches:
            value = self.property_value(prop, match)
            if value is None:
                logger.debug(f"Dropping match {match.match_id}: no {prop.value}")
                continue
            groups.setdefault(value, []).append(match)

        return {value: self.group_matches(group, remaining) for value, group in groups.items()}

    # ── Leaf statistics ────────────────────────────────────────────────

    def compute_stats(self, matches: Sequence[Match]) -> StatValues:
        wins = 0
        damage_total = 0
        rune_games: Dict[int, int] = {}
        rune_sums: Dict[int, List[float]] = {}
        rune_per_damage: Dict[int, List[float]] = {}

        for match in matches:
            participant = match.participant_for(self.player)
            if participant.win:
                wins += 1
            damage = participant.total_damage_dealt_to_champions
            damage_total += damage
            for rune in participant.runes:
                rune_games[rune.rune_id] = rune_games.get(rune.rune_id, 0) + 1
                sums = rune_sums.setdefault(rune.rune_id, [0.0, 0.0, 0.0])
                per_damage = rune_per_damage.setdefault(rune.rune_id, [0.0, 0.0, 0.0])
                for i, value in enumerate(rune.values):
                    sums[i] += value
                    per_damage[i] += _ratio(value, damage)

        runes = {
            rune_id: RuneStats(
                games=games,
                means=tuple(s / games for s in rune_sums[rune_id]),
                means_per_damage=tuple(s / games for s in rune_per_damage[rune_id]),
            )
            for rune_id, games in rune_games.items()
        }
        return {
            StatValue.NUM_GAMES: len(matches),
            StatValue.WIN_RATE: _ratio(wins, len(matches)),
            StatValue.DAMAGE: _ratio(damage_total, len(matches)),
            StatValue.RUNES: runes,
        }

    # ── Time series ────────────────────────────────────────────────────

    def plot_values(
        self,
        matches: Sequence[Match],
        metric: Union[str, PlotStatValue] = PlotStatValue.WIN_DELTA,
    ) -> List[int]:
        """Running win-minus-loss count, oldest game first, starting at 0."""
        metric = PlotStatValue(metric)
        if metric is not PlotStatValue.WIN_DELTA:
            raise ValueError(f"Unsupported plot key '{metric.value}'")
        values = [0]
        for match in sorted(matches, key=lambda m: m.game_creation):
            step = 1 if match.participant_for(self.player).win else -1
            values.append(values[-1] + step)
        return values


def sort_group_keys(
    stat_map: Mapping[Any, StatValues],
    sort_keys: Sequence[Union[str, StatValue]],
) -> List[Any]:
    """Order sibling leaf groups, highest first.

    Sorts once per key from the last key to the first; the sort is stable,
    so the first key decides and later keys break its ties.
    """
    keys = list(stat_map)
    for sort_key in reversed(list(sort_keys)):
        stat = StatValue(sort_key)
        keys.sort(key=lambda k: stat_map[k][stat], reverse=True)
    return keys
