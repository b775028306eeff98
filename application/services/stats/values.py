"""Statistic keys and result containers."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Tuple, Union


class StatValue(str, Enum):
    """Per-group statistics; the values are the keys used in config files."""

    NUM_GAMES = "numGames"
    WIN_RATE = "winRate"
    DAMAGE = "damageDealt"
    RUNES = "runes"

    @classmethod
    def from_string(cls, value: str) -> 'StatValue':
        try:
            return cls(value)
        except ValueError:
            valid = ", ".join(v.value for v in cls)
            raise ValueError(f"Unknown statistic '{value}'. Possible values are: {valid}") from None


class PlotStatValue(str, Enum):
    """Time series that can be extracted from a match list."""

    WIN_DELTA = "winDelta"

    @classmethod
    def from_string(cls, value: str) -> 'PlotStatValue':
        try:
            return cls(value)
        except ValueError:
            valid = ", ".join(v.value for v in cls)
            raise ValueError(f"Unknown plot key '{value}'. Possible values are: {valid}") from None


SORTABLE_STATS: Tuple[StatValue, ...] = (StatValue.NUM_GAMES, StatValue.WIN_RATE, StatValue.DAMAGE)


def validate_sort_keys(keys: Iterable[Union[str, StatValue]]) -> List[StatValue]:
    """Convert sort criteria, rejecting anything that is not a scalar statistic."""
    result = []
    for key in keys:
        try:
            stat = StatValue(key)
        except ValueError:
            stat = None
        if stat not in SORTABLE_STATS:
            valid = ", ".join(s.value for s in SORTABLE_STATS)
            raise ValueError(f"Unknown sorting criterion '{key}'. Possible values are: {valid}")
        result.append(stat)
    return result


@dataclass(frozen=True)
class RuneStats:
    """Aggregates for one rune over the games of a group it was picked in.

    ``means`` holds the mean of each of the three recorded sub-values,
    ``means_per_damage`` the mean of each sub-value divided by the damage
    dealt to champions in that game. A game with zero damage makes the
    latter non-finite.
    """

    games: int
    means: Tuple[float, float, float]
    means_per_damage: Tuple[float, float, float]


StatValues = Dict[StatValue, Any]
Statistics = Dict[Any, Any]
