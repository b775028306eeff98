"""Inclusion filters over the tracked player's matches."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet

from domain.enums import Queue, SeasonId


@dataclass(frozen=True)
class MatchFilters:
    """One id set per dimension.

    A match passes when every non-empty set contains the match's value
    (AND across dimensions, OR within one).
    """

    champions: FrozenSet[int] = field(default_factory=frozenset)
    seasons: FrozenSet[SeasonId] = field(default_factory=frozenset)
    queues: FrozenSet[Queue] = field(default_factory=frozenset)

    @property
    def is_empty(self) -> bool:
        return not (self.champions or self.seasons or self.queues)
