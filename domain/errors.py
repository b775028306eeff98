"""Domain-level exceptions."""
from __future__ import annotations


class MatchStatsError(Exception):
    pass


class ParticipantNotFoundError(MatchStatsError):
    """The tracked player has no participant entry in a cached match."""

    def __init__(self, match_id: str, player: str) -> None:
        super().__init__(f"Couldn't find participant '{player}' in match {match_id}.")
        self.match_id = match_id
        self.player = player


class SyncInterrupted(MatchStatsError):
    """A fetch loop stopped because cancellation was requested.

    Raised after the loop has flushed its progress to disk.
    """


class UnknownNameError(MatchStatsError):
    """A season, queue or champion name in a report filter has no id."""

    def __init__(self, kind: str, name: str) -> None:
        super().__init__(f"Unknown {kind} '{name}'.")
        self.kind = kind
        self.name = name


class InvalidReportConfigError(MatchStatsError):
    pass
