"""Match entity: the provider-neutral view of one match detail document."""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from .participant import Participant
from .player import PlayerIdentity
from ..enums import Queue, SeasonId, resolve_season
from ..errors import ParticipantNotFoundError


@dataclass
class Match:
    """Represents a completed League of Legends match."""

    # Match identity
    match_id: str

    # Match metadata
    queue_id: int
    season_id: Optional[SeasonId]

    # Timing
    game_creation: int  # Unix timestamp milliseconds
    game_end_timestamp: int  # Unix timestamp milliseconds
    game_duration: int  # Seconds

    game_version: str = ""

    participants: list[Participant] = field(default_factory=list)

    @property
    def game_date(self) -> datetime:
        """Get game date as datetime object."""
        return datetime.fromtimestamp(self.game_creation / 1000, tz=timezone.utc)

    @property
    def game_duration_minutes(self) -> float:
        """Get game duration in minutes."""
        return self.game_duration / 60.0

    @property
    def queue(self) -> Optional[Queue]:
        return Queue.from_queue_id(self.queue_id)

    @property
    def resolved_season_id(self) -> Optional[SeasonId]:
        """Season id with the preseason boundary remap applied."""
        return resolve_season(self.season_id, self.game_creation)

    def participant_for(self, player: PlayerIdentity) -> Participant:
        """Locate the tracked player's own entry.

        Raises ParticipantNotFoundError when the player is not part of the
        match, which means the cached history is inconsistent.
        """
        for participant in self.participants:
            if participant.is_player(player.puuid, player.account_id):
                return participant
        raise ParticipantNotFoundError(self.match_id, player.display_id)

    def to_dict(self) -> dict:
        """Convert match to dictionary."""
        return {
            'match_id': self.match_id,
            'queue_id': self.queue_id,
            'queue': self.queue.queue_name if self.queue else None,
            'season_id': self.season_id,
            'game_creation': self.game_creation,
            'game_date': self.game_date.isoformat(),
            'game_end': self.game_end_timestamp,
            'game_duration_seconds': self.game_duration,
            'game_duration_minutes': round(self.game_duration_minutes, 2),
            'game_version': self.game_version,
            'participants': [p.to_dict() for p in self.participants],
        }
