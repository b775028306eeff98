"""Domain entities."""
from .participant import Participant, RuneSelection
from .player import PlayerIdentity
from .match import Match

__all__ = [
    'Participant',
    'RuneSelection',
    'PlayerIdentity',
    'Match',
]
