"""Logical endpoints consumed from the match provider."""
from enum import Enum


class Endpoint(Enum):
    SUMMONER = "summoner"
    MATCH_HISTORY = "matchHistory"
    MATCH_DETAILS = "matchDetails"
