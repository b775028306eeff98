"""Properties a match list can be grouped or filtered by."""
from enum import Enum


class MatchProperty(Enum):
    """Closed set of grouping keys; the stats layer owns one extractor per member."""

    CHAMPION = "champion"
    SEASON = "season"
    QUEUE = "queue"

    @classmethod
    def from_string(cls, value: str) -> 'MatchProperty':
        try:
            return cls(value.strip().lower())
        except ValueError:
            valid = ", ".join(p.value for p in cls)
            raise ValueError(f"Unknown match property '{value}'. Possible values are: {valid}") from None
