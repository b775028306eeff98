"""Infrastructure API module."""
from .errors import RiotAPIError
from .riot_client import RiotAPIClient
from .throttle import RequestThrottle

__all__ = [
    'RiotAPIClient',
    'RiotAPIError',
    'RequestThrottle',
]
