"""Queue enumeration: the game mode a match was played under."""
from enum import Enum
from typing import Optional


class Queue(Enum):
    """Game modes, grouped by map rather than by individual queue id.

    Provides:
    - queue_name: human-readable name (the enum value)
    - from_queue_id: resolve a provider queue id, None when unknown
    """

    CRYSTAL_SCAR = "Crystal Scar"
    TWISTED_TREELINE = "Twisted Treeline"
    HOWLING_ABYSS = "Howling Abyss"
    NEXUS_BLITZ = "Nexus Blitz"
    SUMMONERS_RIFT = "Summoners Rift"
    ONE_FOR_ALL = "One For All"
    ULTRA_RAPID_FIRE = "Ultra Rapid Fire"
    ARENA = "Arena"

    @property
    def queue_name(self) -> str:
        return self.value

    @classmethod
    def from_queue_id(cls, queue_id: int) -> Optional['Queue']:
        return _QUEUE_IDS.get(queue_id)

    @classmethod
    def from_name(cls, name: str) -> Optional['Queue']:
        """Case-insensitive lookup by display name or member name."""
        wanted = name.strip().lower()
        for queue in cls:
            if wanted in (queue.value.lower(), queue.name.lower()):
                return queue
        return None


_QUEUE_IDS = {
    8: Queue.TWISTED_TREELINE,
    16: Queue.CRYSTAL_SCAR,
    65: Queue.HOWLING_ABYSS,
    400: Queue.SUMMONERS_RIFT,   # Draft Pick
    420: Queue.SUMMONERS_RIFT,   # Ranked Solo/Duo
    430: Queue.SUMMONERS_RIFT,   # Blind Pick
    440: Queue.SUMMONERS_RIFT,   # Ranked Flex
    450: Queue.HOWLING_ABYSS,    # ARAM
    460: Queue.TWISTED_TREELINE,
    490: Queue.SUMMONERS_RIFT,   # Quickplay
    900: Queue.ULTRA_RAPID_FIRE,
    1020: Queue.ONE_FOR_ALL,
    1200: Queue.NEXUS_BLITZ,
    1300: Queue.NEXUS_BLITZ,
    1700: Queue.ARENA,
    1900: Queue.ULTRA_RAPID_FIRE,
}
