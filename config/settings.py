"""Application settings and configuration."""
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)


class Settings:
    """
    ─── REQUEST RATE ─────────────────────────────────────────────────────
    Personal API keys allow 20 requests / 1 s and 100 requests / 2 min.
    All fetch loops are strictly sequential, so a fixed pause of 1.5 s
    between two requests keeps us under the 2-minute window on its own
    (80 requests / 120 s).
    ──────────────────────────────────────────────────────────────────────
    """

    RIOT_API_KEY: str = os.getenv('RIOT_API_KEY', '')

    # ── Paths ──────────────────────────────────────────────────────────────
    BASE_DIR:          Path = Path(__file__).resolve().parent.parent
    DATA_DIR:          Path = Path(os.getenv('DATA_DIR', str(BASE_DIR / 'summoner-data')))
    ASSETS_DIR:        Path = Path(os.getenv('ASSETS_DIR', str(BASE_DIR / 'assets')))
    LOG_DIR:           Path = Path(os.getenv('LOG_DIR', str(BASE_DIR / 'logs')))
    API_KEY_PATH:      Path = Path(os.getenv('API_KEY_PATH', 'api-key.txt'))
    PLAYER_INFO_PATH:  Path = Path(os.getenv('PLAYER_INFO_PATH', 'summoner-info.json'))
    STATS_CONFIG_PATH: Path = Path(os.getenv('STATS_CONFIG_PATH', 'stats-config.json'))

    # ── HTTP ───────────────────────────────────────────────────────────────
    REQUEST_TIMEOUT:     int  = 30
    HTTP2:               bool = os.getenv('HTTP2', 'true').strip().lower() == 'true'
    REQUEST_INTERVAL_MS: int  = int(os.getenv('REQUEST_INTERVAL_MS', '1500'))

    # ── Match history sync ─────────────────────────────────────────────────
    # Offset pages are capped at 100 ids by the match endpoint.
    MATCH_BATCH_SIZE: int  = int(os.getenv('MATCH_BATCH_SIZE', '100'))
    WINDOW_DAYS:      int  = 5
    USE_MATCH_V4:     bool = os.getenv('USE_MATCH_V4', 'false').strip().lower() == 'true'

    # ── Reporting ──────────────────────────────────────────────────────────
    MIN_GAMES: int       = int(os.getenv('MIN_GAMES', '5'))
    SORT_BY:   list[str] = [
        s.strip() for s in os.getenv('SORT_BY', 'numGames').split(',') if s.strip()
    ]

    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    @classmethod
    def api_key(cls) -> Optional[str]:
        """Environment key first, then the key file."""
        if cls.RIOT_API_KEY:
            return cls.RIOT_API_KEY
        if cls.API_KEY_PATH.is_file():
            key = cls.API_KEY_PATH.read_text(encoding='utf-8').strip()
            return key or None
        return None

    @classmethod
    def validate(cls) -> None:
        if not cls.api_key():
            raise ValueError(
                f"RIOT_API_KEY must be set in config/.env or written to {cls.API_KEY_PATH}"
            )
        if cls.REQUEST_INTERVAL_MS < 0:
            raise ValueError("REQUEST_INTERVAL_MS must not be negative")
        if not 1 <= cls.MATCH_BATCH_SIZE <= 100:
            raise ValueError("MATCH_BATCH_SIZE must be between 1 and 100")

    @classmethod
    def create_directories(cls) -> None:
        cls.DATA_DIR.mkdir(parents=True, exist_ok=True)
        cls.ASSETS_DIR.mkdir(parents=True, exist_ok=True)
        cls.LOG_DIR.mkdir(parents=True, exist_ok=True)


settings = Settings()
