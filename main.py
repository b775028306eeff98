"""Main CLI entry-point."""
from __future__ import annotations

import argparse
import asyncio
import logging
import signal
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import List, Optional

from core.logging.config import bootstrap_logging, shutdown_logging
from config import settings, Settings

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

_BRIGHT_GREEN = "\033[1;92m"
_CYAN = "\033[96m"
_YELLOW = "\033[93m"
_RESET = "\033[0m"

logger = logging.getLogger(__name__)


def _g(s: str) -> str:
    return f"{_BRIGHT_GREEN}{s}{_RESET}"


def _c(s: str) -> str:
    return f"{_CYAN}{s}{_RESET}"


def _print_banner(command: str) -> None:
    print(_g("═" * 48))
    print(_c(f"  League match history stats: {command}"))
    print(_g("═" * 48))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="match-stats",
        description="Sync a player's match history and print statistics over it.",
    )
    parser.add_argument("command", nargs="?", default="run", choices=["sync", "report", "run"],
                        help="sync the cache, print reports, or both (default)")
    parser.add_argument("--v4", action="store_true", default=None,
                        help="use the legacy match v4 API and its cache files")
    parser.add_argument("-c", "--config-path", type=Path, help="stats config file")
    parser.add_argument("-d", "--data-path", type=Path, help="directory of cached match data")
    parser.add_argument("-a", "--assets-path", type=Path, help="directory of downloaded assets")
    parser.add_argument("-k", "--api-key-path", type=Path, help="file holding the API key")
    parser.add_argument("-i", "--summoner-info-path", type=Path, help="player info file")
    parser.add_argument("-m", "--min-games", type=int,
                        help="hide groups with fewer games than this")
    parser.add_argument("-s", "--sort-by", nargs="+",
                        help="statistics to sort leaf groups by, highest first")
    return parser


def apply_overrides(args: argparse.Namespace) -> None:
    """Command line options take precedence over environment settings."""
    overrides = {
        "USE_MATCH_V4": args.v4,
        "STATS_CONFIG_PATH": args.config_path,
        "DATA_DIR": args.data_path,
        "ASSETS_DIR": args.assets_path,
        "API_KEY_PATH": args.api_key_path,
        "PLAYER_INFO_PATH": args.summoner_info_path,
        "MIN_GAMES": args.min_games,
        "SORT_BY": args.sort_by,
    }
    for name, value in overrides.items():
        if value is not None:
            setattr(Settings, name, value)


def _first_interrupt_cancels(token, restore_default):
    """SIGINT handler that cancels the token once, then hands SIGINT back.

    A second Ctrl-C raises KeyboardInterrupt and aborts a hung request.
    """
    def _handle(*_):
        token.cancel()
        restore_default()
    return _handle


@contextmanager
def _interrupts_cancel(token):
    """Route the first SIGINT inside the block to the token instead of KeyboardInterrupt."""
    loop = asyncio.get_running_loop()
    try:
        loop.add_signal_handler(
            signal.SIGINT,
            _first_interrupt_cancels(token, lambda: loop.remove_signal_handler(signal.SIGINT)),
        )
        uses_loop_handler = True
    except (NotImplementedError, RuntimeError):
        signal.signal(
            signal.SIGINT,
            _first_interrupt_cancels(token, lambda: signal.signal(signal.SIGINT, signal.default_int_handler)),
        )
        uses_loop_handler = False
    try:
        yield token
    finally:
        if uses_loop_handler:
            loop.remove_signal_handler(signal.SIGINT)
        else:
            signal.signal(signal.SIGINT, signal.default_int_handler)


async def _execute(command: str, token) -> int:
    from presentation.cli import ReportCommand, SyncCommand

    player = None
    if command in ("sync", "run"):
        with _interrupts_cancel(token):
            player = await SyncCommand(token).run()
        token.raise_if_cancelled()
    # SIGINT keeps its default behaviour while reports run.
    if command in ("report", "run"):
        return await ReportCommand().run(player)
    return EXIT_OK


async def _run_with_interrupts(command: str) -> int:
    from application.services.match_sync import CancellationToken

    return await _execute(command, CancellationToken())


def main(argv: Optional[List[str]] = None) -> int:
    from domain.errors import MatchStatsError, SyncInterrupted
    from infrastructure.api import RiotAPIError

    args = build_parser().parse_args(argv)
    apply_overrides(args)
    bootstrap_logging(
        service="match-stats",
        level=settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        log_file_name="match-stats.jsonl",
    )
    try:
        _print_banner(args.command)
        return asyncio.run(_run_with_interrupts(args.command))
    except SyncInterrupted as exc:
        print(f"\n{_YELLOW}{exc} Progress was saved.{_RESET}")
        return EXIT_INTERRUPTED
    except (KeyboardInterrupt, asyncio.CancelledError):
        print(f"\n{_YELLOW}Interrupted. Progress was saved.{_RESET}")
        return EXIT_INTERRUPTED
    except (MatchStatsError, RiotAPIError, ValueError, OSError) as exc:
        logger.error(f"{type(exc).__name__}: {exc}")
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    finally:
        shutdown_logging()


def run() -> None:
    """Console script entry point."""
    raise SystemExit(main(sys.argv[1:]))


if __name__ == "__main__":
    run()
