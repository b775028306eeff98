"""Console output for computed reports."""
from __future__ import annotations

import math
from typing import Any, Callable, Mapping, Optional, Sequence

import asciichartpy

from domain.enums import MatchProperty
from infrastructure.assets import AssetCatalog
from application.services.stats import RuneStats, StatValue, sort_group_keys
from application.use_cases import Report

CHART_WIDTH = 160
_CHART_LABEL = "{:6.0f} "
_RESET = "\033[0m"

# (threshold, 256-colour code), checked from the outside in.
_LOW_WIN_RATE_COLORS = ((0.38, 1), (0.43, 5), (0.47, 3))    # pink, red, yellow
_HIGH_WIN_RATE_COLORS = ((0.62, 4), (0.57, 2), (0.53, 6))   # blue, green, turquoise


def choose_color(win_rate: float) -> Optional[int]:
    for threshold, color in _LOW_WIN_RATE_COLORS:
        if win_rate < threshold:
            return color
    for threshold, color in _HIGH_WIN_RATE_COLORS:
        if win_rate > threshold:
            return color
    return None


def apply_color(color: int, text: str) -> str:
    return f"\033[38;5;{color}m{text}{_RESET}"


def _is_finite(value: Any) -> bool:
    return not isinstance(value, float) or math.isfinite(value)


def render_chart(values: Sequence[float]) -> str:
    """Line chart with one column per value and one row per unit step."""
    if not values:
        return ""
    return asciichartpy.plot([float(v) for v in values], {"format": _CHART_LABEL})


class ReportRenderer:
    """Prints reports the way the command line shows them."""

    def __init__(
        self,
        catalog: AssetCatalog,
        *,
        min_games: int = 0,
        use_color: bool = True,
        write: Callable[[str], None] = print,
    ):
        self.catalog = catalog
        self.min_games = min_games
        self.use_color = use_color
        self._write = write

    # ── Values ─────────────────────────────────────────────────────────

    def format_runes(self, runes: Mapping[int, RuneStats]) -> str:
        parts = []
        for rune_id, rune in sorted(runes.items(), key=lambda item: item[1].games, reverse=True):
            means = "/".join(self._number(v) for v in rune.means)
            per_damage = "/".join(self._number(v, digits=4) for v in rune.means_per_damage)
            parts.append(f"{self.catalog.rune_name(rune_id)} x{rune.games} [{means} | {per_damage} per dmg]")
        return "runes: " + "; ".join(parts)

    @staticmethod
    def _number(value: float, digits: int = 1) -> str:
        if not _is_finite(value):
            return "n/a"
        return f"{value:.{digits}f}"

    def format_stat_value(self, key: StatValue, value: Any) -> str:
        if key is StatValue.RUNES:
            return self.format_runes(value)
        if not _is_finite(value):
            return f"{key.value}: n/a"
        if key is StatValue.WIN_RATE:
            text = f"{value * 100:.2f}"
            color = choose_color(value)
            if color is not None and self.use_color:
                text = apply_color(color, text)
            return text + "% won"
        if key is StatValue.DAMAGE:
            return f"{key.value}: {value:.0f}"
        return f"{key.value}: {value}"

    # ── Blocks ─────────────────────────────────────────────────────────

    def print_header(self, title: str) -> None:
        header = "   " + title
        self._write("")
        self._write(header)
        self._write("=" * (len(header) + 4))

    def print_stats(
        self,
        stats: Mapping[Any, Any],
        group_keys: Sequence[MatchProperty],
        stat_keys: Sequence[StatValue],
        sort_keys: Sequence[StatValue],
    ) -> None:
        prop, remaining = group_keys[0], group_keys[1:]
        if remaining:
            for value, sub_stats in stats.items():
                name = self.catalog.display_name(prop, value)
                self._write("")
                self._write(name)
                self._write("-" * len(name))
                self.print_stats(sub_stats, remaining, stat_keys, sort_keys)
            return

        for value in sort_group_keys(stats, sort_keys):
            stat_values = stats[value]
            num_games = stat_values[StatValue.NUM_GAMES]
            if num_games < self.min_games:
                continue
            parts = [
                self.format_stat_value(key, stat_values[key])
                for key in stat_keys
                if key in stat_values
            ]
            name = self.catalog.display_name(prop, value)
            self._write(f"  {name} ({num_games} games): " + ", ".join(parts))

    def plot_chart(self, values: Sequence[float]) -> None:
        chart = render_chart(values)
        self._write(chart)
        self._write("-" * (len(chart.split("\n", 1)[0]) + 5))

    def render(self, report: Report) -> None:
        config = report.config
        filters = config.describe_filters()
        if report.statistics is not None:
            title = "Stats grouped by " + " + ".join(k.value for k in config.group_keys)
            self.print_header(f"{title} {filters}".rstrip())
            self.print_stats(report.statistics, config.group_keys, config.stat_keys, report.sort_keys)
            self._write("")
        if report.plot_values is not None:
            self.print_header(f"{config.plot_key.value} over time {filters}".rstrip())
            for i in range(0, len(report.plot_values), CHART_WIDTH):
                self.plot_chart(report.plot_values[i:i + CHART_WIDTH])
