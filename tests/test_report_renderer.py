"""Tests for console rendering of reports."""

import math

import pytest

from application.services.stats import RuneStats, StatValue
from application.use_cases import Report, ReportConfig
from domain.enums import MatchProperty, Queue
from infrastructure.assets import AssetCatalog
from presentation.report_renderer import CHART_WIDTH, ReportRenderer, apply_color, choose_color, render_chart


@pytest.fixture
def catalog():
    catalog = AssetCatalog(
        champion_names={1: "Annie", 2: "Olaf", 3: "Galio"},
        rune_names={8112: "Electrocute"},
    )
    catalog.add_season(21, "SEASON 2023")
    return catalog


@pytest.fixture
def lines():
    return []


@pytest.fixture
def renderer(catalog, lines):
    return ReportRenderer(catalog, use_color=False, write=lines.append)


def leaf(num_games, win_rate, damage=20000.0, runes=None):
    return {
        StatValue.NUM_GAMES: num_games,
        StatValue.WIN_RATE: win_rate,
        StatValue.DAMAGE: damage,
        StatValue.RUNES: runes or {},
    }


class TestColors:

    @pytest.mark.parametrize("win_rate, color", [
        (0.30, 1),
        (0.40, 5),
        (0.45, 3),
        (0.50, None),
        (0.55, 6),
        (0.60, 2),
        (0.70, 4),
    ])
    def test_thresholds(self, win_rate, color):
        assert choose_color(win_rate) == color

    def test_win_rate_is_colored(self, catalog):
        renderer = ReportRenderer(catalog, use_color=True, write=lambda _: None)

        text = renderer.format_stat_value(StatValue.WIN_RATE, 0.7)

        assert text == apply_color(4, "70.00") + "% won"


class TestStatValues:

    def test_plain_values(self, renderer):
        assert renderer.format_stat_value(StatValue.WIN_RATE, 0.5) == "50.00% won"
        assert renderer.format_stat_value(StatValue.NUM_GAMES, 12) == "numGames: 12"
        assert renderer.format_stat_value(StatValue.DAMAGE, 18250.4) == "damageDealt: 18250"

    def test_non_finite_values_are_not_available(self, renderer):
        assert renderer.format_stat_value(StatValue.WIN_RATE, math.nan) == "winRate: n/a"
        assert renderer.format_stat_value(StatValue.DAMAGE, math.inf) == "damageDealt: n/a"

    def test_runes(self, renderer):
        runes = {8112: RuneStats(games=2, means=(2000.0, 20.0, 0.0), means_per_damage=(0.1, math.inf, math.nan))}

        text = renderer.format_stat_value(StatValue.RUNES, runes)

        assert text == "runes: Electrocute x2 [2000.0/20.0/0.0 | 0.1000/n/a/n/a per dmg]"


class TestStats:

    def test_leaves_are_sorted_and_filtered_by_min_games(self, catalog, lines):
        renderer = ReportRenderer(catalog, min_games=2, use_color=False, write=lines.append)
        stats = {1: leaf(2, 0.5), 2: leaf(5, 0.6), 3: leaf(1, 1.0)}

        renderer.print_stats(stats, [MatchProperty.CHAMPION], [StatValue.WIN_RATE], [StatValue.NUM_GAMES])

        assert lines == [
            "  Olaf (5 games): 60.00% won",
            "  Annie (2 games): 50.00% won",
        ]

    def test_nested_groups_get_underlined_headings(self, renderer, lines):
        stats = {Queue.HOWLING_ABYSS: {1: leaf(3, 1 / 3)}}

        renderer.print_stats(
            stats,
            [MatchProperty.QUEUE, MatchProperty.CHAMPION],
            [StatValue.NUM_GAMES, StatValue.WIN_RATE],
            [StatValue.WIN_RATE],
        )

        assert lines == [
            "",
            "Howling Abyss",
            "-------------",
            "  Annie (3 games): numGames: 3, 33.33% won",
        ]

    def test_header(self, renderer, lines):
        renderer.print_header("Stats grouped by champion")

        assert lines == ["", "   Stats grouped by champion", "=" * 32]


class TestChart:

    def test_win_delta_chart(self):
        top, bottom = render_chart([0, 1, 0, 1]).split("\n")

        assert top.split()[0] == "1"
        assert bottom.split()[0] == "0"
        assert top.endswith("┤╭╮╭")
        assert bottom.endswith("┼╯╰╯")

    def test_one_row_per_unit_step(self):
        chart = render_chart([0, 1, 2, 3, 2, 1, 0, -1])

        assert len(chart.split("\n")) == 5

    def test_flat_series(self):
        chart = render_chart([0, 0, 0])

        assert "\n" not in chart
        assert chart.endswith("┼──")

    def test_empty_series(self):
        assert render_chart([]) == ""

    def test_long_series_is_split_into_chunks(self, renderer, lines):
        config = ReportConfig.from_dict({"plotKey": "winDelta"})
        values = [i % 2 for i in range(CHART_WIDTH + 10)]
        report = Report(config=config, sort_keys=[StatValue.NUM_GAMES], num_matches=len(values) - 1,
                        plot_values=values)

        renderer.render(report)

        assert lines[1] == "   winDelta over time"
        separators = [line for line in lines if line and set(line) == {"-"}]
        assert len(separators) == 2


def test_render_grouped_report_title_includes_filters(renderer, lines):
    config = ReportConfig.from_dict({"groupKeys": ["season"], "filters": {"champions": ["Annie"]}})
    report = Report(config=config, sort_keys=[StatValue.NUM_GAMES], num_matches=4,
                    statistics={21: leaf(4, 0.5)})

    renderer.render(report)

    assert lines[1] == "   Stats grouped by season (champions: Annie)"
    assert "  SEASON 2023 (4 games): 50.00% won" in lines
